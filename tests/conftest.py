"""
Shared pytest fixtures for cgcompat tests.
"""

import pytest

from cgcompat.core import Column, Solution


# Basis: R_1_2_3, R_4_5, R_6_8 (value exactly 1)
#   R_1_2_3 and R_4_5 score 0 against the basis
#   R_6_8 scores 2 against itself (6 -> 8 skips a row)
SAMPLE_LOG = """objective value: 26.5
R_1_2_3\t1\t(obj:10)
R_4_5\t1\t(obj:7.5)
R_6_8\t1\t(obj:9)
R_1_4\t0\t(obj:6)
R_2_3\t0.5\t(obj:3)
R_7\t0\t(obj:2)
"""


@pytest.fixture
def sample_log_text():
    """Text of a small solution log."""
    return SAMPLE_LOG


@pytest.fixture
def data_dir(tmp_path):
    """Directory holding log_sample.txt."""
    directory = tmp_path / "data"
    directory.mkdir()
    (directory / "log_sample.txt").write_text(SAMPLE_LOG)
    return directory


@pytest.fixture
def sample_log(data_dir):
    """Path to the sample solution log."""
    return data_dir / "log_sample.txt"


@pytest.fixture
def sample_solution():
    """The sample solution, built in memory."""
    return Solution.from_columns([
        Column.from_record("R_1_2_3", 1.0, 10.0),
        Column.from_record("R_4_5", 1.0, 7.5),
        Column.from_record("R_6_8", 1.0, 9.0),
        Column.from_record("R_1_4", 0.0, 6.0),
        Column.from_record("R_2_3", 0.5, 3.0),
        Column.from_record("R_7", 0.0, 2.0),
    ], objective_value=26.5)
