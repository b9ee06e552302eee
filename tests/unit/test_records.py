"""
Tests for the record parsers and writers.

This module tests:
- SolutionLogParser
- CompatibilityRecordParser
- CoefficientRecordParser
- write_compatibility / write_coefficients / write_classification
"""

import warnings

import pytest

from cgcompat.compatibility import Classification, CompatibilityRelation
from cgcompat.core import Coefficient
from cgcompat.parsers import (
    CoefficientRecordParser,
    CompatibilityRecordParser,
    MalformedLineWarning,
    ParserConfig,
    RecordFileWarning,
    SolutionLogParser,
    load_coefficients,
    load_compatibility,
    load_solution,
)
from cgcompat.writers import (
    format_coefficient_line,
    write_classification,
    write_coefficients,
    write_compatibility,
)


# =============================================================================
# Test SolutionLogParser
# =============================================================================

class TestSolutionLogParser:
    """Tests for solution log loading."""

    def test_sample(self, sample_log):
        solution = SolutionLogParser().parse(sample_log)

        assert len(solution) == 6
        assert solution.objective_value == 26.5
        assert solution["R_4_5"].coefficient == (1.0, 7.5)
        assert solution["R_2_3"].value == 0.5
        assert solution["R_1_2_3"].covered_rows == (1, 2, 3)
        assert solution.working_basis() == {"R_1_2_3", "R_4_5", "R_6_8"}

    def test_matches_in_memory_solution(self, sample_log, sample_solution):
        assert load_solution(sample_log).coefficients() == sample_solution.coefficients()

    def test_header_always_skipped(self, tmp_path):
        path = tmp_path / "log.txt"
        path.write_text("R_1_2 1 (obj:3)\nR_3_4 1 (obj:4)\n")

        solution = load_solution(path)

        assert list(solution) == ["R_3_4"]
        assert solution.objective_value is None

    def test_space_separated_and_spaced_annotation(self, tmp_path):
        path = tmp_path / "log.txt"
        path.write_text("objective value: 1\nR_1 1 (obj: -2.5)\nR_2   0   (obj:1e3)\n")

        solution = load_solution(path)

        assert solution["R_1"].objective_coefficient == -2.5
        assert solution["R_2"].objective_coefficient == 1000.0

    def test_duplicates_last_wins(self, tmp_path):
        path = tmp_path / "log.txt"
        path.write_text("objective value: 1\nR_1\t0\t(obj:1)\nR_1\t1\t(obj:2)\n")

        solution = load_solution(path)

        assert len(solution) == 1
        assert solution["R_1"].coefficient == (1.0, 2.0)

    def test_malformed_lines_skipped(self, tmp_path):
        path = tmp_path / "log.txt"
        path.write_text(
            "objective value: 5\n"
            "R_1\t1\t(obj:5)\n"
            "R_2\tone\t(obj:1)\n"
            "R_3\t1\n"
            "R_4\t1\t(obj:x)\n"
            "R_5 1 (obj:1) extra\n"
            "R_6\t0\t(obj:2)\n"
        )

        with pytest.warns(MalformedLineWarning) as record:
            solution = load_solution(path)

        assert list(solution) == ["R_1", "R_6"]
        assert len(record) == 4
        assert f"{path}:3" in str(record[0].message)

    def test_blank_lines_ignored(self, tmp_path):
        path = tmp_path / "log.txt"
        path.write_text("objective value: 5\n\nR_1\t1\t(obj:5)\n   \n")

        with warnings.catch_warnings():
            warnings.simplefilter("error")
            solution = load_solution(path)

        assert list(solution) == ["R_1"]

    def test_strict_mode(self, tmp_path):
        path = tmp_path / "log.txt"
        path.write_text("objective value: 5\nbroken line\n")

        with pytest.raises(ValueError, match="broken line"):
            load_solution(path, ParserConfig(strict=True))

    def test_missing_file(self, tmp_path):
        with pytest.warns(RecordFileWarning):
            solution = load_solution(tmp_path / "missing.txt")

        assert solution.is_empty

    def test_directory_is_not_fatal(self, tmp_path):
        with pytest.warns(RecordFileWarning):
            solution = load_solution(tmp_path)
        assert solution.is_empty

    def test_empty_file(self, tmp_path):
        path = tmp_path / "log.txt"
        path.write_text("")
        assert load_solution(path).is_empty

    def test_parse_error_kept_on_column(self, tmp_path):
        path = tmp_path / "log.txt"
        path.write_text("objective value: 5\nR_1_2\t1\t(obj:5)\nR_3q_4\t1\t(obj:5)\n")

        solution = load_solution(path)

        assert len(solution) == 2
        assert list(solution.parse_errors) == ["R_3q_4"]

    def test_delimiter_option(self, tmp_path):
        path = tmp_path / "log.txt"
        path.write_text("objective value: 5\nR-1-2\t1\t(obj:5)\n")

        solution = SolutionLogParser(ParserConfig(options={"delimiter": "-"})).parse(path)

        assert solution["R-1-2"].covered_rows == (1, 2)

    def test_verbose(self, sample_log, capsys):
        SolutionLogParser(ParserConfig(verbose=True)).parse(sample_log)
        assert "[SolutionLog] Loaded 6 columns, 3 selected" in capsys.readouterr().out


# =============================================================================
# Test CompatibilityRecordParser
# =============================================================================

class TestCompatibilityRecordParser:
    """Tests for compatibility record loading."""

    def test_parse(self, tmp_path):
        path = tmp_path / "compat.txt"
        path.write_text("R_1_2 : R_3_4 R_5_6\nR_3_4 : R_1_2\nR_9 :\n")

        relation = CompatibilityRecordParser().parse(path)

        assert relation.to_dict() == {
            "R_1_2": ["R_3_4", "R_5_6"],
            "R_3_4": ["R_1_2"],
            "R_9": [],
        }
        assert relation.identifiers() == {"R_1_2", "R_3_4", "R_5_6", "R_9"}

    def test_malformed(self, tmp_path):
        path = tmp_path / "compat.txt"
        path.write_text("R_1_2 R_3_4\nR_5\nR_6 : R_7\n")

        with pytest.warns(MalformedLineWarning) as record:
            relation = load_compatibility(path)

        assert len(record) == 2
        assert relation.to_dict() == {"R_6": ["R_7"]}

    def test_missing_file(self, tmp_path):
        with pytest.warns(RecordFileWarning):
            relation = load_compatibility(tmp_path / "missing.txt")
        assert len(relation) == 0

    def test_round_trip(self, tmp_path):
        relation = CompatibilityRelation({"a_1": ["b_2", "c_3"], "b_2": ["a_1"], "d_4": []})
        path = write_compatibility(relation, tmp_path / "compat.txt")

        assert path.read_text() == "a_1 : b_2 c_3\nb_2 : a_1\nd_4 :\n"
        assert load_compatibility(path) == relation


# =============================================================================
# Test CoefficientRecordParser
# =============================================================================

class TestCoefficientRecords:
    """Tests for coefficient records."""

    def test_line_format(self):
        assert format_coefficient_line("R_1", (1.0, 7.5)) == "R_1 : 1.0 (obj: 7.5)"

    def test_round_trip(self, tmp_path):
        coefficients = {
            "R_1": Coefficient(1.0, 310.0),
            "R_2": Coefficient(0.1, -3.25),
            "R_3": Coefficient(1e-7, 1234567.891),
            "R_4": Coefficient(0.0, 0.0),
        }
        path = write_coefficients(coefficients, tmp_path / "out" / "coefficients.txt")

        assert CoefficientRecordParser().parse(path) == coefficients

    def test_classification_round_trip(self, tmp_path, sample_solution):
        classification = Classification(
            compatible={"R_1_2_3": Coefficient(1.0, 10.0)},
            incompatible={"R_7": Coefficient(0.0, 2.0), "R_2_3": Coefficient(0.5, 3.0)},
        )
        paths = write_classification(
            classification, tmp_path / "compatible.txt", tmp_path / "incompatible.txt"
        )

        assert load_coefficients(paths["compatible"]) == classification.compatible
        assert load_coefficients(paths["incompatible"]) == classification.incompatible
        for column_id, coefficient in load_coefficients(paths["incompatible"]).items():
            assert sample_solution[column_id].coefficient == coefficient

    def test_malformed(self, tmp_path):
        path = tmp_path / "coefficients.txt"
        path.write_text("R_1 : 1.0 (obj: 2.0)\nR_2 1.0 (obj:2.0)\nR_3 : x (obj: 1)\n")

        with pytest.warns(MalformedLineWarning) as record:
            coefficients = load_coefficients(path)

        assert len(record) == 2
        assert coefficients == {"R_1": (1.0, 2.0)}

    def test_missing_file(self, tmp_path):
        with pytest.warns(RecordFileWarning):
            assert load_coefficients(tmp_path / "missing.txt") == {}
