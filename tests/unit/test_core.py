"""
Tests for the core module.

This module tests:
- parse_covered_rows
- Column
- Solution and the working basis
"""

import pytest

from cgcompat.core import (
    Coefficient,
    Column,
    MAX_ROW_INDEX,
    ColumnParseError,
    Solution,
    find_working_basis,
    parse_covered_rows,
)


# =============================================================================
# Test parse_covered_rows
# =============================================================================

class TestParseCoveredRows:
    """Tests for identifier decoding."""

    def test_numeric_tokens(self):
        assert parse_covered_rows("R_1_3_7") == (1, 3, 7)

    def test_order_preserved(self):
        """Rows are a visiting order, not a set."""
        assert parse_covered_rows("R_7_3_1") == (7, 3, 1)

    def test_non_numeric_tokens_skipped(self):
        assert parse_covered_rows("p_12_4_x_9") == (12, 4, 9)
        assert parse_covered_rows("route") == ()

    def test_sign_is_not_numeric(self):
        """Only a leading digit makes a token numeric."""
        assert parse_covered_rows("R_-3_4") == (4,)

    def test_empty_tokens_skipped(self):
        assert parse_covered_rows("R__1_") == (1,)
        assert parse_covered_rows("") == ()

    def test_custom_delimiter(self):
        assert parse_covered_rows("R-10-2", delimiter="-") == (10, 2)
        assert parse_covered_rows("R-10-2") == ()

    def test_deterministic(self):
        identifier = "col_5_2_11_x"
        assert parse_covered_rows(identifier) == parse_covered_rows(identifier)

    def test_digit_prefixed_garbage_raises(self):
        with pytest.raises(ColumnParseError) as excinfo:
            parse_covered_rows("R_1_12a_3")

        assert excinfo.value.identifier == "R_1_12a_3"
        assert excinfo.value.token == "12a"
        assert isinstance(excinfo.value, ValueError)

    def test_digit_separator_raises(self):
        """Python's "1_0" literal form is not a row index."""
        with pytest.raises(ColumnParseError) as excinfo:
            parse_covered_rows("R-1_0-3", delimiter="-")

        assert excinfo.value.token == "1_0"

    def test_row_index_range(self):
        assert parse_covered_rows(f"R_1_{MAX_ROW_INDEX}") == (1, MAX_ROW_INDEX)

        with pytest.raises(ColumnParseError) as excinfo:
            parse_covered_rows("R_3_99999999999999999999")

        assert excinfo.value.token == "99999999999999999999"


# =============================================================================
# Test Column
# =============================================================================

class TestColumn:
    """Tests for Column."""

    def test_from_record(self):
        column = Column.from_record("R_1_3_7", 1.0, 250.0)

        assert column.covered_rows == (1, 3, 7)
        assert column.is_parsed
        assert column.num_rows == 3
        assert column.covers_row(3)
        assert not column.covers_row(2)
        assert column.coefficient == Coefficient(1.0, 250.0)

    def test_parse_error_attached(self):
        """A bad identifier does not raise; the error travels with the column."""
        column = Column.from_record("R_4x_2", 1.0, 5.0)

        assert not column.is_parsed
        assert column.covered_rows == ()
        assert isinstance(column.parse_error, ColumnParseError)
        assert column.parse_error.token == "4x"

    def test_custom_delimiter(self):
        column = Column.from_record("R.1.2", 0.0, 1.0, delimiter=".")
        assert column.covered_rows == (1, 2)

    def test_is_selected_exact(self):
        assert Column("a", 1.0, 0.0).is_selected()
        assert not Column("a", 0.9999999, 0.0).is_selected()
        assert not Column("a", 2.0, 0.0).is_selected()

    def test_is_selected_with_tolerance(self):
        assert Column("a", 0.9999999, 0.0).is_selected(tol=1e-6)
        assert Column("a", 1.0000001, 0.0).is_selected(tol=1e-6)
        assert not Column("a", 0.99, 0.0).is_selected(tol=1e-6)

    def test_is_positive(self):
        assert Column("a", 0.5, 0.0).is_positive()
        assert not Column("a", 0.0, 0.0).is_positive()
        assert not Column("a", -1.0, 0.0).is_positive()
        assert not Column("a", 1e-9, 0.0).is_positive(tol=1e-6)

    def test_rows_stored_as_tuple(self):
        column = Column("a", 1.0, 0.0, covered_rows=[3, 1])
        assert column.covered_rows == (3, 1)

    def test_hashable(self):
        columns = {Column.from_record("R_1", 1.0, 2.0), Column.from_record("R_1", 1.0, 2.0)}
        assert len(columns) == 1


# =============================================================================
# Test Solution
# =============================================================================

class TestSolution:
    """Tests for Solution and working basis extraction."""

    def test_mapping_interface(self, sample_solution):
        assert len(sample_solution) == 6
        assert "R_4_5" in sample_solution
        assert sample_solution["R_4_5"].objective_coefficient == 7.5
        assert list(sample_solution)[0] == "R_1_2_3"

    def test_working_basis(self, sample_solution):
        basis = sample_solution.working_basis()

        assert basis == {"R_1_2_3", "R_4_5", "R_6_8"}
        assert basis <= set(sample_solution)
        assert all(sample_solution[c].value == 1.0 for c in basis)

    def test_find_working_basis(self, sample_solution):
        assert find_working_basis(sample_solution) == sample_solution.working_basis()

    def test_near_integral_values(self):
        """Exact match by default; a tolerance admits near-integral values."""
        solution = Solution.from_columns([
            Column.from_record("R_1", 1.0, 1.0),
            Column.from_record("R_2", 1.0 - 1e-12, 1.0),
        ])

        assert solution.working_basis() == {"R_1"}
        assert solution.working_basis(tol=1e-9) == {"R_1", "R_2"}

    def test_duplicates_last_wins(self):
        solution = Solution.from_columns([
            Column.from_record("R_1", 0.0, 1.0),
            Column.from_record("R_1", 1.0, 4.0),
        ])

        assert len(solution) == 1
        assert solution["R_1"].coefficient == (1.0, 4.0)

    def test_positive_columns(self, sample_solution):
        ids = [c.column_id for c in sample_solution.positive_columns()]
        assert ids == ["R_1_2_3", "R_4_5", "R_6_8", "R_2_3"]

    def test_parse_errors(self):
        solution = Solution.from_columns([
            Column.from_record("R_1", 1.0, 1.0),
            Column.from_record("R_1b", 1.0, 1.0),
        ])
        assert list(solution.parse_errors) == ["R_1b"]

    def test_empty(self):
        solution = Solution()
        assert solution.is_empty
        assert solution.working_basis() == set()
        assert solution.coefficients() == {}

    def test_summary(self, sample_solution):
        summary = sample_solution.summary()
        assert "Columns: 6" in summary
        assert "Selected (value == 1): 3" in summary
        assert "Objective: 26.500000" in summary
