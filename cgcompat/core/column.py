"""
Column module - a column as read back from a solved master problem.

In set-partitioning models built by column generation, every variable is a
"column": a feasible sequence of rows (e.g., the stops of a route). After
the external solver has run, each column carries:
- its solver-assigned value
- its objective coefficient
- the rows it covers, decoded from its identifier

Design Notes:
------------
- Columns are immutable (frozen dataclass) and hashable by identifier
- covered_rows is a tuple because visiting order matters
- A column whose identifier cannot be decoded keeps the error in
  `parse_error` instead of failing the whole load
"""

from dataclasses import dataclass
from typing import NamedTuple, Optional, Tuple

from cgcompat.core.identifier import (
    DEFAULT_DELIMITER,
    ColumnParseError,
    parse_covered_rows,
)


class Coefficient(NamedTuple):
    """Value and objective coefficient of a column."""
    value: float
    objective: float


@dataclass(frozen=True)
class Column:
    """
    Represents a column of a solved set-partitioning model.

    Attributes:
        column_id: Unique identifier (the solver variable name)
        value: Solver-assigned value
        objective_coefficient: Objective function coefficient
        covered_rows: Row indices in visiting order
        parse_error: Set when the identifier could not be decoded

    Example:
        >>> column = Column.from_record("R_1_3_7", 1.0, 250.0)
        >>> column.covered_rows
        (1, 3, 7)
        >>> column.covers_row(3)
        True
    """
    column_id: str
    value: float
    objective_coefficient: float
    covered_rows: Tuple[int, ...] = ()
    parse_error: Optional[ColumnParseError] = None

    def __post_init__(self):
        """Ensure covered_rows is a tuple."""
        if not isinstance(self.covered_rows, tuple):
            object.__setattr__(self, 'covered_rows', tuple(self.covered_rows))

    @classmethod
    def from_record(
        cls,
        column_id: str,
        value: float,
        objective_coefficient: float,
        delimiter: str = DEFAULT_DELIMITER
    ) -> 'Column':
        """
        Create a column and decode its covered rows from the identifier.

        A decoding failure does not raise; it is attached to the column.

        Args:
            column_id: Column identifier
            value: Solver-assigned value
            objective_coefficient: Objective coefficient
            delimiter: Identifier token delimiter

        Returns:
            New Column
        """
        try:
            rows = parse_covered_rows(column_id, delimiter)
            error = None
        except ColumnParseError as e:
            rows = ()
            error = e
        return cls(
            column_id=column_id,
            value=value,
            objective_coefficient=objective_coefficient,
            covered_rows=rows,
            parse_error=error,
        )

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def is_parsed(self) -> bool:
        """True if the identifier was decoded without error."""
        return self.parse_error is None

    @property
    def num_rows(self) -> int:
        """Number of covered rows."""
        return len(self.covered_rows)

    @property
    def coefficient(self) -> Coefficient:
        """(value, objective coefficient) pair."""
        return Coefficient(self.value, self.objective_coefficient)

    # =========================================================================
    # Methods
    # =========================================================================

    def covers_row(self, row: int) -> bool:
        """Check if this column covers a specific row."""
        return row in self.covered_rows

    def is_selected(self, tol: float = 0.0) -> bool:
        """
        Check if the column is selected (value equal to 1.0).

        Args:
            tol: Accepted distance from 1.0 (0.0 = exact match)
        """
        return abs(self.value - 1.0) <= tol

    def is_positive(self, tol: float = 0.0) -> bool:
        """Check if the column has value strictly above tol."""
        return self.value > tol

    def __hash__(self) -> int:
        return hash(self.column_id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Column):
            return NotImplemented
        return (
            self.column_id == other.column_id
            and self.value == other.value
            and self.objective_coefficient == other.objective_coefficient
        )

    def __repr__(self) -> str:
        err_str = ", unparsed" if self.parse_error is not None else ""
        return (
            f"Column({self.column_id!r}, value={self.value:g}, "
            f"obj={self.objective_coefficient:g}, rows={len(self.covered_rows)}{err_str})"
        )
