"""
Solution module - the column values reported by the external solver.

A Solution is an immutable mapping from column identifier to Column. It is
built once per solution log and never modified afterwards.
"""

from collections.abc import Mapping
from typing import Dict, Iterable, Iterator, List, Optional, Set

from cgcompat.core.column import Coefficient, Column
from cgcompat.core.identifier import ColumnParseError


class Solution(Mapping):
    """
    Immutable mapping from column identifier to Column.

    Duplicate identifiers in the input keep the last occurrence.

    Attributes:
        objective_value: Objective value from the log header (None if absent)

    Example:
        >>> solution = Solution.from_columns([
        ...     Column.from_record("R_1_2", 1.0, 10.0),
        ...     Column.from_record("R_3_4", 0.0, 12.0),
        ... ])
        >>> sorted(solution.working_basis())
        ['R_1_2']
    """

    def __init__(
        self,
        columns: Optional[Dict[str, Column]] = None,
        objective_value: Optional[float] = None
    ):
        self._columns: Dict[str, Column] = dict(columns or {})
        self.objective_value = objective_value

    @classmethod
    def from_columns(
        cls,
        columns: Iterable[Column],
        objective_value: Optional[float] = None
    ) -> 'Solution':
        """Build a solution from columns; later duplicates overwrite earlier ones."""
        mapping: Dict[str, Column] = {}
        for column in columns:
            mapping[column.column_id] = column
        return cls(mapping, objective_value)

    # =========================================================================
    # Mapping interface
    # =========================================================================

    def __getitem__(self, column_id: str) -> Column:
        return self._columns[column_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._columns)

    def __len__(self) -> int:
        return len(self._columns)

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def is_empty(self) -> bool:
        return not self._columns

    def working_basis(self, tol: float = 0.0) -> Set[str]:
        """
        Identifiers of the columns selected in the solution (value == 1.0).

        Args:
            tol: Accepted distance from 1.0 (0.0 = exact match)

        Returns:
            Set of column identifiers
        """
        return {
            col_id for col_id, column in self._columns.items()
            if column.is_selected(tol)
        }

    def selected_columns(self, tol: float = 0.0) -> List[Column]:
        """Selected columns, in input order."""
        return [col for col in self._columns.values() if col.is_selected(tol)]

    def positive_columns(self, tol: float = 0.0) -> List[Column]:
        """Columns with value > tol, in input order."""
        return [col for col in self._columns.values() if col.is_positive(tol)]

    def coefficients(self) -> Dict[str, Coefficient]:
        """Mapping from identifier to (value, objective coefficient)."""
        return {
            col_id: column.coefficient
            for col_id, column in self._columns.items()
        }

    @property
    def parse_errors(self) -> Dict[str, ColumnParseError]:
        """Columns whose identifier could not be decoded."""
        return {
            col_id: column.parse_error
            for col_id, column in self._columns.items()
            if column.parse_error is not None
        }

    def summary(self) -> str:
        """Return a human-readable summary."""
        lines = [
            "Solution:",
            f"  Columns: {len(self)}",
            f"  Selected (value == 1): {len(self.working_basis())}",
            f"  Positive: {len(self.positive_columns())}",
        ]
        if self.objective_value is not None:
            lines.append(f"  Objective: {self.objective_value:.6f}")
        errors = self.parse_errors
        if errors:
            lines.append(f"  Unparsed identifiers: {len(errors)}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        obj_str = f", obj={self.objective_value:.4f}" if self.objective_value is not None else ""
        return f"Solution(columns={len(self)}{obj_str})"


def find_working_basis(solution: Solution, tol: float = 0.0) -> Set[str]:
    """Identifiers of the selected columns of a solution."""
    return solution.working_basis(tol)
