"""
Core module - data model for post-solve compatibility analysis.

This module provides:
- parse_covered_rows: Decode the rows a column covers from its identifier
- Column: A column with its solver value, objective coefficient and rows
- Solution: Immutable mapping from column identifier to Column
"""

from cgcompat.core.column import Coefficient, Column
from cgcompat.core.identifier import (
    DEFAULT_DELIMITER,
    MAX_ROW_INDEX,
    ColumnParseError,
    parse_covered_rows,
)
from cgcompat.core.solution import Solution, find_working_basis

__all__ = [
    # Identifier
    "DEFAULT_DELIMITER",
    "MAX_ROW_INDEX",
    "ColumnParseError",
    "parse_covered_rows",
    # Column
    "Coefficient",
    "Column",
    # Solution
    "Solution",
    "find_working_basis",
]
