"""
Coefficient classifier - splits all columns into compatible and incompatible.

A column is compatible when its value is positive and it belongs to the
compatibility relation (as a key or as a link). Every other column is
incompatible. Both groups keep each column's (value, objective) pair.
"""

from dataclasses import dataclass, field
from typing import AbstractSet, Dict, Union

from cgcompat.compatibility.relation import CompatibilityRelation
from cgcompat.core.column import Coefficient
from cgcompat.core.solution import Solution


@dataclass
class Classification:
    """
    Partition of a solution's columns.

    Attributes:
        compatible: identifier -> (value, objective) for compatible columns
        incompatible: identifier -> (value, objective) for every other column
    """
    compatible: Dict[str, Coefficient] = field(default_factory=dict)
    incompatible: Dict[str, Coefficient] = field(default_factory=dict)

    @property
    def num_columns(self) -> int:
        return len(self.compatible) + len(self.incompatible)

    def is_compatible(self, column_id: str) -> bool:
        return column_id in self.compatible

    def summary(self) -> str:
        """Return a human-readable summary."""
        return "\n".join([
            "Classification:",
            f"  Compatible: {len(self.compatible)}",
            f"  Incompatible: {len(self.incompatible)}",
        ])

    def __repr__(self) -> str:
        return (
            f"Classification(compatible={len(self.compatible)}, "
            f"incompatible={len(self.incompatible)})"
        )


def classify_columns(
    solution: Solution,
    compatible_ids: Union[CompatibilityRelation, AbstractSet[str]],
    positive_tol: float = 0.0
) -> Classification:
    """
    Classify every column of a solution.

    Args:
        solution: The solution
        compatible_ids: A compatibility relation, or the identifier set it implies
        positive_tol: A value must exceed this to count as positive

    Returns:
        Classification covering each column exactly once
    """
    if isinstance(compatible_ids, CompatibilityRelation):
        compatible_ids = compatible_ids.identifiers()

    classification = Classification()
    for column_id, column in solution.items():
        if column.is_positive(positive_tol) and column_id in compatible_ids:
            classification.compatible[column_id] = column.coefficient
        else:
            classification.incompatible[column_id] = column.coefficient
    return classification
