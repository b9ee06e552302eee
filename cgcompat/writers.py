"""
Record writers - the output side of the record formats read by cgcompat.parsers.

Floats are written with repr() so that reading a record back reproduces
the exact values. Each writer opens its file for the duration of the call
only; OSError propagates to the caller.
"""

from pathlib import Path
from typing import Dict, Mapping, Tuple, Union

from cgcompat.compatibility.classifier import Classification
from cgcompat.compatibility.relation import CompatibilityRelation
from cgcompat.core.column import Coefficient


def _ensure_parent(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def format_compatibility_line(column_id: str, linked) -> str:
    return column_id + " :" + "".join(f" {other}" for other in linked)


def format_coefficient_line(column_id: str, coefficient: Tuple[float, float]) -> str:
    value, objective = coefficient
    return f"{column_id} : {value!r} (obj: {objective!r})"


def write_compatibility(
    relation: CompatibilityRelation,
    path: Union[str, Path],
    encoding: str = "utf-8"
) -> Path:
    """
    Write a compatibility record, one line per qualifying column.

    Returns:
        The path written
    """
    path = Path(path)
    _ensure_parent(path)
    with open(path, 'w', encoding=encoding) as f:
        for column_id in relation:
            f.write(format_compatibility_line(column_id, relation.linked(column_id)) + "\n")
    return path


def write_coefficients(
    coefficients: Mapping[str, Coefficient],
    path: Union[str, Path],
    encoding: str = "utf-8"
) -> Path:
    """
    Write a coefficient record.

    Returns:
        The path written
    """
    path = Path(path)
    _ensure_parent(path)
    with open(path, 'w', encoding=encoding) as f:
        for column_id, coefficient in coefficients.items():
            f.write(format_coefficient_line(column_id, coefficient) + "\n")
    return path


def write_classification(
    classification: Classification,
    compatible_path: Union[str, Path],
    incompatible_path: Union[str, Path],
    encoding: str = "utf-8"
) -> Dict[str, Path]:
    """
    Write both coefficient records of a classification.

    Returns:
        {"compatible": path, "incompatible": path}
    """
    return {
        "compatible": write_coefficients(classification.compatible, compatible_path, encoding),
        "incompatible": write_coefficients(classification.incompatible, incompatible_path, encoding),
    }
