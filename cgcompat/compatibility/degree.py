"""
Incompatibility degree between row-covering sequences.

The degree measures how much a subject column disagrees with the adjacency
structure of a reference column. For every pair of consecutive rows
(r_t, r_t+1) in the reference sequence:

    subject covers exactly one of them            -> +1 (broken adjacency)
    subject covers both and r_t+1 - r_t > 1       -> +2 (spans a gap)
    otherwise                                     -> +0

References with fewer than two rows contribute 0. The degree against a
set of references is the sum over the set.

The measure is directional: degree(A, B) iterates B's adjacencies and tests
A's coverage, so in general degree(A, B) != degree(B, A). pairwise_degree()
combines both directions according to a DegreeSymmetry.
"""

from enum import Enum
from typing import Iterable, Sequence

import numpy as np


class DegreeSymmetry(Enum):
    """How pairwise_degree combines the two directions."""
    DIRECTED = "directed"  # degree(A, B) only
    SUM = "sum"            # degree(A, B) + degree(B, A)
    MAX = "max"            # max(degree(A, B), degree(B, A))


def _as_rows(rows: Iterable[int]) -> np.ndarray:
    return np.fromiter(rows, dtype=np.int64)


def directed_degree(
    subject_rows: Iterable[int],
    reference_rows: Sequence[int]
) -> int:
    """
    Incompatibility degree of a subject against one reference column.

    Args:
        subject_rows: Rows covered by the subject column (order irrelevant)
        reference_rows: Rows covered by the reference column, in order

    Returns:
        Non-negative degree
    """
    reference = _as_rows(reference_rows)
    if reference.size < 2:
        return 0

    covered = np.isin(reference, _as_rows(subject_rows))
    head, tail = covered[:-1], covered[1:]

    broken = np.count_nonzero(head != tail)
    spanned = np.count_nonzero(head & tail & (np.diff(reference) > 1))
    return int(broken + 2 * spanned)


def incompatibility_degree(
    subject_rows: Iterable[int],
    reference_set: Iterable[Sequence[int]]
) -> int:
    """
    Incompatibility degree of a subject against a set of reference columns.

    Args:
        subject_rows: Rows covered by the subject column
        reference_set: Row sequences of the reference columns

    Returns:
        Sum of directed_degree over the set (0 for an empty set)
    """
    subject = tuple(subject_rows)
    return sum(directed_degree(subject, reference) for reference in reference_set)


def pairwise_degree(
    rows_a: Sequence[int],
    rows_b: Sequence[int],
    symmetry: DegreeSymmetry = DegreeSymmetry.DIRECTED
) -> int:
    """
    Incompatibility degree between two columns.

    Args:
        rows_a: Rows covered by column A (the subject)
        rows_b: Rows covered by column B (the reference)
        symmetry: How to combine degree(A, B) and degree(B, A)

    Returns:
        Combined degree
    """
    forward = directed_degree(rows_a, rows_b)
    if symmetry is DegreeSymmetry.DIRECTED:
        return forward

    backward = directed_degree(rows_b, rows_a)
    if symmetry is DegreeSymmetry.SUM:
        return forward + backward
    return max(forward, backward)
