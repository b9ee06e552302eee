"""
Compatibility module - scoring, relation building and classification.

This module provides:
- directed_degree / incompatibility_degree / pairwise_degree: the
  row-adjacency incompatibility measure
- CompatibilityPolicy and its implementations: build the relation among
  selected columns
- CompatibilityRelation: the resulting relation
- classify_columns: split every column into compatible and incompatible

Usage:
------
>>> from cgcompat.compatibility import BasisSharedCompatibility, classify_columns
>>>
>>> basis = solution.working_basis()
>>> relation = BasisSharedCompatibility().build(solution, basis)
>>> classification = classify_columns(solution, relation)
"""

from cgcompat.compatibility.classifier import Classification, classify_columns
from cgcompat.compatibility.degree import (
    DegreeSymmetry,
    directed_degree,
    incompatibility_degree,
    pairwise_degree,
)
from cgcompat.compatibility.policy import (
    BasisSharedCompatibility,
    CompatibilityPolicy,
    PairwiseCompatibility,
    get_policy,
    list_policies,
    register_policy,
)
from cgcompat.compatibility.relation import CompatibilityRelation

__all__ = [
    # Degree
    'DegreeSymmetry',
    'directed_degree',
    'incompatibility_degree',
    'pairwise_degree',

    # Relation
    'CompatibilityRelation',

    # Policies
    'CompatibilityPolicy',
    'BasisSharedCompatibility',
    'PairwiseCompatibility',
    'get_policy',
    'list_policies',
    'register_policy',

    # Classification
    'Classification',
    'classify_columns',
]
