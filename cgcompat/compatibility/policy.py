"""
Compatibility policies - how the compatibility relation is built.

Every policy starts from the same candidate filter: a selected column is a
basis-compatible candidate when its incompatibility degree against the
working basis is zero. Policies differ in how candidates are linked:

- BasisSharedCompatibility: every candidate is linked to every other
  candidate. Two columns are considered compatible because each one is
  compatible with the basis; they are never scored against each other.
- PairwiseCompatibility: a candidate A is linked to a candidate B only if
  pairwise_degree(A, B) is also zero, under a chosen DegreeSymmetry.

Columns whose identifier could not be decoded take no part: they are
neither references nor candidates.

Customization Guide:
-------------------
1. Subclass CompatibilityPolicy
2. Implement _link(candidates)
3. Optionally register it with register_policy() so configuration and the
   command line can select it by name
"""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional, Type, Union

from cgcompat.compatibility.degree import (
    DegreeSymmetry,
    incompatibility_degree,
    pairwise_degree,
)
from cgcompat.compatibility.relation import CompatibilityRelation
from cgcompat.core.column import Column
from cgcompat.core.solution import Solution


class CompatibilityPolicy(ABC):
    """
    Abstract base class for compatibility relation builders.

    Example:
        >>> policy = BasisSharedCompatibility()
        >>> basis = solution.working_basis()
        >>> relation = policy.build(solution, basis)
    """

    name: str = ""

    def __init__(self, symmetry: Union[DegreeSymmetry, str] = DegreeSymmetry.DIRECTED):
        """
        Args:
            symmetry: How pairwise degrees combine both directions
        """
        self.symmetry = DegreeSymmetry(symmetry)

    def basis_degrees(self, solution: Solution, basis: Iterable[str]) -> Dict[str, int]:
        """
        Degree of every decodable basis column against the working basis.

        The basis includes the column itself, so a column whose own rows
        contain a numeric gap scores against itself.

        Args:
            solution: The solution
            basis: Working basis identifiers

        Returns:
            Mapping from identifier to degree, in solution order
        """
        basis = set(basis)
        members = [
            column for column_id, column in solution.items()
            if column_id in basis and column.is_parsed
        ]
        references = [column.covered_rows for column in members]
        return {
            column.column_id: incompatibility_degree(column.covered_rows, references)
            for column in members
        }

    def candidates(
        self,
        solution: Solution,
        basis: Iterable[str],
        degrees: Optional[Dict[str, int]] = None
    ) -> List[Column]:
        """Basis columns with zero degree against the basis, in solution order."""
        if degrees is None:
            degrees = self.basis_degrees(solution, basis)
        return [solution[column_id] for column_id, degree in degrees.items() if degree == 0]

    def build(
        self,
        solution: Solution,
        basis: Iterable[str],
        degrees: Optional[Dict[str, int]] = None
    ) -> CompatibilityRelation:
        """
        Build the compatibility relation.

        Args:
            solution: The solution
            basis: Working basis identifiers
            degrees: Result of basis_degrees() for the same solution and
                basis (computed here if not provided)

        Returns:
            Relation keyed by basis-compatible candidates
        """
        return self._link(self.candidates(solution, basis, degrees))

    @abstractmethod
    def _link(self, candidates: List[Column]) -> CompatibilityRelation:
        """Link candidates to each other."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(symmetry={self.symmetry.value})"


class BasisSharedCompatibility(CompatibilityPolicy):
    """
    Link every basis-compatible candidate to every other candidate.

    Each candidate is a key, including a lone candidate with no partner.
    """

    name = "basis_shared"

    def _link(self, candidates: List[Column]) -> CompatibilityRelation:
        relation = CompatibilityRelation()
        ids = [column.column_id for column in candidates]
        for column_id in ids:
            relation.add(column_id, [other for other in ids if other != column_id])
        return relation


class PairwiseCompatibility(CompatibilityPolicy):
    """
    Link candidate A to candidate B when their pairwise degree is zero.

    With DegreeSymmetry.DIRECTED the relation may be asymmetric; SUM and
    MAX always produce a symmetric relation.
    """

    name = "pairwise"

    def _link(self, candidates: List[Column]) -> CompatibilityRelation:
        relation = CompatibilityRelation()
        for column in candidates:
            linked = [
                other.column_id for other in candidates
                if other.column_id != column.column_id
                and pairwise_degree(column.covered_rows, other.covered_rows, self.symmetry) == 0
            ]
            relation.add(column.column_id, linked)
        return relation


# =============================================================================
# Registry
# =============================================================================

_policies: Dict[str, Type[CompatibilityPolicy]] = {}


def register_policy(policy_class: Type[CompatibilityPolicy], name: Optional[str] = None) -> None:
    """
    Register a policy class under a name.

    Args:
        policy_class: CompatibilityPolicy subclass
        name: Registry name (uses policy_class.name if not provided)
    """
    _policies[name or policy_class.name] = policy_class


def get_policy(
    name: str,
    symmetry: Union[DegreeSymmetry, str] = DegreeSymmetry.DIRECTED
) -> CompatibilityPolicy:
    """
    Create a registered policy by name.

    Raises:
        ValueError: If no policy is registered under that name
    """
    policy_class = _policies.get(name)
    if policy_class is None:
        raise ValueError(
            f"Unknown compatibility policy: {name} (available: {', '.join(list_policies())})"
        )
    return policy_class(symmetry)


def list_policies() -> List[str]:
    """Names of the registered policies."""
    return sorted(_policies)


register_policy(BasisSharedCompatibility)
register_policy(PairwiseCompatibility)
