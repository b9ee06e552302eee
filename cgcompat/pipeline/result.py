"""
Pipeline result module.

This module defines the data structures returned by a compatibility
pipeline run.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import Dict, List, Optional, Set

from cgcompat.compatibility.classifier import Classification
from cgcompat.compatibility.relation import CompatibilityRelation
from cgcompat.core.solution import Solution
from cgcompat.pipeline.instance import InstanceFiles


class PipelineStatus(Enum):
    """
    Status of a pipeline run.
    """
    COMPLETED = auto()      # All stages ran and all records were written
    EMPTY_INPUT = auto()    # Solution log missing, unreadable or empty
    WRITE_FAILED = auto()   # Analysis ran but an output record could not be written
    NOT_RUN = auto()        # Run not called yet


@dataclass
class PipelineResult:
    """
    Result of analysing one instance.

    Attributes:
        instance: Instance files the run used
        status: Run status
        solution: Loaded solution
        basis: Working basis identifiers
        degrees: Degree of each basis column against the basis
        relation: Compatibility relation
        classification: Compatible/incompatible partition
        outputs: Record name -> path written
        errors: Diagnostics collected during the run
        total_time: Wall time of the run in seconds

    Example:
        >>> result = pipeline.run(files)
        >>> print(result.summary())
    """
    instance: Optional[InstanceFiles] = None
    status: PipelineStatus = PipelineStatus.NOT_RUN

    solution: Solution = field(default_factory=Solution)
    basis: Set[str] = field(default_factory=set)
    degrees: Dict[str, int] = field(default_factory=dict)
    relation: CompatibilityRelation = field(default_factory=CompatibilityRelation)
    classification: Classification = field(default_factory=Classification)

    outputs: Dict[str, Path] = field(default_factory=dict)
    errors: List[str] = field(default_factory=list)
    total_time: float = 0.0

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def instance_name(self) -> str:
        return self.instance.instance if self.instance else ""

    @property
    def is_complete(self) -> bool:
        return self.status == PipelineStatus.COMPLETED

    @property
    def candidates(self) -> List[str]:
        """Basis columns with zero degree against the basis."""
        return [column_id for column_id, degree in self.degrees.items() if degree == 0]

    def summary(self) -> str:
        """
        Return a human-readable summary of the run.

        Returns:
            Summary string
        """
        lines = [
            f"PipelineResult ({self.instance_name or 'unnamed'}):",
            f"  Status: {self.status.name}",
            f"  Columns: {len(self.solution)}",
            f"  Working basis: {len(self.basis)}",
            f"  Basis-compatible candidates: {len(self.candidates)}",
            f"  Relation: {len(self.relation)} columns, {self.relation.num_links} links",
            f"  Compatible: {len(self.classification.compatible)}",
            f"  Incompatible: {len(self.classification.incompatible)}",
        ]

        if self.solution.objective_value is not None:
            lines.append(f"  Objective: {self.solution.objective_value:.6f}")

        unparsed = self.solution.parse_errors
        if unparsed:
            lines.append(f"  Unparsed identifiers: {len(unparsed)}")

        for name, path in self.outputs.items():
            lines.append(f"  Wrote {name}: {path}")

        for error in self.errors:
            lines.append(f"  Error: {error}")

        lines.append(f"  Time: {self.total_time:.3f}s")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"PipelineResult({self.instance_name!r}, {self.status.name}, "
            f"compatible={len(self.classification.compatible)})"
        )
