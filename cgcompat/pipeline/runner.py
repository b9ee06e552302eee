"""
Compatibility pipeline - runs every stage for one instance.

Stages:
1. Load the solution log (identifiers decoded into covered rows)
2. Extract the working basis
3. Score each basis column against the basis
4. Build the compatibility relation with the configured policy
5. Classify every column as compatible or incompatible
6. Write the compatibility and coefficient records

Each stage consumes the whole output of the previous one. A missing
solution log yields an empty solution; the later stages still run and
write empty records.
"""

import time
import warnings
from typing import Iterable, List, Optional

from cgcompat.compatibility.classifier import Classification, classify_columns
from cgcompat.compatibility.policy import CompatibilityPolicy, get_policy
from cgcompat.config import CompatConfig
from cgcompat.config import config as default_config
from cgcompat.core.solution import Solution
from cgcompat.parsers.base import ParserConfig, RecordFileWarning
from cgcompat.parsers.compatibility import CompatibilityRecordParser
from cgcompat.parsers.solution_log import SolutionLogParser
from cgcompat.pipeline.instance import InstanceFiles
from cgcompat.pipeline.result import PipelineResult, PipelineStatus
from cgcompat.writers import write_classification, write_compatibility

PARSE_ERROR_ACTIONS = ("exclude", "raise")


class CompatibilityPipeline:
    """
    Runs the compatibility analysis for solution logs.

    Example:
        >>> pipeline = CompatibilityPipeline()
        >>> files = InstanceFiles.for_instance("AS65-2", "runs/")
        >>> result = pipeline.run(files)
        >>> print(result.summary())

    Args:
        config: Configuration (uses the global config if None)
        policy: Compatibility policy (built from config if None)
        on_parse_error: "exclude" keeps undecodable columns out of the
            relation; "raise" aborts on the first one
        strict: Raise on malformed record lines instead of skipping them
    """

    def __init__(
        self,
        config: Optional[CompatConfig] = None,
        policy: Optional[CompatibilityPolicy] = None,
        on_parse_error: str = "exclude",
        strict: bool = False
    ):
        if on_parse_error not in PARSE_ERROR_ACTIONS:
            raise ValueError(
                f"on_parse_error must be one of {PARSE_ERROR_ACTIONS}, got {on_parse_error!r}"
            )
        self.config = config or default_config
        self.policy = policy or get_policy(
            self.config.relation_policy, self.config.degree_symmetry
        )
        self.on_parse_error = on_parse_error
        self._parser_config = ParserConfig(
            strict=strict,
            verbose=self.config.verbose,
            encoding=self.config.encoding,
            options={"delimiter": self.config.delimiter},
        )

    def _log(self, message: str) -> None:
        if self.config.verbose:
            print(f"[Pipeline] {message}")

    # =========================================================================
    # Loading
    # =========================================================================

    def load_solution(self, files: InstanceFiles) -> Solution:
        """Load the solution log of an instance."""
        return SolutionLogParser(self._parser_config).parse(files.solution_path)

    # =========================================================================
    # Analysis
    # =========================================================================

    def analyze(self, solution: Solution) -> PipelineResult:
        """
        Run basis extraction, scoring, relation building and classification.

        No files are read or written.

        Args:
            solution: Loaded solution

        Returns:
            PipelineResult with status COMPLETED, or EMPTY_INPUT for an
            empty solution

        Raises:
            ColumnParseError: If on_parse_error is "raise" and an identifier
                could not be decoded
        """
        errors = solution.parse_errors
        if errors:
            if self.on_parse_error == "raise":
                raise next(iter(errors.values()))
            self._log(f"Excluding {len(errors)} columns with undecodable identifiers")

        basis = solution.working_basis(self.config.get_tolerance("basis"))
        degrees = self.policy.basis_degrees(solution, basis)
        relation = self.policy.build(solution, basis, degrees)
        classification = classify_columns(
            solution, relation, self.config.get_tolerance("positive")
        )

        self._log(
            f"Basis {len(basis)}, relation {len(relation)}, "
            f"compatible {len(classification.compatible)}/{len(solution)}"
        )

        return PipelineResult(
            status=PipelineStatus.EMPTY_INPUT if solution.is_empty else PipelineStatus.COMPLETED,
            solution=solution,
            basis=basis,
            degrees=degrees,
            relation=relation,
            classification=classification,
            errors=[str(e) for e in errors.values()],
        )

    # =========================================================================
    # Full runs
    # =========================================================================

    def run(self, files: InstanceFiles) -> PipelineResult:
        """
        Analyse one instance and write its records.

        Args:
            files: Input and output paths of the instance

        Returns:
            PipelineResult
        """
        start = time.time()
        self._log(f"Instance {files.instance}: {files.solution_path}")

        result = self.analyze(self.load_solution(files))
        result.instance = files

        try:
            result.outputs["compatibility"] = write_compatibility(
                result.relation, files.compatibility_path, self.config.encoding
            )
            result.outputs.update(write_classification(
                result.classification,
                files.compatible_path,
                files.incompatible_path,
                self.config.encoding,
            ))
        except OSError as e:
            message = f"Could not write records for {files.instance}: {e}"
            warnings.warn(message, RecordFileWarning, stacklevel=2)
            result.errors.append(message)
            result.status = PipelineStatus.WRITE_FAILED

        result.total_time = time.time() - start
        return result

    def run_instances(self, instances: Iterable[InstanceFiles]) -> List[PipelineResult]:
        """Run every instance in turn."""
        return [self.run(files) for files in instances]

    def classify_from_records(self, files: InstanceFiles) -> Classification:
        """
        Classify from persisted records and write the coefficient records.

        Reads the solution log and the compatibility record of an instance,
        instead of rebuilding the relation.

        Args:
            files: Input and output paths of the instance

        Returns:
            Classification
        """
        solution = self.load_solution(files)
        relation = CompatibilityRecordParser(self._parser_config).parse(files.compatibility_path)
        classification = classify_columns(
            solution, relation, self.config.get_tolerance("positive")
        )
        write_classification(
            classification, files.compatible_path, files.incompatible_path, self.config.encoding
        )
        return classification

    def __repr__(self) -> str:
        return f"CompatibilityPipeline(policy={self.policy!r}, on_parse_error={self.on_parse_error!r})"
