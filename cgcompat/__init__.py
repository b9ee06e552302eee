"""
cgcompat: post-solve compatibility analysis for column generation.

Reads the solution of a set-partitioning model produced by column
generation, scores how well each selected column fits the adjacency
structure of the working basis, builds a compatibility relation among the
selected columns and splits every column into a compatible and an
incompatible group for restricted pricing and branching.
"""

__version__ = "0.1.0"

# Configuration
from cgcompat.config import config, get_data_path, get_output_path, set_data_path

# Core classes
from cgcompat.core import (
    Coefficient,
    Column,
    ColumnParseError,
    Solution,
    find_working_basis,
    parse_covered_rows,
)

# Compatibility analysis
from cgcompat.compatibility import (
    BasisSharedCompatibility,
    Classification,
    CompatibilityPolicy,
    CompatibilityRelation,
    DegreeSymmetry,
    PairwiseCompatibility,
    classify_columns,
    directed_degree,
    get_policy,
    incompatibility_degree,
    pairwise_degree,
)

# Record files
from cgcompat.parsers import (
    CoefficientRecordParser,
    CompatibilityRecordParser,
    MalformedLineWarning,
    ParserConfig,
    RecordFileWarning,
    SolutionLogParser,
    load_coefficients,
    load_compatibility,
    load_solution,
)
from cgcompat.writers import write_classification, write_coefficients, write_compatibility

# Pipeline
from cgcompat.pipeline import (
    CompatibilityPipeline,
    InstanceFiles,
    PipelineResult,
    PipelineStatus,
    discover_instances,
)

__all__ = [
    # Version
    "__version__",
    # Configuration
    "config",
    "get_data_path",
    "get_output_path",
    "set_data_path",
    # Core classes
    "Coefficient",
    "Column",
    "ColumnParseError",
    "Solution",
    "find_working_basis",
    "parse_covered_rows",
    # Compatibility analysis
    "DegreeSymmetry",
    "directed_degree",
    "incompatibility_degree",
    "pairwise_degree",
    "CompatibilityRelation",
    "CompatibilityPolicy",
    "BasisSharedCompatibility",
    "PairwiseCompatibility",
    "get_policy",
    "Classification",
    "classify_columns",
    # Record files
    "ParserConfig",
    "RecordFileWarning",
    "MalformedLineWarning",
    "SolutionLogParser",
    "CompatibilityRecordParser",
    "CoefficientRecordParser",
    "load_solution",
    "load_compatibility",
    "load_coefficients",
    "write_compatibility",
    "write_coefficients",
    "write_classification",
    # Pipeline
    "CompatibilityPipeline",
    "InstanceFiles",
    "PipelineResult",
    "PipelineStatus",
    "discover_instances",
]
