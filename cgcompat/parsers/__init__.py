"""
Parsers module - readers for the line-oriented record files.

Available Parsers:
-----------------
- RecordParser: Abstract base class for record parsers
- SolutionLogParser: Solution written by the external solver
- CompatibilityRecordParser: Compatibility relation records
- CoefficientRecordParser: Compatible/incompatible coefficient records

Usage:
------
>>> from cgcompat.parsers import SolutionLogParser
>>>
>>> solution = SolutionLogParser().parse("log_AS65-2.txt")
>>> print(solution.summary())

Missing files and malformed lines never abort a load: they are reported
with RecordFileWarning and MalformedLineWarning respectively.
"""

from cgcompat.parsers.base import (
    MalformedLineWarning,
    ParserConfig,
    RecordFileWarning,
    RecordParser,
)
from cgcompat.parsers.coefficients import CoefficientRecordParser, load_coefficients
from cgcompat.parsers.compatibility import CompatibilityRecordParser, load_compatibility
from cgcompat.parsers.solution_log import SolutionLogParser, load_solution

__all__ = [
    "RecordParser",
    "ParserConfig",
    "RecordFileWarning",
    "MalformedLineWarning",
    "SolutionLogParser",
    "CompatibilityRecordParser",
    "CoefficientRecordParser",
    "load_solution",
    "load_compatibility",
    "load_coefficients",
]
