"""
Solution log parser - reads the solution written by the external solver.

Format:
------
    objective value: 1234.5
    R_1_2_3     1       (obj:310)
    R_4_5       0       (obj:120.5)
    ...

The first line is a header and is always skipped (its objective value is
kept when it can be read). Every other line holds a column identifier, its
value and its objective coefficient, separated by whitespace.
"""

import re
from pathlib import Path
from typing import Optional, Union

from cgcompat.core.column import Column
from cgcompat.core.identifier import DEFAULT_DELIMITER
from cgcompat.core.solution import Solution
from cgcompat.parsers.base import ParserConfig, RecordParser

_HEADER_RE = re.compile(r"^objective value:\s*(\S+)\s*$", re.IGNORECASE)
_LINE_RE = re.compile(r"^(\S+)\s+(\S+)\s+\(obj:\s*([^()\s]+)\s*\)$")


def _to_float(text: str) -> Optional[float]:
    try:
        return float(text)
    except ValueError:
        return None


class SolutionLogParser(RecordParser[Solution]):
    """
    Parser for solver solution logs.

    Builds a Solution; identifiers are decoded into covered rows using the
    configured delimiter (option "delimiter", default "_").

    Example:
        >>> parser = SolutionLogParser()
        >>> solution = parser.parse("log_AS65-2.txt")
        >>> print(solution.summary())
    """

    def __init__(self, config: Optional[ParserConfig] = None):
        """Initialize parser."""
        super().__init__(config)
        self._delimiter = self.config.options.get('delimiter', DEFAULT_DELIMITER)

    def parse(self, path: Union[str, Path]) -> Solution:
        """
        Parse a solution log.

        Args:
            path: Path to the log file

        Returns:
            Solution (empty if the file could not be read)
        """
        lines = self._read_lines(path)
        if lines is None:
            return Solution()

        self._log(f"Parsing solution from: {path}")

        objective_value = None
        if lines:
            match = _HEADER_RE.match(lines[0][1])
            if match:
                objective_value = _to_float(match.group(1))

        columns = {}
        for number, line in self._content_lines(lines[1:]):
            match = _LINE_RE.match(line)
            if match is None:
                self._malformed(path, number, line, "expected '<identifier> <value> (obj:<coefficient>)'")
                continue

            column_id, value_text, obj_text = match.groups()
            value = _to_float(value_text)
            objective = _to_float(obj_text)
            if value is None or objective is None:
                self._malformed(path, number, line, "value or objective coefficient is not a number")
                continue

            # Last occurrence wins
            columns[column_id] = Column.from_record(
                column_id, value, objective, self._delimiter
            )

        solution = Solution(columns, objective_value)
        self._log(f"Loaded {len(solution)} columns, {len(solution.working_basis())} selected")
        return solution


def load_solution(
    path: Union[str, Path],
    config: Optional[ParserConfig] = None
) -> Solution:
    """Load a solution log with a SolutionLogParser."""
    return SolutionLogParser(config).parse(path)
