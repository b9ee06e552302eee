"""
Coefficient record parser - reads the classifier's output files.

Format:
------
    R_1_2 : 1.0 (obj: 310.0)
    R_4_5 : 0.0 (obj: 120.5)
"""

import re
from pathlib import Path
from typing import Dict, Optional, Union

from cgcompat.core.column import Coefficient
from cgcompat.parsers.base import ParserConfig, RecordParser

_LINE_RE = re.compile(r"^(\S+)\s+:\s+(\S+)\s+\(obj:\s*([^()\s]+)\s*\)$")


class CoefficientRecordParser(RecordParser[Dict[str, Coefficient]]):
    """Parser for compatible/incompatible coefficient records."""

    def parse(self, path: Union[str, Path]) -> Dict[str, Coefficient]:
        """
        Parse a coefficient record.

        Args:
            path: Path to the record file

        Returns:
            Mapping from identifier to (value, objective coefficient)
        """
        coefficients: Dict[str, Coefficient] = {}
        lines = self._read_lines(path)
        if lines is None:
            return coefficients

        for number, line in self._content_lines(lines):
            match = _LINE_RE.match(line)
            if match is None:
                self._malformed(path, number, line, "expected '<identifier> : <value> (obj: <coefficient>)'")
                continue
            column_id, value_text, obj_text = match.groups()
            try:
                coefficients[column_id] = Coefficient(float(value_text), float(obj_text))
            except ValueError:
                self._malformed(path, number, line, "value or objective coefficient is not a number")

        self._log(f"Loaded {len(coefficients)} coefficients from {path}")
        return coefficients


def load_coefficients(
    path: Union[str, Path],
    config: Optional[ParserConfig] = None
) -> Dict[str, Coefficient]:
    """Load a coefficient record with a CoefficientRecordParser."""
    return CoefficientRecordParser(config).parse(path)
