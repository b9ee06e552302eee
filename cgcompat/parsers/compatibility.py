"""
Compatibility record parser.

Format:
------
    R_1_2 : R_3_4 R_5_6
    R_3_4 : R_1_2 R_5_6
    R_7_8 :

One line per qualifying column: its identifier, a ':' token, and the
whitespace-separated identifiers it is linked to.
"""

from pathlib import Path
from typing import Optional, Union

from cgcompat.compatibility.relation import CompatibilityRelation
from cgcompat.parsers.base import ParserConfig, RecordParser


class CompatibilityRecordParser(RecordParser[CompatibilityRelation]):
    """
    Parser for compatibility records written by the relation builder.

    Example:
        >>> relation = CompatibilityRecordParser().parse("compat_AS65-2.txt")
        >>> compatible_ids = relation.identifiers()
    """

    def parse(self, path: Union[str, Path]) -> CompatibilityRelation:
        """
        Parse a compatibility record.

        Args:
            path: Path to the record file

        Returns:
            CompatibilityRelation (empty if the file could not be read)
        """
        relation = CompatibilityRelation()
        lines = self._read_lines(path)
        if lines is None:
            return relation

        for number, line in self._content_lines(lines):
            tokens = line.split()
            if len(tokens) < 2 or tokens[1] != ":":
                self._malformed(path, number, line, "expected '<identifier> : <identifiers...>'")
                continue
            relation.add(tokens[0], tokens[2:])

        self._log(f"Loaded {len(relation)} compatible columns from {path}")
        return relation


def load_compatibility(
    path: Union[str, Path],
    config: Optional[ParserConfig] = None
) -> CompatibilityRelation:
    """Load a compatibility record with a CompatibilityRecordParser."""
    return CompatibilityRecordParser(config).parse(path)
