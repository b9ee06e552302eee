"""
Column identifier parsing.

Column names produced by the upstream generator encode the rows a column
covers, in visiting order, as delimiter-separated numeric tokens:

    R_1_3_7     -> (1, 3, 7)
    p_12_4_x_9  -> (12, 4, 9)

Only tokens whose first character is a digit are treated as row indices.
Such a token must consist of ASCII digits only and fit a signed 64-bit
integer; "12a", "1_0" and "99999999999999999999" are errors.
"""

import re
from typing import Tuple

DEFAULT_DELIMITER = "_"
MAX_ROW_INDEX = 2**63 - 1

_ROW_TOKEN = re.compile(r"[0-9]+")


class ColumnParseError(ValueError):
    """
    A numeric-looking token in a column identifier is not an integer.

    Attributes:
        identifier: The full column identifier
        token: The offending token
    """

    def __init__(self, identifier: str, token: str):
        self.identifier = identifier
        self.token = token
        super().__init__(
            f"Column '{identifier}': token '{token}' starts with a digit "
            f"but is not a row index"
        )

    def __reduce__(self):
        return (self.__class__, (self.identifier, self.token))


def parse_covered_rows(
    identifier: str,
    delimiter: str = DEFAULT_DELIMITER
) -> Tuple[int, ...]:
    """
    Extract the ordered row indices covered by a column.

    Args:
        identifier: Column identifier (e.g., "R_1_3_7")
        delimiter: Token delimiter

    Returns:
        Row indices in the order they appear in the identifier

    Raises:
        ColumnParseError: If a token starts with a digit but is not a
            non-negative integer no larger than MAX_ROW_INDEX
    """
    rows = []
    for token in identifier.split(delimiter):
        if not token or not token[0].isdigit():
            continue
        if not _ROW_TOKEN.fullmatch(token) or int(token) > MAX_ROW_INDEX:
            raise ColumnParseError(identifier, token)
        rows.append(int(token))
    return tuple(rows)
