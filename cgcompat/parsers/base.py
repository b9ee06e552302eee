"""
Parser base module - abstract base class for record parsers.

All record parsers inherit from RecordParser and implement parse().
The base class owns the policy shared by every record format:

- A file that cannot be opened is not fatal: a RecordFileWarning is
  issued and the parser returns its empty result.
- A line that does not match the record shape is skipped with a
  MalformedLineWarning (or raises ValueError in strict mode).
- Blank lines are ignored.

Design Notes:
------------
- Parsers are stateless (no instance data beyond configuration)
- File handles live only for the duration of a single read
"""

import warnings
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Generic, Iterator, List, Optional, Tuple, TypeVar, Union

T = TypeVar("T")


class RecordFileWarning(UserWarning):
    """A record file is missing or unreadable; an empty result is used."""


class MalformedLineWarning(UserWarning):
    """A record line does not match the expected shape and was skipped."""


@dataclass
class ParserConfig:
    """
    Configuration options for record parsers.

    Attributes:
        strict: Raise ValueError on malformed lines instead of skipping them
        verbose: Whether to print progress messages
        encoding: File encoding (default UTF-8)
        options: Additional parser-specific options
    """
    strict: bool = False
    verbose: bool = False
    encoding: str = "utf-8"
    options: Dict[str, Any] = field(default_factory=dict)


class RecordParser(ABC, Generic[T]):
    """
    Abstract base class for line-oriented record parsers.

    Subclasses must implement:
    - parse(): Read a file and return the parsed result

    Subclasses typically use _read_lines() to obtain the file content and
    _malformed() to report lines they cannot use.

    Example:
        >>> class MyRecordParser(RecordParser[dict]):
        ...     def parse(self, path):
        ...         lines = self._read_lines(path)
        ...         if lines is None:
        ...             return {}
        ...         ...
    """

    def __init__(self, config: Optional[ParserConfig] = None):
        """
        Initialize parser with configuration.

        Args:
            config: Parser configuration (uses defaults if None)
        """
        self.config = config or ParserConfig()

    @abstractmethod
    def parse(self, path: Union[str, Path]) -> T:
        """
        Parse a record file.

        Args:
            path: Path to the record file

        Returns:
            Parsed result (empty if the file could not be read)
        """
        pass

    def get_format_name(self) -> str:
        """
        Return human-readable format name.

        Returns:
            Format name (e.g., "SolutionLog")
        """
        return self.__class__.__name__.replace("RecordParser", "").replace("Parser", "")

    def _log(self, message: str) -> None:
        """Print a log message if verbose mode is enabled."""
        if self.config.verbose:
            print(f"[{self.get_format_name()}] {message}")

    def _read_lines(self, path: Union[str, Path]) -> Optional[List[Tuple[int, str]]]:
        """
        Read file lines with configured encoding.

        Args:
            path: Path to file

        Returns:
            List of (line number, stripped line), or None if the file
            could not be read (a RecordFileWarning is issued)
        """
        try:
            with open(path, 'r', encoding=self.config.encoding) as f:
                return [(number, line.strip()) for number, line in enumerate(f, start=1)]
        except (OSError, UnicodeDecodeError) as e:
            warnings.warn(
                f"Could not read {self.get_format_name()} file {path}: {e}",
                RecordFileWarning,
                stacklevel=3,
            )
            return None

    def _content_lines(
        self,
        lines: List[Tuple[int, str]]
    ) -> Iterator[Tuple[int, str]]:
        """Yield the non-blank lines."""
        for number, line in lines:
            if line:
                yield number, line

    def _malformed(self, path: Union[str, Path], number: int, line: str, reason: str) -> None:
        """
        Report a line that does not match the record shape.

        Raises:
            ValueError: In strict mode
        """
        message = f"{path}:{number}: {reason}: {line!r}"
        if self.config.strict:
            raise ValueError(message)
        warnings.warn(message, MalformedLineWarning, stacklevel=3)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
