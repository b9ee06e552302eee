"""
Configuration module for cgcompat.

This module provides configuration management for the compatibility
analysis, including data paths, numerical tolerances and the default
relation policy.

Configuration can be set via:
1. Environment variables (CGCOMPAT_*)
2. Config file (./cgcompat.toml or ~/.cgcompat/config.toml)
3. Programmatic API

Example:
    >>> from cgcompat.config import config
    >>> print(config.data_path)
    /path/to/data
    >>> config.set_tolerance("basis", 1e-9)
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union


def _get_project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent


def _get_default_data_path() -> Path:
    """Get the default data path."""
    env_path = os.environ.get('CGCOMPAT_DATA_PATH')
    if env_path:
        return Path(env_path)
    return _get_project_root() / "data"


def _get_default_output_path() -> Optional[Path]:
    """Get the default output path (None = next to the input files)."""
    env_path = os.environ.get('CGCOMPAT_OUTPUT_PATH')
    return Path(env_path) if env_path else None


def _default_tolerances() -> dict[str, float]:
    return {
        "basis": 0.0,     # |value - 1| <= tol selects a column (0.0 = exact)
        "positive": 0.0,  # value > tol counts as positive
    }


@dataclass
class CompatConfig:
    """
    Configuration for the compatibility analysis.

    Attributes:
        data_path: Directory searched for solution logs
        output_path: Directory for output records (None = next to the input)
        delimiter: Token delimiter in column identifiers
        relation_policy: Name of the compatibility policy
        degree_symmetry: How pairwise degrees combine both directions
        encoding: Encoding of every record file
        verbose: Whether to print progress messages
        tolerances: Numerical tolerances ("basis", "positive")
    """

    # Paths
    data_path: Path = field(default_factory=_get_default_data_path)
    output_path: Optional[Path] = field(default_factory=_get_default_output_path)

    # Formats
    delimiter: str = "_"
    encoding: str = "utf-8"

    # Analysis
    relation_policy: str = "basis_shared"
    degree_symmetry: str = "directed"

    verbose: bool = False

    tolerances: dict[str, float] = field(default_factory=_default_tolerances)

    def __post_init__(self):
        """Ensure paths are Path objects and every tolerance is present."""
        if isinstance(self.data_path, str):
            self.data_path = Path(self.data_path)
        if isinstance(self.output_path, str):
            self.output_path = Path(self.output_path)
        self.tolerances = {**_default_tolerances(), **self.tolerances}

    # =========================================================================
    # Tolerance helpers
    # =========================================================================

    def get_tolerance(self, name: str) -> float:
        """Get a tolerance value by name."""
        return self.tolerances.get(name, 0.0)

    def set_tolerance(self, name: str, value: float) -> None:
        """Set a tolerance value."""
        if value < 0:
            raise ValueError(f"Tolerance '{name}' must be non-negative, got {value}")
        self.tolerances[name] = float(value)

    # =========================================================================
    # Serialization
    # =========================================================================

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary."""
        return {
            "data_path": str(self.data_path),
            "output_path": str(self.output_path) if self.output_path else None,
            "delimiter": self.delimiter,
            "encoding": self.encoding,
            "relation_policy": self.relation_policy,
            "degree_symmetry": self.degree_symmetry,
            "verbose": self.verbose,
            "tolerances": self.tolerances.copy(),
        }

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> 'CompatConfig':
        """Create config from dictionary."""
        verbose = d.get("verbose", False)
        if isinstance(verbose, str):
            verbose = verbose.lower() == "true"
        return cls(
            data_path=Path(d.get("data_path", _get_default_data_path())),
            output_path=Path(d["output_path"]) if d.get("output_path") else None,
            delimiter=d.get("delimiter", "_"),
            encoding=d.get("encoding", "utf-8"),
            relation_policy=d.get("relation_policy", "basis_shared"),
            degree_symmetry=d.get("degree_symmetry", "directed"),
            verbose=bool(verbose),
            tolerances={k: float(v) for k, v in d.get("tolerances", {}).items()},
        )

    @classmethod
    def load(cls, path: Optional[Path] = None) -> 'CompatConfig':
        """
        Load configuration from a TOML file.

        Args:
            path: Path to load from (default: ./cgcompat.toml or ~/.cgcompat/config.toml)

        Returns:
            Loaded configuration (or default if file not found)
        """
        if path is None:
            local_config = Path("cgcompat.toml")
            user_config = Path.home() / ".cgcompat" / "config.toml"

            if local_config.exists():
                path = local_config
            elif user_config.exists():
                path = user_config
            else:
                return cls()

        path = Path(path)
        if not path.exists():
            return cls()

        config_dict: dict[str, Any] = {"tolerances": {}}
        current_section = None

        for line in path.read_text().splitlines():
            line = line.strip()
            if not line or line.startswith("#"):
                continue

            if line.startswith("[") and line.endswith("]"):
                current_section = line[1:-1]
                continue

            if "=" in line:
                key, value = line.split("=", 1)
                key = key.strip()
                value = value.strip().strip('"')

                if current_section == "tolerances":
                    config_dict["tolerances"][key] = float(value)
                else:
                    config_dict[key] = value

        return cls.from_dict(config_dict)


# Global configuration instance
config = CompatConfig()


def set_data_path(path: Union[str, Path]) -> None:
    """
    Set the data path globally.

    Args:
        path: New data path
    """
    config.data_path = Path(path)


def get_data_path() -> Path:
    """Get the current data path."""
    return config.data_path


def get_output_path() -> Optional[Path]:
    """Get the current output path (None = next to the input files)."""
    return config.output_path
