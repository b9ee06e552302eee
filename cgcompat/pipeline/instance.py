"""
Instance files - associates a problem instance with its input and output records.

Naming convention (per instance name N):
    log_N.txt                          solution log (input)
    compat_N.txt                       compatibility record
    compatible_coefficients-N.txt      compatible coefficients
    incompatible_coefficients-N.txt    incompatible coefficients
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

SOLUTION_PREFIX = "log_"
RECORD_SUFFIX = ".txt"


def instance_name_from_log(path: Union[str, Path]) -> str:
    """
    Derive the instance name from a solution log path.

    Example:
        >>> instance_name_from_log("runs/log_AS65-2.txt")
        'AS65-2'
    """
    stem = Path(path).stem
    if stem.startswith(SOLUTION_PREFIX):
        stem = stem[len(SOLUTION_PREFIX):]
    return stem


@dataclass(frozen=True)
class InstanceFiles:
    """
    Input and output record paths of one instance.

    Attributes:
        instance: Instance name
        solution_path: Solution log written by the solver
        compatibility_path: Compatibility record
        compatible_path: Compatible coefficient record
        incompatible_path: Incompatible coefficient record
    """
    instance: str
    solution_path: Path
    compatibility_path: Path
    compatible_path: Path
    incompatible_path: Path

    @classmethod
    def for_instance(
        cls,
        instance: str,
        data_dir: Union[str, Path],
        output_dir: Optional[Union[str, Path]] = None
    ) -> 'InstanceFiles':
        """
        Build the conventional file names of an instance.

        Args:
            instance: Instance name (e.g., "AS65-2")
            data_dir: Directory holding log_<instance>.txt
            output_dir: Directory for output records (default: data_dir)
        """
        data_dir = Path(data_dir)
        output_dir = Path(output_dir) if output_dir is not None else data_dir
        return cls(
            instance=instance,
            solution_path=data_dir / f"{SOLUTION_PREFIX}{instance}{RECORD_SUFFIX}",
            compatibility_path=output_dir / f"compat_{instance}{RECORD_SUFFIX}",
            compatible_path=output_dir / f"compatible_coefficients-{instance}{RECORD_SUFFIX}",
            incompatible_path=output_dir / f"incompatible_coefficients-{instance}{RECORD_SUFFIX}",
        )

    @classmethod
    def from_solution_log(
        cls,
        path: Union[str, Path],
        output_dir: Optional[Union[str, Path]] = None
    ) -> 'InstanceFiles':
        """Build instance files around an existing solution log."""
        path = Path(path)
        files = cls.for_instance(instance_name_from_log(path), path.parent, output_dir)
        # Keep the log path as given, even when it does not follow log_<name>.txt
        return cls(
            instance=files.instance,
            solution_path=path,
            compatibility_path=files.compatibility_path,
            compatible_path=files.compatible_path,
            incompatible_path=files.incompatible_path,
        )


def discover_instances(
    root: Union[str, Path],
    output_dir: Optional[Union[str, Path]] = None
) -> List[InstanceFiles]:
    """
    Recursively gather solution logs (log_*.txt) under a directory.

    Args:
        root: Directory to search
        output_dir: Directory for output records (default: next to each log)

    Returns:
        InstanceFiles per log, sorted by path
    """
    root = Path(root)
    if not root.is_dir():
        return []
    return [
        InstanceFiles.from_solution_log(path, output_dir)
        for path in sorted(root.rglob(f"{SOLUTION_PREFIX}*{RECORD_SUFFIX}"))
        if path.is_file()
    ]
