"""
Command line entry point.

Usage:
    cgcompat runs/log_AS65-2.txt
    cgcompat runs/ --output-dir results/          # every log_*.txt under runs/
    cgcompat runs/ --policy pairwise --symmetry max
    cgcompat runs/ --basis-tolerance 1e-9 --verbose --log-file cgcompat.log
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from cgcompat.compatibility.degree import DegreeSymmetry
from cgcompat.compatibility.policy import list_policies
from cgcompat.config import CompatConfig
from cgcompat.pipeline import (
    CompatibilityPipeline,
    InstanceFiles,
    PipelineResult,
    discover_instances,
)
from cgcompat.pipeline.runner import PARSE_ERROR_ACTIONS


def setup_logging(log_file: Optional[Path] = None, verbose: bool = False) -> logging.Logger:
    """Configure logging to both console and file."""
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w'))

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        handlers=handlers,
        force=True
    )
    # Parser diagnostics are issued as warnings
    logging.captureWarnings(True)
    return logging.getLogger("cgcompat")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="cgcompat",
        description="Build the compatibility relation and coefficient classification "
                    "of solved column generation instances"
    )
    parser.add_argument(
        "paths",
        nargs="*",
        help="Solution logs or directories searched for log_*.txt "
             "(default: the configured data path)"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Configuration file (default: ./cgcompat.toml or ~/.cgcompat/config.toml)"
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Directory for output records (default: next to each solution log)"
    )
    parser.add_argument(
        "--policy",
        choices=list_policies(),
        default=None,
        help="Compatibility policy (default from config: basis_shared)"
    )
    parser.add_argument(
        "--symmetry",
        choices=[s.value for s in DegreeSymmetry],
        default=None,
        help="How pairwise degrees combine both directions (default from config: directed)"
    )
    parser.add_argument(
        "--basis-tolerance",
        type=float,
        default=None,
        help="Accepted distance from 1.0 for basis membership (default: 0, exact)"
    )
    parser.add_argument(
        "--on-parse-error",
        choices=PARSE_ERROR_ACTIONS,
        default="exclude",
        help="What to do with undecodable column identifiers (default: exclude)"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on malformed record lines instead of skipping them"
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write the log to this file"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose output"
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> CompatConfig:
    """Load the configuration and apply command line overrides."""
    config = CompatConfig.load(args.config)
    if args.output_dir is not None:
        config.output_path = args.output_dir
    if args.policy is not None:
        config.relation_policy = args.policy
    if args.symmetry is not None:
        config.degree_symmetry = args.symmetry
    if args.basis_tolerance is not None:
        config.set_tolerance("basis", args.basis_tolerance)
    config.verbose = config.verbose or args.verbose
    return config


def collect_instances(paths: List[Path], output_dir: Optional[Path]) -> List[InstanceFiles]:
    """Expand directories into their solution logs."""
    instances = []
    for path in paths:
        if path.is_dir():
            instances.extend(discover_instances(path, output_dir))
        else:
            instances.append(InstanceFiles.from_solution_log(path, output_dir))
    return instances


def log_results(log: logging.Logger, results: List[PipelineResult]) -> None:
    """Log a summary table of the runs."""
    log.info("")
    log.info(f"{'Instance':<20} {'Status':<12} {'Columns':<8} {'Basis':<7} {'Related':<8} {'Compat':<7} {'Time':<8}")
    log.info("-" * 75)
    for r in results:
        log.info(f"{r.instance_name:<20} "
                 f"{r.status.name:<12} "
                 f"{len(r.solution):<8} "
                 f"{len(r.basis):<7} "
                 f"{len(r.relation):<8} "
                 f"{len(r.classification.compatible):<7} "
                 f"{r.total_time:<7.3f}s")
    log.info("-" * 75)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    log = setup_logging(args.log_file, args.verbose)

    try:
        config = build_config(args)
    except ValueError as e:
        log.error(str(e))
        return 2

    paths = [Path(p) for p in args.paths] or [config.data_path]
    instances = collect_instances(paths, config.output_path)
    if not instances:
        log.error(f"No solution logs found in: {', '.join(str(p) for p in paths)}")
        return 1

    pipeline = CompatibilityPipeline(
        config,
        on_parse_error=args.on_parse_error,
        strict=args.strict,
    )
    log.info(f"Analysing {len(instances)} instance(s) with {pipeline.policy!r}")

    results = []
    for files in instances:
        log.info(f"INSTANCE: {files.instance}")
        try:
            result = pipeline.run(files)
        except ValueError as e:  # ColumnParseError, or a malformed line in strict mode
            log.error(f"{files.instance}: {e}")
            result = PipelineResult(instance=files, errors=[str(e)])
        log.debug(result.summary())
        results.append(result)

    log_results(log, results)
    failed = [r for r in results if not r.is_complete]
    if failed:
        log.warning(f"{len(failed)} of {len(results)} instance(s) did not complete")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
