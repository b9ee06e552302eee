"""
Pipeline module - runs the compatibility analysis for solver outputs.

This module provides:
- InstanceFiles: Input/output record paths of one instance
- discover_instances: Gather solution logs under a directory
- CompatibilityPipeline: Load, analyse, classify and write
- PipelineResult / PipelineStatus: Outcome of a run

Usage:
------
>>> from cgcompat.pipeline import CompatibilityPipeline, discover_instances
>>>
>>> pipeline = CompatibilityPipeline()
>>> for result in pipeline.run_instances(discover_instances("runs/")):
...     print(result.summary())
"""

from cgcompat.pipeline.instance import (
    InstanceFiles,
    discover_instances,
    instance_name_from_log,
)
from cgcompat.pipeline.result import PipelineResult, PipelineStatus
from cgcompat.pipeline.runner import CompatibilityPipeline

__all__ = [
    "InstanceFiles",
    "discover_instances",
    "instance_name_from_log",
    "CompatibilityPipeline",
    "PipelineResult",
    "PipelineStatus",
]
