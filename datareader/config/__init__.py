"""
YAML-driven pipeline configuration.
"""

from .pipeline_config import (
    OutputConfig,
    PipelineConfig,
    PipelineConfigLoader,
    SourceConfig,
    TransformConfig,
    build_reader,
)

__all__ = [
    "SourceConfig",
    "TransformConfig",
    "OutputConfig",
    "PipelineConfig",
    "PipelineConfigLoader",
    "build_reader",
]
