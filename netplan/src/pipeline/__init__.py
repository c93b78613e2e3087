"""
Floor Plan Pipeline Module.

Runs parsing, decoding, indexing, layout solving and validation in order.
"""

from .floorplan_pipeline import (
    FloorPlanPipeline,
    PipelineSettings,
    PipelineResult,
    PipelineStage,
    PipelineError,
)

__all__ = [
    'FloorPlanPipeline',
    'PipelineSettings',
    'PipelineResult',
    'PipelineStage',
    'PipelineError',
]
