# quoteflow/pipeline/__init__.py
"""Batch production pipeline: stages and orchestrator."""

from quoteflow.pipeline.orchestrator import BatchPipeline, PipelineResult
from quoteflow.pipeline.stages import (
    BatchStage,
    FileOrganizationStage,
    MusicStage,
    NarrationStage,
    QuoteGenerationStage,
    SimulatedStage,
    StageResult,
    create_stages,
)

__all__ = [
    "BatchPipeline",
    "PipelineResult",
    "BatchStage",
    "SimulatedStage",
    "StageResult",
    "QuoteGenerationStage",
    "NarrationStage",
    "MusicStage",
    "FileOrganizationStage",
    "create_stages",
]
