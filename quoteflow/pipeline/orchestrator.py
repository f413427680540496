# quoteflow/pipeline/orchestrator.py
"""
Batch pipeline orchestrator.

Executes stages sequentially, passes outputs forward and reports progress
checkpoints as each stage finishes.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from quoteflow.pipeline.stages import BatchStage

if TYPE_CHECKING:
    from quoteflow.models.jobs import BatchJob
    from quoteflow.models.quote_store import QuoteStore

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, str], None] | Callable[[int, str], Any]


@dataclass
class PipelineResult:
    """
    Result of executing the full batch pipeline.

    Attributes:
        success: Whether all stages completed successfully
        outputs: Dictionary mapping stage_name -> stage_output
        failed_stage: Name of the stage that failed (if success=False)
        error: Error message (if success=False)
        progress: Last checkpoint reported before returning
    """

    success: bool
    outputs: dict[str, Any]
    failed_stage: str | None = None
    error: str | None = None
    progress: int = 0


class BatchPipeline:
    """
    Sequential batch pipeline.

    Checkpoints are reported for every stage except the last. The final
    checkpoint (100) belongs to job completion, so the caller writes it
    together with the COMPLETED status once the batch's quotes exist.
    """

    def __init__(self, stages: list[BatchStage]) -> None:
        if not stages:
            raise ValueError("BatchPipeline needs at least one stage")
        checkpoints = [stage.checkpoint for stage in stages]
        if checkpoints != sorted(set(checkpoints)):
            raise ValueError(f"Stage checkpoints must strictly increase: {checkpoints}")

        self._stages = stages
        logger.info(f"Initialized BatchPipeline with {len(stages)} stages")

    @property
    def stages(self) -> list[BatchStage]:
        return list(self._stages)

    async def execute(
        self,
        job: "BatchJob",
        quotes: "QuoteStore",
        progress_callback: ProgressCallback | None = None,
    ) -> PipelineResult:
        """
        Run every stage in order.

        Args:
            job: Batch being processed
            quotes: Shared quote store handed to each stage
            progress_callback: Optional callback(progress, stage_name), sync or async

        Returns:
            PipelineResult; on failure, progress is the last checkpoint reached
        """
        outputs: dict[str, Any] = {}
        progress = 0
        last = self._stages[-1]

        for stage in self._stages:
            logger.info(f"Batch {job.job_id}: {stage.label}")
            await _notify(progress_callback, progress, stage.name)

            result = await stage.execute(job, quotes, outputs)
            if not result.success:
                return PipelineResult(
                    success=False,
                    outputs=outputs,
                    failed_stage=stage.name,
                    error=result.error,
                    progress=progress,
                )

            outputs[stage.name] = result.output
            if stage is not last:
                progress = stage.checkpoint
                await _notify(progress_callback, progress, f"{stage.name}_complete")

        return PipelineResult(success=True, outputs=outputs, progress=progress)


async def _notify(callback: ProgressCallback | None, progress: int, phase: str) -> None:
    if callback is None:
        return
    result_or_coro = callback(progress, phase)
    if hasattr(result_or_coro, "__await__"):
        await result_or_coro
