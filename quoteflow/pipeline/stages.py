# quoteflow/pipeline/stages.py
"""
Batch pipeline stages.

Each stage stands in for one piece of asynchronous production work and owns a
progress checkpoint. The default stages only wait; a stage backed by a real
narration or music service can replace any of them without touching the
orchestrator.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Any

from quoteflow.media.library import build_library_layout

if TYPE_CHECKING:
    from quoteflow.config.schema import TimingConfig
    from quoteflow.models.jobs import BatchJob
    from quoteflow.models.quote_store import QuoteStore

logger = logging.getLogger(__name__)


@dataclass
class StageResult:
    """
    Result of executing a batch stage.

    Attributes:
        stage_name: Name of the stage that produced this result
        success: Whether the stage completed successfully
        output: Stage output data (structure varies by stage)
        error: Error message if success=False
    """

    stage_name: str
    success: bool
    output: dict[str, Any]
    error: str | None = None


class BatchStage(ABC):
    """
    Abstract base class for batch pipeline stages.

    Stages are executed sequentially by BatchPipeline; each receives the
    outputs of all prior stages.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Stage identifier (used in logging and job.current_stage)."""
        pass

    @property
    @abstractmethod
    def label(self) -> str:
        """Human-readable description shown while the stage runs."""
        pass

    @property
    @abstractmethod
    def checkpoint(self) -> int:
        """Job progress (percent) once this stage has finished."""
        pass

    @abstractmethod
    async def run(
        self, job: "BatchJob", quotes: "QuoteStore", prior_outputs: dict[str, Any]
    ) -> dict[str, Any]:
        """
        Do the stage's work.

        Args:
            job: Batch being processed
            quotes: Shared quote store
            prior_outputs: Mapping stage_name -> output of earlier stages

        Returns:
            Output dict for this stage

        Raises:
            Exception: Any failure; the orchestrator records it and stops
        """
        pass

    async def execute(
        self, job: "BatchJob", quotes: "QuoteStore", prior_outputs: dict[str, Any]
    ) -> StageResult:
        """Run the stage, converting exceptions into a failed StageResult."""
        try:
            output = await self.run(job, quotes, prior_outputs)
        except Exception as e:
            logger.error(f"[{self.name}] Stage failed for batch {job.job_id}: {e}")
            return StageResult(
                stage_name=self.name,
                success=False,
                output={},
                error=f"{type(e).__name__}: {e}",
            )
        return StageResult(stage_name=self.name, success=True, output=output)


class SimulatedStage(BatchStage):
    """Stage that waits a fixed duration in place of real work."""

    def __init__(self, name: str, label: str, checkpoint: int, duration: float) -> None:
        self._name = name
        self._label = label
        self._checkpoint = checkpoint
        self._duration = duration

    @property
    def name(self) -> str:
        return self._name

    @property
    def label(self) -> str:
        return self._label

    @property
    def checkpoint(self) -> int:
        return self._checkpoint

    @property
    def duration(self) -> float:
        return self._duration

    async def run(self, job, quotes, prior_outputs) -> dict[str, Any]:
        await asyncio.sleep(self._duration)
        return {"simulated_seconds": self._duration}


class QuoteGenerationStage(SimulatedStage):
    def __init__(self, duration: float) -> None:
        super().__init__("quote_generation", "Generating quotes", 25, duration)

    async def run(self, job, quotes, prior_outputs) -> dict[str, Any]:
        output = await super().run(job, quotes, prior_outputs)
        output.update(quotes_count=job.quotes_count, category=job.category)
        return output


class NarrationStage(SimulatedStage):
    def __init__(self, duration: float) -> None:
        super().__init__("narration", "Creating voice overs", 50, duration)

    async def run(self, job, quotes, prior_outputs) -> dict[str, Any]:
        output = await super().run(job, quotes, prior_outputs)
        output["voice_settings"] = asdict(quotes.voice_settings)
        return output


class MusicStage(SimulatedStage):
    def __init__(self, duration: float) -> None:
        super().__init__("music", "Adding background music", 75, duration)

    async def run(self, job, quotes, prior_outputs) -> dict[str, Any]:
        output = await super().run(job, quotes, prior_outputs)
        output["music_settings"] = asdict(quotes.music_settings)
        return output


class FileOrganizationStage(SimulatedStage):
    def __init__(self, duration: float) -> None:
        super().__init__("file_organization", "Organizing files", 100, duration)

    async def run(self, job, quotes, prior_outputs) -> dict[str, Any]:
        output = await super().run(job, quotes, prior_outputs)
        layout = build_library_layout(job.name)
        output.update(library=layout.project_name, folders=layout.folders)
        return output


def create_stages(timing: "TimingConfig | None" = None) -> list[BatchStage]:
    """
    Build the standard four-stage batch pipeline.

    Args:
        timing: Stage durations (TimingConfig defaults if None)

    Returns:
        Stages in execution order with checkpoints 25, 50, 75, 100
    """
    if timing is None:
        from quoteflow.config.schema import TimingConfig

        timing = TimingConfig()

    return [
        QuoteGenerationStage(timing.quote_generation),
        NarrationStage(timing.narration),
        MusicStage(timing.music),
        FileOrganizationStage(timing.file_organization),
    ]
