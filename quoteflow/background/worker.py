# quoteflow/background/worker.py
"""
Background worker for sequential batch processing.

Polls the batch store, runs batches one at a time through the pipeline, and
handles graceful shutdown.
"""

import asyncio
import logging
from datetime import datetime, timezone

from quoteflow.config.schema import StudioConfig
from quoteflow.media.library import build_library_layout
from quoteflow.models.jobs import BatchJob, BatchStatus
from quoteflow.models.quote_store import QuoteStore
from quoteflow.models.store import BatchStore
from quoteflow.pipeline.orchestrator import BatchPipeline
from quoteflow.pipeline.stages import create_stages

logger = logging.getLogger(__name__)

SHUTDOWN_ERROR = "Shutdown during processing"


class BatchWorker:
    """
    Sequential batch processor.

    Features:
        - Polls the store for the oldest PENDING batch (FIFO)
        - Processes batches one at a time
        - Marks the running batch FAILED on shutdown (via CancelledError)
        - Handles exceptions and marks batches FAILED, leaving progress as reached
    """

    def __init__(
        self,
        batches: BatchStore,
        quotes: QuoteStore,
        config: StudioConfig | None = None,
        pipeline: BatchPipeline | None = None,
    ) -> None:
        """
        Initialize batch worker.

        Args:
            batches: Batch store implementation
            quotes: Shared quote store that receives each batch's quotes
            config: Optional StudioConfig (timing and poll interval)
            pipeline: Optional pipeline override (built from config if None)
        """
        self._batches = batches
        self._quotes = quotes
        self._config = config or StudioConfig()
        self._pipeline = pipeline or BatchPipeline(create_stages(self._config.timing))
        self._poll_interval = self._config.batch.poll_interval
        self._current_job_id: str | None = None
        self._task: asyncio.Task | None = None

        logger.info(
            f"Initialized BatchWorker (poll_interval={self._poll_interval}s, "
            f"stages={len(self._pipeline.stages)})"
        )

    @property
    def current_job_id(self) -> str | None:
        """Get the currently processing batch ID (None if idle)."""
        return self._current_job_id

    @property
    def running(self) -> bool:
        return self._task is not None

    async def start(self) -> None:
        """
        Start the background worker loop.

        Creates an asyncio task that polls for pending batches.
        """
        if self._task is not None:
            logger.warning("Worker already started")
            return

        self._task = asyncio.create_task(self._run_loop())
        logger.info("Batch worker started")

    async def stop(self) -> None:
        """
        Stop the background worker gracefully.

        Cancels the worker task and waits for it to finish.
        If a batch is running, it will be marked FAILED.
        """
        if self._task is None:
            logger.warning("Worker not running")
            return

        logger.info("Stopping batch worker...")
        self._task.cancel()

        try:
            await self._task
        except asyncio.CancelledError:
            logger.info("Worker task cancelled")

        self._task = None
        logger.info("Batch worker stopped")

    async def _run_loop(self) -> None:
        """
        Main worker loop: poll store, process batches sequentially.

        Handles CancelledError for graceful shutdown.
        """
        logger.info("Worker loop started")

        try:
            while True:
                job = await self._batches.get_next_pending()

                if job is None:
                    await asyncio.sleep(self._poll_interval)
                    continue

                logger.info(f"Picked up batch {job.job_id} for processing")
                error = await self._run(job)
                if error is not None:
                    logger.error(f"Batch {job.job_id} failed: {type(error).__name__}: {error}")

        except asyncio.CancelledError:
            logger.info("Worker loop cancelled")
            raise

    async def run_job_direct(self, job_id: str) -> BatchJob:
        """
        Process a single batch directly (for inline CLI execution).

        Unlike the polling loop, this method processes one specific batch and
        returns it in its final state.

        Args:
            job_id: Batch to process

        Returns:
            The finished BatchJob

        Raises:
            ValueError: If batch not found
            Exception: Re-raises any processing error after marking batch FAILED
        """
        job = await self._batches.get(job_id)
        if not job:
            raise ValueError(f"Batch {job_id} not found")

        error = await self._run(job)
        if error is not None:
            raise error
        return job

    async def _run(self, job: BatchJob) -> Exception | None:
        """
        Drive one batch through PROCESSING to COMPLETED or FAILED.

        Returns:
            The exception that failed the batch, or None on success

        Raises:
            asyncio.CancelledError: After marking the batch FAILED
        """
        self._current_job_id = job.job_id
        try:
            await self._batches.update(
                job.job_id,
                status=BatchStatus.PROCESSING,
                progress=0,
                current_stage="starting",
                error=None,
            )
            with self._quotes.processing():
                quote_ids = await self._process_job(job)

            await self._batches.update(
                job.job_id,
                status=BatchStatus.COMPLETED,
                progress=100,
                current_stage=None,
                completed_at=datetime.now(timezone.utc),
                quote_ids=quote_ids,
            )
            logger.info(f"Batch {job.job_id} completed with {len(quote_ids)} quotes")
            return None

        except asyncio.CancelledError:
            logger.warning(f"Batch {job.job_id} interrupted by shutdown")
            try:
                await self._batches.update(
                    job.job_id, status=BatchStatus.FAILED, error=SHUTDOWN_ERROR
                )
            except Exception as e:
                logger.error(f"Failed to mark batch as failed: {e}")
            raise

        except Exception as e:
            await self._batches.update(
                job.job_id,
                status=BatchStatus.FAILED,
                error=f"{type(e).__name__}: {e}",
            )
            return e

        finally:
            self._current_job_id = None

    async def _process_job(self, job: BatchJob) -> list[str]:
        """
        Run the pipeline, then materialize the batch's quotes and media files.

        Args:
            job: BatchJob to process

        Returns:
            IDs of the quotes created for the batch

        Raises:
            RuntimeError: If a pipeline stage fails
            EmptyCategoryError: If the category has no templates (fail policy)
        """

        async def progress_callback(progress: int, stage: str) -> None:
            await self._batches.update(job.job_id, progress=progress, current_stage=stage)

        result = await self._pipeline.execute(job, self._quotes, progress_callback)
        if not result.success:
            raise RuntimeError(
                f"Pipeline failed at stage '{result.failed_stage}': {result.error}"
            )

        await self._batches.update(job.job_id, current_stage="finalizing")
        created = self._quotes.generate_quotes(job.quotes_count, job.category)

        layout = build_library_layout(job.name, created)
        for asset in layout.media_assets():
            self._quotes.add_media_asset(asset)

        return [quote.id for quote in created]
