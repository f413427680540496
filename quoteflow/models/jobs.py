# quoteflow/models/jobs.py
"""
Batch job models and in-memory storage.

Internal models (NOT exposed via MCP) for tracking bulk-creation batches.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4

from quoteflow.models.store import BatchStore

logger = logging.getLogger(__name__)


class BatchStatus(Enum):
    """Batch lifecycle states."""

    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


class BatchType(Enum):
    """What a batch is meant to produce."""

    COMPLETE = "complete"
    QUOTES_ONLY = "quotes-only"
    VOICE_ONLY = "voice-only"
    MUSIC_ONLY = "music-only"


ACTIVE_STATUSES = (BatchStatus.PENDING, BatchStatus.PROCESSING)


@dataclass
class BatchJob:
    """
    Internal batch record (NOT Pydantic - not exposed via MCP).

    progress is an integer percentage that only moves forward during a run.
    """

    job_id: str
    name: str
    batch_type: BatchType
    status: BatchStatus
    progress: int
    quotes_count: int
    category: str
    created_at: datetime
    completed_at: datetime | None = None
    current_stage: str | None = None
    error: str | None = None  # Error message if status=FAILED
    quote_ids: list[str] = field(default_factory=list)
    updated_at: datetime | None = None


class InMemoryBatchStore(BatchStore):
    """
    Simple in-memory batch storage.

    Safe for single event loop usage. Nothing survives the process.
    """

    def __init__(self) -> None:
        """Initialize empty batch store."""
        self._jobs: dict[str, BatchJob] = {}
        logger.info("Initialized InMemoryBatchStore")

    async def add(self, job: BatchJob) -> None:
        """
        Add a batch job to the store.

        Args:
            job: BatchJob to add

        Raises:
            ValueError: If job_id already exists
        """
        if job.job_id in self._jobs:
            raise ValueError(f"Batch {job.job_id} already exists")

        self._jobs[job.job_id] = job
        logger.info(f"Added batch {job.job_id} to store")

    async def get(self, job_id: str) -> BatchJob | None:
        return self._jobs.get(job_id)

    async def list_all(self) -> list[BatchJob]:
        """
        List all batch jobs.

        Returns:
            List of all BatchJobs, ordered by creation time (newest first)
        """
        return sorted(
            self._jobs.values(), key=lambda j: j.created_at, reverse=True
        )

    async def update(self, job_id: str, **kwargs) -> None:
        """
        Update fields on an existing batch job.

        Args:
            job_id: Batch identifier
            **kwargs: Fields to update

        Raises:
            ValueError: If job_id doesn't exist
        """
        job = self._jobs.get(job_id)
        if not job:
            raise ValueError(f"Batch {job_id} not found")

        for key, value in kwargs.items():
            if hasattr(job, key):
                setattr(job, key, value)
            else:
                logger.warning(f"Ignored unknown field '{key}' in update")

        job.updated_at = datetime.now(timezone.utc)
        logger.debug(f"Updated batch {job_id}: {kwargs}")

    async def get_next_pending(self) -> BatchJob | None:
        pending = [j for j in self._jobs.values() if j.status == BatchStatus.PENDING]
        if not pending:
            return None
        return min(pending, key=lambda j: j.created_at)

    async def get_active(self) -> BatchJob | None:
        active = [j for j in self._jobs.values() if j.status in ACTIVE_STATUSES]
        if not active:
            return None
        return min(active, key=lambda j: j.created_at)


def generate_batch_id() -> str:
    """
    Generate a unique batch ID.

    Returns:
        "batch-" followed by 12 hex characters (UUID4 truncated)
    """
    return f"batch-{uuid4().hex[:12]}"
