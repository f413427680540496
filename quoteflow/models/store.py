# quoteflow/models/store.py
"""
Batch store protocol definition.

Defines the abstract interface for batch job registries.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from quoteflow.models.jobs import BatchJob


class BatchStore(ABC):
    """
    Abstract base class for batch job storage implementations.
    """

    @abstractmethod
    async def add(self, job: "BatchJob") -> None:
        """
        Add a batch job to the store.

        Args:
            job: BatchJob to add

        Raises:
            ValueError: If the job id already exists
        """
        pass

    @abstractmethod
    async def get(self, job_id: str) -> "BatchJob | None":
        """
        Get a batch job by ID.

        Args:
            job_id: Batch identifier

        Returns:
            BatchJob if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_all(self) -> "list[BatchJob]":
        """
        List all batch jobs.

        Returns:
            List of all BatchJobs, ordered by creation time (newest first)
        """
        pass

    @abstractmethod
    async def update(self, job_id: str, **kwargs) -> None:
        """
        Update fields on an existing batch job.

        Args:
            job_id: Batch identifier
            **kwargs: Fields to update

        Raises:
            ValueError: If job_id doesn't exist
        """
        pass

    @abstractmethod
    async def get_next_pending(self) -> "BatchJob | None":
        """
        Get the next pending job (FIFO - oldest first).

        Returns:
            BatchJob with status=PENDING (oldest), or None if nothing is waiting
        """
        pass

    @abstractmethod
    async def get_active(self) -> "BatchJob | None":
        """
        Get a job that is pending or processing, if any.

        Returns:
            The oldest active BatchJob, or None when the store is idle
        """
        pass
