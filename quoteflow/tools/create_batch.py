# quoteflow/tools/create_batch.py
"""
create_batch tool implementation.

Validates inputs, enforces the concurrency policy and submits a pending batch.
"""

import logging
from datetime import datetime, timezone

from fastmcp.exceptions import ToolError

from quoteflow.config.schema import StudioConfig
from quoteflow.errors import BatchInProgressError
from quoteflow.models.jobs import BatchJob, BatchStatus, generate_batch_id
from quoteflow.models.responses import CreateBatchResponse
from quoteflow.models.store import BatchStore
from quoteflow.validation.sanitize import (
    sanitize_batch_name,
    sanitize_batch_type,
    sanitize_category,
    sanitize_count,
)

logger = logging.getLogger(__name__)


async def submit_batch(
    name: str,
    batch_type: str,
    quotes_count: int,
    category: str,
    store: BatchStore,
    config: StudioConfig,
) -> BatchJob:
    """
    Validate and store a new pending batch.

    Returns:
        The stored BatchJob

    Raises:
        ToolError: If any input is invalid
        BatchInProgressError: If another batch is active and policy is "reject"
    """
    cleaned_name = sanitize_batch_name(name)
    parsed_type = sanitize_batch_type(batch_type)
    count = sanitize_count(quotes_count, config.generation.max_count)
    cleaned_category = sanitize_category(category)

    if config.batch.concurrency == "reject":
        active = await store.get_active()
        if active is not None:
            raise BatchInProgressError(active.job_id)

    job = BatchJob(
        job_id=generate_batch_id(),
        name=cleaned_name,
        batch_type=parsed_type,
        status=BatchStatus.PENDING,
        progress=0,
        quotes_count=count,
        category=cleaned_category,
        created_at=datetime.now(timezone.utc),
    )

    try:
        await store.add(job)
    except ValueError as e:
        logger.error(f"Batch ID collision: {e}")
        raise ToolError(f"Internal error creating batch: {e}")

    logger.info(
        f"Created batch {job.job_id} '{cleaned_name}' "
        f"({parsed_type.value}, {count} x {cleaned_category})"
    )
    return job


async def create_batch(
    name: str,
    batch_type: str,
    quotes_count: int,
    category: str,
    store: BatchStore,
    config: StudioConfig,
) -> dict:
    """
    Create a new bulk-creation batch.

    Args:
        name: Batch (and library folder) name
        batch_type: complete, quotes-only, voice-only or music-only
        quotes_count: Number of quotes to produce (1..generation.max_count)
        category: Quote category, or "all"
        store: Batch storage instance
        config: Configuration instance

    Returns:
        CreateBatchResponse as dict

    Raises:
        ToolError: If inputs are invalid or another batch is still running
    """
    try:
        job = await submit_batch(name, batch_type, quotes_count, category, store, config)
    except BatchInProgressError as e:
        raise ToolError(f"{e}. Wait for it to finish before starting another batch.")

    if config.batch.concurrency == "queue":
        next_steps = "Batch queued; batches run one at a time. Use check_batch with job_id to monitor progress"
    else:
        next_steps = "Use check_batch with job_id to monitor progress"

    response = CreateBatchResponse(
        job_id=job.job_id,
        name=job.name,
        status=job.status.value,
        next_steps=next_steps,
    )
    return response.model_dump()
