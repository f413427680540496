# quoteflow/tools/check_batch.py
"""
check_batch tool implementation.

Retrieves batch status and progress information.
"""

import logging

from fastmcp.exceptions import ToolError

from quoteflow.models.jobs import BatchStatus
from quoteflow.models.responses import BatchStatusResponse
from quoteflow.models.store import BatchStore
from quoteflow.validation.sanitize import sanitize_job_id

logger = logging.getLogger(__name__)


async def check_batch(job_id: str, store: BatchStore) -> dict:
    """
    Check the status of a batch.

    Args:
        job_id: Batch identifier from create_batch
        store: Batch storage instance

    Returns:
        BatchStatusResponse as dict

    Raises:
        ToolError: If job_id is invalid or not found
    """
    sanitized_id = sanitize_job_id(job_id)

    record = await store.get(sanitized_id)
    if not record:
        raise ToolError(
            f"Batch '{sanitized_id}' not found. Use list_batches to see available batches."
        )

    if record.status == BatchStatus.PENDING:
        message = "Batch is waiting to start."
    elif record.status == BatchStatus.PROCESSING:
        stage_info = f" (stage: {record.current_stage})" if record.current_stage else ""
        message = f"Batch is processing{stage_info}. Progress: {record.progress}%"
    elif record.status == BatchStatus.COMPLETED:
        message = f"Batch completed. {len(record.quote_ids)} quotes ready in '{record.name}'."
    else:
        message = f"Batch failed: {record.error or 'Unknown error'}"

    return BatchStatusResponse.from_job(record, message=message).model_dump()
