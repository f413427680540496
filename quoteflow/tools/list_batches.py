# quoteflow/tools/list_batches.py
"""
list_batches tool implementation.
"""

import logging

from quoteflow.models.responses import BatchSummary, ListBatchesResponse
from quoteflow.models.store import BatchStore

logger = logging.getLogger(__name__)


async def list_batches(store: BatchStore) -> dict:
    """
    List all batches, newest first.

    Returns:
        ListBatchesResponse as dict
    """
    records = await store.list_all()

    summaries = [
        BatchSummary(
            job_id=record.job_id,
            name=record.name,
            type=record.batch_type.value,
            status=record.status.value,
            progress=record.progress,
            quotes_count=record.quotes_count,
            created_at=record.created_at.isoformat(),
        )
        for record in records
    ]

    response = ListBatchesResponse(batches=summaries, total=len(summaries))

    logger.info(f"Listed {len(summaries)} batches")
    return response.model_dump()
