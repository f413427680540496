# quoteflow/tools/dashboard.py
"""
get_dashboard tool implementation.

Summarizes quotes and batches for the session.
"""

from collections import Counter

from quoteflow.models.jobs import BatchStatus
from quoteflow.models.quote_store import QuoteStore
from quoteflow.models.quotes import QuoteStatus
from quoteflow.models.responses import DashboardResponse
from quoteflow.models.store import BatchStore


async def get_dashboard(quotes: QuoteStore, batches: BatchStore) -> dict:
    """
    Counts of quotes by status and category, batches by status, and the
    processing flag. Every status appears, even with a zero count.
    """
    all_quotes = quotes.list_quotes()
    all_batches = await batches.list_all()

    quote_statuses = Counter(q.status.value for q in all_quotes)
    batch_statuses = Counter(b.status.value for b in all_batches)

    response = DashboardResponse(
        total_quotes=len(all_quotes),
        quotes_by_status={s.value: quote_statuses[s.value] for s in QuoteStatus},
        quotes_by_category=dict(Counter(q.category for q in all_quotes)),
        total_batches=len(all_batches),
        batches_by_status={s.value: batch_statuses[s.value] for s in BatchStatus},
        is_processing=quotes.is_processing,
    )
    return response.model_dump()
