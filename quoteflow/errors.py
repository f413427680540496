# quoteflow/errors.py
"""
Domain error conditions.

Stores raise these; the tools layer converts them to ToolError for the user.
"""


class QuoteNotFoundError(ValueError):
    """Raised when a quote id is not present in the store."""

    def __init__(self, quote_id: str) -> None:
        super().__init__(f"Quote {quote_id} not found")
        self.quote_id = quote_id


class EmptyCategoryError(ValueError):
    """Raised when a category filter leaves nothing to sample from."""

    def __init__(self, category: str) -> None:
        super().__init__(f"No quote templates in category '{category}'")
        self.category = category


class BatchInProgressError(RuntimeError):
    """Raised when a batch is submitted while another one is still active."""

    def __init__(self, active_job_id: str) -> None:
        super().__init__(f"Batch {active_job_id} is still in progress")
        self.active_job_id = active_job_id
