# quoteflow/validation/__init__.py
"""Input validation and sanitization utilities."""

from .sanitize import (
    sanitize_batch_name,
    sanitize_category,
    sanitize_count,
    sanitize_job_id,
    sanitize_quote_id,
    sanitize_selection,
)

__all__ = [
    "sanitize_batch_name",
    "sanitize_category",
    "sanitize_count",
    "sanitize_job_id",
    "sanitize_quote_id",
    "sanitize_selection",
]
