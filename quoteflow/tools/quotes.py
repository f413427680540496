# quoteflow/tools/quotes.py
"""
Quote tools: generate, add, list, edit and delete quotes.
"""

import logging
from datetime import datetime, timezone

from fastmcp.exceptions import ToolError

from quoteflow.config.schema import StudioConfig
from quoteflow.errors import EmptyCategoryError, QuoteNotFoundError
from quoteflow.models.quote_store import QuoteStore
from quoteflow.models.quotes import Quote, generate_quote_id
from quoteflow.models.responses import QuoteListResponse, QuoteResponse
from quoteflow.validation.sanitize import (
    sanitize_category,
    sanitize_count,
    sanitize_quote_id,
    sanitize_status,
    sanitize_tag,
    sanitize_text,
)

logger = logging.getLogger(__name__)


def _listing(quotes: list[Quote]) -> dict:
    response = QuoteListResponse(
        quotes=[QuoteResponse.from_quote(q) for q in quotes],
        total=len(quotes),
    )
    return response.model_dump()


async def generate_quotes(
    count: int, category: str, quotes: QuoteStore, config: StudioConfig
) -> dict:
    """
    Generate quotes from the corpus.

    Args:
        count: How many quotes to create (1..generation.max_count)
        category: Category filter, or "all"
        quotes: Quote store
        config: Configuration instance

    Returns:
        QuoteListResponse as dict (only the new quotes)

    Raises:
        ToolError: If count or category is invalid, or the category is empty
    """
    count = sanitize_count(count, config.generation.max_count)
    category = sanitize_category(category)

    try:
        created = quotes.generate_quotes(count, category)
    except EmptyCategoryError as e:
        raise ToolError(str(e))

    return _listing(created)


async def add_quote(text: str, author: str, category: str, quotes: QuoteStore) -> dict:
    """
    Add a hand-written quote as a draft.

    Returns:
        QuoteResponse as dict

    Raises:
        ToolError: If text, author or category is invalid
    """
    quote = Quote(
        id=generate_quote_id(),
        text=sanitize_text(text, field="Quote text"),
        author=sanitize_text(author, field="Author", max_length=200),
        category=sanitize_tag(category),
        created_at=datetime.now(timezone.utc),
    )

    try:
        quotes.add_quote(quote)
    except ValueError as e:
        logger.error(f"Quote ID collision: {e}")
        raise ToolError(f"Internal error creating quote: {e}")

    return QuoteResponse.from_quote(quote).model_dump()


async def list_quotes(
    quotes: QuoteStore, category: str | None = None, status: str | None = None
) -> dict:
    """
    List quotes, optionally filtered by category and/or status.

    The category filter matches any tag; "all" means no filter.

    Returns:
        QuoteListResponse as dict (insertion order)
    """
    category_filter = sanitize_tag(category, allow_all=True) if category else None
    status_filter = sanitize_status(status) if status else None
    return _listing(quotes.list_quotes(category=category_filter, status=status_filter))


async def update_quote(
    quote_id: str,
    quotes: QuoteStore,
    text: str | None = None,
    author: str | None = None,
    category: str | None = None,
    status: str | None = None,
) -> dict:
    """
    Edit a quote. Only the given fields change.

    Returns:
        QuoteResponse as dict

    Raises:
        ToolError: If the quote doesn't exist or a value is invalid
    """
    quote_id = sanitize_quote_id(quote_id)

    changes = {}
    if text is not None:
        changes["text"] = sanitize_text(text, field="Quote text")
    if author is not None:
        changes["author"] = sanitize_text(author, field="Author", max_length=200)
    if category is not None:
        changes["category"] = sanitize_tag(category)
    if status is not None:
        changes["status"] = sanitize_status(status)

    try:
        quote = quotes.update_quote(quote_id, **changes)
    except QuoteNotFoundError as e:
        raise ToolError(f"{e}. Use list_quotes to see available quotes.")

    return QuoteResponse.from_quote(quote).model_dump()


async def delete_quote(quote_id: str, quotes: QuoteStore) -> dict:
    """
    Delete a quote (and its media asset).

    Returns:
        QuoteResponse of the removed quote as dict

    Raises:
        ToolError: If the quote doesn't exist
    """
    quote_id = sanitize_quote_id(quote_id)

    try:
        removed = quotes.delete_quote(quote_id)
    except QuoteNotFoundError as e:
        raise ToolError(f"{e}. Use list_quotes to see available quotes.")

    return QuoteResponse.from_quote(removed).model_dump()
