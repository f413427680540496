# quoteflow/validation/sanitize.py
"""
Input sanitization and validation utilities.

Every helper raises ToolError so tools fail before touching any state.
"""

import logging
import re

from fastmcp.exceptions import ToolError

from quoteflow.catalog import (
    ALL_CATEGORIES,
    CATEGORIES,
    LANGUAGES,
    MUSIC_GENRES,
    MUSIC_MOODS,
    voice_ids,
)
from quoteflow.models.jobs import BatchType
from quoteflow.models.quotes import QuoteStatus

logger = logging.getLogger(__name__)

ID_PATTERN = r"^[a-zA-Z0-9-]{8,64}$"


def sanitize_text(text: str, field: str = "Text", max_length: int = 1000) -> str:
    """
    Strip whitespace and validate non-empty.

    Truncates to max_length if needed.

    Args:
        text: User-provided text
        field: Field name used in error messages
        max_length: Maximum allowed length

    Returns:
        Cleaned string

    Raises:
        ToolError: If text is empty after stripping
    """
    cleaned = text.strip()

    if not cleaned:
        raise ToolError(f"{field} cannot be empty")

    if len(cleaned) > max_length:
        logger.warning(f"{field} truncated from {len(cleaned)} to {max_length} characters")
        cleaned = cleaned[:max_length]

    return cleaned


def sanitize_batch_name(name: str) -> str:
    """
    Validate a batch name.

    Raises:
        ToolError: If the name is empty or whitespace
    """
    if not name or not name.strip():
        raise ToolError("Please enter a batch name")
    return sanitize_text(name, field="Batch name", max_length=200)


def _sanitize_id(value: str, kind: str) -> str:
    if not re.match(ID_PATTERN, value):
        raise ToolError(
            f"Invalid {kind} ID '{value}': must be 8-64 alphanumeric characters or hyphens"
        )
    return value


def sanitize_quote_id(quote_id: str) -> str:
    """
    Validate quote ID format (alphanumeric with hyphens, 8-64 characters).

    Raises:
        ToolError: If quote ID format is invalid
    """
    return _sanitize_id(quote_id, "quote")


def sanitize_job_id(job_id: str) -> str:
    """
    Validate batch ID format (alphanumeric with hyphens, 8-64 characters).

    Raises:
        ToolError: If batch ID format is invalid
    """
    return _sanitize_id(job_id, "batch")


def sanitize_selection(quote_ids: list[str] | None) -> list[str]:
    """
    Validate a selection of quotes for media generation.

    Duplicates are dropped, keeping first-seen order.

    Raises:
        ToolError: If nothing is selected or an ID is malformed
    """
    if not quote_ids:
        raise ToolError("Please select at least one quote")

    selected: list[str] = []
    for quote_id in quote_ids:
        sanitize_quote_id(quote_id)
        if quote_id not in selected:
            selected.append(quote_id)
    return selected


def sanitize_count(count: int, max_count: int = 100) -> int:
    """
    Validate a quote count.

    Raises:
        ToolError: If count is outside 1..max_count
    """
    if count < 1 or count > max_count:
        raise ToolError(f"Count must be between 1 and {max_count}, got {count}")
    return count


def sanitize_category(category: str) -> str:
    """
    Validate a category against the catalog.

    Raises:
        ToolError: If category is unknown
    """
    cleaned = category.strip().lower()
    if cleaned not in CATEGORIES:
        raise ToolError(
            f"Unknown category '{category}'. Choose one of: {', '.join(CATEGORIES)}"
        )
    return cleaned


def sanitize_tag(tag: str, allow_all: bool = False) -> str:
    """
    Validate a quote's category tag.

    Tags are free-form: any non-empty value up to 50 characters, lowercased.
    "all" is reserved for "no filter" and is only accepted when allow_all is set.

    Raises:
        ToolError: If the tag is empty, too long, or the reserved "all"
    """
    cleaned = tag.strip().lower()
    if not cleaned:
        raise ToolError("Category cannot be empty")
    if len(cleaned) > 50:
        raise ToolError(f"Category must be at most 50 characters, got {len(cleaned)}")
    if cleaned == ALL_CATEGORIES and not allow_all:
        raise ToolError(f"'{ALL_CATEGORIES}' is reserved and cannot be used as a quote category")
    return cleaned


def sanitize_batch_type(batch_type: str) -> BatchType:
    """
    Parse a batch type.

    Raises:
        ToolError: If batch type is unknown
    """
    try:
        return BatchType(batch_type.strip().lower())
    except ValueError:
        valid = ", ".join(t.value for t in BatchType)
        raise ToolError(f"Unknown batch type '{batch_type}'. Choose one of: {valid}")


def sanitize_status(status: str) -> QuoteStatus:
    """
    Parse a quote status.

    Raises:
        ToolError: If status is unknown
    """
    try:
        return QuoteStatus(status.strip().lower())
    except ValueError:
        valid = ", ".join(s.value for s in QuoteStatus)
        raise ToolError(f"Unknown status '{status}'. Choose one of: {valid}")


def sanitize_range(value: float, field: str, low: float, high: float) -> float:
    """
    Validate that a number lies in [low, high].

    Raises:
        ToolError: If value is out of range
    """
    if value < low or value > high:
        raise ToolError(f"{field} must be between {low} and {high}, got {value}")
    return value


def sanitize_voice(voice: str) -> str:
    if voice not in voice_ids():
        raise ToolError(f"Unknown voice '{voice}'. Choose one of: {', '.join(sorted(voice_ids()))}")
    return voice


def sanitize_language(language: str) -> str:
    if language not in LANGUAGES:
        raise ToolError(f"Unknown language '{language}'. Choose one of: {', '.join(LANGUAGES)}")
    return language


def sanitize_genre(genre: str) -> str:
    if genre not in MUSIC_GENRES:
        raise ToolError(f"Unknown genre '{genre}'. Choose one of: {', '.join(MUSIC_GENRES)}")
    return genre


def sanitize_mood(mood: str) -> str:
    if mood not in MUSIC_MOODS:
        raise ToolError(f"Unknown mood '{mood}'. Choose one of: {', '.join(MUSIC_MOODS)}")
    return mood
