# quoteflow/models/quotes.py
"""
Quote content models.

Internal dataclasses held by the QuoteStore. Range checks on settings live in
the validation layer, not here.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4


class QuoteStatus(Enum):
    """Quote lifecycle states."""

    DRAFT = "draft"
    PROCESSING = "processing"
    READY = "ready"
    COMPLETED = "completed"


@dataclass
class Quote:
    """A single quote and its lifecycle status."""

    id: str
    text: str
    author: str
    category: str
    status: QuoteStatus = QuoteStatus.DRAFT
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass
class VoiceSettings:
    """Narration parameters (speed and pitch are multipliers, 0.5-2.0 when set via tools)."""

    voice: str = "neural-voice-1"
    speed: float = 1.0
    pitch: float = 1.0
    language: str = "en-US"


@dataclass
class MusicSettings:
    """Background track parameters (duration in seconds, 15-300 when set via tools)."""

    genre: str = "ambient"
    mood: str = "inspirational"
    duration: int = 60
    fade_in: bool = True
    fade_out: bool = True


@dataclass
class MediaAsset:
    """Files associated with one quote after a batch organizes its library."""

    quote_id: str
    video_url: str | None = None
    voice_url: str | None = None
    music_url: str | None = None
    download_folder: str | None = None


def generate_quote_id() -> str:
    """
    Generate a unique quote ID.

    Returns:
        "quote-" followed by 12 hex characters (UUID4 truncated)
    """
    return f"quote-{uuid4().hex[:12]}"
