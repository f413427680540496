# quoteflow/tools/settings.py
"""
Settings tools: read and replace narration and music settings.
"""

import logging

from quoteflow.models.quote_store import QuoteStore
from quoteflow.models.quotes import MusicSettings, VoiceSettings
from quoteflow.models.responses import (
    MusicSettingsModel,
    SettingsResponse,
    VoiceSettingsModel,
)
from quoteflow.validation.sanitize import (
    sanitize_genre,
    sanitize_language,
    sanitize_mood,
    sanitize_range,
    sanitize_voice,
)

logger = logging.getLogger(__name__)


async def get_settings(quotes: QuoteStore) -> dict:
    """Current voice and music settings plus the processing flag."""
    response = SettingsResponse(
        voice=VoiceSettingsModel.from_settings(quotes.voice_settings),
        music=MusicSettingsModel.from_settings(quotes.music_settings),
        is_processing=quotes.is_processing,
    )
    return response.model_dump()


async def set_voice_settings(
    quotes: QuoteStore,
    voice: str | None = None,
    speed: float | None = None,
    pitch: float | None = None,
    language: str | None = None,
) -> dict:
    """
    Change narration settings.

    Omitted fields keep their current value; the result replaces the stored
    settings as a whole.

    Returns:
        SettingsResponse as dict

    Raises:
        ToolError: If a voice/language is unknown or speed/pitch is outside 0.5-2.0
    """
    current = quotes.voice_settings
    updated = VoiceSettings(
        voice=sanitize_voice(voice) if voice is not None else current.voice,
        speed=sanitize_range(speed, "Speed", 0.5, 2.0) if speed is not None else current.speed,
        pitch=sanitize_range(pitch, "Pitch", 0.5, 2.0) if pitch is not None else current.pitch,
        language=sanitize_language(language) if language is not None else current.language,
    )
    quotes.set_voice_settings(updated)
    return await get_settings(quotes)


async def set_music_settings(
    quotes: QuoteStore,
    genre: str | None = None,
    mood: str | None = None,
    duration: int | None = None,
    fade_in: bool | None = None,
    fade_out: bool | None = None,
) -> dict:
    """
    Change background music settings.

    Returns:
        SettingsResponse as dict

    Raises:
        ToolError: If genre/mood is unknown or duration is outside 15-300 seconds
    """
    current = quotes.music_settings
    if duration is not None:
        duration = int(sanitize_range(duration, "Duration", 15, 300))

    updated = MusicSettings(
        genre=sanitize_genre(genre) if genre is not None else current.genre,
        mood=sanitize_mood(mood) if mood is not None else current.mood,
        duration=duration if duration is not None else current.duration,
        fade_in=current.fade_in if fade_in is None else fade_in,
        fade_out=current.fade_out if fade_out is None else fade_out,
    )
    quotes.set_music_settings(updated)
    return await get_settings(quotes)
