# quoteflow/tools/media.py
"""
Media tools: simulated voice-over and music generation, and previews.
"""

import asyncio
import logging

from fastmcp.exceptions import ToolError

from quoteflow.config.schema import StudioConfig
from quoteflow.media.preview import PreviewPlayer
from quoteflow.models.quote_store import QuoteStore
from quoteflow.models.quotes import QuoteStatus
from quoteflow.models.responses import MediaGenerationResponse, PreviewResponse
from quoteflow.validation.sanitize import sanitize_quote_id, sanitize_selection

logger = logging.getLogger(__name__)


def _require_quotes(quote_ids: list[str], quotes: QuoteStore) -> None:
    missing = [quote_id for quote_id in quote_ids if quotes.get_quote(quote_id) is None]
    if missing:
        raise ToolError(
            f"Unknown quote ID(s): {', '.join(missing)}. Use list_quotes to see available quotes."
        )


async def _generate(
    kind: str, label: str, quote_ids: list[str], quotes: QuoteStore, duration: float
) -> dict:
    selected = sanitize_selection(quote_ids)
    _require_quotes(selected, quotes)

    with quotes.processing():
        for quote_id in selected:
            quotes.update_quote(quote_id, status=QuoteStatus.PROCESSING)
        logger.info(f"Generating {label} for {len(selected)} quotes")

        await asyncio.sleep(duration)

        # Quotes deleted during the wait are skipped
        finished = [quote_id for quote_id in selected if quotes.get_quote(quote_id) is not None]
        for quote_id in finished:
            quotes.update_quote(quote_id, status=QuoteStatus.READY)

    if len(finished) < len(selected):
        logger.warning(
            f"{len(selected) - len(finished)} quotes were deleted during {label} generation"
        )

    response = MediaGenerationResponse(
        kind=kind,
        generated=len(finished),
        quote_ids=finished,
        message=f"Generated {len(finished)} {label}!",
    )
    return response.model_dump()


async def generate_voice_overs(
    quote_ids: list[str], quotes: QuoteStore, config: StudioConfig
) -> dict:
    """
    Generate narration for the selected quotes.

    Selected quotes move to PROCESSING, then READY once the simulated work
    finishes. The store's processing flag is held meanwhile. Quotes deleted
    before the work finishes are left out of the response.

    Returns:
        MediaGenerationResponse as dict (only the quotes that finished)

    Raises:
        ToolError: If nothing is selected or an ID is unknown
    """
    return await _generate(
        "voice_over", "voice overs", quote_ids, quotes, config.timing.voice_over_generation
    )


async def generate_music(
    quote_ids: list[str], quotes: QuoteStore, config: StudioConfig
) -> dict:
    """
    Generate background music for the selected quotes.

    Returns:
        MediaGenerationResponse as dict

    Raises:
        ToolError: If nothing is selected or an ID is unknown
    """
    return await _generate(
        "music", "music tracks", quote_ids, quotes, config.timing.music_generation
    )


async def preview(quote_id: str, quotes: QuoteStore, player: PreviewPlayer) -> dict:
    """
    Toggle a preview for one quote.

    Starting a preview stops whatever the same player was playing. The
    preview resets itself after the player's duration.

    Returns:
        PreviewResponse as dict

    Raises:
        ToolError: If the quote doesn't exist
    """
    quote_id = sanitize_quote_id(quote_id)
    _require_quotes([quote_id], quotes)

    playing = player.toggle(quote_id)
    response = PreviewResponse(
        quote_id=quote_id,
        playing=playing,
        auto_stop_seconds=player.duration if playing else None,
    )
    return response.model_dump()
