# quoteflow/server.py
"""
FastMCP server instance with tool registration.

CRITICAL: configure_logging() is called first to prevent stdout pollution.
All logging goes to stderr as JSON.
"""

# Configure logging FIRST before any other imports
from quoteflow.logging_config import configure_logging

configure_logging()

import logging

from fastmcp import FastMCP

from quoteflow.background.lifecycle import StudioLifecycle
from quoteflow.config.loader import load_config
from quoteflow.config.schema import StudioConfig
from quoteflow.tools import media as _media
from quoteflow.tools import quotes as _quotes
from quoteflow.tools import settings as _settings
from quoteflow.tools.check_batch import check_batch as _check_batch
from quoteflow.tools.create_batch import create_batch as _create_batch
from quoteflow.tools.dashboard import get_dashboard as _get_dashboard
from quoteflow.tools.list_batches import list_batches as _list_batches

logger = logging.getLogger(__name__)

mcp = FastMCP("quoteflow")

_config = load_config()
logger.info(
    f"Loaded configuration: concurrency={_config.batch.concurrency}, "
    f"empty_category={_config.generation.empty_category}"
)

# Lifecycle manager (initialized by __main__.py)
_lifecycle: StudioLifecycle | None = None


def get_lifecycle() -> StudioLifecycle:
    """
    Get the studio lifecycle.

    Raises:
        RuntimeError: If lifecycle not initialized (should never happen)
    """
    if _lifecycle is None:
        raise RuntimeError("Studio lifecycle not initialized. Call initialize_lifecycle() first.")
    return _lifecycle


async def initialize_lifecycle(config: StudioConfig | None = None) -> StudioLifecycle:
    """
    Initialize the studio lifecycle (stores + worker + signals).

    Must be called before any tool calls. Called by __main__.py on startup.

    Args:
        config: StudioConfig instance (defaults to module-level _config if None)
    """
    global _lifecycle

    _lifecycle = StudioLifecycle(config or _config)
    await _lifecycle.startup()

    logger.info("Lifecycle initialized: stores + worker + signals ready")
    return _lifecycle


@mcp.tool()
async def generate_quotes(count: int = 5, category: str = "all") -> dict:
    """Generate draft quotes from the motivational corpus, optionally limited to one category."""
    lc = get_lifecycle()
    return await _quotes.generate_quotes(count, category, quotes=lc.quotes, config=lc.config)


@mcp.tool()
async def add_quote(text: str, author: str, category: str = "inspiration") -> dict:
    """Add a hand-written quote as a draft."""
    return await _quotes.add_quote(text, author, category, quotes=get_lifecycle().quotes)


@mcp.tool()
async def list_quotes(category: str | None = None, status: str | None = None) -> dict:
    """List quotes in creation order, optionally filtered by category and status."""
    return await _quotes.list_quotes(get_lifecycle().quotes, category=category, status=status)


@mcp.tool()
async def update_quote(
    quote_id: str,
    text: str | None = None,
    author: str | None = None,
    category: str | None = None,
    status: str | None = None,
) -> dict:
    """Edit a quote's text, author, category or status."""
    return await _quotes.update_quote(
        quote_id, get_lifecycle().quotes, text=text, author=author, category=category, status=status
    )


@mcp.tool()
async def delete_quote(quote_id: str) -> dict:
    """Delete a quote."""
    return await _quotes.delete_quote(quote_id, get_lifecycle().quotes)


@mcp.tool()
async def get_settings() -> dict:
    """Show the current narration and background music settings."""
    return await _settings.get_settings(get_lifecycle().quotes)


@mcp.tool()
async def set_voice_settings(
    voice: str | None = None,
    speed: float | None = None,
    pitch: float | None = None,
    language: str | None = None,
) -> dict:
    """Change narration voice, speed (0.5-2.0), pitch (0.5-2.0) or language."""
    return await _settings.set_voice_settings(
        get_lifecycle().quotes, voice=voice, speed=speed, pitch=pitch, language=language
    )


@mcp.tool()
async def set_music_settings(
    genre: str | None = None,
    mood: str | None = None,
    duration: int | None = None,
    fade_in: bool | None = None,
    fade_out: bool | None = None,
) -> dict:
    """Change background music genre, mood, duration (15-300 s) or fades."""
    return await _settings.set_music_settings(
        get_lifecycle().quotes,
        genre=genre,
        mood=mood,
        duration=duration,
        fade_in=fade_in,
        fade_out=fade_out,
    )


@mcp.tool()
async def generate_voice_overs(quote_ids: list[str]) -> dict:
    """Generate voice overs for the selected quotes."""
    lc = get_lifecycle()
    return await _media.generate_voice_overs(quote_ids, quotes=lc.quotes, config=lc.config)


@mcp.tool()
async def generate_music(quote_ids: list[str]) -> dict:
    """Generate background music for the selected quotes."""
    lc = get_lifecycle()
    return await _media.generate_music(quote_ids, quotes=lc.quotes, config=lc.config)


@mcp.tool()
async def preview_voice(quote_id: str) -> dict:
    """Play or stop a short narration preview of a quote."""
    lc = get_lifecycle()
    return await _media.preview(quote_id, quotes=lc.quotes, player=lc.voice_preview)


@mcp.tool()
async def preview_music(quote_id: str) -> dict:
    """Play or stop a short background music preview for a quote."""
    lc = get_lifecycle()
    return await _media.preview(quote_id, quotes=lc.quotes, player=lc.music_preview)


@mcp.tool()
async def create_batch(
    name: str,
    batch_type: str = "complete",
    quotes_count: int = 10,
    category: str = "all",
) -> dict:
    """Start a bulk-creation batch: quotes, voice overs, music and an organized library."""
    lc = get_lifecycle()
    return await _create_batch(
        name, batch_type, quotes_count, category, store=lc.batches, config=lc.config
    )


@mcp.tool()
async def check_batch(job_id: str) -> dict:
    """Check a batch's status, progress and current stage."""
    return await _check_batch(job_id, store=get_lifecycle().batches)


@mcp.tool()
async def list_batches() -> dict:
    """List all batches, newest first."""
    return await _list_batches(store=get_lifecycle().batches)


@mcp.tool()
async def get_dashboard() -> dict:
    """Summarize quotes and batches for this session."""
    lc = get_lifecycle()
    return await _get_dashboard(lc.quotes, lc.batches)


logger.info("MCP server initialized with 16 tools")
