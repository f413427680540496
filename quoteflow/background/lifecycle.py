# quoteflow/background/lifecycle.py
"""
Studio lifecycle management.

Owns the quote store, batch store, worker and preview players for one
session, and coordinates startup and shutdown.
"""

import logging

from quoteflow.background.signals import setup_signal_handlers
from quoteflow.background.worker import BatchWorker
from quoteflow.config.schema import StudioConfig
from quoteflow.media.preview import PreviewPlayer
from quoteflow.models.jobs import InMemoryBatchStore
from quoteflow.models.quote_store import QuoteStore
from quoteflow.models.quotes import MusicSettings, VoiceSettings

logger = logging.getLogger(__name__)


def create_quote_store(config: StudioConfig) -> QuoteStore:
    """Build a QuoteStore seeded with the configured defaults and policy."""
    voice = config.defaults.voice
    music = config.defaults.music
    return QuoteStore(
        voice_settings=VoiceSettings(
            voice=voice.voice,
            speed=voice.speed,
            pitch=voice.pitch,
            language=voice.language,
        ),
        music_settings=MusicSettings(
            genre=music.genre,
            mood=music.mood,
            duration=music.duration,
            fade_in=music.fade_in,
            fade_out=music.fade_out,
        ),
        empty_category=config.generation.empty_category,
    )


class StudioLifecycle:
    """
    Studio lifecycle coordinator.

    Manages:
        - The shared QuoteStore and InMemoryBatchStore
        - Batch worker lifecycle
        - Voice and music preview players
        - Signal handler registration
    """

    def __init__(self, config: StudioConfig | None = None) -> None:
        self._config = config or StudioConfig()
        self._quotes = create_quote_store(self._config)
        self._batches = InMemoryBatchStore()
        self._worker = BatchWorker(self._batches, self._quotes, config=self._config)
        self._voice_preview = PreviewPlayer("voice", self._config.timing.voice_preview)
        self._music_preview = PreviewPlayer("music", self._config.timing.music_preview)
        logger.info("Created StudioLifecycle")

    @property
    def config(self) -> StudioConfig:
        return self._config

    @property
    def quotes(self) -> QuoteStore:
        """Get the quote store (for server.py to pass to tools)."""
        return self._quotes

    @property
    def batches(self) -> InMemoryBatchStore:
        """Get the batch store (for server.py to pass to tools)."""
        return self._batches

    @property
    def worker(self) -> BatchWorker:
        """Get the batch worker (for inspection/testing)."""
        return self._worker

    @property
    def voice_preview(self) -> PreviewPlayer:
        return self._voice_preview

    @property
    def music_preview(self) -> PreviewPlayer:
        return self._music_preview

    async def startup(self, register_signals: bool = True) -> None:
        """
        Start the studio.

        Steps:
            1. Register signal handlers for graceful shutdown
            2. Start batch worker
        """
        logger.info("Starting studio lifecycle...")

        if register_signals:
            setup_signal_handlers(self._worker)

        await self._worker.start()

        logger.info("Studio lifecycle started: worker running")

    async def shutdown(self) -> None:
        """
        Shut down the studio gracefully.

        Stops the worker (a running batch is marked FAILED) and any preview.
        """
        logger.info("Shutting down studio lifecycle...")

        if self._worker.running:
            await self._worker.stop()

        self._voice_preview.stop()
        self._music_preview.stop()

        logger.info("Studio lifecycle shutdown complete")
