# quoteflow/media/preview.py
"""
Simulated preview playback.

Tracks which quote is "currently playing" and clears it after a fixed
duration, as a real player would when the clip ends.
"""

import asyncio
import logging

logger = logging.getLogger(__name__)


class PreviewPlayer:
    """
    One-at-a-time preview indicator with auto-reset.

    Must be used from inside a running event loop.
    """

    def __init__(self, kind: str, duration: float) -> None:
        """
        Args:
            kind: Label for logging ("voice" or "music")
            duration: Seconds before playback resets on its own
        """
        self._kind = kind
        self._duration = duration
        self._playing: str | None = None
        self._reset_handle: asyncio.TimerHandle | None = None

    @property
    def playing(self) -> str | None:
        """Quote id currently playing, or None."""
        return self._playing

    @property
    def duration(self) -> float:
        return self._duration

    def toggle(self, quote_id: str) -> bool:
        """
        Start or stop the preview for a quote.

        Toggling the quote that is already playing stops it. Toggling another
        quote switches playback to it.

        Returns:
            True if the quote is now playing, False if playback stopped
        """
        if self._playing == quote_id:
            self.stop()
            return False

        loop = asyncio.get_running_loop()
        self._cancel_reset()
        self._playing = quote_id
        self._reset_handle = loop.call_later(self._duration, self._auto_reset, quote_id)
        logger.info(f"{self._kind} preview started for {quote_id}")
        return True

    def stop(self) -> None:
        self._cancel_reset()
        if self._playing is not None:
            logger.info(f"{self._kind} preview stopped for {self._playing}")
        self._playing = None

    def _auto_reset(self, quote_id: str) -> None:
        if self._playing == quote_id:
            self._playing = None
            self._reset_handle = None

    def _cancel_reset(self) -> None:
        if self._reset_handle is not None:
            self._reset_handle.cancel()
            self._reset_handle = None
