# quoteflow/models/quote_store.py
"""
Quote store: the single source of truth for quotes, settings and the
processing flag.

One instance is owned by the studio lifecycle and passed to every tool and to
the batch worker. There is no module-level instance.
"""

import logging
import random
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import replace
from typing import Literal

from quoteflow.catalog import ALL_CATEGORIES, QUOTE_CORPUS, templates_for
from quoteflow.errors import EmptyCategoryError, QuoteNotFoundError
from quoteflow.models.quotes import (
    MediaAsset,
    MusicSettings,
    Quote,
    QuoteStatus,
    VoiceSettings,
    generate_quote_id,
)

logger = logging.getLogger(__name__)

EmptyCategoryPolicy = Literal["fail", "fallback"]


class QuoteStore:
    """
    In-memory quote collection plus narration/music settings.

    Mutation is last-write-wins; callers share one event loop, so no locking
    is needed. Settings are stored as given: range limits are enforced by the
    validation layer before they reach the store.
    """

    def __init__(
        self,
        voice_settings: VoiceSettings | None = None,
        music_settings: MusicSettings | None = None,
        empty_category: EmptyCategoryPolicy = "fail",
        rng: random.Random | None = None,
    ) -> None:
        """
        Initialize an empty quote store.

        Args:
            voice_settings: Initial narration settings (defaults if None)
            music_settings: Initial music settings (defaults if None)
            empty_category: "fail" raises EmptyCategoryError when a category has
                no templates; "fallback" samples the full corpus instead
            rng: Random source for generation (module-level random if None)
        """
        self._quotes: dict[str, Quote] = {}
        self._assets: dict[str, MediaAsset] = {}
        self._voice_settings = voice_settings or VoiceSettings()
        self._music_settings = music_settings or MusicSettings()
        self._empty_category = empty_category
        self._rng = rng or random.Random()
        self._processing = False
        self._holders = 0
        logger.info(f"Initialized QuoteStore (empty_category={empty_category})")

    # -- quotes ---------------------------------------------------------

    def add_quote(self, quote: Quote) -> Quote:
        """
        Append a quote.

        Raises:
            ValueError: If a quote with the same id already exists
        """
        if quote.id in self._quotes:
            raise ValueError(f"Quote {quote.id} already exists")
        self._quotes[quote.id] = quote
        logger.info(f"Added quote {quote.id} ({quote.category})")
        return quote

    def get_quote(self, quote_id: str) -> Quote | None:
        return self._quotes.get(quote_id)

    def list_quotes(
        self, category: str | None = None, status: QuoteStatus | None = None
    ) -> list[Quote]:
        """List quotes in insertion order, optionally filtered."""
        quotes = list(self._quotes.values())
        if category and category != ALL_CATEGORIES:
            quotes = [q for q in quotes if q.category == category]
        if status is not None:
            quotes = [q for q in quotes if q.status == status]
        return quotes

    def update_quote(self, quote_id: str, **changes) -> Quote:
        """
        Apply a partial update to a quote.

        Args:
            quote_id: Quote identifier
            **changes: Fields to overwrite (id cannot be changed)

        Returns:
            The updated quote

        Raises:
            QuoteNotFoundError: If quote_id is not in the store (store unchanged)
        """
        quote = self._quotes.get(quote_id)
        if quote is None:
            raise QuoteNotFoundError(quote_id)

        changes.pop("id", None)
        for key, value in changes.items():
            if hasattr(quote, key):
                setattr(quote, key, value)
            else:
                logger.warning(f"Ignored unknown field '{key}' in quote update")

        logger.info(f"Updated quote {quote_id}: {sorted(changes)}")
        return quote

    def delete_quote(self, quote_id: str) -> Quote:
        """
        Remove a quote and its media asset.

        Raises:
            QuoteNotFoundError: If quote_id is not in the store (store unchanged)
        """
        quote = self._quotes.pop(quote_id, None)
        if quote is None:
            raise QuoteNotFoundError(quote_id)
        self._assets.pop(quote_id, None)
        logger.info(f"Deleted quote {quote_id}")
        return quote

    def generate_quotes(self, count: int, category: str) -> list[Quote]:
        """
        Append `count` quotes drawn at random (with replacement) from the corpus.

        Args:
            count: Number of quotes to create (0 creates none)
            category: Corpus category to draw from, or "all"

        Returns:
            The newly created quotes, all in DRAFT status

        Raises:
            ValueError: If count is negative
            EmptyCategoryError: If the category has no templates and the
                store's policy is "fail"
        """
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")

        pool = templates_for(category)
        if not pool:
            if self._empty_category == "fail":
                raise EmptyCategoryError(category)
            logger.warning(
                f"No templates in category '{category}', sampling full corpus"
            )
            pool = list(QUOTE_CORPUS)

        created = []
        for _ in range(count):
            template = self._rng.choice(pool)
            quote = Quote(
                id=self._fresh_id(),
                text=template.text,
                author=template.author,
                category=template.category,
            )
            self._quotes[quote.id] = quote
            created.append(quote)

        logger.info(f"Generated {len(created)} quotes (category={category})")
        return created

    def _fresh_id(self) -> str:
        quote_id = generate_quote_id()
        while quote_id in self._quotes:
            quote_id = generate_quote_id()
        return quote_id

    # -- settings -------------------------------------------------------

    @property
    def voice_settings(self) -> VoiceSettings:
        return replace(self._voice_settings)

    @property
    def music_settings(self) -> MusicSettings:
        return replace(self._music_settings)

    def set_voice_settings(self, settings: VoiceSettings) -> None:
        self._voice_settings = replace(settings)
        logger.info(f"Voice settings replaced: {settings}")

    def set_music_settings(self, settings: MusicSettings) -> None:
        self._music_settings = replace(settings)
        logger.info(f"Music settings replaced: {settings}")

    # -- processing flag ------------------------------------------------

    @property
    def is_processing(self) -> bool:
        return self._processing

    def set_processing(self, processing: bool) -> None:
        """Set the processing flag directly, ignoring any outstanding holds."""
        self._processing = processing

    @contextmanager
    def processing(self) -> Iterator[None]:
        """
        Hold the processing flag for the duration of a block.

        The flag is cleared only when the last overlapping holder exits.
        """
        self._holders += 1
        self._processing = True
        try:
            yield
        finally:
            self._holders -= 1
            if self._holders == 0:
                self._processing = False

    # -- media assets ---------------------------------------------------

    def add_media_asset(self, asset: MediaAsset) -> None:
        """Register (or replace) the media asset for a quote."""
        if asset.quote_id not in self._quotes:
            raise QuoteNotFoundError(asset.quote_id)
        self._assets[asset.quote_id] = asset

    def get_media_asset(self, quote_id: str) -> MediaAsset | None:
        return self._assets.get(quote_id)

    def update_media_asset(self, quote_id: str, **changes) -> MediaAsset:
        """
        Update fields on a quote's media asset.

        Raises:
            QuoteNotFoundError: If the quote has no media asset
        """
        asset = self._assets.get(quote_id)
        if asset is None:
            raise QuoteNotFoundError(quote_id)
        for key, value in changes.items():
            if key != "quote_id" and hasattr(asset, key):
                setattr(asset, key, value)
        return asset
