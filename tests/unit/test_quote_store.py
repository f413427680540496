# tests/unit/test_quote_store.py
"""
Tests for QuoteStore.

Tests cover:
    - Quote CRUD and NotFound behavior
    - Generation from the corpus (counts, ids, categories, empty-category policy)
    - Settings replacement semantics
    - Processing flag and overlapping holds
    - Media assets
"""

import random

import pytest

from quoteflow.catalog import CATEGORIES, QUOTE_CORPUS
from quoteflow.errors import EmptyCategoryError, QuoteNotFoundError
from quoteflow.models.quote_store import QuoteStore
from quoteflow.models.quotes import (
    MediaAsset,
    MusicSettings,
    Quote,
    QuoteStatus,
    VoiceSettings,
)


@pytest.fixture
def store() -> QuoteStore:
    return QuoteStore(rng=random.Random(42))


def _quote(quote_id="quote-000000000001", text="Keep going.", category="action"):
    return Quote(id=quote_id, text=text, author="Someone", category=category)


class TestCrud:
    def test_add_and_get(self, store):
        quote = _quote()
        store.add_quote(quote)
        assert store.get_quote(quote.id) is quote
        assert store.list_quotes() == [quote]

    def test_add_duplicate_raises(self, store):
        store.add_quote(_quote())
        with pytest.raises(ValueError, match="already exists"):
            store.add_quote(_quote())

    def test_list_preserves_insertion_order(self, store):
        ids = [f"quote-00000000000{i}" for i in range(3)]
        for quote_id in ids:
            store.add_quote(_quote(quote_id))
        assert [q.id for q in store.list_quotes()] == ids

    def test_list_filters(self, store):
        store.add_quote(_quote("quote-aaaaaaaaaaaa", category="life"))
        store.add_quote(_quote("quote-bbbbbbbbbbbb", category="success"))
        store.update_quote("quote-bbbbbbbbbbbb", status=QuoteStatus.READY)

        assert [q.id for q in store.list_quotes(category="life")] == ["quote-aaaaaaaaaaaa"]
        assert [q.id for q in store.list_quotes(status=QuoteStatus.READY)] == ["quote-bbbbbbbbbbbb"]
        assert len(store.list_quotes(category="all")) == 2

    def test_update_changes_only_given_fields(self, store):
        original = _quote()
        store.add_quote(original)
        created_at = original.created_at

        store.update_quote(original.id, text="New text")

        updated = store.get_quote(original.id)
        assert updated.text == "New text"
        assert updated.author == "Someone"
        assert updated.category == "action"
        assert updated.status == QuoteStatus.DRAFT
        assert updated.created_at == created_at

    def test_update_cannot_change_id(self, store):
        store.add_quote(_quote())
        store.update_quote("quote-000000000001", id="quote-ffffffffffff", author="Other")
        assert store.get_quote("quote-000000000001").author == "Other"
        assert store.get_quote("quote-ffffffffffff") is None

    def test_update_unknown_id_raises_and_leaves_store(self, store):
        store.add_quote(_quote())
        before = [(q.id, q.text) for q in store.list_quotes()]

        with pytest.raises(QuoteNotFoundError):
            store.update_quote("quote-missing00000", text="x")

        assert [(q.id, q.text) for q in store.list_quotes()] == before

    def test_delete_removes_exactly_one(self, store):
        store.add_quote(_quote("quote-aaaaaaaaaaaa"))
        store.add_quote(_quote("quote-bbbbbbbbbbbb"))

        removed = store.delete_quote("quote-aaaaaaaaaaaa")

        assert removed.id == "quote-aaaaaaaaaaaa"
        assert [q.id for q in store.list_quotes()] == ["quote-bbbbbbbbbbbb"]

    def test_second_delete_leaves_store_unchanged(self, store):
        store.add_quote(_quote("quote-aaaaaaaaaaaa"))
        store.add_quote(_quote("quote-bbbbbbbbbbbb"))
        store.delete_quote("quote-aaaaaaaaaaaa")

        with pytest.raises(QuoteNotFoundError):
            store.delete_quote("quote-aaaaaaaaaaaa")

        assert [q.id for q in store.list_quotes()] == ["quote-bbbbbbbbbbbb"]


class TestGenerate:
    def test_generates_count_drafts_with_unique_ids(self, store):
        created = store.generate_quotes(25, "all")

        assert len(created) == 25
        assert len({q.id for q in created}) == 25
        assert all(q.status == QuoteStatus.DRAFT for q in created)
        assert store.list_quotes() == created

    def test_appends_to_existing(self, store):
        store.add_quote(_quote())
        store.generate_quotes(3, "all")
        assert len(store.list_quotes()) == 4

    def test_category_filter(self, store):
        created = store.generate_quotes(10, "success")
        assert {q.category for q in created} == {"success"}
        success_texts = {t.text for t in QUOTE_CORPUS if t.category == "success"}
        assert {q.text for q in created} <= success_texts

    def test_single_template_category_repeats(self, store):
        created = store.generate_quotes(10, "motivation")
        assert {q.text for q in created} == {
            "The only impossible journey is the one you never begin."
        }

    def test_all_draws_from_corpus(self, store):
        corpus_texts = {t.text for t in QUOTE_CORPUS}
        created = store.generate_quotes(50, "all")
        assert {q.text for q in created} <= corpus_texts

    def test_zero_count(self, store):
        assert store.generate_quotes(0, "all") == []
        assert store.list_quotes() == []

    def test_negative_count_raises(self, store):
        with pytest.raises(ValueError):
            store.generate_quotes(-1, "all")

    def test_every_catalog_category_has_templates(self, store):
        for category in CATEGORIES:
            assert store.generate_quotes(1, category)

    def test_empty_category_fails_by_default(self, store):
        with pytest.raises(EmptyCategoryError):
            store.generate_quotes(3, "gratitude")
        assert store.list_quotes() == []

    def test_empty_category_fallback(self):
        store = QuoteStore(empty_category="fallback", rng=random.Random(1))
        created = store.generate_quotes(3, "gratitude")
        assert len(created) == 3
        assert {q.category for q in created} <= {t.category for t in QUOTE_CORPUS}


class TestSettings:
    def test_defaults(self, store):
        assert store.voice_settings == VoiceSettings()
        assert store.music_settings == MusicSettings()

    def test_replace_voice_settings(self, store):
        new = VoiceSettings(voice="neural-voice-3", speed=1.5, pitch=0.8, language="en-GB")
        store.set_voice_settings(new)
        assert store.voice_settings == new

    def test_replace_music_settings(self, store):
        new = MusicSettings(genre="cinematic", mood="calm", duration=120, fade_in=False)
        store.set_music_settings(new)
        assert store.music_settings == new

    def test_returned_settings_are_copies(self, store):
        settings = store.voice_settings
        settings.speed = 2.0
        assert store.voice_settings.speed == 1.0


class TestProcessing:
    def test_set_processing(self, store):
        assert store.is_processing is False
        store.set_processing(True)
        assert store.is_processing is True
        store.set_processing(False)
        assert store.is_processing is False

    def test_hold_sets_and_clears(self, store):
        with store.processing():
            assert store.is_processing is True
        assert store.is_processing is False

    def test_overlapping_holds(self, store):
        outer = store.processing()
        inner = store.processing()
        outer.__enter__()
        inner.__enter__()

        outer.__exit__(None, None, None)
        assert store.is_processing is True

        inner.__exit__(None, None, None)
        assert store.is_processing is False

    def test_hold_released_on_error(self, store):
        with pytest.raises(RuntimeError):
            with store.processing():
                raise RuntimeError("boom")
        assert store.is_processing is False


class TestMediaAssets:
    def test_add_and_update(self, store):
        store.add_quote(_quote())
        store.add_media_asset(MediaAsset(quote_id="quote-000000000001", video_url="a.mp4"))

        store.update_media_asset("quote-000000000001", voice_url="a.mp3")

        asset = store.get_media_asset("quote-000000000001")
        assert asset.video_url == "a.mp4"
        assert asset.voice_url == "a.mp3"

    def test_asset_requires_quote(self, store):
        with pytest.raises(QuoteNotFoundError):
            store.add_media_asset(MediaAsset(quote_id="quote-missing00000"))

    def test_update_missing_asset_raises(self, store):
        with pytest.raises(QuoteNotFoundError):
            store.update_media_asset("quote-missing00000", video_url="x")

    def test_delete_quote_drops_asset(self, store):
        store.add_quote(_quote())
        store.add_media_asset(MediaAsset(quote_id="quote-000000000001"))
        store.delete_quote("quote-000000000001")
        assert store.get_media_asset("quote-000000000001") is None
