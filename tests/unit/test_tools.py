# tests/unit/test_tools.py
"""
Tests for tool implementations (not the MCP wrappers).

Tests cover:
    - Quote tools and their validation
    - Settings tools and range checks
    - Voice-over / music generation and previews
    - Batch submission, concurrency policy, status and listing
    - Dashboard counts
"""

import asyncio

import pytest
from fastmcp.exceptions import ToolError

from quoteflow.config.schema import BatchConfig, StudioConfig, TimingConfig
from quoteflow.media.preview import PreviewPlayer
from quoteflow.models.jobs import BatchStatus, InMemoryBatchStore
from quoteflow.models.quote_store import QuoteStore
from quoteflow.models.quotes import QuoteStatus
from quoteflow.tools.check_batch import check_batch
from quoteflow.tools.create_batch import create_batch
from quoteflow.tools.dashboard import get_dashboard
from quoteflow.tools.list_batches import list_batches
from quoteflow.tools.media import generate_music, generate_voice_overs, preview
from quoteflow.tools.quotes import (
    add_quote,
    delete_quote,
    generate_quotes,
    list_quotes,
    update_quote,
)
from quoteflow.tools.settings import get_settings, set_music_settings, set_voice_settings


@pytest.fixture
def config() -> StudioConfig:
    return StudioConfig(
        timing=TimingConfig(voice_over_generation=0, music_generation=0),
    )


@pytest.fixture
def quotes() -> QuoteStore:
    return QuoteStore()


@pytest.fixture
def batches() -> InMemoryBatchStore:
    return InMemoryBatchStore()


# ---------------------------------------------------------------------------
# Quotes
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_generate_quotes_returns_new_quotes(quotes, config):
    result = await generate_quotes(4, "success", quotes=quotes, config=config)

    assert result["total"] == 4
    assert all(q["category"] == "success" for q in result["quotes"])
    assert all(q["status"] == "draft" for q in result["quotes"])
    assert len(quotes.list_quotes()) == 4


@pytest.mark.asyncio
@pytest.mark.parametrize("count", [0, 101, -3])
async def test_generate_quotes_rejects_count(quotes, config, count):
    with pytest.raises(ToolError, match="between 1 and 100"):
        await generate_quotes(count, "all", quotes=quotes, config=config)
    assert quotes.list_quotes() == []


@pytest.mark.asyncio
async def test_generate_quotes_rejects_unknown_category(quotes, config):
    with pytest.raises(ToolError, match="Unknown category"):
        await generate_quotes(3, "gratitude", quotes=quotes, config=config)


@pytest.mark.asyncio
async def test_add_and_list_quotes(quotes):
    added = await add_quote("  Stay hungry.  ", "Stewart Brand", "mindset", quotes=quotes)
    assert added["text"] == "Stay hungry."
    assert added["status"] == "draft"

    listed = await list_quotes(quotes, category="mindset")
    assert [q["id"] for q in listed["quotes"]] == [added["id"]]
    assert (await list_quotes(quotes, category="life"))["total"] == 0


@pytest.mark.asyncio
async def test_add_quote_rejects_empty_text(quotes):
    with pytest.raises(ToolError, match="cannot be empty"):
        await add_quote("   ", "Someone", "life", quotes=quotes)


@pytest.mark.asyncio
async def test_update_quote(quotes, config):
    quote_id = (await generate_quotes(1, "life", quotes=quotes, config=config))["quotes"][0]["id"]

    result = await update_quote(quote_id, quotes, text="Edited", status="ready")

    assert result["text"] == "Edited"
    assert result["status"] == "ready"
    assert result["category"] == "life"


@pytest.mark.asyncio
async def test_update_unknown_quote(quotes):
    with pytest.raises(ToolError, match="not found"):
        await update_quote("quote-missing00000", quotes, text="x")


@pytest.mark.asyncio
async def test_update_quote_invalid_status(quotes, config):
    quote_id = (await generate_quotes(1, "all", quotes=quotes, config=config))["quotes"][0]["id"]
    with pytest.raises(ToolError, match="Unknown status"):
        await update_quote(quote_id, quotes, status="published")


@pytest.mark.asyncio
async def test_delete_quote_twice(quotes, config):
    generated = await generate_quotes(2, "all", quotes=quotes, config=config)
    quote_id = generated["quotes"][0]["id"]

    await delete_quote(quote_id, quotes)
    with pytest.raises(ToolError, match="not found"):
        await delete_quote(quote_id, quotes)

    assert len(quotes.list_quotes()) == 1


@pytest.mark.asyncio
async def test_add_quote_accepts_free_form_category(quotes):
    added = await add_quote("Be kind.", "Someone", " Gratitude ", quotes=quotes)
    assert added["category"] == "gratitude"

    listed = await list_quotes(quotes, category="gratitude")
    assert [q["id"] for q in listed["quotes"]] == [added["id"]]


@pytest.mark.asyncio
@pytest.mark.parametrize("category", ["all", " ALL ", "   ", "x" * 51])
async def test_add_quote_rejects_category(quotes, category):
    with pytest.raises(ToolError, match="[Cc]ategory"):
        await add_quote("Be kind.", "Someone", category, quotes=quotes)
    assert quotes.list_quotes() == []


@pytest.mark.asyncio
async def test_update_quote_category(quotes, config):
    quote_id = (await generate_quotes(1, "life", quotes=quotes, config=config))["quotes"][0]["id"]

    result = await update_quote(quote_id, quotes, category="Mornings")
    assert result["category"] == "mornings"

    with pytest.raises(ToolError, match="reserved"):
        await update_quote(quote_id, quotes, category="all")
    assert quotes.get_quote(quote_id).category == "mornings"


@pytest.mark.asyncio
async def test_list_quotes_all_means_no_filter(quotes, config):
    await generate_quotes(2, "success", quotes=quotes, config=config)
    await add_quote("Be kind.", "Someone", "gratitude", quotes=quotes)

    assert (await list_quotes(quotes, category="all"))["total"] == 3


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_get_settings_defaults(quotes):
    result = await get_settings(quotes)
    assert result["voice"] == {
        "voice": "neural-voice-1",
        "speed": 1.0,
        "pitch": 1.0,
        "language": "en-US",
    }
    assert result["music"]["duration"] == 60
    assert result["is_processing"] is False


@pytest.mark.asyncio
async def test_set_voice_settings_partial(quotes):
    result = await set_voice_settings(quotes, voice="neural-voice-5", speed=1.5)

    assert result["voice"]["voice"] == "neural-voice-5"
    assert result["voice"]["speed"] == 1.5
    assert result["voice"]["pitch"] == 1.0
    assert quotes.voice_settings.voice == "neural-voice-5"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "kwargs",
    [
        {"speed": 0.4},
        {"pitch": 2.1},
        {"voice": "robot-9"},
        {"language": "fr-FR"},
    ],
)
async def test_set_voice_settings_rejects(quotes, kwargs):
    with pytest.raises(ToolError):
        await set_voice_settings(quotes, **kwargs)
    assert quotes.voice_settings.speed == 1.0


@pytest.mark.asyncio
async def test_set_music_settings(quotes):
    result = await set_music_settings(quotes, genre="cinematic", duration=300, fade_out=False)

    assert result["music"]["genre"] == "cinematic"
    assert result["music"]["duration"] == 300
    assert result["music"]["fade_in"] is True
    assert result["music"]["fade_out"] is False


@pytest.mark.asyncio
@pytest.mark.parametrize("kwargs", [{"duration": 14}, {"duration": 301}, {"mood": "angry"}])
async def test_set_music_settings_rejects(quotes, kwargs):
    with pytest.raises(ToolError):
        await set_music_settings(quotes, **kwargs)
    assert quotes.music_settings.duration == 60


# ---------------------------------------------------------------------------
# Media
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_generate_voice_overs_empty_selection(quotes, config):
    with pytest.raises(ToolError, match="Please select at least one quote"):
        await generate_voice_overs([], quotes=quotes, config=config)
    assert quotes.is_processing is False


@pytest.mark.asyncio
async def test_generate_voice_overs_empty_selection_keeps_flag(quotes, config):
    quotes.set_processing(True)
    with pytest.raises(ToolError):
        await generate_voice_overs([], quotes=quotes, config=config)
    assert quotes.is_processing is True


@pytest.mark.asyncio
async def test_generate_voice_overs_marks_ready(quotes, config):
    generated = await generate_quotes(3, "all", quotes=quotes, config=config)
    ids = [q["id"] for q in generated["quotes"]][:2]

    result = await generate_voice_overs(ids, quotes=quotes, config=config)

    assert result["generated"] == 2
    assert result["message"] == "Generated 2 voice overs!"
    statuses = [q.status for q in quotes.list_quotes()]
    assert statuses == [QuoteStatus.READY, QuoteStatus.READY, QuoteStatus.DRAFT]
    assert quotes.is_processing is False


@pytest.mark.asyncio
async def test_generate_music_holds_processing_flag(quotes):
    config = StudioConfig(timing=TimingConfig(music_generation=0.05))
    quote_id = quotes.generate_quotes(1, "all")[0].id

    task = asyncio.create_task(generate_music([quote_id], quotes=quotes, config=config))
    await asyncio.sleep(0.01)
    assert quotes.is_processing is True
    assert quotes.get_quote(quote_id).status == QuoteStatus.PROCESSING

    result = await task
    assert result["kind"] == "music"
    assert quotes.is_processing is False
    assert quotes.get_quote(quote_id).status == QuoteStatus.READY


@pytest.mark.asyncio
async def test_generate_unknown_quote(quotes, config):
    with pytest.raises(ToolError, match="Unknown quote"):
        await generate_music(["quote-missing00000"], quotes=quotes, config=config)
    assert quotes.is_processing is False


@pytest.mark.asyncio
async def test_generate_voice_overs_skips_quote_deleted_midway(quotes):
    config = StudioConfig(timing=TimingConfig(voice_over_generation=0.05))
    first, second, third = [q.id for q in quotes.generate_quotes(3, "all")]

    task = asyncio.create_task(
        generate_voice_overs([first, second, third], quotes=quotes, config=config)
    )
    await asyncio.sleep(0.01)
    await delete_quote(second, quotes)

    result = await task

    assert result["generated"] == 2
    assert result["quote_ids"] == [first, third]
    assert result["message"] == "Generated 2 voice overs!"
    assert quotes.get_quote(first).status == QuoteStatus.READY
    assert quotes.get_quote(third).status == QuoteStatus.READY
    assert quotes.get_quote(second) is None
    assert quotes.is_processing is False


@pytest.mark.asyncio
async def test_preview_toggle(quotes):
    player = PreviewPlayer("voice", 5.0)
    first, second = [q.id for q in quotes.generate_quotes(2, "all")]

    started = await preview(first, quotes=quotes, player=player)
    assert started == {"quote_id": first, "playing": True, "auto_stop_seconds": 5.0}

    await preview(second, quotes=quotes, player=player)
    assert player.playing == second

    stopped = await preview(second, quotes=quotes, player=player)
    assert stopped["playing"] is False
    assert player.playing is None


@pytest.mark.asyncio
async def test_preview_unknown_quote(quotes):
    with pytest.raises(ToolError):
        await preview("quote-missing00000", quotes=quotes, player=PreviewPlayer("music", 5.0))


# ---------------------------------------------------------------------------
# Batches
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_create_batch_pending(batches, config):
    result = await create_batch("Monday", "complete", 10, "motivation", store=batches, config=config)

    assert result["status"] == "pending"
    assert result["name"] == "Monday"
    job = await batches.get(result["job_id"])
    assert job.quotes_count == 10
    assert job.category == "motivation"
    assert job.progress == 0


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "args, message",
    [
        (("", "complete", 10, "all"), "batch name"),
        (("   ", "complete", 10, "all"), "batch name"),
        (("X", "slideshow", 10, "all"), "Unknown batch type"),
        (("X", "complete", 0, "all"), "between 1 and 100"),
        (("X", "complete", 10, "gratitude"), "Unknown category"),
    ],
)
async def test_create_batch_validation(batches, config, args, message):
    with pytest.raises(ToolError, match=message):
        await create_batch(*args, store=batches, config=config)
    assert await batches.list_all() == []


@pytest.mark.asyncio
async def test_create_batch_rejects_while_active(batches, config):
    await create_batch("First", "complete", 5, "all", store=batches, config=config)

    with pytest.raises(ToolError, match="still in progress"):
        await create_batch("Second", "complete", 5, "all", store=batches, config=config)
    assert len(await batches.list_all()) == 1


@pytest.mark.asyncio
async def test_create_batch_queue_mode(batches):
    config = StudioConfig(batch=BatchConfig(concurrency="queue"))

    first = await create_batch("First", "complete", 5, "all", store=batches, config=config)
    second = await create_batch("Second", "quotes-only", 5, "all", store=batches, config=config)

    assert first["status"] == second["status"] == "pending"
    assert "one at a time" in second["next_steps"]
    assert len(await batches.list_all()) == 2


@pytest.mark.asyncio
async def test_create_batch_allowed_after_completion(batches, config):
    first = await create_batch("First", "complete", 5, "all", store=batches, config=config)
    await batches.update(first["job_id"], status=BatchStatus.COMPLETED, progress=100)

    second = await create_batch("Second", "complete", 5, "all", store=batches, config=config)
    assert second["job_id"] != first["job_id"]


@pytest.mark.asyncio
async def test_check_batch(batches, config):
    created = await create_batch("Monday", "voice-only", 3, "all", store=batches, config=config)
    job_id = created["job_id"]

    pending = await check_batch(job_id, store=batches)
    assert pending["status"] == "pending"
    assert pending["type"] == "voice-only"
    assert pending["completed_at"] is None

    await batches.update(job_id, status=BatchStatus.PROCESSING, progress=50, current_stage="music")
    running = await check_batch(job_id, store=batches)
    assert running["progress"] == 50
    assert "stage: music" in running["message"]

    await batches.update(job_id, status=BatchStatus.FAILED, error="ConnectionError: down")
    failed = await check_batch(job_id, store=batches)
    assert failed["error"] == "ConnectionError: down"
    assert "ConnectionError" in failed["message"]


@pytest.mark.asyncio
async def test_check_batch_unknown(batches):
    with pytest.raises(ToolError, match="not found"):
        await check_batch("batch-missing00000", store=batches)


@pytest.mark.asyncio
async def test_check_batch_malformed_id(batches):
    with pytest.raises(ToolError, match="Invalid batch ID"):
        await check_batch("../etc", store=batches)


@pytest.mark.asyncio
async def test_list_batches(batches):
    config = StudioConfig(batch=BatchConfig(concurrency="queue"))
    await create_batch("First", "complete", 5, "all", store=batches, config=config)
    await create_batch("Second", "music-only", 7, "all", store=batches, config=config)

    result = await list_batches(store=batches)

    assert result["total"] == 2
    assert {b["name"] for b in result["batches"]} == {"First", "Second"}


# ---------------------------------------------------------------------------
# Dashboard
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_dashboard_counts(quotes, batches, config):
    generated = await generate_quotes(3, "success", quotes=quotes, config=config)
    await update_quote(generated["quotes"][0]["id"], quotes, status="completed")
    await create_batch("Monday", "complete", 10, "motivation", store=batches, config=config)

    result = await get_dashboard(quotes, batches)

    assert result["total_quotes"] == 3
    assert result["quotes_by_status"] == {"draft": 2, "processing": 0, "ready": 0, "completed": 1}
    assert result["quotes_by_category"] == {"success": 3}
    assert result["total_batches"] == 1
    assert result["batches_by_status"]["pending"] == 1
    assert result["is_processing"] is False
