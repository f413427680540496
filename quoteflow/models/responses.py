# quoteflow/models/responses.py
"""
Pydantic response models for MCP tool outputs.

All tools return structured responses using these models for consistency.
"""

from pydantic import BaseModel, Field

from quoteflow.models.jobs import BatchJob
from quoteflow.models.quotes import MusicSettings, Quote, VoiceSettings


class QuoteResponse(BaseModel):
    """A single quote as shown to the user."""

    id: str = Field(description="Quote identifier")
    text: str = Field(description="Quote text")
    author: str = Field(description="Quote author")
    category: str = Field(description="Category tag")
    status: str = Field(description="Lifecycle status (draft/processing/ready/completed)")
    created_at: str = Field(description="Creation timestamp (ISO format)")

    @classmethod
    def from_quote(cls, quote: Quote) -> "QuoteResponse":
        return cls(
            id=quote.id,
            text=quote.text,
            author=quote.author,
            category=quote.category,
            status=quote.status.value,
            created_at=quote.created_at.isoformat(),
        )


class QuoteListResponse(BaseModel):
    """Response from generate_quotes and list_quotes."""

    quotes: list[QuoteResponse] = Field(default_factory=list, description="Quotes")
    total: int = Field(description="Number of quotes returned")


class VoiceSettingsModel(BaseModel):
    """Narration settings."""

    voice: str = Field(description="Voice identifier")
    speed: float = Field(description="Speaking rate multiplier")
    pitch: float = Field(description="Pitch multiplier")
    language: str = Field(description="Language tag (e.g. en-US)")

    @classmethod
    def from_settings(cls, settings: VoiceSettings) -> "VoiceSettingsModel":
        return cls(
            voice=settings.voice,
            speed=settings.speed,
            pitch=settings.pitch,
            language=settings.language,
        )


class MusicSettingsModel(BaseModel):
    """Background music settings."""

    genre: str = Field(description="Music genre")
    mood: str = Field(description="Music mood")
    duration: int = Field(description="Track duration in seconds")
    fade_in: bool = Field(description="Fade the track in")
    fade_out: bool = Field(description="Fade the track out")

    @classmethod
    def from_settings(cls, settings: MusicSettings) -> "MusicSettingsModel":
        return cls(
            genre=settings.genre,
            mood=settings.mood,
            duration=settings.duration,
            fade_in=settings.fade_in,
            fade_out=settings.fade_out,
        )


class SettingsResponse(BaseModel):
    """Response from get_settings and the settings setters."""

    voice: VoiceSettingsModel
    music: MusicSettingsModel
    is_processing: bool = Field(description="Whether any operation is in progress")


class MediaGenerationResponse(BaseModel):
    """Response from generate_voice_overs and generate_music."""

    kind: str = Field(description="What was generated (voice_over/music)")
    generated: int = Field(description="Number of quotes processed")
    quote_ids: list[str] = Field(default_factory=list, description="Processed quote ids")
    message: str = Field(description="Human-readable confirmation message")


class PreviewResponse(BaseModel):
    """Response from preview_voice and preview_music."""

    quote_id: str = Field(description="Quote whose preview was toggled")
    playing: bool = Field(description="Whether the preview is now playing")
    auto_stop_seconds: float | None = Field(
        default=None, description="Seconds until playback resets on its own"
    )


class CreateBatchResponse(BaseModel):
    """Response from create_batch."""

    job_id: str = Field(description="Unique batch identifier for tracking")
    name: str = Field(description="Batch name")
    status: str = Field(description="Batch status (always 'pending' for new batches)")
    next_steps: str = Field(
        default="Use check_batch with job_id to monitor progress",
        description="Instructions for monitoring batch progress",
    )


class BatchStatusResponse(BaseModel):
    """Response from check_batch."""

    job_id: str = Field(description="Batch identifier")
    name: str = Field(description="Batch name")
    type: str = Field(description="Batch type (complete/quotes-only/voice-only/music-only)")
    status: str = Field(description="Batch status (pending/processing/completed/failed)")
    progress: int = Field(ge=0, le=100, description="Completion progress in percent")
    quotes_count: int = Field(description="Number of quotes the batch produces")
    category: str = Field(description="Quote category for the batch")
    current_stage: str | None = Field(default=None, description="Stage currently running")
    created_at: str = Field(description="Creation timestamp (ISO format)")
    completed_at: str | None = Field(default=None, description="Completion timestamp")
    error: str | None = Field(default=None, description="Error message if the batch failed")
    quote_ids: list[str] = Field(default_factory=list, description="Quotes created by the batch")
    message: str | None = Field(default=None, description="Human-readable status message")

    @classmethod
    def from_job(cls, job: BatchJob, message: str | None = None) -> "BatchStatusResponse":
        return cls(
            job_id=job.job_id,
            name=job.name,
            type=job.batch_type.value,
            status=job.status.value,
            progress=job.progress,
            quotes_count=job.quotes_count,
            category=job.category,
            current_stage=job.current_stage,
            created_at=job.created_at.isoformat(),
            completed_at=job.completed_at.isoformat() if job.completed_at else None,
            error=job.error,
            quote_ids=list(job.quote_ids),
            message=message,
        )


class BatchSummary(BaseModel):
    """Summary information for a single batch (used in list_batches)."""

    job_id: str = Field(description="Batch identifier")
    name: str = Field(description="Batch name")
    type: str = Field(description="Batch type")
    status: str = Field(description="Current batch status")
    progress: int = Field(ge=0, le=100, description="Completion progress in percent")
    quotes_count: int = Field(description="Number of quotes the batch produces")
    created_at: str = Field(description="Creation timestamp (ISO format)")


class ListBatchesResponse(BaseModel):
    """Response from list_batches."""

    batches: list[BatchSummary] = Field(default_factory=list, description="All batches")
    total: int = Field(description="Total number of batches")


class DashboardResponse(BaseModel):
    """Response from get_dashboard."""

    total_quotes: int = Field(description="Quotes in the session")
    quotes_by_status: dict[str, int] = Field(default_factory=dict)
    quotes_by_category: dict[str, int] = Field(default_factory=dict)
    total_batches: int = Field(description="Batches submitted in the session")
    batches_by_status: dict[str, int] = Field(default_factory=dict)
    is_processing: bool = Field(description="Whether any operation is in progress")
