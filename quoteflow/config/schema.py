# quoteflow/config/schema.py
"""
Pydantic configuration models for quoteflow.

All models use extra="ignore" to allow unknown YAML keys without crashing.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class TimingConfig(BaseModel):
    """Durations (seconds) of the simulated work."""

    model_config = ConfigDict(extra="ignore")

    quote_generation: float = Field(
        default=2.0, ge=0.0, description="Batch stage 1: generating quotes"
    )
    narration: float = Field(
        default=3.0, ge=0.0, description="Batch stage 2: creating voice overs"
    )
    music: float = Field(
        default=2.5, ge=0.0, description="Batch stage 3: adding background music"
    )
    file_organization: float = Field(
        default=1.5, ge=0.0, description="Batch stage 4: organizing files"
    )
    voice_over_generation: float = Field(
        default=3.0, ge=0.0, description="Standalone voice over generation"
    )
    music_generation: float = Field(
        default=4.0, ge=0.0, description="Standalone background music generation"
    )
    voice_preview: float = Field(
        default=3.0, ge=0.0, description="Narration preview playback length"
    )
    music_preview: float = Field(
        default=5.0, ge=0.0, description="Music preview playback length"
    )


class GenerationConfig(BaseModel):
    """Quote generation behaviour."""

    model_config = ConfigDict(extra="ignore")

    empty_category: Literal["fail", "fallback"] = Field(
        default="fail",
        description="When a category has no templates: fail, or sample the full corpus",
    )
    max_count: int = Field(
        default=100, ge=1, le=1000, description="Largest count a single request may ask for"
    )


class BatchConfig(BaseModel):
    """Batch submission policy."""

    model_config = ConfigDict(extra="ignore")

    concurrency: Literal["reject", "queue"] = Field(
        default="reject",
        description="Reject submissions while a batch is active, or queue them FIFO",
    )
    poll_interval: float = Field(
        default=0.5, gt=0.0, description="Seconds between worker queue checks"
    )


class VoiceDefaults(BaseModel):
    """Initial narration settings."""

    model_config = ConfigDict(extra="ignore")

    voice: str = Field(default="neural-voice-1")
    speed: float = Field(default=1.0, ge=0.5, le=2.0)
    pitch: float = Field(default=1.0, ge=0.5, le=2.0)
    language: str = Field(default="en-US")


class MusicDefaults(BaseModel):
    """Initial background music settings."""

    model_config = ConfigDict(extra="ignore")

    genre: str = Field(default="ambient")
    mood: str = Field(default="inspirational")
    duration: int = Field(default=60, ge=15, le=300)
    fade_in: bool = Field(default=True)
    fade_out: bool = Field(default=True)


class DefaultsConfig(BaseModel):
    """Session defaults."""

    model_config = ConfigDict(extra="ignore")

    voice: VoiceDefaults = Field(default_factory=VoiceDefaults)
    music: MusicDefaults = Field(default_factory=MusicDefaults)


class StudioConfig(BaseModel):
    """Root configuration for quoteflow."""

    model_config = ConfigDict(extra="ignore")

    timing: TimingConfig = Field(default_factory=TimingConfig)
    generation: GenerationConfig = Field(default_factory=GenerationConfig)
    batch: BatchConfig = Field(default_factory=BatchConfig)
    defaults: DefaultsConfig = Field(default_factory=DefaultsConfig)
