# quoteflow/models/__init__.py
"""
Data models for quoteflow.

Provides Pydantic response models, quote content models, the quote store and
internal batch tracking.
"""

from quoteflow.models.jobs import (
    BatchJob,
    BatchStatus,
    BatchType,
    InMemoryBatchStore,
    generate_batch_id,
)
from quoteflow.models.quote_store import QuoteStore
from quoteflow.models.quotes import (
    MediaAsset,
    MusicSettings,
    Quote,
    QuoteStatus,
    VoiceSettings,
    generate_quote_id,
)
from quoteflow.models.responses import (
    BatchStatusResponse,
    BatchSummary,
    CreateBatchResponse,
    DashboardResponse,
    ListBatchesResponse,
    MediaGenerationResponse,
    PreviewResponse,
    QuoteListResponse,
    QuoteResponse,
    SettingsResponse,
)

__all__ = [
    # Response models
    "QuoteResponse",
    "QuoteListResponse",
    "SettingsResponse",
    "MediaGenerationResponse",
    "PreviewResponse",
    "CreateBatchResponse",
    "BatchStatusResponse",
    "BatchSummary",
    "ListBatchesResponse",
    "DashboardResponse",
    # Content
    "Quote",
    "QuoteStatus",
    "VoiceSettings",
    "MusicSettings",
    "MediaAsset",
    "QuoteStore",
    "generate_quote_id",
    # Batch tracking
    "BatchJob",
    "BatchStatus",
    "BatchType",
    "InMemoryBatchStore",
    "generate_batch_id",
]
