# quoteflow/config/__init__.py
"""Configuration system for quoteflow."""

from .loader import get_config_path, load_config
from .schema import (
    BatchConfig,
    DefaultsConfig,
    GenerationConfig,
    StudioConfig,
    TimingConfig,
)

__all__ = [
    "StudioConfig",
    "TimingConfig",
    "GenerationConfig",
    "BatchConfig",
    "DefaultsConfig",
    "load_config",
    "get_config_path",
]
