# quoteflow/config/loader.py
"""
Studio config.yaml loading.

The file lives in the per-user config directory (platformdirs). A first run
writes the defaults there so timings, concurrency policy and default voice
and music settings can be edited by hand.
"""

import logging
from pathlib import Path

import yaml
from platformdirs import user_config_path

from .schema import StudioConfig

logger = logging.getLogger(__name__)


def get_config_path() -> Path:
    """Location of the studio's config.yaml (directory is created if missing)."""
    return user_config_path("quoteflow", ensure_exists=True) / "config.yaml"


def _write_defaults(config_path: Path) -> StudioConfig:
    config = StudioConfig()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with config_path.open("w") as f:
        yaml.safe_dump(config.model_dump(mode="json"), f, default_flow_style=False, sort_keys=False)
    logger.info(f"Wrote default studio config to {config_path}")
    return config


def load_config(config_path: Path | None = None) -> StudioConfig:
    """
    Load the studio config.

    Args:
        config_path: Explicit config file (defaults to the user config dir)

    Returns:
        Validated StudioConfig. An empty file yields the defaults.

    Raises:
        ValueError: If the file's top level is not a mapping
        pydantic.ValidationError: If a value is out of range
    """
    config_path = config_path or get_config_path()
    if not config_path.exists():
        return _write_defaults(config_path)

    with config_path.open("r") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"{config_path} must contain a YAML mapping, got {type(data).__name__}")

    config = StudioConfig.model_validate(data)
    logger.info(
        f"Loaded studio config from {config_path} "
        f"(concurrency={config.batch.concurrency}, empty_category={config.generation.empty_category})"
    )
    return config
