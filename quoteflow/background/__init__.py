# quoteflow/background/__init__.py
"""
Background batch processing system.

Exports:
    - BatchWorker: Sequential batch processor
    - setup_signal_handlers: Graceful shutdown signal handling
    - StudioLifecycle: Session ownership and shutdown coordination
"""

from quoteflow.background.lifecycle import StudioLifecycle, create_quote_store
from quoteflow.background.signals import setup_signal_handlers
from quoteflow.background.worker import BatchWorker

__all__ = ["BatchWorker", "setup_signal_handlers", "StudioLifecycle", "create_quote_store"]
