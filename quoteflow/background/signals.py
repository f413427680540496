# quoteflow/background/signals.py
"""
Graceful shutdown signal handling for Windows and Unix.

Registers SIGINT/SIGTERM handlers that stop the batch worker.
"""

import asyncio
import logging
import signal

from quoteflow.background.worker import BatchWorker

logger = logging.getLogger(__name__)


def setup_signal_handlers(worker: BatchWorker) -> None:
    """
    Set up signal handlers for graceful shutdown.

    On Windows (ProactorEventLoop), add_signal_handler is not supported,
    so we fall back to signal.signal().

    Args:
        worker: BatchWorker to stop on shutdown (marks running batch FAILED)
    """
    loop = asyncio.get_running_loop()

    async def _shutdown(sig_name: str) -> None:
        logger.info(f"Received {sig_name}, shutting down gracefully...")
        if worker.running:
            await worker.stop()
        logger.info("Shutdown complete")

    def _signal_callback(sig_num, frame) -> None:
        sig_name = signal.Signals(sig_num).name
        logger.info(f"Signal handler triggered: {sig_name}")
        loop.call_soon_threadsafe(lambda: loop.create_task(_shutdown(sig_name)))

    try:
        loop.add_signal_handler(
            signal.SIGINT,
            lambda: asyncio.create_task(_shutdown("SIGINT")),
        )
        loop.add_signal_handler(
            signal.SIGTERM,
            lambda: asyncio.create_task(_shutdown("SIGTERM")),
        )
        logger.info("Signal handlers registered (loop-based)")

    except NotImplementedError:
        signal.signal(signal.SIGINT, _signal_callback)
        signal.signal(signal.SIGTERM, _signal_callback)
        logger.info("Signal handlers registered (fallback for Windows)")
