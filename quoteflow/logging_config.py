# quoteflow/logging_config.py
"""
Logging setup for the two ways QuoteFlow runs.

The MCP server speaks JSON-RPC on stdout, so its logs go to stderr as JSON
lines. The CLI prints quotes and video paths on stdout and keeps its own
logs on stderr in a short plain format, quiet unless --verbose.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

QUIET_LOGGERS = ("uvicorn", "fastmcp")


class JsonFormatter(logging.Formatter):
    """One JSON object per record: ts, level, logger, msg (and exc if any)."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            entry["exc"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def configure_logging(json_output: bool = True, level: int = logging.INFO) -> None:
    """
    Route all QuoteFlow and fastmcp logging to a single stderr handler.

    Call before the server module builds its FastMCP instance. Existing root
    handlers are replaced.

    Args:
        json_output: JSON lines (server) or plain "LEVEL name: message" (CLI)
        level: Root log level
    """
    handler = logging.StreamHandler(sys.stderr)
    if json_output:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    for name in QUIET_LOGGERS:
        library_logger = logging.getLogger(name)
        library_logger.handlers.clear()
        library_logger.addHandler(handler)
        library_logger.setLevel(level)
        library_logger.propagate = False
