# quoteflow/__main__.py
"""
Entry point for the quoteflow MCP server.

CRITICAL: Server imports configure_logging() first to prevent stdout pollution.

FastMCP doesn't have built-in lifecycle hooks, so the studio lifecycle is
started here before serving.
"""

import asyncio
import logging

# Import server (which configures logging before anything else)
from quoteflow.server import initialize_lifecycle, mcp

logger = logging.getLogger(__name__)


async def main() -> None:
    """Initialize lifecycle (stores + worker + signals), then serve on stdio."""
    lifecycle = await initialize_lifecycle()

    logger.info("Starting MCP server on stdio transport")
    try:
        await mcp.run_stdio_async()
    finally:
        await lifecycle.shutdown()


if __name__ == "__main__":
    asyncio.run(main())
