# quoteflow/tools/__init__.py
"""Tool implementations called by the MCP server and the CLI."""
