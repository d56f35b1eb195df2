"""Allow running the MCP server as a module.

Usage:
    python -m fte_summary.mcp        # starts the MCP server in stdio mode
    uv run python -m fte_summary.mcp
"""

from fte_summary.mcp.server import mcp

if __name__ == "__main__":
    mcp.run()
