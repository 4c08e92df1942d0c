"""MCP transport for the liturgical calendar tools."""

from .server import build_mcp_server, run_mcp_server

__all__ = ["build_mcp_server", "run_mcp_server"]
