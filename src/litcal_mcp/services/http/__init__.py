"""HTTP services for the liturgical calendar tools."""

from .server import app, call_tool, list_tools, run_local_server

__all__ = [
    "app",
    "call_tool",
    "list_tools",
    "run_local_server",
]
