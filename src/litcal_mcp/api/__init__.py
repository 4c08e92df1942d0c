"""Public tool surface for MCP and the local HTTP API."""

from __future__ import annotations

from .dispatcher import ToolResult, dispatch_tool, unknown_tool_result
from .registry import ApiFunction, call_api, get_api_function, get_api_functions, register_api
from .state import api_state

# Import endpoints so decorators run at module import time.
from . import endpoints  # noqa: F401

__all__ = [
    "ApiFunction",
    "ToolResult",
    "api_state",
    "call_api",
    "dispatch_tool",
    "get_api_function",
    "get_api_functions",
    "register_api",
    "unknown_tool_result",
]
