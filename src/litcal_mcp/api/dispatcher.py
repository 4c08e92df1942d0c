from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from .registry import get_api_function
from .serializers import serialize_error

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToolResult:
    text: str
    is_error: bool = False

    def as_content(self) -> Dict[str, Any]:
        return {"content": [{"type": "text", "text": self.text}], "isError": self.is_error}


def unknown_tool_result(name: str) -> ToolResult:
    logger.warning("Unknown tool requested: %s", name)
    return ToolResult(serialize_error(f"Unknown tool: {name}"), is_error=True)


def dispatch_tool(name: str, arguments: Optional[Mapping[str, Any]] = None) -> ToolResult:
    """Run the tool ``name`` and wrap its JSON text in a :class:`ToolResult`.

    Unknown tools and unexpected failures become error payloads with
    ``is_error`` set; nothing is raised to the caller.
    """

    try:
        api_function = get_api_function(name)
    except KeyError:
        return unknown_tool_result(name)

    known = api_function.signature.parameters
    kwargs = {key: value for key, value in (arguments or {}).items() if key in known}
    ignored = sorted(set(arguments or {}) - set(kwargs))
    if ignored:
        logger.debug("Ignoring unknown arguments for %s: %s", name, ", ".join(ignored))

    try:
        text = api_function.func(**kwargs)
    except Exception as exc:  # noqa: BLE001
        logger.exception("Tool %s failed", name)
        return ToolResult(serialize_error(f"Error executing {name}: {exc}"), is_error=True)
    return ToolResult(text)
