from __future__ import annotations

import functools
import logging
from typing import Any, Callable

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.server.middleware import Middleware, MiddlewareContext
from fastmcp.tools import Tool

from ...api import ApiFunction, dispatch_tool, get_api_function, get_api_functions, unknown_tool_result

INSTRUCTIONS = (
    "Liturgical calendar tools backed by the Liturgical Calendar API. "
    "Query the General Roman Calendar or a national or diocesan calendar for a year, "
    "optionally filtered by month and celebration grade, list the available calendars, "
    "or list every event definition a calendar can contain."
)

logger = logging.getLogger(__name__)


class UnknownToolMiddleware(Middleware):
    """Answer calls to unregistered tools with the JSON error payload."""

    async def on_call_tool(self, context: MiddlewareContext, call_next: Callable[..., Any]) -> Any:
        name = context.message.name
        try:
            get_api_function(name)
        except KeyError:
            raise ToolError(unknown_tool_result(name).text) from None
        return await call_next(context)


def _dispatching(api_function: ApiFunction) -> Callable[..., str]:
    signature = api_function.signature

    @functools.wraps(api_function.func)
    def run(*args: Any, **kwargs: Any) -> str:
        arguments = signature.bind_partial(*args, **kwargs).arguments
        result = dispatch_tool(api_function.name, arguments)
        if result.is_error:
            # Raised so the client sees isError with the JSON text unchanged.
            raise ToolError(result.text)
        return result.text

    # FastMCP reads the schema from the signature and resolved annotations.
    run.__signature__ = signature
    run.__annotations__ = {name: param.annotation for name, param in signature.parameters.items()}
    run.__annotations__["return"] = str
    return run


def build_mcp_tool(api_function: ApiFunction) -> Tool:
    tool = Tool.from_function(
        _dispatching(api_function),
        name=api_function.name,
        description=api_function.description,
        tags=set(api_function.tags),
    )
    if api_function.required:
        required = list(tool.parameters.get("required", []))
        required.extend(name for name in api_function.required if name not in required)
        tool.parameters["required"] = required
    return tool


def build_mcp_server() -> FastMCP:
    server = FastMCP(name="liturgical-calendar-mcp", instructions=INSTRUCTIONS)
    server.add_middleware(UnknownToolMiddleware())
    # Register every API function as an MCP tool.
    for api_function in get_api_functions():
        logger.debug("Registering MCP tool: %s", api_function.name)
        server.add_tool(build_mcp_tool(api_function))
    return server


def run_mcp_server(transport: str = "stdio", host: str = "127.0.0.1", port: int = 8765) -> None:
    server = build_mcp_server()
    if transport == "stdio":
        logger.info("Liturgical Calendar MCP server running on stdio")
        server.run(transport="stdio")
    else:
        logger.info("Liturgical Calendar MCP server listening on http://%s:%s", host, port)
        server.run(transport="http", host=host, port=port)
