from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ...api import ApiFunction, dispatch_tool, get_api_function, get_api_functions


logger = logging.getLogger(__name__)

app = FastAPI(title="Liturgical Calendar Local API", version="1.0.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class ToolCallRequest(BaseModel):
    arguments: Dict[str, Any] = Field(default_factory=dict)


def _serialize_api_function(api_function: ApiFunction) -> dict:
    return {
        "name": api_function.name,
        "description": api_function.description,
        "category": api_function.category,
        "tags": list(api_function.tags),
        "inputSchema": api_function.parameter_schema,
    }


@app.get("/api/tools")
def list_tools() -> JSONResponse:
    tools = [_serialize_api_function(func) for func in get_api_functions()]
    return JSONResponse({"tools": tools})


@app.post("/api/tools/{tool_name}")
def call_tool(tool_name: str, request: ToolCallRequest) -> JSONResponse:
    try:
        get_api_function(tool_name)
    except KeyError as exc:
        logger.warning("Tool not found: %s", tool_name)
        raise HTTPException(status_code=404, detail=f"Unknown tool: {tool_name}") from exc
    result = dispatch_tool(tool_name, request.arguments)
    logger.debug("Tool %s executed (error=%s)", tool_name, result.is_error)
    return JSONResponse(result.as_content())


def run_local_server(host: str = "127.0.0.1", port: int = 8000) -> None:
    import asyncio
    from hypercorn.asyncio import serve
    from hypercorn.config import Config

    config = Config()
    config.bind = [f"{host}:{port}"]
    logger.info("Liturgical Calendar API listening on http://%s:%s", host, port)
    asyncio.run(serve(app, config))
