"""
HTTP API for MCP tools.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Response

from mcp_kit.config import get_settings
from mcp_kit.kit.client import KitClient
from mcp_kit.server.schema import ToolRequest, ToolResult
from mcp_kit.tools.base import ToolContext
from mcp_kit.tools.dispatch import invoke
from mcp_kit.tools.registry import ToolRegistry


router = APIRouter()


@router.get("/")
async def root() -> dict[str, str]:
    return {"status": "ok", "service": "mcp-kit"}


@router.get("/favicon.ico")
async def favicon() -> Response:
    return Response(status_code=204)


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/mcp/tools")
async def list_tools() -> dict[str, Any]:
    settings = get_settings()
    return {"tools": ToolRegistry.list_tools(settings.tools.enabled)}


@router.post(
    "/mcp/tools/{tool_name}",
    response_model=ToolResult,
    response_model_exclude_none=True,
)
async def call_tool(tool_name: str, request: ToolRequest) -> ToolResult:
    settings = get_settings()
    context = ToolContext(settings=settings, client=KitClient(settings))
    return await invoke(tool_name, request.params, context)
