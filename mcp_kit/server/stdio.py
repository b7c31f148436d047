"""
描述: MCP stdio 服务
主要功能:
    - 基于 mcp SDK 低层 Server 暴露 tools/list 与 tools/call
    - 将统一结果信封转换为 CallToolResult
    - 进程入口 (mcp-kit 命令)
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import anyio
from dotenv import load_dotenv
from mcp import types
from mcp.server import Server
from mcp.server.stdio import stdio_server

from mcp_kit.config import Settings, get_settings
from mcp_kit.kit.client import KitClient
from mcp_kit.server.schema import ToolResult
import mcp_kit.tools  # noqa: F401
from mcp_kit.tools.base import ToolContext
from mcp_kit.tools.dispatch import invoke
from mcp_kit.tools.registry import ToolRegistry
from mcp_kit.utils.logger import setup_logging


SERVER_NAME = "mcp-kit"
SERVER_VERSION = "1.0.0"

logger = logging.getLogger(__name__)


# region 协议转换
def list_tool_definitions(settings: Settings) -> list[types.Tool]:
    """已启用工具的 MCP 定义"""
    return [
        types.Tool(
            name=meta["name"],
            description=meta["description"],
            inputSchema=meta["input_schema"],
        )
        for meta in ToolRegistry.list_tools(settings.tools.enabled)
    ]


def to_call_tool_result(result: ToolResult) -> types.CallToolResult:
    # CallToolResult.isError 缺省为 False, 成功时序列化为 false 而非省略
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=block.text) for block in result.content],
        isError=bool(result.isError),
    )
# endregion


# region MCP Server
def build_server(settings: Settings, client: KitClient) -> Server:
    """
    构建 MCP Server

    参数:
        settings: 全局配置对象
        client: 共享的 Kit 客户端 (只读, 可并发使用)
    """
    server: Server = Server(SERVER_NAME, version=SERVER_VERSION)
    context = ToolContext(settings=settings, client=client)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return list_tool_definitions(settings)

    # 参数校验统一交给工具的 pydantic 模型, 保证错误文本格式一致
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any] | None) -> types.CallToolResult:
        result = await invoke(name, arguments, context)
        return to_call_tool_result(result)

    return server


async def serve(settings: Settings) -> None:
    server = build_server(settings, KitClient(settings))
    initialization_options = server.create_initialization_options()
    logger.info("Kit MCP server started", extra={"api_base": settings.kit.api_base})
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, initialization_options)
# endregion


def main() -> None:
    load_dotenv()
    settings = get_settings()
    setup_logging(settings.logging)
    if not settings.kit.api_key:
        logger.error("KIT_API_KEY environment variable is required")
        sys.exit(1)
    anyio.run(serve, settings)


if __name__ == "__main__":
    main()
