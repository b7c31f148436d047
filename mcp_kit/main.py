"""
描述: MCP Kit HTTP 服务主入口
主要功能:
    - FastAPI 应用初始化
    - 路由注册 (工具列表 / 工具调用)
    - 日志与配置加载
"""

from __future__ import annotations

import logging

from fastapi import FastAPI

from mcp_kit.config import get_settings
from mcp_kit.server.http import router as http_router
import mcp_kit.tools  # noqa: F401
from mcp_kit.tools.registry import ToolRegistry
from mcp_kit.utils.logger import setup_logging


def create_app() -> FastAPI:
    """创建 FastAPI 应用, 缺少 API Key 时拒绝启动"""
    settings = get_settings()
    setup_logging(settings.logging)
    logger = logging.getLogger(__name__)

    if not settings.kit.api_key:
        raise RuntimeError("KIT_API_KEY environment variable is required")

    unknown = [name for name in settings.tools.enabled if ToolRegistry.get(name) is None]
    if unknown:
        logger.warning("Enabled tools not registered: %s", ", ".join(unknown))

    logger.info(
        "MCP server config loaded",
        extra={
            "api_base": settings.kit.api_base,
            "tools_enabled_count": len(settings.tools.enabled) or len(ToolRegistry.names()),
        },
    )

    app = FastAPI(title="MCP Kit Server", version="1.0.0")
    app.include_router(http_router)
    return app

