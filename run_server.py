"""
描述: MCP Kit HTTP 服务启动脚本
主要功能:
    - 配置 asyncio 策略 (Windows)
    - 使用 uvicorn 启动 ASGI 服务
    - 默认监听 8081 端口 (MCP_HOST / MCP_PORT 可覆盖)
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

# Windows 兼容性：在任何 asyncio 操作前设置策略
if sys.platform == "win32":
    asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())

# 添加项目路径
BASE_DIR = Path(__file__).resolve().parent
sys.path.insert(0, str(BASE_DIR))

from dotenv import load_dotenv

load_dotenv(BASE_DIR / ".env")

import uvicorn

from mcp_kit.config import get_settings


if __name__ == "__main__":
    server_settings = get_settings().server
    print(f"Starting MCP Kit server on http://{server_settings.host}:{server_settings.port}")
    print("Press Ctrl+C to stop")
    uvicorn.run(
        "mcp_kit.main:create_app",
        factory=True,
        host=server_settings.host,
        port=server_settings.port,
        log_level="info",
    )
