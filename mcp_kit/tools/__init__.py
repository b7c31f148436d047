"""
描述: MCP 工具注册入口。
主要功能:
    - 导入并注册 account、subscribers、tags、sequences、broadcasts、forms、custom_fields、webhooks 工具
    - 在服务启动时完成工具发现
"""

from mcp_kit.tools import (  # noqa: F401
    account,
    broadcasts,
    custom_fields,
    forms,
    sequences,
    subscribers,
    tags,
    webhooks,
)
