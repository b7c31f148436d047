"""
Account tool.
"""

from __future__ import annotations

from typing import Any

from mcp_kit.tools.base import BaseTool
from mcp_kit.tools.registry import ToolRegistry


@ToolRegistry.register
class GetAccountTool(BaseTool):
    name = "kit_get_account"
    description = "Get information about the Kit.com account"

    async def run(self, params: dict[str, Any]) -> Any:
        return await self.context.client.get_account()
