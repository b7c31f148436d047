"""
Custom field tool.
"""

from __future__ import annotations

from typing import Any

from mcp_kit.tools.base import BaseTool
from mcp_kit.tools.registry import ToolRegistry


@ToolRegistry.register
class ListCustomFieldsTool(BaseTool):
    name = "kit_list_custom_fields"
    description = "List all custom fields defined in Kit.com"

    async def run(self, params: dict[str, Any]) -> Any:
        return await self.context.client.list_custom_fields()
