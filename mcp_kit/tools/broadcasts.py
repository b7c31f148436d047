"""
Broadcast (email campaign) tools.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from mcp_kit.tools.base import BaseTool, PageArgs
from mcp_kit.tools.registry import ToolRegistry


class BroadcastIdArgs(BaseModel):
    broadcast_id: str = Field(description="The broadcast ID")


class BroadcastFields(BaseModel):
    content: str | None = Field(default=None, description="The email content (HTML supported)")
    description: str | None = Field(
        default=None, description="Internal description for the broadcast"
    )
    public: bool | None = Field(default=None, description="Whether the broadcast should be public")
    published_at: str | None = Field(
        default=None, description="ISO date the broadcast is published to the web"
    )
    send_at: str | None = Field(default=None, description="ISO date when to send the broadcast")
    email_template_id: str | None = Field(default=None, description="Email template ID to use")
    thumbnail_alt: str | None = Field(default=None, description="Alt text for the thumbnail image")
    thumbnail_url: str | None = Field(default=None, description="Thumbnail image URL")
    preview_text: str | None = Field(
        default=None, description="Preview text shown in email clients"
    )


class CreateBroadcastArgs(BroadcastFields):
    subject: str = Field(description="The email subject line")


class UpdateBroadcastArgs(BroadcastFields):
    broadcast_id: str = Field(description="The broadcast ID to update")
    subject: str | None = Field(default=None, description="New subject line")


@ToolRegistry.register
class ListBroadcastsTool(BaseTool):
    name = "kit_list_broadcasts"
    description = "List all broadcasts (email campaigns) in Kit.com"
    args_model = PageArgs

    async def run(self, params: dict[str, Any]) -> Any:
        return await self.context.client.list_broadcasts(params)


@ToolRegistry.register
class GetBroadcastTool(BaseTool):
    name = "kit_get_broadcast"
    description = "Get a specific broadcast by ID"
    args_model = BroadcastIdArgs

    async def run(self, params: dict[str, Any]) -> Any:
        return await self.context.client.get_broadcast(params["broadcast_id"])


@ToolRegistry.register
class CreateBroadcastTool(BaseTool):
    name = "kit_create_broadcast"
    description = "Create a new broadcast (email campaign) in Kit.com"
    args_model = CreateBroadcastArgs

    async def run(self, params: dict[str, Any]) -> Any:
        return await self.context.client.create_broadcast(params)


@ToolRegistry.register
class UpdateBroadcastTool(BaseTool):
    name = "kit_update_broadcast"
    description = "Update an existing broadcast"
    args_model = UpdateBroadcastArgs

    async def run(self, params: dict[str, Any]) -> Any:
        data = dict(params)
        broadcast_id = data.pop("broadcast_id")
        return await self.context.client.update_broadcast(broadcast_id, data)


@ToolRegistry.register
class DeleteBroadcastTool(BaseTool):
    name = "kit_delete_broadcast"
    description = "Delete a broadcast from Kit.com"
    args_model = BroadcastIdArgs

    async def run(self, params: dict[str, Any]) -> Any:
        await self.context.client.delete_broadcast(params["broadcast_id"])
        return {"success": True, "message": "Broadcast deleted"}
