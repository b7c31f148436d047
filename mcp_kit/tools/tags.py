"""
Tag tools: list, get, create, rename, delete and list tagged subscribers.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from mcp_kit.tools.base import BaseTool, PageArgs
from mcp_kit.tools.registry import ToolRegistry


class TagIdArgs(BaseModel):
    tag_id: str = Field(description="The tag ID")


class CreateTagArgs(BaseModel):
    name: str = Field(description="The name for the new tag")


class UpdateTagArgs(BaseModel):
    tag_id: str = Field(description="The tag ID to update")
    name: str = Field(description="The new name for the tag")


class ListTagSubscribersArgs(PageArgs):
    tag_id: str = Field(description="The tag ID")


@ToolRegistry.register
class ListTagsTool(BaseTool):
    name = "kit_list_tags"
    description = "List all tags in Kit.com"
    args_model = PageArgs

    async def run(self, params: dict[str, Any]) -> Any:
        return await self.context.client.list_tags(params)


@ToolRegistry.register
class GetTagTool(BaseTool):
    name = "kit_get_tag"
    description = "Get a specific tag by ID"
    args_model = TagIdArgs

    async def run(self, params: dict[str, Any]) -> Any:
        return await self.context.client.get_tag(params["tag_id"])


@ToolRegistry.register
class CreateTagTool(BaseTool):
    name = "kit_create_tag"
    description = "Create a new tag in Kit.com"
    args_model = CreateTagArgs

    async def run(self, params: dict[str, Any]) -> Any:
        return await self.context.client.create_tag(params["name"])


@ToolRegistry.register
class UpdateTagTool(BaseTool):
    name = "kit_update_tag"
    description = "Update an existing tag's name"
    args_model = UpdateTagArgs

    async def run(self, params: dict[str, Any]) -> Any:
        return await self.context.client.update_tag(params["tag_id"], params["name"])


@ToolRegistry.register
class DeleteTagTool(BaseTool):
    name = "kit_delete_tag"
    description = "Delete a tag from Kit.com"
    args_model = TagIdArgs

    async def run(self, params: dict[str, Any]) -> Any:
        await self.context.client.delete_tag(params["tag_id"])
        return {"success": True, "message": "Tag deleted"}


@ToolRegistry.register
class ListTagSubscribersTool(BaseTool):
    name = "kit_list_tag_subscribers"
    description = "List all subscribers with a specific tag"
    args_model = ListTagSubscribersArgs

    async def run(self, params: dict[str, Any]) -> Any:
        query = dict(params)
        tag_id = query.pop("tag_id")
        return await self.context.client.list_tag_subscribers(tag_id, query)
