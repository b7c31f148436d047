"""
描述: 订阅者 (Subscriber) 工具集
主要功能:
    - 列表 (状态/时间/排序筛选, 游标分页) 与详情
    - 创建和更新订阅者
    - 订阅者标签的查询、添加与移除
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

from mcp_kit.tools.base import BaseTool, Email
from mcp_kit.tools.registry import ToolRegistry


# region 参数模型
class ListSubscribersArgs(BaseModel):
    status: Literal["active", "inactive", "bounced", "complained", "cancelled"] | None = Field(
        default=None, description="Filter by subscriber status"
    )
    created_after: str | None = Field(
        default=None, description="Filter subscribers created after this ISO date"
    )
    created_before: str | None = Field(
        default=None, description="Filter subscribers created before this ISO date"
    )
    updated_after: str | None = Field(
        default=None, description="Filter subscribers updated after this ISO date"
    )
    updated_before: str | None = Field(
        default=None, description="Filter subscribers updated before this ISO date"
    )
    sort_field: Literal["created_at", "updated_at"] | None = Field(
        default=None, description="Field to sort by"
    )
    sort_order: Literal["asc", "desc"] | None = Field(default=None, description="Sort order")
    per_page: int | None = Field(default=None, description="Number of results per page (max 100)")
    after: str | None = Field(
        default=None, description="Cursor for pagination - get results after this cursor"
    )
    before: str | None = Field(
        default=None, description="Cursor for pagination - get results before this cursor"
    )


class SubscriberIdArgs(BaseModel):
    subscriber_id: str = Field(description="The subscriber ID")


class CreateSubscriberArgs(BaseModel):
    email_address: Email = Field(description="The subscriber's email address")
    first_name: str | None = Field(default=None, description="The subscriber's first name")
    state: Literal["active", "inactive"] | None = Field(
        default=None, description="Subscriber state (default: active)"
    )
    fields: dict[str, str] | None = Field(
        default=None, description="Custom field values as key-value pairs"
    )


class UpdateSubscriberArgs(BaseModel):
    subscriber_id: str = Field(description="The subscriber ID to update")
    email_address: Email | None = Field(default=None, description="New email address")
    first_name: str | None = Field(default=None, description="New first name")
    fields: dict[str, str] | None = Field(default=None, description="Custom field values to update")


class SubscriberTagArgs(BaseModel):
    subscriber_id: str = Field(description="The subscriber ID")
    tag_id: str = Field(description="The tag ID")
# endregion


# region 订阅者工具
@ToolRegistry.register
class ListSubscribersTool(BaseTool):
    name = "kit_list_subscribers"
    description = "List subscribers from Kit.com with optional filters. Returns paginated results."
    args_model = ListSubscribersArgs

    async def run(self, params: dict[str, Any]) -> Any:
        return await self.context.client.list_subscribers(params)


@ToolRegistry.register
class GetSubscriberTool(BaseTool):
    name = "kit_get_subscriber"
    description = "Get a specific subscriber by ID"
    args_model = SubscriberIdArgs

    async def run(self, params: dict[str, Any]) -> Any:
        return await self.context.client.get_subscriber(params["subscriber_id"])


@ToolRegistry.register
class CreateSubscriberTool(BaseTool):
    name = "kit_create_subscriber"
    description = "Create a new subscriber in Kit.com"
    args_model = CreateSubscriberArgs

    async def run(self, params: dict[str, Any]) -> Any:
        return await self.context.client.create_subscriber(params)


@ToolRegistry.register
class UpdateSubscriberTool(BaseTool):
    name = "kit_update_subscriber"
    description = "Update an existing subscriber"
    args_model = UpdateSubscriberArgs

    async def run(self, params: dict[str, Any]) -> Any:
        data = dict(params)
        subscriber_id = data.pop("subscriber_id")
        return await self.context.client.update_subscriber(subscriber_id, data)


@ToolRegistry.register
class GetSubscriberTagsTool(BaseTool):
    name = "kit_get_subscriber_tags"
    description = "Get all tags for a specific subscriber"
    args_model = SubscriberIdArgs

    async def run(self, params: dict[str, Any]) -> Any:
        return await self.context.client.get_subscriber_tags(params["subscriber_id"])


@ToolRegistry.register
class AddTagToSubscriberTool(BaseTool):
    name = "kit_add_tag_to_subscriber"
    description = "Add a tag to a subscriber"
    args_model = SubscriberTagArgs

    async def run(self, params: dict[str, Any]) -> Any:
        return await self.context.client.add_tag_to_subscriber(
            params["subscriber_id"], params["tag_id"]
        )


@ToolRegistry.register
class RemoveTagFromSubscriberTool(BaseTool):
    name = "kit_remove_tag_from_subscriber"
    description = "Remove a tag from a subscriber"
    args_model = SubscriberTagArgs

    async def run(self, params: dict[str, Any]) -> Any:
        await self.context.client.remove_tag_from_subscriber(
            params["subscriber_id"], params["tag_id"]
        )
        return {"success": True, "message": "Tag removed from subscriber"}
# endregion
