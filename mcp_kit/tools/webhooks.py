"""
描述: Webhook 工具集
主要功能:
    - 列出已注册的 webhook
    - 注册 webhook (扁平参数组装为嵌套 event 对象)
    - 删除 webhook

说明:
    只代理注册, 不接收或投递事件
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from mcp_kit.tools.base import BaseTool, PageArgs, Url
from mcp_kit.tools.registry import ToolRegistry


_EVENT_FILTER_KEYS = ("tag_id", "form_id", "sequence_id", "product_id")


# region 参数模型
class CreateWebhookArgs(BaseModel):
    target_url: Url = Field(description="The URL to receive webhook events")
    event_name: str = Field(description="The event name (e.g., subscriber.subscriber_activate)")
    tag_id: str | None = Field(default=None, description="Tag ID for tag-specific events")
    form_id: str | None = Field(default=None, description="Form ID for form-specific events")
    sequence_id: str | None = Field(
        default=None, description="Sequence ID for sequence-specific events"
    )
    product_id: str | None = Field(
        default=None, description="Product ID for purchase-specific events"
    )


class WebhookIdArgs(BaseModel):
    webhook_id: str = Field(description="The webhook ID to delete")
# endregion


def build_webhook_payload(params: dict[str, Any]) -> dict[str, Any]:
    """
    组装 webhook 注册请求体

    参数:
        params: 已校验的扁平参数

    返回:
        {"target_url": ..., "event": {"name": ..., <已提供的筛选 ID>}}
    """
    event: dict[str, Any] = {"name": params["event_name"]}
    for key in _EVENT_FILTER_KEYS:
        if params.get(key) is not None:
            event[key] = params[key]
    return {"target_url": params["target_url"], "event": event}


# region Webhook 工具
@ToolRegistry.register
class ListWebhooksTool(BaseTool):
    name = "kit_list_webhooks"
    description = "List all webhooks configured in Kit.com"
    args_model = PageArgs

    async def run(self, params: dict[str, Any]) -> Any:
        return await self.context.client.list_webhooks(params)


@ToolRegistry.register
class CreateWebhookTool(BaseTool):
    name = "kit_create_webhook"
    description = "Create a new webhook in Kit.com"
    args_model = CreateWebhookArgs

    async def run(self, params: dict[str, Any]) -> Any:
        return await self.context.client.create_webhook(build_webhook_payload(params))


@ToolRegistry.register
class DeleteWebhookTool(BaseTool):
    name = "kit_delete_webhook"
    description = "Delete a webhook from Kit.com"
    args_model = WebhookIdArgs

    async def run(self, params: dict[str, Any]) -> Any:
        await self.context.client.delete_webhook(params["webhook_id"])
        return {"success": True, "message": "Webhook deleted"}
# endregion
