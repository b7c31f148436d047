"""
描述: Kit 开放平台 API v4 客户端
主要功能:
    - 封装 HTTP 请求与 API Key 鉴权
    - 查询参数序列化 (跳过空值, 保持调用方顺序)
    - 统一错误处理 (非 2xx 一律抛出 KitAPIError)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping
from urllib.parse import quote, urlencode

import httpx

from mcp_kit.config import Settings


@dataclass(eq=False)
class KitAPIError(RuntimeError):
    """Kit API 调用异常 (非 2xx 响应)"""
    status: int
    body: str

    def __str__(self) -> str:
        return f"Kit API error ({self.status}): {self.body}"


# region 请求辅助函数
def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_query(params: Mapping[str, Any] | None) -> str:
    """
    序列化查询参数

    参数:
        params: 查询参数, 值为 None 的键被忽略

    返回:
        URL 编码后的查询串 (不含 "?"), 无参数时为空串
    """
    if not params:
        return ""
    pairs = [(key, _stringify(value)) for key, value in params.items() if value is not None]
    return urlencode(pairs)


def _segment(value: Any) -> str:
    return quote(str(value), safe="")
# endregion


# region Kit 客户端
class KitClient:
    """
    Kit API 客户端

    功能:
        - 统一封装 API 请求 (每次调用单次网络往返, 无重试无超时)
        - 每个上游资源动作对应一个方法
        - 分页仅透传游标, 不自动翻页
    """
    def __init__(
        self,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        初始化客户端

        参数:
            settings: 全局配置对象
            transport: 自定义 httpx 传输层 (测试注入)
        """
        self._api_key = settings.kit.api_key
        self._api_base = settings.kit.api_base.rstrip("/")
        self._transport = transport

    async def execute(
        self,
        path: str,
        method: str = "GET",
        query: Mapping[str, Any] | None = None,
        body: Any | None = None,
        parse: bool = True,
    ) -> Any:
        """
        执行 API 请求

        参数:
            path: API 路径 (不含 Base URL)
            method: HTTP 方法 (GET/POST/PUT/DELETE)
            query: 查询参数
            body: JSON 请求体
            parse: 是否解析响应 JSON (删除类操作为 False)

        返回:
            解析后的响应 JSON, parse=False 时为 None

        抛出:
            KitAPIError: 非 2xx 响应
            httpx.HTTPError: 网络层异常, 原样抛出
            ValueError: 响应体不是合法 JSON
        """
        url = f"{self._api_base}{path}"
        query_string = build_query(query)
        if query_string:
            url = f"{url}?{query_string}"

        headers = {
            "X-Kit-Api-Key": self._api_key,
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

        async with httpx.AsyncClient(
            transport=self._transport,
            timeout=None,
            trust_env=False,
        ) as client:
            response = await client.request(
                method,
                url,
                headers=headers,
                json=body,
            )

        if not response.is_success:
            raise KitAPIError(status=response.status_code, body=response.text)
        if not parse:
            return None
        return response.json()

    # Account
    async def get_account(self) -> Any:
        return await self.execute("/account")

    # Subscribers
    async def list_subscribers(self, params: Mapping[str, Any] | None = None) -> Any:
        return await self.execute("/subscribers", query=params)

    async def get_subscriber(self, subscriber_id: str) -> Any:
        return await self.execute(f"/subscribers/{_segment(subscriber_id)}")

    async def create_subscriber(self, data: dict[str, Any]) -> Any:
        return await self.execute("/subscribers", method="POST", body=data)

    async def update_subscriber(self, subscriber_id: str, data: dict[str, Any]) -> Any:
        return await self.execute(
            f"/subscribers/{_segment(subscriber_id)}", method="PUT", body=data
        )

    async def get_subscriber_tags(self, subscriber_id: str) -> Any:
        return await self.execute(f"/subscribers/{_segment(subscriber_id)}/tags")

    async def add_tag_to_subscriber(self, subscriber_id: str, tag_id: str) -> Any:
        return await self.execute(
            f"/subscribers/{_segment(subscriber_id)}/tags",
            method="POST",
            body={"tag_id": tag_id},
        )

    async def remove_tag_from_subscriber(self, subscriber_id: str, tag_id: str) -> None:
        await self.execute(
            f"/subscribers/{_segment(subscriber_id)}/tags/{_segment(tag_id)}",
            method="DELETE",
            parse=False,
        )

    # Tags
    async def list_tags(self, params: Mapping[str, Any] | None = None) -> Any:
        return await self.execute("/tags", query=params)

    async def get_tag(self, tag_id: str) -> Any:
        return await self.execute(f"/tags/{_segment(tag_id)}")

    async def create_tag(self, name: str) -> Any:
        return await self.execute("/tags", method="POST", body={"name": name})

    async def update_tag(self, tag_id: str, name: str) -> Any:
        return await self.execute(f"/tags/{_segment(tag_id)}", method="PUT", body={"name": name})

    async def delete_tag(self, tag_id: str) -> None:
        await self.execute(f"/tags/{_segment(tag_id)}", method="DELETE", parse=False)

    async def list_tag_subscribers(
        self, tag_id: str, params: Mapping[str, Any] | None = None
    ) -> Any:
        return await self.execute(f"/tags/{_segment(tag_id)}/subscribers", query=params)

    # Sequences
    async def list_sequences(self, params: Mapping[str, Any] | None = None) -> Any:
        return await self.execute("/sequences", query=params)

    async def get_sequence(self, sequence_id: str) -> Any:
        return await self.execute(f"/sequences/{_segment(sequence_id)}")

    async def add_subscriber_to_sequence(self, sequence_id: str, email: str) -> Any:
        return await self.execute(
            f"/sequences/{_segment(sequence_id)}/subscribers",
            method="POST",
            body={"email_address": email},
        )

    # Broadcasts
    async def list_broadcasts(self, params: Mapping[str, Any] | None = None) -> Any:
        return await self.execute("/broadcasts", query=params)

    async def get_broadcast(self, broadcast_id: str) -> Any:
        return await self.execute(f"/broadcasts/{_segment(broadcast_id)}")

    async def create_broadcast(self, data: dict[str, Any]) -> Any:
        return await self.execute("/broadcasts", method="POST", body=data)

    async def update_broadcast(self, broadcast_id: str, data: dict[str, Any]) -> Any:
        return await self.execute(
            f"/broadcasts/{_segment(broadcast_id)}", method="PUT", body=data
        )

    async def delete_broadcast(self, broadcast_id: str) -> None:
        await self.execute(f"/broadcasts/{_segment(broadcast_id)}", method="DELETE", parse=False)

    # Forms
    async def list_forms(self, params: Mapping[str, Any] | None = None) -> Any:
        return await self.execute("/forms", query=params)

    async def get_form(self, form_id: str) -> Any:
        return await self.execute(f"/forms/{_segment(form_id)}")

    async def add_subscriber_to_form(
        self,
        form_id: str,
        email: str,
        data: Mapping[str, Any] | None = None,
    ) -> Any:
        return await self.execute(
            f"/forms/{_segment(form_id)}/subscribers",
            method="POST",
            body={"email_address": email, **(data or {})},
        )

    # Custom fields
    async def list_custom_fields(self) -> Any:
        return await self.execute("/custom_fields")

    # Webhooks
    async def list_webhooks(self, params: Mapping[str, Any] | None = None) -> Any:
        return await self.execute("/webhooks", query=params)

    async def create_webhook(self, data: dict[str, Any]) -> Any:
        return await self.execute("/webhooks", method="POST", body=data)

    async def delete_webhook(self, webhook_id: str) -> None:
        await self.execute(f"/webhooks/{_segment(webhook_id)}", method="DELETE", parse=False)
# endregion
