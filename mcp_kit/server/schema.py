"""
描述: MCP 工具调用数据模型
主要功能:
    - 定义工具调用请求 (ToolRequest)
    - 定义统一结果信封 (ToolResult / TextContent)
    - 提供成功/失败信封构造函数
"""

from __future__ import annotations

import json
from typing import Any, Literal

from pydantic import BaseModel, Field


# region API 数据模型
class ToolRequest(BaseModel):
    """工具调用请求体"""
    params: dict[str, Any] = Field(default_factory=dict)


class TextContent(BaseModel):
    """文本内容块"""
    type: Literal["text"] = "text"
    text: str


class ToolResult(BaseModel):
    """
    工具调用结果信封

    属性:
        content: 内容块列表 (固定为单个文本块)
        isError: 失败时为 True, 成功时缺省 (序列化时省略)
    """
    content: list[TextContent]
    isError: bool | None = None

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)
# endregion


# region 信封构造
def error_message(exc: BaseException) -> str:
    # 原样保留, 上游响应体不做裁剪
    message = str(exc)
    if not message:
        return exc.__class__.__name__
    return message


def format_response(data: Any) -> ToolResult:
    """成功信封: 数据以缩进 JSON 文本返回"""
    return ToolResult(
        content=[TextContent(text=json.dumps(data, indent=2, ensure_ascii=False))]
    )


def format_error(error: BaseException | str) -> ToolResult:
    """失败信封: 文本以 "Error: " 开头"""
    message = error if isinstance(error, str) else error_message(error)
    return ToolResult(content=[TextContent(text=f"Error: {message}")], isError=True)
# endregion
