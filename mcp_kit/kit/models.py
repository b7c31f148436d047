"""
描述: Kit API 响应数据模型
主要功能:
    - 定义分页集合结构 (游标由上游签发, 仅透传)
    - 提供只读的分页摘要, 不参与返回数据的序列化
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError


# region 响应模型
class Pagination(BaseModel):
    """
    分页游标状态

    属性:
        has_previous_page: 是否存在上一页
        has_next_page: 是否存在下一页
        start_cursor: 当前页起始游标 (传给 before 获取上一页)
        end_cursor: 当前页结束游标 (传给 after 获取下一页)
        per_page: 每页条数
    """
    model_config = ConfigDict(extra="allow")

    has_previous_page: bool = False
    has_next_page: bool = False
    start_cursor: str | None = None
    end_cursor: str | None = None
    per_page: int | None = None


class PaginatedResponse(BaseModel):
    """Kit 列表接口通用响应结构"""
    model_config = ConfigDict(extra="allow")

    pagination: Pagination
    items: list[Any] = Field(default_factory=list)

    def summary(self) -> dict[str, Any]:
        return {
            "items": len(self.items),
            "has_next_page": self.pagination.has_next_page,
            "end_cursor": self.pagination.end_cursor,
        }


def parse_page(payload: Any) -> PaginatedResponse | None:
    """
    尝试将响应解析为分页集合

    Kit 列表接口以资源名为数据键 (如 "tags", "subscribers"),
    取除 pagination 外唯一的列表字段作为 items; 非分页响应返回 None
    """
    if not isinstance(payload, dict) or "pagination" not in payload:
        return None
    lists = [value for key, value in payload.items() if key != "pagination" and isinstance(value, list)]
    try:
        return PaginatedResponse(
            pagination=payload["pagination"],
            items=lists[0] if len(lists) == 1 else [],
        )
    except ValidationError:
        return None
# endregion
