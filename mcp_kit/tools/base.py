"""
描述: MCP 工具基类定义
主要功能:
    - 定义 BaseTool 抽象基类 (名称 / 描述 / 参数模型)
    - 定义 ToolContext 上下文对象
    - 定义邮箱与 URL 参数类型 (只校验, 不改写原值)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Annotated, Any, ClassVar

from email_validator import validate_email
from pydantic import AfterValidator, AnyHttpUrl, BaseModel, Field, TypeAdapter, WithJsonSchema

from mcp_kit.config import Settings
from mcp_kit.kit.client import KitClient


# region 参数类型
_URL_ADAPTER = TypeAdapter(AnyHttpUrl)


def _check_email(value: str) -> str:
    # 仅语法校验, 拒绝 "Name <addr>" 形式
    validate_email(value, check_deliverability=False)
    return value


def _check_url(value: str) -> str:
    _URL_ADAPTER.validate_python(value)
    return value


Email = Annotated[
    str,
    AfterValidator(_check_email),
    WithJsonSchema({"type": "string", "format": "email"}),
]
Url = Annotated[
    str,
    AfterValidator(_check_url),
    WithJsonSchema({"type": "string", "format": "uri"}),
]


class NoArgs(BaseModel):
    """无参数工具的参数模型"""
# endregion


# region 工具上下文与基类
@dataclass
class ToolContext:
    """工具执行上下文 (依赖注入)"""
    settings: Settings
    client: KitClient


class BaseTool(ABC):
    """MCP 工具抽象基类"""
    name: ClassVar[str] = ""
    description: ClassVar[str] = ""
    args_model: ClassVar[type[BaseModel]] = NoArgs

    def __init__(self, context: ToolContext) -> None:
        self.context = context
        if not self.name:
            raise ValueError(f"{self.__class__.__name__} must define 'name' attribute")

    @classmethod
    def input_schema(cls) -> dict[str, Any]:
        return cls.args_model.model_json_schema()

    @classmethod
    def to_schema(cls) -> dict[str, Any]:
        """返回工具 schema (用于工具发现)"""
        return {
            "name": cls.name,
            "description": cls.description,
            "input_schema": cls.input_schema(),
        }

    async def execute(self, raw_params: dict[str, Any] | None) -> Any:
        """
        校验参数并执行工具

        参数:
            raw_params: 未校验的原始参数

        抛出:
            pydantic.ValidationError: 参数不符合 args_model
        """
        args = self.args_model.model_validate(raw_params or {})
        return await self.run(args.model_dump(exclude_none=True))

    @abstractmethod
    async def run(self, params: dict[str, Any]) -> Any:
        """
        执行工具逻辑

        参数:
            params: 已校验的参数字典 (未提供的可选参数不出现)

        返回:
            可 JSON 序列化的结果
        """
        raise NotImplementedError
# endregion


# region 分页参数
class PageArgs(BaseModel):
    """游标分页参数 (仅透传, 不自动翻页)"""
    per_page: int | None = Field(default=None, description="Number of results per page (max 100)")
    after: str | None = Field(
        default=None, description="Cursor for pagination - get results after this cursor"
    )
    before: str | None = Field(
        default=None, description="Cursor for pagination - get results before this cursor"
    )
# endregion
