"""
Form tools.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

from mcp_kit.tools.base import BaseTool, Email
from mcp_kit.tools.registry import ToolRegistry


class ListFormsArgs(BaseModel):
    status: Literal["active", "archived", "trashed", "all"] | None = Field(
        default=None, description="Filter by form status"
    )
    per_page: int | None = Field(default=None, description="Number of results per page")
    after: str | None = Field(default=None, description="Cursor for pagination")
    before: str | None = Field(default=None, description="Cursor for pagination (previous page)")


class FormIdArgs(BaseModel):
    form_id: str = Field(description="The form ID")


class AddSubscriberToFormArgs(BaseModel):
    form_id: str = Field(description="The form ID")
    email: Email = Field(description="The subscriber's email address")
    first_name: str | None = Field(default=None, description="The subscriber's first name")
    fields: dict[str, str] | None = Field(default=None, description="Custom field values")


def build_form_subscriber_extras(params: dict[str, Any]) -> dict[str, Any]:
    """Everything except the form id and email is forwarded as extra subscriber data."""
    return {key: value for key, value in params.items() if key not in ("form_id", "email")}


@ToolRegistry.register
class ListFormsTool(BaseTool):
    name = "kit_list_forms"
    description = "List all forms in Kit.com"
    args_model = ListFormsArgs

    async def run(self, params: dict[str, Any]) -> Any:
        return await self.context.client.list_forms(params)


@ToolRegistry.register
class GetFormTool(BaseTool):
    name = "kit_get_form"
    description = "Get a specific form by ID"
    args_model = FormIdArgs

    async def run(self, params: dict[str, Any]) -> Any:
        return await self.context.client.get_form(params["form_id"])


@ToolRegistry.register
class AddSubscriberToFormTool(BaseTool):
    name = "kit_add_subscriber_to_form"
    description = "Add a subscriber to a form (creates subscriber if doesn't exist)"
    args_model = AddSubscriberToFormArgs

    async def run(self, params: dict[str, Any]) -> Any:
        return await self.context.client.add_subscriber_to_form(
            params["form_id"],
            params["email"],
            build_form_subscriber_extras(params),
        )
