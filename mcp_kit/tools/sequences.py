"""
Sequence tools.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from mcp_kit.tools.base import BaseTool, Email, PageArgs
from mcp_kit.tools.registry import ToolRegistry


class SequenceIdArgs(BaseModel):
    sequence_id: str = Field(description="The sequence ID")


class AddSubscriberToSequenceArgs(BaseModel):
    sequence_id: str = Field(description="The sequence ID")
    email: Email = Field(description="The subscriber's email address")


@ToolRegistry.register
class ListSequencesTool(BaseTool):
    name = "kit_list_sequences"
    description = "List all email sequences in Kit.com"
    args_model = PageArgs

    async def run(self, params: dict[str, Any]) -> Any:
        return await self.context.client.list_sequences(params)


@ToolRegistry.register
class GetSequenceTool(BaseTool):
    name = "kit_get_sequence"
    description = "Get a specific sequence by ID"
    args_model = SequenceIdArgs

    async def run(self, params: dict[str, Any]) -> Any:
        return await self.context.client.get_sequence(params["sequence_id"])


@ToolRegistry.register
class AddSubscriberToSequenceTool(BaseTool):
    name = "kit_add_subscriber_to_sequence"
    description = "Add a subscriber to an email sequence"
    args_model = AddSubscriberToSequenceArgs

    async def run(self, params: dict[str, Any]) -> Any:
        return await self.context.client.add_subscriber_to_sequence(
            params["sequence_id"], params["email"]
        )
