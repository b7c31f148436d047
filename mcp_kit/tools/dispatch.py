"""
Tool dispatch adapter.

Looks up a registered tool, validates the raw arguments against its
argument model, runs it and wraps the outcome in a ``ToolResult``.
``invoke`` never raises: every failure becomes an error envelope.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from mcp_kit.kit.client import KitAPIError
from mcp_kit.kit.models import parse_page
from mcp_kit.server.schema import ToolResult, format_error, format_response
from mcp_kit.tools.base import ToolContext
from mcp_kit.tools.registry import ToolRegistry


logger = logging.getLogger(__name__)


async def invoke(
    tool_name: str,
    raw_arguments: dict[str, Any] | None,
    context: ToolContext,
) -> ToolResult:
    tool_cls = ToolRegistry.get(tool_name)
    if tool_cls is None:
        logger.warning("Unknown tool requested", extra={"tool": tool_name})
        return format_error(f"Unknown tool: {tool_name}")
    if not context.settings.tools.is_enabled(tool_name):
        logger.warning("Disabled tool requested", extra={"tool": tool_name})
        return format_error(f"Tool disabled: {tool_name}")

    logger.info("Tool invoked", extra={"tool": tool_name})
    try:
        result = await tool_cls(context).execute(raw_arguments)
        envelope = format_response(result)
    except (KitAPIError, ValidationError) as exc:
        logger.warning("Tool failed", extra={"tool": tool_name, "error": str(exc)})
        return format_error(exc)
    except Exception as exc:
        logger.exception("Tool raised unexpectedly", extra={"tool": tool_name})
        return format_error(exc)

    if logger.isEnabledFor(logging.DEBUG):
        page = parse_page(result)
        if page is not None:
            logger.debug("Page fetched", extra={"tool": tool_name, **page.summary()})
    return envelope
