from __future__ import annotations

import asyncio
import json

from mcp import types

from mcp_kit.server.schema import format_error, format_response
from mcp_kit.server.stdio import build_server, list_tool_definitions, to_call_tool_result
from tests.helpers import Recorder, make_client, make_settings


def test_list_tool_definitions_match_registry() -> None:
    settings = make_settings()
    tools = list_tool_definitions(settings)
    by_name = {tool.name: tool for tool in tools}

    assert "kit_create_webhook" in by_name
    webhook = by_name["kit_create_webhook"]
    assert webhook.description == "Create a new webhook in Kit.com"
    assert set(webhook.inputSchema["required"]) == {"target_url", "event_name"}


def test_list_tool_definitions_only_enabled() -> None:
    settings = make_settings()
    settings.tools.enabled = ["kit_get_account"]
    assert [tool.name for tool in list_tool_definitions(settings)] == ["kit_get_account"]


def test_to_call_tool_result_success() -> None:
    result = to_call_tool_result(format_response({"ok": True}))
    assert isinstance(result, types.CallToolResult)
    assert result.isError is False
    assert result.content[0].type == "text"
    assert result.content[0].text == '{\n  "ok": true\n}'


def test_to_call_tool_result_error() -> None:
    result = to_call_tool_result(format_error(RuntimeError("boom")))
    assert result.isError is True
    assert result.content[0].text == "Error: boom"


def test_build_server_registers_handlers() -> None:
    settings = make_settings()
    server = build_server(settings, make_client(Recorder(), settings))
    assert server.name == "mcp-kit"
    assert types.ListToolsRequest in server.request_handlers
    assert types.CallToolRequest in server.request_handlers


def _call_request(name: str, arguments: dict) -> types.CallToolRequest:
    return types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name=name, arguments=arguments),
    )


def test_call_tool_through_server() -> None:
    settings = make_settings()
    account = {"account": {"name": "Ann's newsletter", "plan_type": "creator"}}
    recorder = Recorder(body=account)
    server = build_server(settings, make_client(recorder, settings))
    handler = server.request_handlers[types.CallToolRequest]

    async def run() -> None:
        ok = (await handler(_call_request("kit_get_account", {}))).root
        assert isinstance(ok, types.CallToolResult)
        assert ok.isError is False
        assert json.loads(ok.content[0].text) == account

        bad = (
            await handler(_call_request("kit_create_subscriber", {"email_address": "Ann <a@b.com>"}))
        ).root
        assert isinstance(bad, types.CallToolResult)
        assert bad.isError is True
        assert len(bad.content) == 1
        assert bad.content[0].text.startswith("Error: ")
        assert "email_address" in bad.content[0].text

        assert len(recorder.requests) == 1
        assert str(recorder.last.url) == "https://api.kit.com/v4/account"

    asyncio.run(run())
