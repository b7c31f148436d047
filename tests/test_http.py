from __future__ import annotations

import asyncio
import json

import httpx
import pytest
from fastapi import FastAPI

import mcp_kit.main as main_module
import mcp_kit.server.http as http_module
from mcp_kit.config import Settings
from mcp_kit.kit.client import KitClient
from tests.helpers import Recorder, make_settings


def _patch(monkeypatch: pytest.MonkeyPatch, settings: Settings, recorder: Recorder) -> None:
    monkeypatch.setattr(http_module, "get_settings", lambda: settings)
    monkeypatch.setattr(
        http_module,
        "KitClient",
        lambda s: KitClient(s, transport=httpx.MockTransport(recorder)),
    )


def _app() -> FastAPI:
    app = FastAPI()
    app.include_router(http_module.router)
    return app


def test_http_routes(monkeypatch: pytest.MonkeyPatch) -> None:
    _patch(monkeypatch, make_settings(), Recorder())

    async def run() -> None:
        transport = httpx.ASGITransport(app=_app())
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            health = await client.get("/health")
            assert health.status_code == 200
            tools = await client.get("/mcp/tools")
            assert tools.status_code == 200
            data = tools.json()
            names = [tool["name"] for tool in data["tools"]]
            assert "kit_list_tags" in names
            list_tags = next(tool for tool in data["tools"] if tool["name"] == "kit_list_tags")
            assert "per_page" in list_tags["input_schema"]["properties"]

    asyncio.run(run())


def test_call_tool_route_success_envelope(monkeypatch: pytest.MonkeyPatch) -> None:
    page = {"tags": [{"id": 1, "name": "VIP"}], "pagination": {"has_next_page": False}}
    recorder = Recorder(body=page)
    _patch(monkeypatch, make_settings(), recorder)

    async def run() -> None:
        transport = httpx.ASGITransport(app=_app())
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.post("/mcp/tools/kit_list_tags", json={"params": {"per_page": 50}})
            assert response.status_code == 200
            body = response.json()
            assert "isError" not in body
            assert body["content"][0]["type"] == "text"
            assert json.loads(body["content"][0]["text"]) == page
            assert str(recorder.last.url) == "https://api.kit.com/v4/tags?per_page=50"

    asyncio.run(run())


def test_call_tool_route_error_envelope(monkeypatch: pytest.MonkeyPatch) -> None:
    recorder = Recorder(status_code=401, text='{"errors":["Unauthorized"]}')
    _patch(monkeypatch, make_settings(), recorder)

    async def run() -> None:
        transport = httpx.ASGITransport(app=_app())
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.post("/mcp/tools/kit_get_account", json={})
            assert response.status_code == 200
            assert response.json() == {
                "content": [
                    {"type": "text", "text": 'Error: Kit API error (401): {"errors":["Unauthorized"]}'}
                ],
                "isError": True,
            }

            missing = await client.post("/mcp/tools/kit_nope", json={"params": {}})
            assert missing.json()["isError"] is True
            assert missing.json()["content"][0]["text"] == "Error: Unknown tool: kit_nope"

    asyncio.run(run())


def test_create_app_requires_api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(main_module, "get_settings", lambda: Settings())
    with pytest.raises(RuntimeError, match="KIT_API_KEY"):
        main_module.create_app()


def test_create_app_serves_routes(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(main_module, "get_settings", make_settings)
    _patch(monkeypatch, make_settings(), Recorder())
    app = main_module.create_app()

    async def run() -> None:
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            health = await client.get("/health")
            assert health.status_code == 200
            assert health.json() == {"status": "ok"}
            tools = await client.get("/mcp/tools")
            assert tools.status_code == 200
            assert len(tools.json()["tools"]) == 29

    asyncio.run(run())
