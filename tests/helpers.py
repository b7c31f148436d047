from __future__ import annotations

import json
from typing import Any

import httpx

from mcp_kit.config import Settings
from mcp_kit.kit.client import KitClient
from mcp_kit.tools.base import ToolContext


class Recorder:
    """httpx.MockTransport handler returning one canned response."""

    def __init__(
        self,
        status_code: int = 200,
        body: Any = None,
        text: str | None = None,
        error: Exception | None = None,
    ) -> None:
        self.status_code = status_code
        self.body = body
        self.text = text
        self.error = error
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        if self.body is None:
            return httpx.Response(self.status_code)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


def make_settings() -> Settings:
    settings = Settings()
    settings.kit.api_key = "secret"
    return settings


def make_client(recorder: Recorder, settings: Settings | None = None) -> KitClient:
    return KitClient(settings or make_settings(), transport=httpx.MockTransport(recorder))


def make_context(recorder: Recorder, settings: Settings | None = None) -> ToolContext:
    settings = settings or make_settings()
    return ToolContext(settings=settings, client=make_client(recorder, settings))
