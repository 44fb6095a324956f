"""Pytest configuration and fixtures for all tests."""

from __future__ import annotations

import asyncio
import json
from typing import Optional

import httpx
import pytest

from chatgpt_admin.providers import (
    ModelOption,
    ProviderDescriptor,
    ProviderRegistry,
)
from chatgpt_admin.settings import (
    ConfigClient,
    ConfigurationSession,
    NotificationKind,
)

READ_PATH = "/strapi-chatgpt/config"
WRITE_PATH = "/strapi-chatgpt/config/update"

STORED = {
    "apiKey": "sk-stored",
    "modelName": "text-curie-001",
    "backend": "open_ai",
    "backendConf": {"url": ""},
    "maxTokens": 1024,
}


class FakeEndpoint:
    """In-memory stand-in for the admin configuration endpoint."""

    def __init__(self) -> None:
        self.stored: dict = dict(STORED)
        self.fail_reads = False
        self.fail_writes = False
        # "wrapped" -> {"value": "<json>"}, "direct" -> document,
        # "empty" -> no body, "other" -> unrelated JSON
        self.write_mode = "wrapped"
        self.echo_overrides: dict = {}
        self.release: Optional[asyncio.Event] = None
        self.reads = 0
        self.writes: list[dict] = []

    async def handler(self, request: httpx.Request) -> httpx.Response:
        if request.method == "GET" and request.url.path == READ_PATH:
            self.reads += 1
            if self.fail_reads:
                return httpx.Response(500, json={"error": "boom"})
            return httpx.Response(200, json=self.stored)

        if request.method == "POST" and request.url.path == WRITE_PATH:
            body = json.loads(request.content)
            self.writes.append(body)
            if self.release is not None:
                await self.release.wait()
            if self.fail_writes:
                return httpx.Response(502, json={"error": "bad gateway"})
            self.stored = {**body, **self.echo_overrides}
            if self.write_mode == "wrapped":
                return httpx.Response(
                    200,
                    json={"value": json.dumps(self.stored)},
                )
            if self.write_mode == "direct":
                return httpx.Response(200, json=self.stored)
            if self.write_mode == "other":
                return httpx.Response(200, json={"ok": True})
            return httpx.Response(200)

        return httpx.Response(404)


class Notifications:
    """Records notifications emitted by a session."""

    def __init__(self) -> None:
        self.events: list[tuple[NotificationKind, str]] = []

    def __call__(self, kind: NotificationKind, message: str) -> None:
        self.events.append((kind, message))

    def of(self, kind: NotificationKind) -> list[str]:
        return [m for k, m in self.events if k is kind]


@pytest.fixture
def endpoint() -> FakeEndpoint:
    return FakeEndpoint()


@pytest.fixture
def notifications() -> Notifications:
    return Notifications()


@pytest.fixture
def client(endpoint: FakeEndpoint) -> ConfigClient:
    return ConfigClient(
        "http://cms.test",
        token="admin-token",
        transport=httpx.MockTransport(endpoint.handler),
    )


@pytest.fixture
def registry() -> ProviderRegistry:
    """Registry with an OpenAI entry lacking a default URL and Azure."""
    return ProviderRegistry(
        [
            ProviderDescriptor(
                id="open_ai",
                name="Open AI",
                custom_url_allowed=True,
                custom_url_required=False,
                default_models=[
                    ModelOption(value="text-davinci-003", label="davinci"),
                    ModelOption(value="text-curie-001", label="curie"),
                ],
            ),
            ProviderDescriptor(
                id="azure_ai",
                name="Azure AI",
                custom_url_allowed=True,
                custom_url_required=True,
                default_url="https://azure-endpoint-name.openai.azure.com/",
                require_custom_model_name=True,
            ),
        ],
    )


@pytest.fixture
def session(
    client: ConfigClient,
    registry: ProviderRegistry,
    notifications: Notifications,
) -> ConfigurationSession:
    return ConfigurationSession(client, registry, notifications)
