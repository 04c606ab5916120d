"""
tests.conftest

Shared fixtures: a fake Discord/Google upstream and an app client factory.

The app runs in-process over httpx.ASGITransport; its outbound client is wired
to `FakeUpstream.handler` through httpx.MockTransport, so no network is used.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import AsyncExitStack
from typing import Any

import httpx
import pytest
import pytest_asyncio

from paleto_auth.api.app import create_app
from paleto_auth.observability.logging import configure_logging
from paleto_auth.settings import Settings

FRONTEND = "https://front.example"

HEADER_ROW = ["", "", "Prénom / Nom", "", "Grade", "", "ID Discord"]


def sheet_row(name: str, grade: str, discord_id: str) -> list[str]:
    return ["", "", name, "", grade, "", discord_id]


class FakeUpstream:
    def __init__(self) -> None:
        self.token_status = 200
        self.token_body: dict[str, Any] = {"access_token": "user-token"}
        self.profile_status = 200
        self.profile: dict[str, Any] = {
            "id": "123",
            "username": "jdoe",
            "discriminator": "0",
            "avatar": "abcdef",
        }
        self.member_roles: dict[str, list[str]] = {}
        self.sheet_status = 200
        self.sheet_rows: list[list[str]] = [["Paleto Garage"], HEADER_ROW]
        self.calls: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        path = request.url.path
        if path.endswith("/oauth2/token"):
            return httpx.Response(self.token_status, json=self.token_body)
        if path.endswith("/users/@me"):
            return httpx.Response(self.profile_status, json=self.profile)
        if "/guilds/" in path:
            roles = self.member_roles.get(path.rsplit("/", 1)[-1])
            if roles is None:
                return httpx.Response(404, json={"message": "Unknown Member"})
            return httpx.Response(200, json={"roles": roles})
        if "/spreadsheets/" in path:
            return httpx.Response(self.sheet_status, json={"values": self.sheet_rows})
        return httpx.Response(404)


def make_settings(**overrides: Any) -> Settings:
    values: dict[str, Any] = {
        "env": "test",
        "session_backend": "memory",
        "discord_client_id": "client-id",
        "discord_client_secret": "client-secret",
        "discord_redirect_uri": "https://api.example/auth/discord/callback",
        "discord_guild_id": "guild-1",
        "discord_bot_token": "bot-token",
        "admin_role_ids": "ADMIN_ROLE_ID",
        "rh_role_ids": "RH_ROLE_ID",
        "employee_role_ids": "EMPLOYEE_ROLE_ID, MECANO_ROLE_ID",
        "google_sheet_id": "sheet-1",
        "google_api_key": "api-key",
        "frontend_url": FRONTEND,
        "session_secret": "test-secret",
    }
    values.update(overrides)
    return Settings(**values)


ClientFactory = Callable[..., Awaitable[httpx.AsyncClient]]


@pytest.fixture(scope="session", autouse=True)
def _structured_logging() -> None:
    # Configure before any module logger is first used so every line reaches caplog.
    configure_logging(service_name="paleto-auth-test", level="DEBUG")


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest_asyncio.fixture
async def make_client(upstream: FakeUpstream) -> AsyncIterator[ClientFactory]:
    async with AsyncExitStack() as stack:

        async def factory(**overrides: Any) -> httpx.AsyncClient:
            app = create_app(
                settings=make_settings(**overrides),
                transport=httpx.MockTransport(upstream.handler),
            )
            await stack.enter_async_context(app.router.lifespan_context(app))
            # https base URL: the session cookie is Secure.
            return await stack.enter_async_context(
                httpx.AsyncClient(
                    transport=httpx.ASGITransport(app=app, raise_app_exceptions=False),
                    base_url="https://testserver",
                )
            )

        yield factory


async def login(client: httpx.AsyncClient, code: str = "abc") -> httpx.Response:
    return await client.get("/auth/discord/callback", params={"code": code})
