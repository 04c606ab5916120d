"""
paleto_auth.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Hand out the components built once in `create_app` (stored on app.state).
"""

from __future__ import annotations

from fastapi import Request

from paleto_auth.discord.client import DiscordClient
from paleto_auth.services.login_service import LoginService
from paleto_auth.sessions.manager import SessionManager
from paleto_auth.settings import Settings


def settings_dep(request: Request) -> Settings:
    return request.app.state.settings  # type: ignore[attr-defined]


def discord_dep(request: Request) -> DiscordClient:
    return request.app.state.discord  # type: ignore[attr-defined]


def session_manager_dep(request: Request) -> SessionManager:
    return request.app.state.sessions  # type: ignore[attr-defined]


def login_service_dep(request: Request) -> LoginService:
    return request.app.state.login  # type: ignore[attr-defined]
