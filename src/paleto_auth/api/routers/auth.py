"""
paleto_auth.api.routers.auth

Discord OAuth2 browser flow.

Responsibilities:
- Redirect the browser to Discord's authorize page.
- Handle the callback: run the login service, set the session cookie and
  send the browser back to the frontend with `?auth=success` or `?error=<reason>`.
"""

from __future__ import annotations

from urllib.parse import urlencode

from fastapi import APIRouter, Depends
from fastapi.responses import RedirectResponse
from starlette.status import HTTP_302_FOUND

from paleto_auth.api.deps import discord_dep, login_service_dep, session_manager_dep, settings_dep
from paleto_auth.discord.client import DiscordClient
from paleto_auth.errors import LoginError
from paleto_auth.observability.logging import get_logger
from paleto_auth.services.login_service import LoginService
from paleto_auth.sessions.manager import SessionManager
from paleto_auth.settings import Settings

router = APIRouter(tags=["auth"])
log = get_logger(__name__)


def _to_frontend(settings: Settings, **params: str) -> RedirectResponse:
    return RedirectResponse(
        f"{settings.frontend_url}?{urlencode(params)}", status_code=HTTP_302_FOUND
    )


@router.get("/auth/discord")
async def discord_login(
    settings: Settings = Depends(settings_dep),
    discord: DiscordClient = Depends(discord_dep),
) -> RedirectResponse:
    log.info("oauth_redirect", scope=settings.oauth_scope)
    return RedirectResponse(
        discord.authorize_url(scope=settings.oauth_scope), status_code=HTTP_302_FOUND
    )


@router.get("/auth/discord/callback")
async def discord_callback(
    code: str | None = None,
    settings: Settings = Depends(settings_dep),
    login: LoginService = Depends(login_service_dep),
    sessions: SessionManager = Depends(session_manager_dep),
) -> RedirectResponse:
    if not code:
        log.warning("login_failed", reason="no_code")
        return _to_frontend(settings, error="no_code")

    try:
        session_id, identity = await login.complete(code)
    except LoginError as e:
        log.warning("login_failed", reason=e.reason, error=str(e))
        return _to_frontend(settings, error=e.reason)
    except Exception:
        # The browser only ever sees the opaque reason code.
        log.exception("login_failed", reason="auth_failed")
        return _to_frontend(settings, error="auth_failed")

    log.info("login_succeeded", user_id=identity.id, role=identity.role)
    response = _to_frontend(settings, auth="success")
    response.set_cookie(
        key=settings.session_cookie_name,
        value=sessions.cookie_for(session_id),
        max_age=settings.session_ttl_seconds,
        httponly=True,
        secure=True,
        samesite="none",
    )
    return response
