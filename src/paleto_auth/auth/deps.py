"""
paleto_auth.auth.deps

FastAPI dependency functions for authentication and authorization.

Responsibilities:
- Turn the signed session cookie into the stored `SessionIdentity`.
- Enforce minimum role levels via reusable dependency factories.
"""

from __future__ import annotations

from fastapi import Depends, HTTPException, Request
from starlette.status import HTTP_401_UNAUTHORIZED, HTTP_403_FORBIDDEN

from paleto_auth.api.deps import session_manager_dep, settings_dep
from paleto_auth.auth.models import SessionIdentity
from paleto_auth.auth.roles import Role
from paleto_auth.sessions.manager import SessionManager
from paleto_auth.settings import Settings


def session_id_dep(
    request: Request,
    settings: Settings = Depends(settings_dep),
    sessions: SessionManager = Depends(session_manager_dep),
) -> str | None:
    return sessions.session_id_from_cookie(request.cookies.get(settings.session_cookie_name))


async def current_identity(
    session_id: str | None = Depends(session_id_dep),
    sessions: SessionManager = Depends(session_manager_dep),
) -> SessionIdentity | None:
    # Never raises: a missing, forged or expired cookie reads as anonymous.
    return await sessions.read_session(session_id)


def require_auth(
    identity: SessionIdentity | None = Depends(current_identity),
) -> SessionIdentity:
    if identity is None:
        raise HTTPException(status_code=HTTP_401_UNAUTHORIZED, detail="Not authenticated")
    return identity


def require_role(minimum: Role):
    def _dep(identity: SessionIdentity = Depends(require_auth)) -> SessionIdentity:
        if not identity.has_at_least(minimum):
            raise HTTPException(status_code=HTTP_403_FORBIDDEN, detail="Insufficient role")
        return identity

    return _dep


# --- Module Notes -----------------------------------------------------------
# 401 means "log in first", 403 means "logged in, role too low"; the frontend relies
# on that distinction.
