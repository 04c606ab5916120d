from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from paleto_auth.api.deps import session_manager_dep, settings_dep
from paleto_auth.auth.deps import current_identity, require_auth, session_id_dep
from paleto_auth.auth.models import SessionIdentity
from paleto_auth.errors import SessionPersistError
from paleto_auth.observability.logging import get_logger
from paleto_auth.sessions.manager import SessionManager
from paleto_auth.settings import Settings

router = APIRouter(prefix="/api", tags=["session"])
log = get_logger(__name__)


@router.get("/check-auth")
async def check_auth(
    identity: SessionIdentity | None = Depends(current_identity),
) -> dict[str, Any]:
    if identity is None:
        return {"authenticated": False}
    return {"authenticated": True, "user": identity.to_public()}


@router.get("/user")
async def current_user(identity: SessionIdentity = Depends(require_auth)) -> dict[str, Any]:
    return identity.to_public()


@router.post("/logout")
async def logout(
    session_id: str | None = Depends(session_id_dep),
    settings: Settings = Depends(settings_dep),
    sessions: SessionManager = Depends(session_manager_dep),
) -> JSONResponse:
    try:
        await sessions.destroy_session(session_id)
    except SessionPersistError as e:
        log.error("logout_failed", error=str(e))
        raise HTTPException(
            status_code=HTTP_500_INTERNAL_SERVER_ERROR, detail="Logout failed"
        ) from e

    response = JSONResponse({"success": True})
    response.delete_cookie(
        settings.session_cookie_name, httponly=True, secure=True, samesite="none"
    )
    return response
