"""
paleto_auth.sessions.manager

Session lifecycle on top of a `SessionStore`.

Responsibilities:
- Mint a fresh random id for every login and persist the identity before
  reporting success.
- Read the identity behind a signed cookie; any failure reads as "no session".
- Destroy sessions so their ids can never be used again.
"""

from __future__ import annotations

import secrets
from datetime import timedelta

from paleto_auth.auth.cookies import (
    CookieSigner,
    CookieValidationError,
    read_session_id,
    sign_session_id,
)
from paleto_auth.auth.models import SessionIdentity
from paleto_auth.errors import SessionPersistError
from paleto_auth.observability.logging import get_logger
from paleto_auth.sessions.store import SessionStore

log = get_logger(__name__)


class SessionManager:
    def __init__(self, *, store: SessionStore, signer: CookieSigner, ttl: timedelta) -> None:
        self._store = store
        self._signer = signer
        self.ttl = ttl

    async def create_session(self, identity: SessionIdentity) -> str:
        """
        Persist `identity` under a new id and return the id.
        Raises SessionPersistError when the store cannot save it.
        """

        session_id = secrets.token_urlsafe(32)
        await self._store.put(session_id, identity, self.ttl)
        log.info("session_created", user_id=identity.id, role=identity.role)
        return session_id

    async def read_session(self, session_id: str | None) -> SessionIdentity | None:
        if not session_id:
            return None
        try:
            return await self._store.get(session_id)
        except SessionPersistError as e:
            log.error("session_read_failed", error=str(e))
            return None

    async def destroy_session(self, session_id: str | None) -> None:
        if not session_id:
            return
        await self._store.delete(session_id)
        log.info("session_destroyed")

    def cookie_for(self, session_id: str) -> str:
        return sign_session_id(signer=self._signer, session_id=session_id, ttl=self.ttl)

    def session_id_from_cookie(self, cookie: str | None) -> str | None:
        if not cookie:
            return None
        try:
            return read_session_id(signer=self._signer, cookie=cookie)
        except CookieValidationError as e:
            log.info("session_cookie_rejected", error=str(e))
            return None
