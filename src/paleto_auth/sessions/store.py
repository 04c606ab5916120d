"""
paleto_auth.sessions.store

Session store implementations.

Responsibilities:
- Persist a `SessionIdentity` under an opaque id with a fixed TTL.
- Treat expired entries as absent and sweep them on every write.
- Surface persistence failures as `SessionPersistError`.
"""

from __future__ import annotations

import time
from datetime import timedelta
from typing import Protocol

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from paleto_auth.auth.models import SessionIdentity
from paleto_auth.db.models import utcnow
from paleto_auth.db.repositories.sessions import SessionRepo
from paleto_auth.errors import SessionPersistError
from paleto_auth.observability.logging import get_logger

log = get_logger(__name__)


class SessionStore(Protocol):
    async def get(self, session_id: str) -> SessionIdentity | None: ...

    async def put(self, session_id: str, identity: SessionIdentity, ttl: timedelta) -> None: ...

    async def delete(self, session_id: str) -> None: ...


class SqlSessionStore:
    """
    One committed transaction per call, so a successful `put` is visible to
    the very next request (the post-login redirect).
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._factory = session_factory

    async def get(self, session_id: str) -> SessionIdentity | None:
        try:
            async with self._factory() as session, session.begin():
                row = await SessionRepo(session).get_live(session_id)
                if row is None:
                    return None
                return SessionIdentity.from_dict(row.identity)
        except SQLAlchemyError as e:
            raise SessionPersistError(f"session read failed: {e}") from e
        except (KeyError, TypeError, AttributeError) as e:
            # A row that no longer parses reads as "no session".
            log.warning("session_row_unreadable", error=type(e).__name__)
            return None

    async def put(self, session_id: str, identity: SessionIdentity, ttl: timedelta) -> None:
        try:
            async with self._factory() as session, session.begin():
                repo = SessionRepo(session)
                # Abandoned sessions are swept whenever a new one is written.
                await repo.purge_expired()
                await repo.add(
                    session_id=session_id,
                    user_id=identity.id,
                    identity=identity.to_dict(),
                    expires_at=utcnow() + ttl,
                )
        except SQLAlchemyError as e:
            raise SessionPersistError(f"session write failed: {e}") from e

    async def delete(self, session_id: str) -> None:
        try:
            async with self._factory() as session, session.begin():
                await SessionRepo(session).delete(session_id)
        except SQLAlchemyError as e:
            raise SessionPersistError(f"session delete failed: {e}") from e

    async def purge_expired(self) -> int:
        async with self._factory() as session, session.begin():
            return await SessionRepo(session).purge_expired()


class MemorySessionStore:
    # Process-local; sessions vanish on restart. Used for development and tests.

    def __init__(self) -> None:
        self._data: dict[str, tuple[SessionIdentity, float]] = {}

    async def get(self, session_id: str) -> SessionIdentity | None:
        entry = self._data.get(session_id)
        if entry is None:
            return None
        identity, expires_at = entry
        if expires_at <= time.monotonic():
            self._data.pop(session_id, None)
            return None
        return identity

    async def put(self, session_id: str, identity: SessionIdentity, ttl: timedelta) -> None:
        now = time.monotonic()
        for expired in [sid for sid, (_, exp) in self._data.items() if exp <= now]:
            del self._data[expired]
        self._data[session_id] = (identity, time.monotonic() + ttl.total_seconds())

    async def delete(self, session_id: str) -> None:
        self._data.pop(session_id, None)

    def __len__(self) -> int:
        return len(self._data)
