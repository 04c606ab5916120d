"""
paleto_auth.db.repositories.sessions

Repository for `StoredSession` rows.

Responsibilities:
- Insert a session snapshot with its expiry.
- Fetch live sessions, dropping expired ones on read.
- Delete sessions by id.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from paleto_auth.db.models import StoredSession, utcnow


class SessionRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(
        self,
        *,
        session_id: str,
        user_id: str,
        identity: dict[str, Any],
        expires_at: datetime,
    ) -> StoredSession:
        row = StoredSession(
            id=session_id,
            user_id=user_id,
            identity=identity,
            expires_at=expires_at,
        )
        self._session.add(row)
        await self._session.flush()
        return row

    async def get_live(self, session_id: str) -> StoredSession | None:
        row = await self._session.get(StoredSession, session_id)
        if row is None:
            return None
        if row.expires_at <= utcnow():
            await self._session.delete(row)
            return None
        return row

    async def delete(self, session_id: str) -> None:
        await self._session.execute(delete(StoredSession).where(StoredSession.id == session_id))

    async def purge_expired(self) -> int:
        result = await self._session.execute(
            delete(StoredSession).where(StoredSession.expires_at <= utcnow())
        )
        return result.rowcount or 0


# --- Module Notes -----------------------------------------------------------
# Commit/rollback is owned by `sessions.store.SqlSessionStore`, one transaction per call.
