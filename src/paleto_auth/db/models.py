"""
paleto_auth.db.models

Persistence schema for server-side sessions.

Responsibilities:
- StoredSession: one row per live browser session, holding the identity snapshot.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from paleto_auth.db.base import Base


def utcnow() -> datetime:
    # Naive UTC timestamps; SQLite drops tzinfo anyway.
    return datetime.now(tz=UTC).replace(tzinfo=None)


class StoredSession(Base):
    __tablename__ = "sessions"

    # Opaque random id; never reused after deletion.
    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    user_id: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    identity: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False)

    created_at: Mapped[datetime] = mapped_column(nullable=False, default=utcnow)
    expires_at: Mapped[datetime] = mapped_column(nullable=False, index=True)


# --- Module Notes -----------------------------------------------------------
# `identity` is the `SessionIdentity.to_dict()` snapshot; it is written once at
# login and never updated in place.
