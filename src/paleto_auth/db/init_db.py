"""
paleto_auth.db.init_db

DB initialization helper (development/test convenience).
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncEngine

from paleto_auth.db import models  # noqa: F401  # registers tables on Base.metadata
from paleto_auth.db.base import Base


async def init_db(engine: AsyncEngine) -> None:
    """
    Create tables if they don't exist. Production runs Alembic migrations instead.
    """

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
