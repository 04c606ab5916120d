"""
paleto_auth.db

Persistence package.

Responsibilities:
- SQLAlchemy base, ORM models, engine/session helpers.
- Repository for server-side session records.
"""

# Package marker.
