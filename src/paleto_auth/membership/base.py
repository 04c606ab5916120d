"""
paleto_auth.membership.base

Resolver interface shared by both deployment modes.
"""

from __future__ import annotations

from typing import Protocol

from paleto_auth.auth.roles import GuildRoles
from paleto_auth.sheets.rows import EmployeeRecord

MembershipFacts = GuildRoles | EmployeeRecord


class MembershipResolver(Protocol):
    # Redirect reason used when `resolve` returns None.
    not_found_reason: str

    async def resolve(self, user_id: str) -> MembershipFacts | None: ...
