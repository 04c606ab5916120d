"""
paleto_auth.auth.roles

Role levels and role classification.

Both classifiers are pure and total: every input yields one of the four roles,
and rules are evaluated in declared order with the first match winning.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass

from paleto_auth.sheets.rows import EmployeeRecord


class Role(enum.StrEnum):
    visitor = "visitor"
    employee = "employee"
    rh = "rh"
    admin = "admin"

    @property
    def level(self) -> int:
        return _LEVELS[self]


_LEVELS = {Role.visitor: 0, Role.employee: 1, Role.rh: 2, Role.admin: 3}


def role_level(role: str | None) -> int:
    # Unknown or malformed role strings rank as visitor.
    try:
        return Role(role).level
    except ValueError:
        return 0


@dataclass(frozen=True, slots=True)
class GuildRoleIds:
    admin: frozenset[str] = frozenset()
    rh: frozenset[str] = frozenset()
    employee: frozenset[str] = frozenset()


@dataclass(frozen=True, slots=True)
class GuildRoles:
    role_ids: frozenset[str]


def classify_by_guild(role_ids: Iterable[str] | None, configured: GuildRoleIds) -> Role:
    held = frozenset(role_ids or ())
    if held & configured.admin:
        return Role.admin
    if held & configured.rh:
        return Role.rh
    if held & configured.employee:
        return Role.employee
    return Role.visitor


GRADE_RULES: tuple[tuple[Role, tuple[str, ...]], ...] = (
    (Role.admin, ("PATRON", "CO PATRON")),
    (Role.rh, ("DRH", "RH")),
    (
        Role.employee,
        ("RESPONSABLE", "CHEF", "CONFIRMÉ", "MÉCANO", "APPRENTI", "STAGIAIRE"),
    ),
)


def classify_by_grade(grade: str | None) -> Role:
    upper = (grade or "").upper()
    for role, keywords in GRADE_RULES:
        if any(k in upper for k in keywords):
            return role
    return Role.visitor


def classify(facts: GuildRoles | EmployeeRecord, configured: GuildRoleIds) -> Role:
    if isinstance(facts, GuildRoles):
        return classify_by_guild(facts.role_ids, configured)
    return classify_by_grade(facts.grade)


# --- Module Notes -----------------------------------------------------------
# Roles are computed once at login and stored with the session; they are not
# re-evaluated per request.
