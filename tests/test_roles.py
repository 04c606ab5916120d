"""
tests.test_roles

Role classifiers and role ordering.
"""

from __future__ import annotations

import itertools

import pytest

from paleto_auth.auth.models import SessionIdentity
from paleto_auth.auth.roles import (
    GuildRoleIds,
    GuildRoles,
    Role,
    classify,
    classify_by_grade,
    classify_by_guild,
    role_level,
)
from paleto_auth.sheets.rows import EmployeeRecord

CONFIGURED = GuildRoleIds(
    admin=frozenset({"a1", "a2"}),
    rh=frozenset({"r1"}),
    employee=frozenset({"e1", "e2"}),
)

ALL_IDS = ["a1", "a2", "r1", "e1", "e2", "x"]


def test_role_levels_are_ordered() -> None:
    assert [role_level(r) for r in ("visitor", "employee", "rh", "admin")] == [0, 1, 2, 3]


@pytest.mark.parametrize("raw", ["", "ADMIN", "superuser", None])
def test_unknown_role_strings_rank_as_visitor(raw) -> None:
    assert role_level(raw) == 0


def test_admin_takes_precedence_for_every_subset() -> None:
    for n in range(len(ALL_IDS) + 1):
        for subset in itertools.combinations(ALL_IDS, n):
            role = classify_by_guild(subset, CONFIGURED)
            assert role in set(Role)
            if {"a1", "a2"} & set(subset):
                assert role is Role.admin


@pytest.mark.parametrize(
    ("held", "expected"),
    [
        ({"r1", "e1"}, Role.rh),
        ({"e2"}, Role.employee),
        ({"x"}, Role.visitor),
        (set(), Role.visitor),
        (None, Role.visitor),
    ],
)
def test_guild_precedence(held, expected) -> None:
    assert classify_by_guild(held, CONFIGURED) is expected


@pytest.mark.parametrize(
    ("grade", "expected"),
    [
        ("Patron", Role.admin),
        ("co patron", Role.admin),
        ("DRH", Role.rh),
        ("Chef RH", Role.rh),
        ("chef d'atelier", Role.employee),
        ("Mécano confirmé", Role.employee),
        ("Apprenti", Role.employee),
        ("Stagiaire", Role.employee),
        ("Responsable dépanneuse", Role.employee),
        ("Aucun", Role.visitor),
        ("", Role.visitor),
    ],
)
def test_grade_keywords_first_match_wins(grade, expected) -> None:
    assert classify_by_grade(grade) is expected


def test_classify_dispatches_on_facts_type() -> None:
    assert classify(GuildRoles(role_ids=frozenset({"r1"})), CONFIGURED) is Role.rh
    record = EmployeeRecord(name="Jean", grade="Patron", discord_id="1")
    assert classify(record, CONFIGURED) is Role.admin


def test_identity_compares_levels() -> None:
    identity = SessionIdentity(
        id="1", username="u", discriminator="0", avatar_url="", role="rh"
    )
    assert identity.has_at_least(Role.employee)
    assert identity.has_at_least(Role.rh)
    assert not identity.has_at_least(Role.admin)
    assert SessionIdentity.from_dict(identity.to_dict()) == identity
