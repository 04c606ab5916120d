"""
tests.test_sheet_rows

Header detection and identifier scan over the employee sheet.
"""

from __future__ import annotations

import httpx
import pytest

from paleto_auth.membership.sheet import SheetMembershipResolver
from paleto_auth.sheets.client import SheetConfig, SheetsClient
from paleto_auth.sheets.rows import find_employee, find_header_index


def _row(name: str, grade: str, discord_id: str) -> list[str]:
    return ["x", "y", name, "z", grade, "w", discord_id]


def test_no_header_row_means_not_found() -> None:
    rows = [["a", "b"], _row("Jean", "Patron", "5")]
    assert find_header_index(rows) is None
    assert find_employee(rows, "5") is None


def test_header_marker_is_a_case_sensitive_substring() -> None:
    assert find_header_index([[], ["", "ID Unique (G)"]]) == 1
    assert find_header_index([["id unique"], ["Prénom / Nom"]]) == 1


def test_match_after_header_uses_name_and_grade_columns() -> None:
    rows = [
        ["Titre"],
        [],
        ["", "", "Prénom / Nom", "", "Grade", "", "ID Discord"],
        _row("Alice", "Apprenti", "1"),
        _row("Bob", "Chef", "2"),
        _row("Chloé", "DRH", "42"),
    ]
    record = find_employee(rows, "42")
    assert record is not None
    assert (record.name, record.grade, record.discord_id) == ("Chloé", "DRH", "42")


def test_rows_before_header_are_ignored() -> None:
    rows = [_row("Early", "Patron", "7"), ["Prénom / Nom"], _row("Late", "Chef", "8")]
    assert find_employee(rows, "7") is None


def test_first_duplicate_wins() -> None:
    rows = [["Prénom / Nom"], _row("First", "Chef", "9"), _row("Second", "Patron", "9")]
    assert find_employee(rows, "9").name == "First"


def test_identifier_cell_is_trimmed_and_defaults_apply() -> None:
    rows = [["ID Unique"], ["", "", "", "", "", "", "  11  "]]
    record = find_employee(rows, "11")
    assert (record.name, record.grade) == ("Inconnu", "Aucun")


def test_short_rows_do_not_fail() -> None:
    rows = [["ID Unique"], ["only", "two"], []]
    assert find_employee(rows, "11") is None
    assert find_employee(rows, "") is None


def _resolver(handler) -> tuple[SheetMembershipResolver, httpx.AsyncClient]:
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    sheets = SheetsClient(
        config=SheetConfig(sheet_id="s", api_key="k", sheet_name="Info Employé"), http=http
    )
    return SheetMembershipResolver(sheets=sheets), http


@pytest.mark.asyncio
async def test_resolver_returns_none_on_transport_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("down", request=request)

    resolver, http = _resolver(handler)
    async with http:
        assert await resolver.resolve("1") is None


@pytest.mark.asyncio
async def test_resolver_finds_employee() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"values": [["ID Unique"], _row("Dan", "Mécano", "3")]})

    resolver, http = _resolver(handler)
    async with http:
        record = await resolver.resolve("3")
    assert record.name == "Dan"
    assert record.grade == "Mécano"
