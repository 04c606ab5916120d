"""
paleto_auth.sheets.rows

Pure lookups over the employee sheet.

Layout (after a header row): column C holds the display name, column E the
grade and column G the Discord user id.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

HEADER_MARKERS = ("Prénom / Nom", "ID Unique")

NAME_COLUMN = 2
GRADE_COLUMN = 4
DISCORD_ID_COLUMN = 6

UNKNOWN_NAME = "Inconnu"
NO_GRADE = "Aucun"


@dataclass(frozen=True, slots=True)
class EmployeeRecord:
    name: str
    grade: str
    discord_id: str


def _cell(row: Sequence[str], index: int) -> str:
    if index >= len(row) or row[index] is None:
        return ""
    return str(row[index]).strip()


def find_header_index(rows: Sequence[Sequence[str]]) -> int | None:
    # Marker match is a case-sensitive substring test on any cell.
    for i, row in enumerate(rows):
        if any(cell and any(m in str(cell) for m in HEADER_MARKERS) for cell in row or ()):
            return i
    return None


def matching_row_indexes(rows: Sequence[Sequence[str]], discord_id: str) -> list[int]:
    header = find_header_index(rows)
    if header is None:
        return []
    return [
        i
        for i in range(header + 1, len(rows))
        if _cell(rows[i] or (), DISCORD_ID_COLUMN) == discord_id
    ]


def find_employee(rows: Sequence[Sequence[str]], discord_id: str) -> EmployeeRecord | None:
    """
    First row after the header whose column G equals `discord_id`, or None.
    Returns None as well when no header row exists.
    """

    if not discord_id:
        return None
    matches = matching_row_indexes(rows, discord_id)
    if not matches:
        return None
    row = rows[matches[0]]
    return EmployeeRecord(
        name=_cell(row, NAME_COLUMN) or UNKNOWN_NAME,
        grade=_cell(row, GRADE_COLUMN) or NO_GRADE,
        discord_id=discord_id,
    )
