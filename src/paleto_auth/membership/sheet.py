"""
paleto_auth.membership.sheet

Resolve membership from the employee registry spreadsheet.

A failed sheet fetch and a missing row produce the same `None`; they are
only told apart in the logs.
"""

from __future__ import annotations

from paleto_auth.observability.logging import get_logger
from paleto_auth.sheets.client import SheetsClient
from paleto_auth.sheets.rows import (
    EmployeeRecord,
    find_employee,
    find_header_index,
    matching_row_indexes,
)

log = get_logger(__name__)


class SheetMembershipResolver:
    not_found_reason = "not_employee"

    def __init__(self, *, sheets: SheetsClient) -> None:
        self._sheets = sheets

    async def resolve(self, user_id: str) -> EmployeeRecord | None:
        rows = await self._sheets.fetch_rows()
        if rows is None:
            return None

        if find_header_index(rows) is None:
            log.warning("sheet_header_missing", rows=len(rows))
            return None

        employee = find_employee(rows, user_id)
        if employee is None:
            log.info("employee_not_found", user_id=user_id)
            return None

        duplicates = matching_row_indexes(rows, user_id)
        if len(duplicates) > 1:
            # First row wins; duplicates are reported, not rejected.
            log.warning("duplicate_discord_id", user_id=user_id, rows=duplicates)
        return employee
