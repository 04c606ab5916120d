"""
paleto_auth.sheets.client

Google Sheets `values.get` client.

Responsibilities:
- Read the whole employee sheet as rows of cell strings.
- Collapse every failure into `None` so callers can treat it as "not found".
"""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import quote

import httpx

from paleto_auth.observability.logging import get_logger

log = get_logger(__name__)

Rows = list[list[str]]


@dataclass(frozen=True, slots=True)
class SheetConfig:
    sheet_id: str
    api_key: str
    sheet_name: str
    api_base_url: str = "https://sheets.googleapis.com/v4"


class SheetsClient:
    def __init__(self, *, config: SheetConfig, http: httpx.AsyncClient) -> None:
        self._cfg = config
        self._http = http

    @property
    def values_url(self) -> str:
        base = self._cfg.api_base_url.rstrip("/")
        sheet = quote(self._cfg.sheet_name, safe="")
        return f"{base}/spreadsheets/{self._cfg.sheet_id}/values/{sheet}"

    async def fetch_rows(self) -> Rows | None:
        try:
            r = await self._http.get(
                self.values_url, headers={"X-goog-api-key": self._cfg.api_key}
            )
            r.raise_for_status()
            payload = r.json()
        except httpx.HTTPStatusError as e:
            # Only the status: the exception text embeds the request URL.
            log.warning(
                "sheet_fetch_failed", sheet=self._cfg.sheet_name, status=e.response.status_code
            )
            return None
        except (httpx.HTTPError, ValueError) as e:
            log.warning(
                "sheet_fetch_failed", sheet=self._cfg.sheet_name, error=type(e).__name__
            )
            return None

        values = payload.get("values", []) if isinstance(payload, dict) else None
        if not isinstance(values, list) or not all(isinstance(row, list) for row in values):
            log.warning("sheet_fetch_failed", sheet=self._cfg.sheet_name, error="malformed body")
            return None
        return [[str(cell) for cell in row] for row in values]


# --- Module Notes -----------------------------------------------------------
# The API key travels in the X-goog-api-key header, never in the URL, so
# request URLs and httpx error messages are safe to log.
