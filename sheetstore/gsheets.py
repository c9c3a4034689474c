from __future__ import annotations

import logging

import gspread
from google.oauth2.service_account import Credentials

from .interfaces import CellValue, ValuesClient

logger = logging.getLogger(__name__)


class GspreadValuesClient(ValuesClient):
    """
    ValuesClient over a single gspread Spreadsheet.

    Errors from gspread (APIError, SpreadsheetNotFound, ...) and from
    google-auth are not caught here.
    """

    def __init__(self, spreadsheet: gspread.Spreadsheet):
        self._spreadsheet = spreadsheet

    @property
    def spreadsheet(self) -> gspread.Spreadsheet:
        return self._spreadsheet

    def get_values(self, a1_range: str) -> list[list[str]]:
        logger.debug("SHEETS GET: %s", a1_range)
        response = self._spreadsheet.values_get(a1_range)
        values = response.get("values") if isinstance(response, dict) else None
        return values if isinstance(values, list) else []

    def clear_values(self, a1_range: str) -> None:
        logger.debug("SHEETS CLEAR: %s", a1_range)
        self._spreadsheet.values_clear(a1_range)

    def update_values(self, a1_range: str, rows: list[list[CellValue]]) -> None:
        logger.debug("SHEETS UPDATE: %s rows=%d", a1_range, len(rows))
        self._spreadsheet.values_update(
            a1_range,
            params={"valueInputOption": "RAW"},
            body={"values": rows},
        )


def open_values_client(credentials: Credentials, spreadsheet_id: str) -> GspreadValuesClient:
    """
    Authorise gspread with service-account credentials and open the
    spreadsheet by key. Blocking: this performs network I/O.
    """
    client = gspread.authorize(credentials)
    spreadsheet = client.open_by_key(spreadsheet_id)
    logger.info("Opened spreadsheet %s", spreadsheet_id)
    return GspreadValuesClient(spreadsheet)
