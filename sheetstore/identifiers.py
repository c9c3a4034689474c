from __future__ import annotations

import re

SPREADSHEET_URL_RE = re.compile(r"/spreadsheets/d/([a-zA-Z0-9_-]+)")


def resolve_spreadsheet_id(value: str) -> str:
    """
    Return the spreadsheet id from a full Google Sheets URL, or `value`
    unchanged when it carries no `/spreadsheets/d/<id>` segment.
    """
    match = SPREADSHEET_URL_RE.search(value)
    if match:
        return match.group(1)
    return value
