from __future__ import annotations

import re
from pathlib import Path
import sys
from typing import Any


import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from sheetstore.ranges import column_to_index  # noqa: E402

A1_RE = re.compile(r"^(?:(?P<sheet>'(?:[^']|'')*'|[^!]+)!)?(?P<c1>[A-Z]+)(?P<r1>\d+):(?P<c2>[A-Z]+)$")

DEFAULT_SHEET = "Sheet1"


class FakeSheet:
    """
    In-memory stand-in for a spreadsheet's values API.

    Cells live in a grid keyed by (sheet, row, column). Reads return strings,
    drop trailing empty cells and rows, and keep empty interior rows as [],
    like the Sheets API does.
    """

    def __init__(self) -> None:
        self.cells: dict[tuple[str, int, int], Any] = {}
        self.calls: list[tuple[str, str]] = []
        self.fail_on: set[str] = set()

    def _parse(self, a1_range: str) -> tuple[str, int, int, int]:
        m = A1_RE.match(a1_range)
        assert m, f"unexpected range {a1_range!r}"
        sheet = m.group("sheet") or DEFAULT_SHEET
        if sheet.startswith("'"):
            sheet = sheet[1:-1].replace("''", "'")
        return sheet, int(m.group("r1")), column_to_index(m.group("c1")), column_to_index(m.group("c2"))

    def put_rows(self, a1_range: str, rows: list[list[Any]]) -> None:
        sheet, r1, c1, _ = self._parse(a1_range)
        for i, row in enumerate(rows):
            for j, value in enumerate(row):
                self.cells[(sheet, r1 + i, c1 + j)] = value

    def get_values(self, a1_range: str) -> list[list[str]]:
        self.calls.append(("get", a1_range))
        if "get" in self.fail_on:
            raise RuntimeError("remote read failed")
        sheet, r1, c1, c2 = self._parse(a1_range)
        rows_present = [r for (s, r, c) in self.cells if s == sheet and r >= r1 and c1 <= c <= c2]
        out: list[list[str]] = []
        for r in range(r1, max(rows_present, default=r1 - 1) + 1):
            row = [self.cells.get((sheet, r, c), "") for c in range(c1, c2 + 1)]
            while row and row[-1] == "":
                row.pop()
            out.append([str(v) for v in row])
        return out

    def clear_values(self, a1_range: str) -> None:
        self.calls.append(("clear", a1_range))
        if "clear" in self.fail_on:
            raise RuntimeError("remote clear failed")
        sheet, r1, c1, c2 = self._parse(a1_range)
        for key in [k for k in self.cells if k[0] == sheet and k[1] >= r1 and c1 <= k[2] <= c2]:
            del self.cells[key]

    def update_values(self, a1_range: str, rows: list[list[Any]]) -> None:
        self.calls.append(("update", a1_range))
        if "update" in self.fail_on:
            raise RuntimeError("remote write failed")
        self.put_rows(a1_range, rows)


@pytest.fixture
def fake_sheet() -> FakeSheet:
    return FakeSheet()


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in (
        "SHEET_ID",
        "SHEET_NAME",
        "START_X",
        "START_Y",
        "END_X",
        "SERVICE_ACCOUNT_CREDENTIALS",
        "GOOGLE_CLIENT_EMAIL",
        "GOOGLE_PRIVATE_KEY",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
