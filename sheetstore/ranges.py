from __future__ import annotations

import re
from dataclasses import dataclass

from .errors import ConfigurationError

COLUMN_RE = re.compile(r"^[A-Z]+$")
PLAIN_SHEET_NAME_RE = re.compile(r"^[A-Za-z0-9_]+$")


def column_to_index(letters: str) -> int:
    """1-based index of a column label: A -> 1, Z -> 26, AA -> 27."""
    label = letters.strip().upper()
    if not COLUMN_RE.match(label):
        raise ConfigurationError(f"Invalid column label: {letters!r}")
    index = 0
    for ch in label:
        index = index * 26 + (ord(ch) - ord("A") + 1)
    return index


def index_to_column(index: int) -> str:
    if index < 1:
        raise ConfigurationError(f"Column index must be >= 1, got {index}")
    letters = []
    while index:
        index, rem = divmod(index - 1, 26)
        letters.append(chr(ord("A") + rem))
    return "".join(reversed(letters))


def next_column(letters: str) -> str:
    return index_to_column(column_to_index(letters) + 1)


def quote_sheet_name(name: str) -> str:
    # A1 notation needs quotes around names with spaces or punctuation.
    if PLAIN_SHEET_NAME_RE.match(name):
        return name
    return "'" + name.replace("'", "''") + "'"


@dataclass(frozen=True)
class RangeCoordinates:
    """
    Top-left cell of the two-column key/value table.

    The table runs from `start_column` to `value_column` and extends downward
    for as many rows as the sheet holds. `sheet_name=None` leaves the choice
    of sheet to the spreadsheet (its first sheet).
    """

    sheet_name: str | None = None
    start_column: str = "A"
    start_row: int = 1
    end_column: str | None = None

    def __post_init__(self) -> None:
        start = self.start_column.strip().upper()
        column_to_index(start)
        object.__setattr__(self, "start_column", start)

        if isinstance(self.start_row, bool) or not isinstance(self.start_row, int) or self.start_row < 1:
            raise ConfigurationError(f"start_row must be a positive integer, got {self.start_row!r}")

        if self.end_column is not None:
            end = self.end_column.strip().upper()
            if column_to_index(end) <= column_to_index(start):
                raise ConfigurationError(
                    f"end_column {end!r} must come after start_column {start!r}"
                )
            object.__setattr__(self, "end_column", end)

        if self.sheet_name is not None and not self.sheet_name.strip():
            object.__setattr__(self, "sheet_name", None)

    @property
    def value_column(self) -> str:
        return self.end_column or next_column(self.start_column)

    def a1(self) -> str:
        prefix = f"{quote_sheet_name(self.sheet_name)}!" if self.sheet_name else ""
        return f"{prefix}{self.start_column}{self.start_row}:{self.value_column}"
