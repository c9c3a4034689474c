from __future__ import annotations

from typing import Protocol, Union

CellValue = Union[str, int, float, bool]


class ValuesClient(Protocol):
    """
    The three spreadsheet operations the store depends on. All calls are
    blocking; the store runs them off the event loop.
    """

    def get_values(self, a1_range: str) -> list[list[str]]:
        """Return the rows of `a1_range` (trailing empty rows/cells omitted)."""
        ...

    def clear_values(self, a1_range: str) -> None:
        ...

    def update_values(self, a1_range: str, rows: list[list[CellValue]]) -> None:
        """Write `rows` starting at the top-left cell of `a1_range`."""
        ...
