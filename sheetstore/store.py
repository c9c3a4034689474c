from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterator, MutableMapping
from typing import Any

from .interfaces import CellValue, ValuesClient
from .ranges import RangeCoordinates

logger = logging.getLogger(__name__)


class SheetKeyValueStore(MutableMapping[str, CellValue]):
    """
    Key/value pairs kept in a two-column range of a spreadsheet.

    The in-memory mapping is a volatile copy of the range:

    - load() replaces it with what the sheet currently holds.
    - save() clears the range and writes the mapping back, row per entry,
      in insertion order. Edits made remotely since the last load() are lost.

    save() is two remote calls (clear, then write). If the write fails the
    range is left empty; the error is logged and re-raised.
    """

    def __init__(self, client: ValuesClient, spreadsheet_id: str, coordinates: RangeCoordinates):
        self._client = client
        self._spreadsheet_id = spreadsheet_id
        self._coordinates = coordinates
        self._data: dict[str, CellValue] = {}

        if coordinates.sheet_name is None:
            logger.warning(
                'No "sheet_name" provided for spreadsheet %s; the first sheet will be used.',
                spreadsheet_id,
            )

    @property
    def spreadsheet_id(self) -> str:
        return self._spreadsheet_id

    @property
    def coordinates(self) -> RangeCoordinates:
        return self._coordinates

    @property
    def a1_range(self) -> str:
        return self._coordinates.a1()

    @property
    def data(self) -> dict[str, CellValue]:
        return dict(self._data)

    async def load(self) -> None:
        a1_range = self.a1_range
        rows = await asyncio.to_thread(self._client.get_values, a1_range)

        data: dict[str, CellValue] = {}
        for index, row in enumerate(rows or []):
            if not row or row[0] in (None, ""):
                logger.debug("LOAD %s: skipping row %d without a key", a1_range, index)
                continue
            key = str(row[0])
            data[key] = row[1] if len(row) > 1 and row[1] is not None else ""

        self._data = data
        logger.info("Loaded %d keys from %s (%s)", len(data), a1_range, self._spreadsheet_id)

    async def save(self) -> None:
        a1_range = self.a1_range
        rows: list[list[CellValue]] = [[key, value] for key, value in self._data.items()]

        await asyncio.to_thread(self._client.clear_values, a1_range)
        if rows:
            try:
                await asyncio.to_thread(self._client.update_values, a1_range, rows)
            except Exception:
                logger.warning(
                    "SAVE %s: write failed after clear; the range is now empty (%d keys not written)",
                    a1_range,
                    len(rows),
                )
                raise
        logger.info("Saved %d keys to %s (%s)", len(rows), a1_range, self._spreadsheet_id)

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set(self, key: str, value: CellValue) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def __getitem__(self, key: str) -> CellValue:
        return self._data[key]

    def __setitem__(self, key: str, value: CellValue) -> None:
        self.set(key, value)

    def __delitem__(self, key: str) -> None:
        del self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._spreadsheet_id!r}, {self.a1_range!r}, keys={len(self._data)})"
