from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from .interfaces import CellValue
from .store import SheetKeyValueStore


class AttributeAccessStore:
    """
    Attribute-style access to the entries of a SheetKeyValueStore:

        store.counter = "3"
        await store.save()

    Names the store itself defines (load, save, items, spreadsheet_id, ...)
    always resolve to the store member. Only other names read from and write
    to the mapping. Entries shadowed by a member stay reachable through
    item access: store["save"].
    """

    __slots__ = ("_store",)

    def __init__(self, store: SheetKeyValueStore):
        object.__setattr__(self, "_store", store)

    @property
    def store(self) -> SheetKeyValueStore:
        return self._store

    def __getattr__(self, name: str) -> Any:
        store = self._store
        if hasattr(store, name):
            return getattr(store, name)
        try:
            return store[name]
        except KeyError:
            raise AttributeError(name) from None

    def __setattr__(self, name: str, value: CellValue) -> None:
        if hasattr(type(self), name) or hasattr(self._store, name):
            raise AttributeError(f"{name!r} is a store member and cannot be assigned")
        self._store[name] = value

    def __delattr__(self, name: str) -> None:
        if hasattr(self._store, name):
            raise AttributeError(f"{name!r} is a store member and cannot be deleted")
        try:
            del self._store[name]
        except KeyError:
            raise AttributeError(name) from None

    def __getitem__(self, key: str) -> CellValue:
        return self._store[key]

    def __setitem__(self, key: str, value: CellValue) -> None:
        self._store[key] = value

    def __delitem__(self, key: str) -> None:
        del self._store[key]

    def __contains__(self, key: object) -> bool:
        return key in self._store

    def __iter__(self) -> Iterator[str]:
        return iter(self._store)

    def __len__(self) -> int:
        return len(self._store)

    def __dir__(self) -> list[str]:
        return sorted(set(dir(self._store)) | set(self._store.keys()) | {"store"})

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._store!r})"
