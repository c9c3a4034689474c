from __future__ import annotations

from .credentials import ServiceAccountInfo, build_credentials, resolve_credentials
from .errors import ConfigurationError, SheetStoreError
from .factory import create_key_value_store
from .gsheets import GspreadValuesClient, open_values_client
from .identifiers import resolve_spreadsheet_id
from .interfaces import CellValue, ValuesClient
from .proxy import AttributeAccessStore
from .ranges import RangeCoordinates
from .settings import Settings, get_settings, load_settings
from .store import SheetKeyValueStore

__all__ = [
    "AttributeAccessStore",
    "CellValue",
    "ConfigurationError",
    "GspreadValuesClient",
    "RangeCoordinates",
    "ServiceAccountInfo",
    "Settings",
    "SheetKeyValueStore",
    "SheetStoreError",
    "ValuesClient",
    "build_credentials",
    "create_key_value_store",
    "get_settings",
    "load_settings",
    "open_values_client",
    "resolve_credentials",
    "resolve_spreadsheet_id",
]
