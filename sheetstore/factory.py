from __future__ import annotations

import asyncio
import logging

from .credentials import build_credentials, resolve_credentials
from .errors import ConfigurationError
from .gsheets import open_values_client
from .identifiers import resolve_spreadsheet_id
from .proxy import AttributeAccessStore
from .ranges import RangeCoordinates
from .settings import Settings, load_settings
from .store import SheetKeyValueStore

logger = logging.getLogger(__name__)


async def create_key_value_store(settings: Settings | None = None, **overrides) -> AttributeAccessStore:
    """
    Build a store from settings, load it once, and return it wrapped for
    attribute access.

    `settings` defaults to `load_settings()` (.env + environment). Keyword
    overrides replace individual Settings fields, e.g.
    `create_key_value_store(sheet_name="Config")`.

    Configuration problems raise ConfigurationError before any remote call.
    Remote errors from opening or reading the spreadsheet propagate as-is.
    """
    if settings is None:
        settings = load_settings()
    if overrides:
        settings = settings.replace(**overrides)

    if not settings.sheet_id:
        raise ConfigurationError("No SHEET_ID found. Provide it via settings or .env.")

    spreadsheet_id = resolve_spreadsheet_id(settings.sheet_id)
    coordinates = RangeCoordinates(
        sheet_name=settings.sheet_name,
        start_column=settings.start_x,
        start_row=settings.start_y,
        end_column=settings.end_x,
    )
    info = resolve_credentials(
        client_email=settings.client_email,
        private_key=settings.private_key,
        credentials_file=settings.service_account_credentials,
    )

    credentials = build_credentials(info)
    client = await asyncio.to_thread(open_values_client, credentials, spreadsheet_id)

    store = SheetKeyValueStore(client, spreadsheet_id, coordinates)
    await store.load()
    logger.info("Key/value store ready: %s %s", spreadsheet_id, store.a1_range)
    return AttributeAccessStore(store)
