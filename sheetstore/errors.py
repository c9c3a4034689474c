from __future__ import annotations


class SheetStoreError(Exception):
    """Base class for errors raised by sheetstore itself."""


class ConfigurationError(SheetStoreError, ValueError):
    """
    Raised before any remote call when the store cannot be configured:
    missing spreadsheet id, bad range coordinates, or no usable credentials.
    """
