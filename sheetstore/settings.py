from __future__ import annotations

import dataclasses
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .errors import ConfigurationError


def _env_str(name: str) -> str | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    return raw.strip()


def _env_int(name: str, default: int) -> int:
    raw = _env_str(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from e


@dataclass(frozen=True)
class Settings:
    # Spreadsheet location (id or full URL)
    sheet_id: str
    sheet_name: str | None

    # Top-left cell of the key/value table
    start_x: str
    start_y: int
    # Value column; None means the column right after start_x
    end_x: str | None

    # Credentials: explicit pair wins over the JSON file
    service_account_credentials: str
    client_email: str | None
    private_key: str | None

    def replace(self, **overrides) -> "Settings":
        return dataclasses.replace(self, **overrides)


def get_settings() -> Settings:
    return Settings(
        sheet_id=_env_str("SHEET_ID") or "",
        sheet_name=_env_str("SHEET_NAME"),
        start_x=_env_str("START_X") or "A",
        start_y=_env_int("START_Y", 1),
        end_x=_env_str("END_X"),
        service_account_credentials=_env_str("SERVICE_ACCOUNT_CREDENTIALS") or "./service_account.json",
        # Not stripped beyond the blank check: keys are multi-line.
        client_email=_env_str("GOOGLE_CLIENT_EMAIL"),
        private_key=os.getenv("GOOGLE_PRIVATE_KEY") or None,
    )


def load_settings(env_file: str | Path | None = ".env") -> Settings:
    """
    Load a dotenv file (if present) into the environment, then read settings.
    Variables already set in the environment take precedence over the file.
    """
    if env_file is not None:
        load_dotenv(env_file)
    return get_settings()
