from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from google.oauth2.service_account import Credentials
from pydantic import BaseModel, ConfigDict, ValidationError

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]
GOOGLE_TOKEN_URI = "https://oauth2.googleapis.com/token"


class ServiceAccountInfo(BaseModel):
    """
    The subset of a service account JSON key that signing needs. Any other
    fields of the key file (project_id, private_key_id, ...) are kept.
    """

    model_config = ConfigDict(extra="allow")

    client_email: str
    private_key: str
    token_uri: str = GOOGLE_TOKEN_URI

    def to_info(self) -> dict[str, Any]:
        return self.model_dump(mode="json")


def _normalize_private_key(key: str) -> str:
    # Keys copied into .env files usually carry literal "\n" sequences.
    return key.replace("\\n", "\n")


def resolve_credentials(
    *,
    client_email: str | None = None,
    private_key: str | None = None,
    credentials_file: str | Path | None = None,
) -> ServiceAccountInfo:
    """
    Priority:
      1) client_email + private_key (the file is not touched)
      2) service account JSON file at credentials_file
    """
    if client_email and private_key:
        logger.debug("Using explicit service account credentials for %s", client_email)
        return ServiceAccountInfo(client_email=client_email, private_key=_normalize_private_key(private_key))

    path = Path(credentials_file).expanduser().resolve() if credentials_file else None
    if path is not None and path.is_file():
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
            info = ServiceAccountInfo.model_validate(raw)
        except (OSError, ValueError, ValidationError) as e:
            raise ConfigurationError(f"Invalid service account credentials file {path}: {e}") from e
        logger.debug("Using service account credentials from %s", path)
        return info

    raise ConfigurationError(
        "Cannot find valid service account credentials. "
        "Provide either (client_email, private_key) or a valid service account credentials file."
    )


def build_credentials(info: ServiceAccountInfo) -> Credentials:
    return Credentials.from_service_account_info(info.to_info(), scopes=SCOPES)
