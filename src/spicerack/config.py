"""Application configuration helpers."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

ENV_FILE_CANDIDATES = (Path(".env"), Path(".env.local"))


class Settings(BaseModel):
    """Global application settings loaded from environment variables or .env files."""

    database_path: Path = Field(
        default=Path("./data/spicerack.db"),
        description="SQLite database location.",
    )
    catalog_path: Optional[Path] = Field(
        default=None,
        description="Markdown spice catalog (falls back to the packaged list when unset).",
    )
    api_token: Optional[str] = Field(
        default=None,
        description="Bearer token required for mutating endpoints.",
    )
    log_level: str = Field(default="INFO", description="Logging level (DEBUG/INFO/WARNING/ERROR)")
    log_format: str = Field(
        default="plain",
        description="Logging format (plain/json).",
    )
    log_requests: bool = Field(
        default=True,
        description="Emit request access logs when true.",
    )
    default_shelf_count: int = Field(
        default=3,
        ge=1,
        description="Shelf count used when no saved configuration exists.",
    )
    search_limit: int = Field(
        default=10,
        ge=1,
        description="Maximum number of fuzzy search suggestions returned.",
    )

    model_config = ConfigDict(frozen=True)


def _coerce_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _parse_env_file(path: Path) -> dict[str, str]:
    payload: dict[str, str] = {}
    try:
        with path.open("r", encoding="utf-8") as handle:
            for raw_line in handle:
                line = raw_line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue
                key, raw_value = line.split("=", 1)
                payload[key.strip()] = raw_value.strip()
    except FileNotFoundError:
        return {}
    return payload


def _load_env_file_values() -> dict[str, str]:
    values: dict[str, str] = {}
    for candidate in ENV_FILE_CANDIDATES:
        values.update(_parse_env_file(candidate))
    return values


def _load_from_env() -> dict[str, object]:
    """Load optional overrides from env vars (with .env fallbacks)."""

    file_values = _load_env_file_values()

    def _env(key: str) -> Optional[str]:
        return os.environ.get(key) or file_values.get(key)

    payload: dict[str, object] = {}
    if (db_path := _env("SPICERACK_DATABASE_PATH")):
        payload["database_path"] = Path(db_path)
    if (catalog_path := _env("SPICERACK_CATALOG_PATH")):
        payload["catalog_path"] = Path(catalog_path)
    if (api_token := _env("SPICERACK_API_TOKEN")):
        payload["api_token"] = api_token
    if (log_level := _env("SPICERACK_LOG_LEVEL")):
        payload["log_level"] = log_level
    if (log_format := _env("SPICERACK_LOG_FORMAT")):
        payload["log_format"] = log_format
    if (log_requests := _env("SPICERACK_LOG_REQUESTS")):
        payload["log_requests"] = _coerce_bool(log_requests)
    if (shelf_count := _env("SPICERACK_DEFAULT_SHELF_COUNT")):
        try:
            payload["default_shelf_count"] = max(1, int(shelf_count))
        except ValueError:
            pass
    if (search_limit := _env("SPICERACK_SEARCH_LIMIT")):
        try:
            payload["search_limit"] = max(1, int(search_limit))
        except ValueError:
            pass
    return payload


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings(**_load_from_env())
