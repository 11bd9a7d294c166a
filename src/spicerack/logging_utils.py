"""Logging setup shared by the API server and the CLI."""

from __future__ import annotations

import json
import logging
import re
from datetime import datetime, timezone
from typing import Iterable, List, Sequence

REDACTED = "[redacted]"

_TOKEN_PATTERNS = (
    re.compile(r"(Bearer\s+)([A-Za-z0-9\-._~+/=]+)", re.IGNORECASE),
    re.compile(r"(api_token=)([^&\s]+)", re.IGNORECASE),
    re.compile(r"(X-API-Key[=:]\s*)([^&\s]+)", re.IGNORECASE),
)

# Extra attributes copied into JSON log lines when present on a record.
_CONTEXT_FIELDS = ("request_id", "user_id", "shelf_count")

_SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def redact(message: str, secrets: Sequence[str]) -> str:
    """Mask auth tokens and configured secrets in ``message``."""

    for pattern in _TOKEN_PATTERNS:
        message = pattern.sub(r"\1" + REDACTED, message)
    for secret in secrets:
        if secret:
            message = message.replace(secret, REDACTED)
    return message


class SensitiveDataFilter(logging.Filter):
    """Filter that redacts the API token from log records before they are emitted."""

    def __init__(self, secrets: Iterable[str]):
        super().__init__()
        self._secrets: List[str] = [secret.strip() for secret in secrets if secret and secret.strip()]

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401 - standard interface
        message = record.getMessage()
        sanitized = redact(message, self._secrets)
        if sanitized != message:
            record.msg = sanitized
            record.args = ()

        if self._secrets:
            for key, value in list(vars(record).items()):
                if isinstance(value, str) and key != "msg":
                    setattr(record, key, redact(value, self._secrets))

        return True


class JsonFormatter(logging.Formatter):
    """One JSON object per line, carrying request and user context when available."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401 - override
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for field in _CONTEXT_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                payload[field] = value

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=True)


def configure_logging(level_name: str, fmt: str, secrets: Iterable[str] = ()) -> None:
    """Install a single root handler using the plain or JSON format."""

    numeric_level = getattr(logging, (level_name or "INFO").upper(), logging.INFO)

    handler = logging.StreamHandler()
    if (fmt or "plain").lower() == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )
    handler.setFormatter(formatter)

    filter_ = SensitiveDataFilter(secrets)
    handler.addFilter(filter_)

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(numeric_level)

    logging.captureWarnings(True)

    for name in _SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers = []
        server_logger.setLevel(numeric_level)
        server_logger.propagate = True
