"""Library logger setup, JSON-line formatting and secret redaction."""

import json
import logging
import re
import sys
from datetime import UTC, datetime
from typing import Any

from auth0_management.core.settings import get_settings

LIBRARY_LOGGER_NAME = "auth0_management"

# Fields attached through ``extra=`` by the library's collaborators
_RECORD_FIELDS = ("component", "operation", "context_data", "http_details")

_SENSITIVE_KEYS = {
    "authorization",
    "cookie",
    "token",
    "client_secret",
    "password",
    "secret",
}
_BEARER_RE = re.compile(r"(?i)\bbearer\s+[a-z0-9\-._~+/]+=*")
_CLIENT_SECRET_RE = re.compile(r"(?i)(client_secret['\"]?\s*[:=]\s*['\"])([^'\"]+)(['\"])")


def _redact_value(value: Any) -> Any:
    if isinstance(value, dict):
        return {
            str(k): "<redacted>"
            if any(part in str(k).lower() for part in _SENSITIVE_KEYS)
            else _redact_value(v)
            for k, v in value.items()
        }
    if isinstance(value, (list, tuple)):
        return type(value)(_redact_value(v) for v in value)
    if isinstance(value, str):
        return _CLIENT_SECRET_RE.sub(r"\1<redacted>\3", _BEARER_RE.sub("Bearer <redacted>", value))
    return value


def _build_structured_json_payload(record: logging.LogRecord) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "timestamp": datetime.now(UTC).isoformat(),
        "level": record.levelname,
        "logger": record.name,
        "message": _redact_value(record.getMessage()),
        "source": f"{record.filename}:{record.lineno}",
    }
    for name in _RECORD_FIELDS:
        value = getattr(record, name, None)
        if value is not None:
            payload[name] = _redact_value(value)
    payload.setdefault("component", record.name)

    error_type = getattr(record, "error_type", None)
    error_message = getattr(record, "error_message", None)
    if record.exc_info and record.exc_info[1] is not None:
        error_type = error_type or type(record.exc_info[1]).__name__
        error_message = error_message or str(record.exc_info[1])
    if error_type:
        payload["error_type"] = error_type
        payload["error_message"] = _redact_value(error_message)
    return payload


class _JsonLineStructuredFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        return json.dumps(_build_structured_json_payload(record), ensure_ascii=False, default=str)


def setup_logging(level: str | None = None, structured: bool | None = None) -> logging.Logger:
    """
    Configure the library logger for applications that do not bring their own setup.

    Args:
        level: Log level (defaults to settings.log_level)
        structured: Emit JSON lines instead of plain text (defaults to settings.structured_logs)

    Returns:
        The configured library logger
    """
    settings = get_settings()
    log_level = (level or settings.log_level).upper()
    use_structured = settings.structured_logs if structured is None else structured

    library_logger = logging.getLogger(LIBRARY_LOGGER_NAME)
    library_logger.setLevel(getattr(logging, log_level))
    library_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(getattr(logging, log_level))
    if use_structured:
        handler.setFormatter(_JsonLineStructuredFormatter())
    else:
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
    library_logger.addHandler(handler)
    library_logger.propagate = False

    return library_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the given name."""
    return logging.getLogger(name)


# Stay silent unless the application configures logging
logging.getLogger(LIBRARY_LOGGER_NAME).addHandler(logging.NullHandler())
