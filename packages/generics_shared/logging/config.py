"""Stdout logging setup.

One handler on the root logger writes either NDJSON or plain lines. Every
record carries the bound context plus any ``extra={"fields": {...}}`` passed
at the call site.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any

from packages.generics_shared.config import LoggingSettings

from . import fields
from .context import bind_context, get_context

_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
_PLAIN_DATEFMT = "%Y-%m-%dT%H:%M:%S%z"


class ContextFilter(logging.Filter):
    """Attach bound context and call-site fields to each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        merged = get_context()
        call_site = getattr(record, "fields", None)
        if isinstance(call_site, dict):
            merged.update({str(key): str(value) for key, value in call_site.items()})
        record.context = merged
        return True


def _record_context(record: logging.LogRecord) -> dict[str, str]:
    context = getattr(record, "context", None)
    return context if isinstance(context, dict) else {}


class JsonFormatter(logging.Formatter):
    """One JSON object per line: core fields first, then context."""

    def format(self, record: logging.LogRecord) -> str:
        document: dict[str, Any] = {
            fields.TIMESTAMP: datetime.now(UTC).isoformat(),
            fields.LEVEL: record.levelname,
            fields.LOGGER: record.name,
            fields.MESSAGE: record.getMessage(),
            **_record_context(record),
        }
        if record.exc_info:
            document[fields.EXCEPTION] = self.formatException(record.exc_info)
        return json.dumps(document, default=str, separators=(",", ":"))


class PlainFormatter(logging.Formatter):
    """Readable line with context appended as sorted ``key=value`` pairs."""

    def __init__(self) -> None:
        super().__init__(fmt=_PLAIN_FORMAT, datefmt=_PLAIN_DATEFMT)

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = _record_context(record)
        if not context:
            return line
        pairs = " ".join(f"{key}={value}" for key, value in sorted(context.items()))
        return f"{line} {pairs}"


def configure_logging(settings: LoggingSettings | None = None) -> None:
    """Install a single stdout handler on the root logger.

    Calling again replaces the previous handler. The configured service and
    environment are bound into the logging context.
    """
    settings = settings if settings is not None else LoggingSettings()

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.addFilter(ContextFilter())
    handler.setFormatter(JsonFormatter() if settings.json_output else PlainFormatter())

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(settings.level)

    bind_context(
        **{
            fields.SERVICE: settings.service or None,
            fields.ENVIRONMENT: settings.environment or None,
        }
    )


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a standard library logger."""
    return logging.getLogger(name)
