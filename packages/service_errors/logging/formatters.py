"""Record filter and formatters that render error fields in a fixed schema.

JSON lines look like::

    {"timestamp": "...", "level": "WARNING", "logger": "...", "message": "...",
     "service": "api", "environment": "prod",
     "error": {"error_code": "NOT_FOUND", "transport": "rest", "status": 404}}

The ``error`` object only appears when a record carries error fields, and its
keys always follow ``fields.ERROR_FIELDS``.
"""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from typing import Any

from . import fields
from .context import current_fields


class ErrorFieldsFilter(logging.Filter):
    """Copy the active error fields onto each record.

    The mapping is stored as ``record.error_fields`` and each field is also
    set as a record attribute, so ``caplog`` assertions can read it directly.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        active = current_fields()
        record.error_fields = active
        for key, value in active.items():
            setattr(record, key, value)
        return True


def _record_fields(record: logging.LogRecord) -> dict[str, object]:
    attached = getattr(record, "error_fields", None)
    if not isinstance(attached, dict):
        return {}
    return {name: attached[name] for name in fields.ERROR_FIELDS if name in attached}


class ErrorJsonFormatter(logging.Formatter):
    """Emit one JSON object per record with error fields nested under ``error``."""

    def __init__(
        self, *, service: str | None = None, environment: str | None = None
    ) -> None:
        super().__init__()
        self._static: dict[str, str] = {}
        if service:
            self._static[fields.SERVICE] = service
        if environment:
            self._static[fields.ENVIRONMENT] = environment

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            fields.TIMESTAMP: datetime.fromtimestamp(record.created, UTC).isoformat(
                timespec="milliseconds"
            ),
            fields.LEVEL: record.levelname,
            fields.LOGGER: record.name,
            fields.MESSAGE: record.getMessage(),
            **self._static,
        }
        error = _record_fields(record)
        if error:
            payload[fields.ERROR] = error
        if record.exc_info:
            payload[fields.EXCEPTION] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, ensure_ascii=False, separators=(",", ":"))


class ErrorTextFormatter(logging.Formatter):
    """Human-readable lines ending in ``[error_code=... status=...]``."""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        error = _record_fields(record)
        if not error:
            return line
        pairs = " ".join(f"{key}={value}" for key, value in error.items())
        return f"{line} [{pairs}]"
