"""Canonical structured error types for service boundaries.

``ServiceError`` is the failure value that crosses a boundary. It carries an
abstract code, a top-level message, ordered ``Detail`` records, a UTC
creation timestamp, an optional original cause and an internal trace. Only
code, message, details and timestamp ever reach the wire.
"""

from __future__ import annotations

import dataclasses
import json
from dataclasses import dataclass, replace
from datetime import UTC, datetime
from typing import Any, Iterable

from .trace import TraceProvider, capture_trace

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


@dataclass(frozen=True, slots=True, kw_only=True)
class Detail:
    """One structured fact about a failure.

    Fields are keyword-only. ``trace`` is internal-only and excluded from
    equality and ``repr``.
    """

    message: str
    field: str = ""
    hint: str = ""
    trace: str = dataclasses.field(default="", repr=False, compare=False)

    def to_dict(self) -> dict[str, str]:
        """Return the wire shape, omitting empty ``field`` and ``hint``."""
        payload: dict[str, str] = {}
        if self.field:
            payload["field"] = self.field
        payload["error"] = self.message
        if self.hint:
            payload["hint"] = self.hint
        return payload


class ServiceError(Exception):
    """Structured failure raised or returned across a service boundary.

    ``code`` and ``message`` are fixed at construction. ``details`` only grows;
    entries are never removed or reordered. ``timestamp`` is stamped once.

    Mutation through ``add_detail``/``add_details`` is not synchronized. An
    instance should be owned by one request flow at a time; once serialized
    or handed to an external caller it should be treated as read-only.
    """

    __slots__ = ("_code", "_message", "_details", "_created_at", "_cause", "_trace")

    def __init__(
        self,
        code: str,
        message: str,
        details: Iterable[Detail] = (),
        *,
        cause: object | None = None,
        timestamp: datetime | None = None,
        trace_provider: TraceProvider | None = None,
    ) -> None:
        if not isinstance(code, str) or not code:
            raise ValueError("error code must be a non-empty string")
        if not isinstance(message, str):
            raise TypeError("error message must be a string")
        super().__init__(code, message)
        object.__setattr__(self, "_code", code)
        object.__setattr__(self, "_message", message)
        object.__setattr__(self, "_details", list(details))
        object.__setattr__(
            self,
            "_created_at",
            _utc_now() if timestamp is None else _normalize_utc(timestamp),
        )
        object.__setattr__(self, "_cause", cause)
        object.__setattr__(self, "_trace", capture_trace(trace_provider))

    def __setattr__(self, name: str, value: Any) -> None:
        if name.startswith("_") and not name.startswith("__"):
            raise AttributeError(f"{type(self).__name__}.{name} is read-only")
        super().__setattr__(name, value)

    def __reduce__(self) -> tuple[Any, ...]:
        state = {name: getattr(self, name) for name in ServiceError.__slots__}
        state["_details"] = list(self._details)
        return (_rebuild_service_error, (type(self), state), self.__dict__ or None)

    @property
    def code(self) -> str:
        return self._code

    @property
    def message(self) -> str:
        return self._message

    @property
    def details(self) -> tuple[Detail, ...]:
        """Snapshot of attached details in insertion order."""
        return tuple(self._details)

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def timestamp(self) -> str:
        """Creation instant as RFC 3339 UTC text."""
        return self._created_at.strftime(TIMESTAMP_FORMAT)

    @property
    def cause(self) -> object | None:
        return self._cause

    def add_detail(
        self, detail: Detail, *, trace_provider: TraceProvider | None = None
    ) -> None:
        """Append one detail, capturing its trace at this call site."""
        self._details.append(replace(detail, trace=capture_trace(trace_provider)))

    def add_details(
        self, *details: Detail, trace_provider: TraceProvider | None = None
    ) -> None:
        """Append details in order, capturing a trace for each at this call site."""
        for detail in details:
            self._details.append(replace(detail, trace=capture_trace(trace_provider)))

    def render(self) -> str:
        """Return the first detail's message, or the error message without details.

        Only the first fact is rendered; inspect ``details`` for the full list.
        """
        if self._details:
            return self._details[0].message
        return self._message

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(code={self._code!r}, message={self._message!r}, "
            f"details={len(self._details)})"
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the canonical envelope as plain data."""
        body: dict[str, Any] = {"code": self._code, "message": self._message}
        if self._details:
            body["details"] = [item.to_dict() for item in self._details]
        body["timestamp"] = self.timestamp
        return {"errors": body}

    def serialize(self) -> bytes:
        """Return the canonical envelope as compact JSON bytes."""
        return json.dumps(
            self.to_dict(), ensure_ascii=False, separators=(",", ":")
        ).encode("utf-8")

    def trace_of(self) -> str:
        """Return the trace captured when this error was built."""
        return self._trace

    def trace_of_field(self, field_name: str) -> str:
        """Return the trace of the first detail for ``field_name``, or ``""``."""
        for item in self._details:
            if item.field == field_name:
                return item.trace
        return ""


def parse_timestamp(value: str) -> datetime:
    """Parse RFC 3339 UTC text produced by ``ServiceError.timestamp``."""
    return datetime.strptime(value, TIMESTAMP_FORMAT).replace(tzinfo=UTC)


def _rebuild_service_error(
    cls: type[ServiceError], state: dict[str, Any]
) -> ServiceError:
    """Restore a pickled or copied error with its original timestamp and trace."""
    error = cls.__new__(cls)
    Exception.__init__(error, state["_code"], state["_message"])
    for name, value in state.items():
        object.__setattr__(error, name, value)
    return error


def _utc_now() -> datetime:
    """Return current UTC timestamp truncated to whole seconds."""
    return datetime.now(UTC).replace(microsecond=0)


def _normalize_utc(value: datetime) -> datetime:
    """Normalize naive/aware datetimes to UTC whole seconds."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).replace(microsecond=0)
