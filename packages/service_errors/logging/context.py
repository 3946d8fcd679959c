"""Error fields carried by log records emitted inside a block.

Fields live in a ``contextvars.ContextVar`` so values set while resolving one
error never appear on log lines of another thread or asyncio task. Only names
listed in ``fields.ERROR_FIELDS`` are accepted; values keep their type so the
JSON formatter can emit counts as numbers.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from types import MappingProxyType
from typing import TYPE_CHECKING, Iterator, Mapping

from . import fields

if TYPE_CHECKING:
    from packages.service_errors.errors import ServiceError

_ERROR_FIELDS: ContextVar[Mapping[str, object]] = ContextVar(
    "service_errors_log_fields", default=MappingProxyType({})
)


def current_fields() -> dict[str, object]:
    """Return the error fields active in this context, in schema order."""
    active = _ERROR_FIELDS.get()
    return {name: active[name] for name in fields.ERROR_FIELDS if name in active}


@contextmanager
def log_context(values: Mapping[str, object]) -> Iterator[None]:
    """Set error fields for log records emitted inside the block.

    ``None`` values are skipped. Unknown names raise ``KeyError`` so a typo
    never silently drops a field.
    """
    unknown = sorted(set(values) - set(fields.ERROR_FIELDS))
    if unknown:
        raise KeyError(f"unknown log fields: {', '.join(unknown)}")
    merged = dict(_ERROR_FIELDS.get())
    merged.update({key: value for key, value in values.items() if value is not None})
    token = _ERROR_FIELDS.set(MappingProxyType(merged))
    try:
        yield
    finally:
        _ERROR_FIELDS.reset(token)


def error_fields(error: ServiceError) -> dict[str, object]:
    """Return the log fields describing ``error``.

    ``detail_fields`` lists the non-empty detail field names in order and is
    omitted when there are none.
    """
    named = [item.field for item in error.details if item.field]
    return {
        fields.ERROR_CODE: error.code,
        fields.DETAIL_COUNT: len(error.details),
        fields.DETAIL_FIELDS: ",".join(named) or None,
    }
