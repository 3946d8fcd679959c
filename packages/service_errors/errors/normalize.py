"""Normalization of arbitrary failures into ``ServiceError`` values.

Boundaries receive failures from many sources. ``append_details`` and
``extract_error`` guarantee that whatever crosses a boundary is a
``ServiceError``, without forcing every producer to build one directly.

Whether a failure is already structured is decided by ``classify``, which
returns an explicit tagged result instead of leaving callers to inspect types.
A failure counts as structured when it is a ``ServiceError`` or when its
explicit ``__cause__`` chain (``raise ... from error``) reaches one.
"""

from __future__ import annotations

from dataclasses import dataclass

from packages.service_errors.codes import constants as codes
from packages.service_errors.logging import error_fields, fields, get_logger, log_context

from .types import Detail, ServiceError

_LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class StructuredFailure:
    """Failure that already is, or explicitly wraps, a ``ServiceError``."""

    error: ServiceError


@dataclass(frozen=True)
class OpaqueFailure:
    """Failure with no structured error anywhere in its cause chain."""

    failure: object


def classify(failure: object) -> StructuredFailure | OpaqueFailure:
    """Tag ``failure`` as structured or opaque."""
    seen: set[int] = set()
    current: object | None = failure
    while current is not None and id(current) not in seen:
        if isinstance(current, ServiceError):
            return StructuredFailure(error=current)
        seen.add(id(current))
        current = getattr(current, "__cause__", None)
    return OpaqueFailure(failure=failure)


def append_details(failure: object, *details: Detail) -> ServiceError:
    """Attach ``details`` to ``failure``, structuring it first when needed.

    A structured failure is mutated in place and its ``ServiceError`` is
    returned. An opaque failure becomes a new ``UNKNOWN_ERROR`` error holding
    ``details`` as given, with the original kept as ``cause``.

    ``None`` is not a failure and raises ``TypeError``.
    """
    _require_failure(failure)
    tagged = classify(failure)
    if isinstance(tagged, StructuredFailure):
        tagged.error.add_details(*details)
        return tagged.error

    error = ServiceError(
        codes.UNKNOWN_ERROR,
        render_failure(failure),
        details,
        cause=failure,
    )
    _chain(error, failure)
    _log_coerced(error, failure)
    return error


def extract_error(failure: object) -> ServiceError:
    """Return ``failure`` as a ``ServiceError``.

    Structured failures come back as the same instance. Opaque failures become
    a new ``INTERNAL_ERROR`` error with a fresh trace and the original kept as
    ``cause``.

    ``None`` is not a failure and raises ``TypeError``.
    """
    _require_failure(failure)
    tagged = classify(failure)
    if isinstance(tagged, StructuredFailure):
        return tagged.error

    error = ServiceError(codes.INTERNAL_ERROR, render_failure(failure), cause=failure)
    _chain(error, failure)
    _log_coerced(error, failure)
    return error


def render_failure(failure: object) -> str:
    """Return the text of ``failure``, falling back to its type name."""
    return str(failure) or type(failure).__name__


def _require_failure(failure: object) -> None:
    if failure is None:
        raise TypeError("failure must not be None")


def _chain(error: ServiceError, failure: object) -> None:
    """Record exception failures as the explicit cause of ``error``."""
    if isinstance(failure, BaseException):
        error.__cause__ = failure


def _log_coerced(error: ServiceError, failure: object) -> None:
    """Emit one debug line for an opaque failure coerced at a boundary."""
    with log_context(
        {
            **error_fields(error),
            fields.SENTINEL: error.code,
            fields.FAILURE_TYPE: type(failure).__name__,
        }
    ):
        _LOGGER.debug("Coerced unstructured failure")
