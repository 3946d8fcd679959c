"""Typed errors raised by the service errors library itself."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ServiceErrorsError(Exception):
    """Base error type for misuse of the service errors library."""

    message: str

    def __str__(self) -> str:
        """Return the human-readable error message."""
        return self.message


@dataclass(frozen=True)
class UnknownErrorCodeError(ServiceErrorsError):
    """Strict status lookup for a code missing from the registry."""

    code: str = ""


@dataclass(frozen=True)
class EnvelopeDecodeError(ServiceErrorsError):
    """Wire bytes could not be decoded into an error envelope."""
