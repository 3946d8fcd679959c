"""Typed wire models for the canonical error envelope.

Shape::

    {"errors": {"code": ..., "message": ..., "details": [...], "timestamp": ...}}

``details`` is omitted when empty, as are empty ``field``/``hint`` entries.
Traces and causes have no place in these models.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from packages.service_errors.errors import Detail, ServiceError, parse_timestamp


class DetailBody(BaseModel):
    """Wire form of one ``Detail``."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    field: str | None = None
    error: str
    hint: str | None = None

    def to_detail(self) -> Detail:
        return Detail(message=self.error, field=self.field or "", hint=self.hint or "")


class ErrorBody(BaseModel):
    """Wire form of one ``ServiceError``."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    code: str = Field(min_length=1)
    message: str
    details: list[DetailBody] | None = None
    timestamp: str

    @field_validator("timestamp")
    @classmethod
    def _require_rfc3339_utc(cls, value: str) -> str:
        """Reject timestamps not in ``YYYY-MM-DDTHH:MM:SSZ`` form."""
        parse_timestamp(value)
        return value


class ErrorResponse(BaseModel):
    """Canonical error envelope returned across transport boundaries."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    errors: ErrorBody

    @classmethod
    def from_error(cls, error: ServiceError) -> ErrorResponse:
        """Build the envelope for ``error``."""
        return cls.model_validate(error.to_dict())

    def to_json(self) -> bytes:
        """Return compact JSON bytes with optional fields omitted."""
        return self.model_dump_json(exclude_none=True).encode("utf-8")

    def to_error(self) -> ServiceError:
        """Rebuild a ``ServiceError`` carrying this envelope's wire fields."""
        body = self.errors
        return ServiceError(
            body.code,
            body.message,
            [item.to_detail() for item in body.details or ()],
            timestamp=parse_timestamp(body.timestamp),
        )

    def __str__(self) -> str:
        """Render like the error: first detail message, else the message."""
        if self.errors.details:
            return self.errors.details[0].error
        return self.errors.message
