"""Transport status resolution and envelope production for service errors."""

from __future__ import annotations

import grpc
from pydantic import ValidationError

from packages.service_errors.codes import rest_status, rpc_status
from packages.service_errors.errors import ServiceError
from packages.service_errors.exceptions import EnvelopeDecodeError
from packages.service_errors.logging import error_fields, fields, get_logger, log_context

from .models import ErrorResponse

_LOGGER = get_logger(__name__)


def to_response(
    error: ServiceError, *, strict: bool = False
) -> tuple[int, ErrorResponse]:
    """Resolve the HTTP status and envelope for ``error``.

    Unknown codes resolve to status ``0`` unless ``strict`` is set.
    """
    status = rest_status(error.code, strict=strict)
    _log_resolved(error, transport="rest", status=status)
    return status, ErrorResponse.from_error(error)


def to_rpc_response(
    error: ServiceError, *, strict: bool = False
) -> tuple[grpc.StatusCode, ErrorResponse]:
    """Resolve the gRPC status and envelope for ``error``.

    Unknown codes resolve to ``grpc.StatusCode.OK`` unless ``strict`` is set.
    """
    status = rpc_status(error.code, strict=strict)
    _log_resolved(error, transport="rpc", status=status.name)
    return status, ErrorResponse.from_error(error)


def abort_rpc(context: grpc.ServicerContext, error: ServiceError) -> None:
    """Abort a gRPC call with the status and rendered message for ``error``."""
    status, _ = to_rpc_response(error)
    context.abort(status, error.render())


def deserialize(data: bytes | str) -> ServiceError:
    """Rebuild a ``ServiceError`` from canonical envelope JSON."""
    try:
        envelope = ErrorResponse.model_validate_json(data)
    except ValidationError as exc:
        raise EnvelopeDecodeError(message=_map_decode_error(exc)) from None
    return envelope.to_error()


def _log_resolved(error: ServiceError, *, transport: str, status: object) -> None:
    """Emit one debug line for a resolved boundary status."""
    with log_context(
        {**error_fields(error), fields.TRANSPORT: transport, fields.STATUS: status}
    ):
        _LOGGER.debug("Resolved error response")


def _map_decode_error(error: ValidationError) -> str:
    """Map Pydantic decode failures to stable public messages."""
    first_error = error.errors()[0]
    location = ".".join(str(part) for part in first_error.get("loc", ()))
    message = str(first_error.get("msg", "invalid envelope"))
    if not location:
        return f"invalid error envelope: {message}"
    return f"invalid error envelope at {location}: {message}"
