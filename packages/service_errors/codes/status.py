"""Code-to-status translation tables for HTTP-style and gRPC transports.

Both tables are read-only mappings built once at import. Lookups are total:
a code missing from a table yields the zero value of the status type (``0``
for HTTP, ``grpc.StatusCode.OK`` for gRPC) unless the caller asks for a strict
lookup. The fallback is a silent degradation, so it is logged at ``WARNING``
and callers that cannot tolerate it should pass ``strict=True``.

The gRPC space is coarser than the HTTP one, so several codes collapse onto
one status. The collapsing below is the contract; do not derive it from the
HTTP value.
"""

from __future__ import annotations

from http import HTTPStatus
from types import MappingProxyType
from typing import Mapping

import grpc

from packages.service_errors.exceptions import UnknownErrorCodeError
from packages.service_errors.logging import fields, get_logger, log_context

from . import constants as c

REST_FALLBACK_STATUS = 0
RPC_FALLBACK_STATUS = grpc.StatusCode.OK

_LOGGER = get_logger(__name__)

_REST_STATUS: Mapping[str, HTTPStatus] = MappingProxyType(
    {
        c.OK: HTTPStatus.OK,
        c.CREATED: HTTPStatus.CREATED,
        c.ACCEPTED: HTTPStatus.ACCEPTED,
        c.NO_CONTENT: HTTPStatus.NO_CONTENT,
        c.MOVED_PERMANENTLY: HTTPStatus.MOVED_PERMANENTLY,
        c.FOUND: HTTPStatus.FOUND,
        c.BAD_REQUEST: HTTPStatus.BAD_REQUEST,
        c.UNAUTHORIZED: HTTPStatus.UNAUTHORIZED,
        c.FORBIDDEN: HTTPStatus.FORBIDDEN,
        c.NOT_FOUND: HTTPStatus.NOT_FOUND,
        c.METHOD_NOT_ALLOWED: HTTPStatus.METHOD_NOT_ALLOWED,
        c.NOT_ACCEPTABLE: HTTPStatus.NOT_ACCEPTABLE,
        c.REQUEST_TIMEOUT: HTTPStatus.REQUEST_TIMEOUT,
        c.CONFLICT: HTTPStatus.CONFLICT,
        c.GONE: HTTPStatus.GONE,
        c.LENGTH_REQUIRED: HTTPStatus.LENGTH_REQUIRED,
        c.PRECONDITION_FAILED: HTTPStatus.PRECONDITION_FAILED,
        c.PAYLOAD_TOO_LARGE: HTTPStatus.REQUEST_ENTITY_TOO_LARGE,
        c.URI_TOO_LONG: HTTPStatus.REQUEST_URI_TOO_LONG,
        c.UNSUPPORTED_MEDIA_TYPE: HTTPStatus.UNSUPPORTED_MEDIA_TYPE,
        c.RANGE_NOT_SATISFIABLE: HTTPStatus.REQUESTED_RANGE_NOT_SATISFIABLE,
        c.EXPECTATION_FAILED: HTTPStatus.EXPECTATION_FAILED,
        c.IM_A_TEAPOT: HTTPStatus.IM_A_TEAPOT,
        c.UPGRADE_REQUIRED: HTTPStatus.UPGRADE_REQUIRED,
        c.PRECONDITION_REQUIRED: HTTPStatus.PRECONDITION_REQUIRED,
        c.TOO_MANY_REQUESTS: HTTPStatus.TOO_MANY_REQUESTS,
        c.INTERNAL_SERVER_ERROR: HTTPStatus.INTERNAL_SERVER_ERROR,
        c.NOT_IMPLEMENTED: HTTPStatus.NOT_IMPLEMENTED,
        c.BAD_GATEWAY: HTTPStatus.BAD_GATEWAY,
        c.SERVICE_UNAVAILABLE: HTTPStatus.SERVICE_UNAVAILABLE,
        c.GATEWAY_TIMEOUT: HTTPStatus.GATEWAY_TIMEOUT,
        c.HTTP_VERSION_NOT_SUPPORTED: HTTPStatus.HTTP_VERSION_NOT_SUPPORTED,
        c.UNKNOWN_ERROR: HTTPStatus.INTERNAL_SERVER_ERROR,
        c.INTERNAL_ERROR: HTTPStatus.INTERNAL_SERVER_ERROR,
    }
)

_RPC_STATUS: Mapping[str, grpc.StatusCode] = MappingProxyType(
    {
        c.OK: grpc.StatusCode.OK,
        # gRPC has no distinct success variants.
        c.CREATED: grpc.StatusCode.OK,
        c.ACCEPTED: grpc.StatusCode.OK,
        c.NO_CONTENT: grpc.StatusCode.OK,
        # gRPC has no redirects.
        c.MOVED_PERMANENTLY: grpc.StatusCode.UNIMPLEMENTED,
        c.FOUND: grpc.StatusCode.UNIMPLEMENTED,
        c.BAD_REQUEST: grpc.StatusCode.INVALID_ARGUMENT,
        c.UNAUTHORIZED: grpc.StatusCode.UNAUTHENTICATED,
        c.FORBIDDEN: grpc.StatusCode.PERMISSION_DENIED,
        c.NOT_FOUND: grpc.StatusCode.NOT_FOUND,
        c.METHOD_NOT_ALLOWED: grpc.StatusCode.UNIMPLEMENTED,
        c.NOT_ACCEPTABLE: grpc.StatusCode.INVALID_ARGUMENT,
        c.REQUEST_TIMEOUT: grpc.StatusCode.DEADLINE_EXCEEDED,
        c.CONFLICT: grpc.StatusCode.ABORTED,
        c.GONE: grpc.StatusCode.NOT_FOUND,
        c.LENGTH_REQUIRED: grpc.StatusCode.FAILED_PRECONDITION,
        c.PRECONDITION_FAILED: grpc.StatusCode.FAILED_PRECONDITION,
        c.PAYLOAD_TOO_LARGE: grpc.StatusCode.RESOURCE_EXHAUSTED,
        c.URI_TOO_LONG: grpc.StatusCode.INVALID_ARGUMENT,
        c.UNSUPPORTED_MEDIA_TYPE: grpc.StatusCode.UNIMPLEMENTED,
        c.RANGE_NOT_SATISFIABLE: grpc.StatusCode.OUT_OF_RANGE,
        c.EXPECTATION_FAILED: grpc.StatusCode.FAILED_PRECONDITION,
        c.IM_A_TEAPOT: grpc.StatusCode.INTERNAL,
        c.UPGRADE_REQUIRED: grpc.StatusCode.UNIMPLEMENTED,
        c.PRECONDITION_REQUIRED: grpc.StatusCode.FAILED_PRECONDITION,
        c.TOO_MANY_REQUESTS: grpc.StatusCode.RESOURCE_EXHAUSTED,
        c.INTERNAL_SERVER_ERROR: grpc.StatusCode.INTERNAL,
        c.NOT_IMPLEMENTED: grpc.StatusCode.UNIMPLEMENTED,
        c.BAD_GATEWAY: grpc.StatusCode.UNAVAILABLE,
        c.SERVICE_UNAVAILABLE: grpc.StatusCode.UNAVAILABLE,
        c.GATEWAY_TIMEOUT: grpc.StatusCode.DEADLINE_EXCEEDED,
        c.HTTP_VERSION_NOT_SUPPORTED: grpc.StatusCode.UNIMPLEMENTED,
        c.UNKNOWN_ERROR: grpc.StatusCode.UNKNOWN,
        c.INTERNAL_ERROR: grpc.StatusCode.INTERNAL,
    }
)


def rest_status(code: str, *, strict: bool = False) -> int:
    """Return the HTTP status for ``code``.

    Unknown codes return ``REST_FALLBACK_STATUS`` (``0``), or raise
    ``UnknownErrorCodeError`` when ``strict`` is set.
    """
    status = _REST_STATUS.get(code)
    if status is None:
        _unknown(code, transport="rest", strict=strict)
        return REST_FALLBACK_STATUS
    return int(status)


def rpc_status(code: str, *, strict: bool = False) -> grpc.StatusCode:
    """Return the gRPC status for ``code``.

    Unknown codes return ``RPC_FALLBACK_STATUS`` (``grpc.StatusCode.OK``), or
    raise ``UnknownErrorCodeError`` when ``strict`` is set.
    """
    status = _RPC_STATUS.get(code)
    if status is None:
        _unknown(code, transport="rpc", strict=strict)
        return RPC_FALLBACK_STATUS
    return status


def is_known_code(code: str) -> bool:
    """Return ``True`` when ``code`` has entries in both status tables."""
    return code in _REST_STATUS and code in _RPC_STATUS


def _unknown(code: str, *, transport: str, strict: bool) -> None:
    """Raise for strict lookups, otherwise log the fallback."""
    if strict:
        raise UnknownErrorCodeError(
            message=f"error code {code!r} has no {transport} status mapping",
            code=code,
        )
    with log_context({fields.ERROR_CODE: code, fields.TRANSPORT: transport}):
        _LOGGER.warning("Unmapped error code; using fallback status")
