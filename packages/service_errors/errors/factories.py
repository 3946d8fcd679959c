"""Factory helpers for creating consistent service errors."""

from __future__ import annotations

from packages.service_errors.codes import constants as codes

from .types import Detail, ServiceError


def body_validation_error(*details: Detail) -> ServiceError:
    """Create a bad-request error for request body validation failures."""
    return ServiceError(codes.BAD_REQUEST, "Body validation failed.", details)


def header_validation_error(*details: Detail) -> ServiceError:
    """Create a bad-request error for request header validation failures."""
    return ServiceError(codes.BAD_REQUEST, "Header validation failed.", details)


def request_validation_error(*details: Detail) -> ServiceError:
    """Create a bad-request error for general request validation failures."""
    return ServiceError(codes.BAD_REQUEST, "Request validation failed.", details)


def auth_error() -> ServiceError:
    """Create an unauthorized error."""
    return ServiceError(codes.UNAUTHORIZED, "Authentication failed.")


def not_found_error(resource: str, value: str) -> ServiceError:
    """Create a not-found error naming the missing resource and lookup value."""
    return ServiceError(codes.NOT_FOUND, f"no {resource} component found for {value}.")


def conflict_error(*details: Detail) -> ServiceError:
    """Create a conflict error for entities that already exist."""
    return ServiceError(codes.CONFLICT, "Entity already exists.", details)


def server_error() -> ServiceError:
    """Create an internal server error."""
    return ServiceError(
        codes.INTERNAL_SERVER_ERROR, "An unexpected internal error occurred."
    )


def db_error() -> ServiceError:
    """Create an internal server error for database failures."""
    return ServiceError(
        codes.INTERNAL_SERVER_ERROR, "An unexpected database error occurred."
    )
