"""Tests for prebuilt service error factories."""

from __future__ import annotations

from packages.service_errors.codes import constants as codes
from packages.service_errors.codes import rest_status
from packages.service_errors.errors import (
    auth_error,
    body_validation_error,
    conflict_error,
    db_error,
    details,
    header_validation_error,
    not_found_error,
    request_validation_error,
    server_error,
)


def test_validation_factories_are_bad_requests_with_details() -> None:
    """Validation factories should carry BAD_REQUEST and the given details."""
    body = body_validation_error(details.missing_parameter("email"))
    header = header_validation_error(details.missing_header("X-Tenant"))
    request = request_validation_error()

    assert body.code == header.code == request.code == codes.BAD_REQUEST
    assert body.message == "Body validation failed."
    assert header.message == "Header validation failed."
    assert request.message == "Request validation failed."
    assert body.render() == "Parameter email is required."
    assert request.render() == "Request validation failed."


def test_auth_error_uses_registered_unauthorized_code() -> None:
    """auth_error should resolve to a real 401 status."""
    error = auth_error()

    assert error.code == codes.UNAUTHORIZED
    assert rest_status(error.code) == 401
    assert error.message == "Authentication failed."


def test_not_found_error_names_resource_and_value() -> None:
    """not_found_error should format the resource and lookup value."""
    error = not_found_error("user", "42")

    assert error.code == codes.NOT_FOUND
    assert error.message == "no user component found for 42."


def test_conflict_and_server_factories() -> None:
    """Conflict and server factories should use their documented codes."""
    conflict = conflict_error(details.already_exists("user"))

    assert conflict.code == codes.CONFLICT
    assert conflict.message == "Entity already exists."
    assert conflict.render() == "user already exists."
    assert server_error().code == codes.INTERNAL_SERVER_ERROR
    assert server_error().message == "An unexpected internal error occurred."
    assert db_error().code == codes.INTERNAL_SERVER_ERROR
    assert db_error().message == "An unexpected database error occurred."
