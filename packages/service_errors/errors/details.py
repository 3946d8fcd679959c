"""Catalog of pre-filled ``Detail`` constructors for common failure categories.

Every constructor is a pure function of its arguments apart from the
diagnostic trace, which is captured at the constructor's call site. Attaching
the detail to an error later records a second trace at the attach site.
"""

from __future__ import annotations

from typing import Sequence

from .trace import capture_trace
from .types import Detail

# Validation


def missing_parameter(field: str) -> Detail:
    return Detail(
        field=field,
        message=f"Parameter {field} is required.",
        hint=f"Ensure {field} is included in the request.",
        trace=capture_trace(),
    )


def invalid_parameter(field: str) -> Detail:
    return Detail(
        field=field,
        message=f"Parameter {field} is invalid.",
        hint=f"Check the value of {field} for correctness.",
        trace=capture_trace(),
    )


def invalid_format(field: str) -> Detail:
    return Detail(
        field=field,
        message=f"Parameter {field} has an invalid format.",
        hint=f"Ensure {field} follows the expected format.",
        trace=capture_trace(),
    )


def length_exceeded(field: str, maximum: int) -> Detail:
    return Detail(
        field=field,
        message=f"Parameter {field} exceeds maximum length of {maximum}.",
        hint=f"Ensure {field} does not exceed {maximum} characters.",
        trace=capture_trace(),
    )


def out_of_range(field: str, minimum: int, maximum: int) -> Detail:
    return Detail(
        field=field,
        message=f"Parameter {field} must be between {minimum} and {maximum}.",
        hint=f"Provide a value between {minimum} and {maximum} for {field}.",
        trace=capture_trace(),
    )


def invalid_enum_value(field: str, allowed: Sequence[str]) -> Detail:
    """Detail for a value outside ``allowed``, listed in the given order."""
    values = _join(allowed)
    return Detail(
        field=field,
        message=f"Parameter {field} must be one of [{values}].",
        hint=f"Allowed values: {values}.",
        trace=capture_trace(),
    )


# Headers


def missing_header(header: str) -> Detail:
    return Detail(
        field=header,
        message=f"Header {header} is required.",
        hint=f"Ensure {header} is included in the request headers.",
        trace=capture_trace(),
    )


def invalid_header(header: str) -> Detail:
    return Detail(
        field=header,
        message=f"Header {header} is invalid.",
        hint=f"Verify the value of header {header}.",
        trace=capture_trace(),
    )


def missing_correlation_id() -> Detail:
    return Detail(
        field="correlation_id",
        message="Missing Correlation ID in request headers.",
        hint="Include 'correlation_id' in the request headers with a valid UUID.",
        trace=capture_trace(),
    )


# Authentication and authorization


def unauthorized() -> Detail:
    return Detail(
        field="auth",
        message="Authentication failed. Invalid credentials.",
        hint="Ensure correct credentials are provided.",
        trace=capture_trace(),
    )


def forbidden() -> Detail:
    return Detail(
        field="auth",
        message="Access denied. You do not have permission to perform this action.",
        hint="Check user roles and permissions.",
        trace=capture_trace(),
    )


def token_expired() -> Detail:
    return Detail(
        field="auth",
        message="Authentication token has expired.",
        hint="Request a new token and retry.",
        trace=capture_trace(),
    )


def invalid_token() -> Detail:
    return Detail(
        field="auth",
        message="Invalid authentication token.",
        hint="Ensure the token is valid and not tampered with.",
        trace=capture_trace(),
    )


# Resources


def not_found(resource: str) -> Detail:
    return Detail(
        field=resource,
        message=f"{resource} not found.",
        hint=f"Check if {resource} exists before making the request.",
        trace=capture_trace(),
    )


def already_exists(resource: str) -> Detail:
    return Detail(
        field=resource,
        message=f"{resource} already exists.",
        hint=f"Ensure {resource} does not already exist before attempting to create it.",
        trace=capture_trace(),
    )


def conflict(resource: str) -> Detail:
    return Detail(
        field=resource,
        message=f"A conflict occurred with {resource}.",
        hint=f"Resolve conflicts with {resource} before retrying.",
        trace=capture_trace(),
    )


# Server side; these carry no hint.


def internal() -> Detail:
    return Detail(
        field="server",
        message="An unexpected internal error occurred.",
        trace=capture_trace(),
    )


def database() -> Detail:
    return Detail(
        field="database",
        message="A database error occurred.",
        trace=capture_trace(),
    )


def service_down() -> Detail:
    return Detail(
        field="service",
        message="Service is temporarily unavailable.",
        trace=capture_trace(),
    )


def rate_limit_exceeded() -> Detail:
    return Detail(
        field="rate_limit",
        message="Rate limit exceeded. Please try again later.",
        trace=capture_trace(),
    )


# Request and payload


def invalid_json() -> Detail:
    return Detail(
        field="request",
        message="Invalid JSON payload.",
        hint="Ensure the request body is a valid JSON object.",
        trace=capture_trace(),
    )


def request_timeout() -> Detail:
    return Detail(
        field="request",
        message="Request timed out. Please try again.",
        hint="Ensure the server is reachable and retry the request.",
        trace=capture_trace(),
    )


def unsupported_media_type() -> Detail:
    return Detail(
        field="content_type",
        message="Unsupported media type. Please check the request format.",
        hint="Use 'application/json' as the Content-Type.",
        trace=capture_trace(),
    )


def missing_query_param(param: str) -> Detail:
    return Detail(
        field=param,
        message=f"Query parameter {param} is required.",
        hint=f"Include {param} in the request URL.",
        trace=capture_trace(),
    )


def invalid_query_param(param: str) -> Detail:
    return Detail(
        field=param,
        message=f"Query parameter {param} is invalid.",
        hint=f"Provide a valid value for {param}.",
        trace=capture_trace(),
    )


def pagination_limit_exceeded() -> Detail:
    return Detail(
        field="pagination",
        message="Pagination limit exceeded. Reduce the page size.",
        hint="Use a smaller page size in the request.",
        trace=capture_trace(),
    )


def required_together(*fields: str) -> Detail:
    """Detail for fields that must be supplied as a group."""
    group = f"[{_join(fields)}]"
    return Detail(
        field=group,
        message=f"Fields {group} are required together.",
        hint=f"Ensure all of {group} are included in the request.",
        trace=capture_trace(),
    )


def _join(values: Sequence[str]) -> str:
    """Format a value list for detail text."""
    return ", ".join(str(value) for value in values)
