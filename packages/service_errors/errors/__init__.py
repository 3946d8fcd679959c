"""Public structured error API: error model, detail catalog and normalizer."""

from . import details
from .factories import (
    auth_error,
    body_validation_error,
    conflict_error,
    db_error,
    header_validation_error,
    not_found_error,
    request_validation_error,
    server_error,
)
from .normalize import (
    OpaqueFailure,
    StructuredFailure,
    append_details,
    classify,
    extract_error,
    render_failure,
)
from .trace import (
    TraceProvider,
    capture_trace,
    configure_tracing,
    current_trace_provider,
    fixed_trace,
    install_trace_provider,
    no_trace,
    provider_from_settings,
    reset_trace_provider,
    stack_trace_provider,
    use_trace_provider,
)
from .types import Detail, ServiceError, parse_timestamp

__all__ = [
    "Detail",
    "OpaqueFailure",
    "ServiceError",
    "StructuredFailure",
    "TraceProvider",
    "append_details",
    "auth_error",
    "body_validation_error",
    "capture_trace",
    "classify",
    "configure_tracing",
    "conflict_error",
    "current_trace_provider",
    "db_error",
    "details",
    "extract_error",
    "fixed_trace",
    "header_validation_error",
    "install_trace_provider",
    "no_trace",
    "not_found_error",
    "parse_timestamp",
    "provider_from_settings",
    "render_failure",
    "request_validation_error",
    "reset_trace_provider",
    "server_error",
    "stack_trace_provider",
    "use_trace_provider",
]
