"""Public logging API for the service errors library.

Library modules log through ``get_logger`` inside ``log_context`` blocks; the
formatters render those error fields in one fixed schema.
"""

from .config import (
    LIBRARY_LOGGER,
    configure_logging,
    configure_logging_from_settings,
    get_logger,
)
from .context import current_fields, error_fields, log_context
from .formatters import ErrorFieldsFilter, ErrorJsonFormatter, ErrorTextFormatter

__all__ = [
    "configure_logging",
    "configure_logging_from_settings",
    "current_fields",
    "error_fields",
    "ErrorFieldsFilter",
    "ErrorJsonFormatter",
    "ErrorTextFormatter",
    "get_logger",
    "LIBRARY_LOGGER",
    "log_context",
]
