"""Handler setup for the library's log output.

Library modules only call ``get_logger``. Applications that want the library's
own lines formatted with the error schema call ``configure_logging`` (or
``configure_logging_from_settings``), which installs one handler on the
``packages.service_errors`` logger and leaves the root logger alone.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, TextIO

from .formatters import ErrorFieldsFilter, ErrorJsonFormatter, ErrorTextFormatter

if TYPE_CHECKING:
    from packages.service_errors.config import ServiceErrorsSettings

LIBRARY_LOGGER = "packages.service_errors"
HANDLER_NAME = "service-errors"


def configure_logging(
    *,
    level: str = "INFO",
    json_output: bool = True,
    service: str | None = None,
    environment: str | None = None,
    stream: TextIO | None = None,
    propagate: bool = False,
) -> logging.Handler:
    """Install the library handler, replacing one installed earlier.

    Records stop at the library logger unless ``propagate`` is set, so the
    same line is not also written by root handlers.
    """
    logger = logging.getLogger(LIBRARY_LOGGER)
    for existing in list(logger.handlers):
        if existing.get_name() == HANDLER_NAME:
            logger.removeHandler(existing)
    logger.setLevel(level.upper())
    logger.propagate = propagate

    handler = logging.StreamHandler(stream=sys.stdout if stream is None else stream)
    handler.set_name(HANDLER_NAME)
    handler.addFilter(ErrorFieldsFilter())
    handler.setFormatter(
        ErrorJsonFormatter(service=service, environment=environment)
        if json_output
        else ErrorTextFormatter()
    )
    logger.addHandler(handler)
    return handler


def configure_logging_from_settings(
    settings: ServiceErrorsSettings, *, stream: TextIO | None = None
) -> logging.Handler:
    """Configure library logging from the ``logging`` subtree of loaded settings."""
    return configure_logging(
        level=settings.logging.level,
        json_output=settings.logging.json_output,
        service=settings.logging.service,
        environment=settings.logging.environment,
        stream=stream,
    )


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger using Python's standard logging hierarchy."""
    return logging.getLogger(name)
