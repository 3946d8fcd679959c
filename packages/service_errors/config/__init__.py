"""Public API for service errors configuration."""

from .loader import load_settings
from .models import (
    DEFAULT_CONFIG_PATH,
    LoggingSettings,
    ServiceErrorsSettings,
    TraceSettings,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "LoggingSettings",
    "ServiceErrorsSettings",
    "TraceSettings",
    "load_settings",
]
