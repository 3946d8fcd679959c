"""Public code registry API: code constants and transport status lookups."""

from . import constants
from .constants import ALL_CODES
from .status import (
    REST_FALLBACK_STATUS,
    RPC_FALLBACK_STATUS,
    is_known_code,
    rest_status,
    rpc_status,
)

__all__ = [
    "ALL_CODES",
    "REST_FALLBACK_STATUS",
    "RPC_FALLBACK_STATUS",
    "constants",
    "is_known_code",
    "rest_status",
    "rpc_status",
]
