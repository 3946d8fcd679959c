"""Public envelope API: wire models and transport response adapters."""

from .models import DetailBody, ErrorBody, ErrorResponse
from .response import abort_rpc, deserialize, to_response, to_rpc_response

__all__ = [
    "DetailBody",
    "ErrorBody",
    "ErrorResponse",
    "abort_rpc",
    "deserialize",
    "to_response",
    "to_rpc_response",
]
