"""Canonical logging field names for the service errors library.

Keeping names centralized keeps log lines from the registry, the normalizer
and the response adapter queryable with one key set.
"""

TIMESTAMP = "timestamp"
LEVEL = "level"
LOGGER = "logger"
MESSAGE = "message"
EXCEPTION = "exception"

# Common service-level fields.
SERVICE = "service"
ENVIRONMENT = "environment"

# Nested object holding the error fields of a record.
ERROR = "error"

# Error fields.
ERROR_CODE = "error_code"
DETAIL_COUNT = "detail_count"
DETAIL_FIELDS = "detail_fields"
FAILURE_TYPE = "failure_type"
SENTINEL = "sentinel"

# Status resolution fields.
TRANSPORT = "transport"
STATUS = "status"

# Emission order of error fields. Keys outside this tuple are never logged.
ERROR_FIELDS = (
    ERROR_CODE,
    TRANSPORT,
    STATUS,
    DETAIL_COUNT,
    DETAIL_FIELDS,
    SENTINEL,
    FAILURE_TYPE,
)
