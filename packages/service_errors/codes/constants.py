"""Abstract error code constants.

Codes are transport-agnostic identifiers. Every code listed in ``ALL_CODES``
has an entry in both status tables in ``codes.status``.
"""

# Success
OK = "OK"
CREATED = "CREATED"
ACCEPTED = "ACCEPTED"
NO_CONTENT = "NO_CONTENT"

# Redirection
MOVED_PERMANENTLY = "MOVED_PERMANENTLY"
FOUND = "FOUND"

# Client errors
BAD_REQUEST = "BAD_REQUEST"
UNAUTHORIZED = "UNAUTHORIZED"
FORBIDDEN = "FORBIDDEN"
NOT_FOUND = "NOT_FOUND"
METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"
NOT_ACCEPTABLE = "NOT_ACCEPTABLE"
REQUEST_TIMEOUT = "REQUEST_TIMEOUT"
CONFLICT = "CONFLICT"
GONE = "GONE"
LENGTH_REQUIRED = "LENGTH_REQUIRED"
PRECONDITION_FAILED = "PRECONDITION_FAILED"
PAYLOAD_TOO_LARGE = "PAYLOAD_TOO_LARGE"
URI_TOO_LONG = "URI_TOO_LONG"
UNSUPPORTED_MEDIA_TYPE = "UNSUPPORTED_MEDIA_TYPE"
RANGE_NOT_SATISFIABLE = "RANGE_NOT_SATISFIABLE"
EXPECTATION_FAILED = "EXPECTATION_FAILED"
IM_A_TEAPOT = "IM_A_TEAPOT"
UPGRADE_REQUIRED = "UPGRADE_REQUIRED"
PRECONDITION_REQUIRED = "PRECONDITION_REQUIRED"
TOO_MANY_REQUESTS = "TOO_MANY_REQUESTS"

# Server errors
INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
NOT_IMPLEMENTED = "NOT_IMPLEMENTED"
BAD_GATEWAY = "BAD_GATEWAY"
SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"
GATEWAY_TIMEOUT = "GATEWAY_TIMEOUT"
HTTP_VERSION_NOT_SUPPORTED = "HTTP_VERSION_NOT_SUPPORTED"

# Normalization sentinels.
# Unclassified failure wrapped by ``append_details``.
UNKNOWN_ERROR = "UNKNOWN_ERROR"
# Unclassified failure coerced by ``extract_error``.
INTERNAL_ERROR = "INTERNAL_ERROR"

ALL_CODES: frozenset[str] = frozenset(
    {
        OK,
        CREATED,
        ACCEPTED,
        NO_CONTENT,
        MOVED_PERMANENTLY,
        FOUND,
        BAD_REQUEST,
        UNAUTHORIZED,
        FORBIDDEN,
        NOT_FOUND,
        METHOD_NOT_ALLOWED,
        NOT_ACCEPTABLE,
        REQUEST_TIMEOUT,
        CONFLICT,
        GONE,
        LENGTH_REQUIRED,
        PRECONDITION_FAILED,
        PAYLOAD_TOO_LARGE,
        URI_TOO_LONG,
        UNSUPPORTED_MEDIA_TYPE,
        RANGE_NOT_SATISFIABLE,
        EXPECTATION_FAILED,
        IM_A_TEAPOT,
        UPGRADE_REQUIRED,
        PRECONDITION_REQUIRED,
        TOO_MANY_REQUESTS,
        INTERNAL_SERVER_ERROR,
        NOT_IMPLEMENTED,
        BAD_GATEWAY,
        SERVICE_UNAVAILABLE,
        GATEWAY_TIMEOUT,
        HTTP_VERSION_NOT_SUPPORTED,
        UNKNOWN_ERROR,
        INTERNAL_ERROR,
    }
)
