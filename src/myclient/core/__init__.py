"""Core модули myclient."""

from .config import ClientConfig, TimeoutConfig, DEFAULT_BASE_URL
from .outcome import (
    ERROR,
    Marker,
    Reason,
    Outcome,
    TypedOutcome,
    Result,
    is_error,
)
from .exceptions import (
    MyclientException,
    DecodeError,
    UnexpectedResponseError,
    ConfigurationError,
    ConfigValidationError,
    classify_requests_exception,
)
from .transport import RequestsTransport, TransportResponse, TransportFailure

__all__ = [
    # Config
    "ClientConfig",
    "TimeoutConfig",
    "DEFAULT_BASE_URL",
    # Outcome
    "ERROR",
    "Marker",
    "Reason",
    "Outcome",
    "TypedOutcome",
    "Result",
    "is_error",
    # Exceptions
    "MyclientException",
    "DecodeError",
    "UnexpectedResponseError",
    "ConfigurationError",
    "ConfigValidationError",
    "classify_requests_exception",
    # Transport
    "RequestsTransport",
    "TransportResponse",
    "TransportFailure",
]
