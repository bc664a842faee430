"""myclient - GET/POST helper that normalises responses into (status, body)."""

import logging
from importlib.metadata import version, PackageNotFoundError

from .api import (
    get,
    post,
    request,
    call,
    get_raw,
    content_type,
    encode,
    decode,
    clean_url,
    clean_headers,
)
from .client import VersionClient
from .core.config import ClientConfig, TimeoutConfig
from .core.outcome import ERROR, Marker, Reason, Outcome, TypedOutcome, Result, is_error
from .core.exceptions import (
    MyclientException,
    DecodeError,
    UnexpectedResponseError,
    ConfigurationError,
    ConfigValidationError,
)
from .core.transport import RequestsTransport
from .core.logging import LoggingConfig, configure_logging
from .core.env_config import load_from_env, ConfigFileLoader

# Users can configure logging themselves using logging.getLogger('myclient')
logging.getLogger('myclient').addHandler(logging.NullHandler())

try:
    __version__ = version("myclient")
except PackageNotFoundError:
    # Package is not installed (development mode)
    __version__ = "0.0.0-dev"

__all__ = [
    # Pipeline
    "get",
    "post",
    "request",
    "call",
    "get_raw",
    "content_type",
    "encode",
    "decode",
    "clean_url",
    "clean_headers",
    # Clients
    "VersionClient",
    "RequestsTransport",
    # Results
    "ERROR",
    "Marker",
    "Reason",
    "Outcome",
    "TypedOutcome",
    "Result",
    "is_error",
    # Config
    "ClientConfig",
    "TimeoutConfig",
    "LoggingConfig",
    "configure_logging",
    "load_from_env",
    "ConfigFileLoader",
    # Exceptions
    "MyclientException",
    "DecodeError",
    "UnexpectedResponseError",
    "ConfigurationError",
    "ConfigValidationError",
    # Version
    "__version__",
]
