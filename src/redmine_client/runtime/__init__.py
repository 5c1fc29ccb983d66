"""Runtime helpers for the Redmine client"""

from .url import EndpointUrl
from .errors import (
    ErrorCode,
    RedmineError,
    ConfigError,
    NotFoundError,
    ApiError,
    TransportError,
    DecodeError,
)

__all__ = [
    "EndpointUrl",
    "ErrorCode",
    "RedmineError",
    "ConfigError",
    "NotFoundError",
    "ApiError",
    "TransportError",
    "DecodeError",
]
