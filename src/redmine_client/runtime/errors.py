"""
Redmine Client Error Model

This module provides the error handling framework for the Redmine client.
Every failure surfaced by the client is a RedmineError subclass carrying a
stable error code, a human-readable message and, where one exists, the
underlying cause.
"""

from __future__ import annotations
from typing import Optional, Dict, Any, List
from enum import IntEnum


class ErrorCode(IntEnum):
    """Error codes used by the client's error taxonomy."""

    UNKNOWN = 1

    # Configuration errors (100-199)
    INVALID_CONFIG = 100
    INVALID_AUTH = 101
    INVALID_URL = 102

    # Remote API errors (200-299)
    NOT_FOUND = 200
    API_ERROR = 201

    # Transport errors (300-399)
    HTTP_STATUS = 300
    CONNECTION_FAILED = 301

    # Decoding errors (400-499)
    DECODE_ERROR = 400


class RedmineError(Exception):
    """
    Base class for all Redmine client errors.

    Provides structured error information: a code, a message, optional
    details and the cause the error was raised from.
    """

    default_code = ErrorCode.UNKNOWN

    def __init__(self, message: str, code: Optional[ErrorCode] = None,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[BaseException] = None):
        """
        Initialize a Redmine error.

        Args:
            message: Error message
            code: Error code (defaults to the class default)
            details: Additional error details
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.code = code if code is not None else self.default_code
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}([{self.code.name}] {self.message!r})"

    def wrap(self, context: str) -> "RedmineError":
        """
        Return an error of the same class with ``context`` prepended.

        The new error keeps code and details, and records this error as its cause.
        """
        wrapped = type(self).__new__(type(self))
        RedmineError.__init__(
            wrapped,
            f"{context}: {self.message}",
            self.code,
            dict(self.details),
            self,
        )
        return wrapped

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result: Dict[str, Any] = {
            "code": self.code.value,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.cause:
            result["cause"] = str(self.cause)
        return result


class ConfigError(RedmineError):
    """Invalid client configuration: auth policy, endpoint or builder values."""

    default_code = ErrorCode.INVALID_CONFIG


class NotFoundError(RedmineError):
    """The addressed entity does not exist (HTTP 404)."""

    default_code = ErrorCode.NOT_FOUND

    def __init__(self, kind: str, resource_id: Any, verb: Optional[str] = None,
                 cause: Optional[BaseException] = None):
        if verb:
            message = f"could not {verb} {kind} (id: {resource_id}) because it was not found"
        else:
            message = f"{kind} (id: {resource_id}) was not found"
        super().__init__(message, details={"kind": kind, "id": resource_id}, cause=cause)

    @property
    def kind(self) -> str:
        return self.details["kind"]

    @property
    def resource_id(self) -> Any:
        return self.details["id"]


class ApiError(RedmineError):
    """Non-success status with a decodable ``{"errors": [...]}`` body."""

    default_code = ErrorCode.API_ERROR

    def __init__(self, errors: List[str], status_code: int, cause: Optional[BaseException] = None):
        super().__init__(
            "\n".join(errors),
            details={"status_code": status_code, "errors": list(errors)},
            cause=cause,
        )

    @property
    def status_code(self) -> int:
        return self.details["status_code"]

    @property
    def errors(self) -> List[str]:
        return self.details["errors"]


class TransportError(RedmineError):
    """HTTP failure without a decodable error body, or a connection-level failure."""

    default_code = ErrorCode.CONNECTION_FAILED

    @classmethod
    def from_status(cls, status_code: int, reason: str) -> "TransportError":
        """Build an error from the literal status line of a response."""
        status_line = f"HTTP {status_code} {reason}".rstrip()
        return cls(status_line, ErrorCode.HTTP_STATUS, {"status_code": status_code})

    @property
    def status_code(self) -> Optional[int]:
        return self.details.get("status_code")


class DecodeError(RedmineError):
    """A successful response whose body does not match the expected JSON shape."""

    default_code = ErrorCode.DECODE_ERROR


__all__ = [
    "ErrorCode",
    "RedmineError",
    "ConfigError",
    "NotFoundError",
    "ApiError",
    "TransportError",
    "DecodeError",
]
