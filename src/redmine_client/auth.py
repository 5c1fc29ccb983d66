"""
Authentication policies for the Redmine REST API.

Redmine accepts either HTTP Basic credentials or an API key passed as the
``key`` query parameter. Each supported scheme is its own immutable type that
only holds the credentials it needs:

- BasicAuth: user and password as HTTP Basic credentials
- TokenAuth: API key as ``key=<token>`` query parameter
- BasicAuthWithToken: user and API key (as password) as HTTP Basic credentials
- NoAuth: anonymous access

Policies are validated when the client is built, never at request time.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Union

from .runtime.errors import ConfigError, ErrorCode

if TYPE_CHECKING:
    from .transport.request import RequestSpec

API_KEY_PARAMETER = "key"


def _require(scheme: str, field_name: str, value: str) -> None:
    if not value:
        raise ConfigError(
            f"invalid auth configuration for {scheme}: {field_name} must not be empty",
            ErrorCode.INVALID_AUTH,
        )


@dataclass(frozen=True)
class BasicAuth:
    """HTTP Basic authentication with user and password."""

    user: str
    password: str = field(repr=False)

    scheme = "basic auth"

    def validate(self) -> None:
        _require(self.scheme, "user", self.user)

    def apply(self, request: "RequestSpec") -> None:
        request.set_basic_auth(self.user, self.password)


@dataclass(frozen=True)
class TokenAuth:
    """API key sent as the ``key`` query parameter."""

    token: str = field(repr=False)

    scheme = "API token"

    def validate(self) -> None:
        _require(self.scheme, "API token", self.token)

    def apply(self, request: "RequestSpec") -> None:
        # An empty key parameter would look like an authenticated request
        if self.token:
            request.add_query_parameter(API_KEY_PARAMETER, self.token)


@dataclass(frozen=True)
class BasicAuthWithToken:
    """HTTP Basic authentication using the API key as password."""

    user: str
    token: str = field(repr=False)

    scheme = "basic auth with API token"

    def validate(self) -> None:
        _require(self.scheme, "user", self.user)
        _require(self.scheme, "API token", self.token)

    def apply(self, request: "RequestSpec") -> None:
        request.set_basic_auth(self.user, self.token)


@dataclass(frozen=True)
class NoAuth:
    """Anonymous access."""

    scheme = "no auth"

    def validate(self) -> None:
        return None

    def apply(self, request: "RequestSpec") -> None:
        return None


AuthPolicy = Union[BasicAuth, TokenAuth, BasicAuthWithToken, NoAuth]

AUTH_POLICIES = (BasicAuth, TokenAuth, BasicAuthWithToken, NoAuth)


def validate_auth(auth: AuthPolicy) -> None:
    """Validate ``auth``, rejecting anything that is not a known policy."""
    if not isinstance(auth, AUTH_POLICIES):
        raise ConfigError(
            f"invalid auth configuration: unsupported auth policy {type(auth).__name__}",
            ErrorCode.INVALID_AUTH,
        )
    auth.validate()
