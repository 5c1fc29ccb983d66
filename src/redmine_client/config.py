"""
Client configuration.

ClientConfig is the immutable configuration shared by all requests of a
client. ClientBuilder assembles and validates it step by step.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Mapping, Optional

import requests

from .auth import AuthPolicy, BasicAuth, BasicAuthWithToken, NoAuth, TokenAuth, validate_auth
from .runtime.errors import ConfigError
from .runtime.url import EndpointUrl

if TYPE_CHECKING:
    from .client import RedmineClient

__version__ = "1.0.0"

# Sentinel for limit/offset: leave the value to the server
NO_SETTING = -1

DEFAULT_LIMIT = NO_SETTING
DEFAULT_OFFSET = NO_SETTING
DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = f"redmine-client-python/{__version__}"


@dataclass(frozen=True)
class ClientConfig:
    """Configuration for the Redmine API client."""

    endpoint: str
    auth: AuthPolicy = field(default_factory=NoAuth)
    limit: int = DEFAULT_LIMIT
    offset: int = DEFAULT_OFFSET
    timeout: float = DEFAULT_TIMEOUT
    verify_ssl: bool = True
    debug: bool = False
    user_agent: str = DEFAULT_USER_AGENT

    def validate(self) -> None:
        """
        Check the configuration before any request is sent.

        Raises:
            ConfigError: On an invalid auth policy, endpoint or pagination value
        """
        try:
            validate_auth(self.auth)
            EndpointUrl.parse(self.endpoint)
        except ConfigError as e:
            raise e.wrap("could not create redmine client")
        for name, value in (("limit", self.limit), ("offset", self.offset)):
            if value < NO_SETTING:
                raise ConfigError(f"{name} must be {NO_SETTING} (unset) or non-negative, got {value}")
        if self.timeout <= 0:
            raise ConfigError(f"timeout must be positive, got {self.timeout}")


class ClientBuilder:
    """
    Fluent builder for RedmineClient.

    Example:
        ```python
        client = (
            ClientBuilder()
            .endpoint("https://redmine.example.com")
            .auth_api_token("0123456789abcdef")
            .limit(100)
            .build()
        )
        ```
    """

    def __init__(self) -> None:
        self._endpoint: str = ""
        self._auth: AuthPolicy = NoAuth()
        self._limit = DEFAULT_LIMIT
        self._offset = DEFAULT_OFFSET
        self._timeout = DEFAULT_TIMEOUT
        self._verify_ssl = True
        self._debug = False
        self._session: Optional[requests.Session] = None

    def endpoint(self, endpoint: str) -> "ClientBuilder":
        self._endpoint = endpoint
        return self

    def auth_basic_auth(self, user: str, password: str) -> "ClientBuilder":
        self._auth = BasicAuth(user, password)
        return self

    def auth_api_token(self, token: str) -> "ClientBuilder":
        self._auth = TokenAuth(token)
        return self

    def auth_basic_auth_with_token(self, user: str, token: str) -> "ClientBuilder":
        self._auth = BasicAuthWithToken(user, token)
        return self

    def auth_none(self) -> "ClientBuilder":
        self._auth = NoAuth()
        return self

    def auth(self, auth: AuthPolicy) -> "ClientBuilder":
        self._auth = auth
        return self

    def limit(self, limit: int) -> "ClientBuilder":
        self._limit = limit
        return self

    def offset(self, offset: int) -> "ClientBuilder":
        self._offset = offset
        return self

    def timeout(self, seconds: float) -> "ClientBuilder":
        self._timeout = seconds
        return self

    def verify_ssl(self, verify: bool) -> "ClientBuilder":
        self._verify_ssl = verify
        return self

    def debug(self, enabled: bool = True) -> "ClientBuilder":
        self._debug = enabled
        return self

    def session(self, session: requests.Session) -> "ClientBuilder":
        """Use an existing session (connection pool) instead of creating one."""
        self._session = session
        return self

    def config(self) -> ClientConfig:
        """Return the validated configuration."""
        config = ClientConfig(
            endpoint=self._endpoint,
            auth=self._auth,
            limit=self._limit,
            offset=self._offset,
            timeout=self._timeout,
            verify_ssl=self._verify_ssl,
            debug=self._debug,
        )
        config.validate()
        return config

    def build(self) -> "RedmineClient":
        from .client import RedmineClient

        return RedmineClient(self.config(), session=self._session)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ClientBuilder":
        """
        Create a builder from environment variables.

        REDMINE_ENDPOINT is required. With REDMINE_USER set, REDMINE_PASSWORD
        selects basic auth and REDMINE_API_KEY basic auth with token; otherwise
        REDMINE_API_KEY selects token auth. REDMINE_LIMIT and REDMINE_OFFSET
        are optional integers.
        """
        env = os.environ if environ is None else environ
        builder = cls().endpoint(env.get("REDMINE_ENDPOINT", ""))

        user = env.get("REDMINE_USER", "")
        password = env.get("REDMINE_PASSWORD")
        api_key = env.get("REDMINE_API_KEY", "")
        if user and password is not None:
            builder.auth_basic_auth(user, password)
        elif user:
            builder.auth_basic_auth_with_token(user, api_key)
        elif api_key:
            builder.auth_api_token(api_key)

        for name, setter in (("REDMINE_LIMIT", builder.limit), ("REDMINE_OFFSET", builder.offset)):
            raw = env.get(name)
            if raw:
                try:
                    setter(int(raw))
                except ValueError as e:
                    raise ConfigError(f"{name} must be an integer, got {raw!r}", cause=e)
        return builder
