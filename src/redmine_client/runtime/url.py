"""
EndpointUrl type for Redmine service endpoints.
"""

from typing import Any, Union
from urllib.parse import urlsplit, urlunsplit

import requests

from .errors import ConfigError, ErrorCode


class EndpointUrl:
    """Parsed base endpoint of a Redmine instance, e.g. ``https://host:3000/redmine``."""

    SCHEMES = ("http", "https")

    def __init__(self, url: str):
        if not isinstance(url, str):
            raise ConfigError("endpoint must be a string", ErrorCode.INVALID_URL)
        if not url.strip():
            raise ConfigError("endpoint must not be empty", ErrorCode.INVALID_URL)

        try:
            parts = urlsplit(url.strip())
            # Accessing port validates it
            parts.port
        except ValueError as e:
            raise ConfigError(f"endpoint {url!r} is not a valid URL", ErrorCode.INVALID_URL, cause=e)

        if parts.scheme.lower() not in self.SCHEMES:
            raise ConfigError(
                f"endpoint {url!r} is not a valid URL: scheme must be one of {', '.join(self.SCHEMES)}",
                ErrorCode.INVALID_URL,
            )
        if not parts.hostname:
            raise ConfigError(f"endpoint {url!r} is not a valid URL: missing host", ErrorCode.INVALID_URL)

        # Host labels, IDNA encoding and the like, as checked when a request is sent
        try:
            requests.Request("GET", url.strip()).prepare()
        except (requests.exceptions.RequestException, ValueError) as e:
            raise ConfigError(f"endpoint {url!r} is not a valid URL: {e}", ErrorCode.INVALID_URL, cause=e)

        self.url = url.strip()
        self._parts = parts

    def __str__(self) -> str:
        return self.url

    def __repr__(self) -> str:
        return f"EndpointUrl('{self.url}')"

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, EndpointUrl):
            return self.url == other.url
        elif isinstance(other, str):
            return self.url == other
        return False

    def __hash__(self) -> int:
        return hash(self.url)

    @classmethod
    def parse(cls, value: Union[str, "EndpointUrl"]) -> "EndpointUrl":
        if isinstance(value, cls):
            return value
        return cls(value)

    @property
    def scheme(self) -> str:
        return self._parts.scheme

    @property
    def host(self) -> str:
        return self._parts.hostname

    @property
    def path(self) -> str:
        """Path prefix of the endpoint without trailing slash ('' for the root)."""
        return self._parts.path.rstrip("/")

    def resource(self, resource_path: str) -> str:
        """
        Return the JSON URL of a resource below this endpoint.

        The resource path is appended to the endpoint's own path, so an endpoint
        of ``https://example.com/redmine`` and ``projects/1`` yield
        ``https://example.com/redmine/projects/1.json``. A query string on the
        endpoint is kept.
        """
        path = f"{self.path}/{resource_path.strip('/')}.json"
        return urlunsplit((self._parts.scheme, self._parts.netloc, path, self._parts.query, ""))
