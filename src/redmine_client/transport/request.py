"""
Request construction for the Redmine REST API.

RequestBuilder turns a resource path into a RequestSpec: the endpoint URL with
the resource appended, pagination and caller supplied query parameters, JSON
body, headers and finally the configured auth policy.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, NamedTuple, Optional, Tuple, Union
from urllib.parse import urlencode

import requests
from requests.auth import HTTPBasicAuth

from ..config import ClientConfig, NO_SETTING
from ..runtime.errors import ConfigError, ErrorCode, RedmineError
from ..runtime.url import EndpointUrl

logger = logging.getLogger(__name__)

HTTP_HEADER_CONTENT_TYPE = "Content-Type"
CONTENT_TYPE_JSON = "application/json"

# Methods that always carry Content-Type: application/json
BODY_METHODS = ("POST", "PUT", "DELETE")


class KeyValue(NamedTuple):
    """A single query parameter."""
    key: str
    value: str


def args_to_key_values(args: Optional[Mapping[str, Any]]) -> Optional[List[KeyValue]]:
    """Convert a mapping of extra arguments into query parameters (None stays None)."""
    if args is None:
        return None
    return [KeyValue(str(key), str(value)) for key, value in args.items()]


@dataclass
class RequestSpec:
    """
    A fully formed outgoing request.

    Query parameters are held as ordered key/value pairs and are only
    percent-encoded when the request is prepared, so values with reserved or
    non-ASCII characters cannot corrupt the URL.
    """

    method: str
    url: str
    params: List[KeyValue] = field(default_factory=list)
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[bytes] = None
    auth: Optional[Tuple[bytes, bytes]] = field(default=None, repr=False)

    def add_query_parameter(self, key: str, value: Any) -> None:
        """Append ``key=value``; an empty key is ignored."""
        if not key:
            return
        self.params.append(KeyValue(key, str(value)))

    def add_query_parameters(self, kvs: Optional[Iterable[Union[KeyValue, Tuple[str, Any]]]]) -> None:
        for key, value in kvs or ():
            self.add_query_parameter(key, value)

    def set_query_parameter(self, key: str, value: Any) -> None:
        """Replace every ``key`` parameter by a single ``key=value`` at the first one's position."""
        if not key:
            return
        replaced: List[KeyValue] = []
        found = False
        for kv in self.params:
            if kv.key != key:
                replaced.append(kv)
            elif not found:
                replaced.append(KeyValue(key, str(value)))
                found = True
        if not found:
            replaced.append(KeyValue(key, str(value)))
        self.params = replaced

    def query_value(self, key: str) -> Optional[str]:
        for kv in self.params:
            if kv.key == key:
                return kv.value
        return None

    def set_basic_auth(self, user: str, password: str) -> None:
        # UTF-8 so that non-latin1 credentials survive Basic encoding
        self.auth = (user.encode("utf-8"), password.encode("utf-8"))

    def has_basic_auth(self) -> bool:
        return self.auth is not None

    def prepare(self, session: Optional[requests.Session] = None) -> requests.PreparedRequest:
        """
        Build the wire-level request.

        With a session, the request is prepared through
        ``Session.prepare_request`` so the session's headers, auth and cookies
        are merged in; values set on this request take precedence.
        """
        request = requests.Request(
            method=self.method,
            url=self.url,
            params=[tuple(kv) for kv in self.params],
            headers=self.headers,
            data=self.body,
            auth=HTTPBasicAuth(*self.auth) if self.auth else None,
        )
        try:
            if session is not None:
                return session.prepare_request(request)
            return request.prepare()
        except (requests.exceptions.RequestException, ValueError) as e:
            raise ConfigError(f"could not prepare request for URL {self.url}: {e}", ErrorCode.INVALID_URL, cause=e)

    @property
    def full_url(self) -> str:
        """URL including the encoded query string."""
        if not self.params:
            return self.url
        return f"{self.url}?{urlencode(self.params)}"


class RequestBuilder:
    """
    Builds authenticated requests against the configured endpoint.

    Parameter order is pagination (``limit``, ``offset``) first, then the
    caller's parameters, then whatever the auth policy adds.
    """

    def __init__(self, config: ClientConfig):
        self._config = config

    @property
    def config(self) -> ClientConfig:
        return self._config

    def pagination_params(self) -> List[KeyValue]:
        params: List[KeyValue] = []
        if self._config.limit > NO_SETTING:
            params.append(KeyValue("limit", str(self._config.limit)))
        if self._config.offset > NO_SETTING:
            params.append(KeyValue("offset", str(self._config.offset)))
        return params

    def build(
        self,
        method: str,
        resource_path: str,
        params: Optional[Iterable[Union[KeyValue, Tuple[str, Any]]]] = None,
        body: Optional[Any] = None,
        description: Optional[str] = None,
    ) -> RequestSpec:
        """
        Build a request for ``resource_path`` below the endpoint.

        Args:
            method: HTTP verb
            resource_path: Path of the resource without ``.json`` (e.g. ``projects/1``)
            params: Extra query parameters
            body: JSON-serializable payload (or pre-encoded bytes)
            description: Resource name used in error messages (defaults to the path)

        Raises:
            ConfigError: If the endpoint is not a valid URL or the request cannot be prepared
        """
        method = method.upper()
        description = description or resource_path
        try:
            endpoint = EndpointUrl.parse(self._config.endpoint)
        except RedmineError as e:
            raise e.wrap(f"error while creating {method} request for {description}")

        spec = RequestSpec(method=method, url=endpoint.resource(resource_path))
        spec.headers["Accept"] = CONTENT_TYPE_JSON
        spec.headers["User-Agent"] = self._config.user_agent

        spec.add_query_parameters(self.pagination_params())
        spec.add_query_parameters(params)

        if body is not None:
            spec.body = body if isinstance(body, bytes) else json.dumps(body, ensure_ascii=False).encode("utf-8")
        if method in BODY_METHODS:
            spec.headers[HTTP_HEADER_CONTENT_TYPE] = CONTENT_TYPE_JSON

        try:
            self._config.auth.apply(spec)
            spec.prepare()
        except RedmineError as e:
            raise e.wrap(f"error while creating {method} request for {description}")

        logger.debug("Built %s request for %s", method, description)
        return spec
