"""
HTTP transport on top of a requests session.

Sends prepared RequestSpecs and maps connection-level failures (DNS, refused
connections, timeouts) to TransportError. Status codes are not inspected
here; that is the ResponseDecoder's job.
"""

from __future__ import annotations

import logging
import re
from typing import Optional

import requests

from ..config import ClientConfig
from ..runtime.errors import ErrorCode, TransportError
from .request import RequestSpec

logger = logging.getLogger(__name__)

_API_KEY_RE = re.compile(r"([?&]key=)[^&#]*")


def redact_url(url: str) -> str:
    """Hide the API key of a URL for logging."""
    return _API_KEY_RE.sub(r"\1***", url)


class HttpTransport:
    """Blocking HTTP transport with connection reuse."""

    def __init__(self, config: ClientConfig, session: Optional[requests.Session] = None):
        self._config = config
        self._session = session or requests.Session()
        self._owns_session = session is None

    @property
    def session(self) -> requests.Session:
        return self._session

    def send(self, spec: RequestSpec) -> requests.Response:
        """
        Send ``spec`` and return the raw response.

        The caller owns the response and must close it.

        Raises:
            ConfigError: If the request cannot be prepared
            TransportError: On connection-level failures
        """
        prepared = spec.prepare(self._session)
        logger.debug("Request: %s %s", prepared.method, redact_url(prepared.url))
        try:
            response = self._session.send(
                prepared,
                timeout=self._config.timeout,
                verify=self._config.verify_ssl,
            )
        except requests.exceptions.RequestException as e:
            raise TransportError(
                f"{prepared.method} {redact_url(prepared.url)} failed: {e}",
                ErrorCode.CONNECTION_FAILED,
                cause=e,
            )
        logger.debug("Response: %s %s for %s", response.status_code, response.reason, redact_url(prepared.url))
        return response

    def close(self) -> None:
        """Close the HTTP session if owned by this transport."""
        if self._owns_session:
            self._session.close()
