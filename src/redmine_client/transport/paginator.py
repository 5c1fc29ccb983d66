"""
Offset-based pagination of list endpoints.

Redmine's ``offset`` parameter is the number of items to skip, not a page
index. The paginator therefore sets ``offset`` to the number of items
collected so far and keeps requesting pages until that number reaches the
``total_count`` the server reports.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, List

from ..runtime.errors import DecodeError, RedmineError
from ..types import PageEnvelope
from .decoder import STATUS_GET, ResponseDecoder
from .http import HttpTransport, redact_url
from .request import RequestSpec

logger = logging.getLogger(__name__)

OFFSET_PARAMETER = "offset"


class Paginator:
    """Fetches every page of a list request, one request at a time."""

    def __init__(self, transport: HttpTransport, decoder: ResponseDecoder):
        self._transport = transport
        self._decoder = decoder

    def fetch_all(self, request: RequestSpec, parse: Callable[[Any], PageEnvelope]) -> List[Any]:
        """
        Collect all items of a list endpoint.

        At least one request is sent, since the total is only known from a
        response. The regular end is the collected count becoming equal to the
        reported total. Two further conditions also end the loop: the count
        exceeding the total, and an empty page before the total is reached.
        Both occur only when the collection shrinks while it is read, and
        without them the loop would never end. Neither uses ``limit``, so a
        collection of N items still takes ceil(N / limit) requests.
        A failing page aborts the whole operation and nothing is returned.

        Args:
            request: Request template; its ``offset`` parameter is overwritten per page
            parse: Page envelope parser for the response body

        Raises:
            RedmineError: From the first failing page
        """
        items: List[Any] = []
        while True:
            request.set_query_parameter(OFFSET_PARAMETER, len(items))
            page = self._fetch_page(request, parse)
            items.extend(page.items)

            total = page.effective_total
            if len(items) >= total:
                break
            if not page.items:
                logger.debug(
                    "Stopping pagination of %s: empty page at offset %d of %d",
                    redact_url(request.full_url), len(items), total,
                )
                break

        return items

    def _fetch_page(self, request: RequestSpec, parse: Callable[[Any], PageEnvelope]) -> PageEnvelope:
        offset = request.query_value(OFFSET_PARAMETER)
        try:
            response = self._transport.send(request)
            return self._decoder.decode(response, STATUS_GET, parse)
        except DecodeError:
            raise
        except RedmineError as e:
            raise e.wrap(f"list request returned non-successfully, URL: {redact_url(request.full_url)}, offset {offset}")
