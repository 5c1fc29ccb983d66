"""
Response decoding.

Maps an HTTP response to either a decoded value or an error of the client's
taxonomy:

1. 404 on an addressed entity -> NotFoundError
2. any status outside the operation's success set -> ApiError when the body
   is an ``{"errors": [...]}`` envelope, otherwise TransportError carrying
   the status line (e.g. ``HTTP 401 Unauthorized``)
3. success -> the parsed body; a body of the wrong shape is a DecodeError
"""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any, Callable, Collection, NamedTuple, Optional, Type, TypeVar

import requests
from pydantic import BaseModel, ValidationError

from ..runtime.errors import ApiError, DecodeError, NotFoundError, RedmineError, TransportError
from ..types import ErrorEnvelope, PageEnvelope

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

STATUS_GET = frozenset({200})
STATUS_POST = frozenset({201})
STATUS_PUT = frozenset({200, 204})
STATUS_DELETE = frozenset({200, 204})


class NotFound(NamedTuple):
    """How to report a 404 for a single addressed entity."""
    kind: str
    resource_id: Any
    verb: Optional[str] = None

    def error(self) -> NotFoundError:
        return NotFoundError(self.kind, self.resource_id, self.verb)


def reason_phrase(response: requests.Response) -> str:
    if response.reason:
        return response.reason
    try:
        return HTTPStatus(response.status_code).phrase
    except ValueError:
        return ""


def status_line(response: requests.Response) -> str:
    return f"HTTP {response.status_code} {reason_phrase(response)}".rstrip()


def decode_http_error(response: requests.Response) -> RedmineError:
    """
    Turn a failed response into ApiError or, if its body is not an error
    envelope, into a TransportError with the status line.
    """
    try:
        envelope = ErrorEnvelope.model_validate(response.json())
    except (ValueError, ValidationError):
        logger.debug("Error body of %s is not an error envelope", status_line(response))
        return TransportError.from_status(response.status_code, reason_phrase(response))
    return ApiError(envelope.errors, response.status_code)


def entity_parser(model: Type[M], key: str) -> Callable[[Any], M]:
    """Parser for single-entity envelopes such as ``{"issue": {...}}``."""

    def parse(data: Any) -> M:
        if not isinstance(data, dict) or key not in data:
            raise DecodeError(f"response does not contain a {key!r} object")
        return model.model_validate(data[key])

    return parse


def page_parser(model: Type[M], key: str) -> Callable[[Any], PageEnvelope[M]]:
    """Parser for list envelopes such as ``{"issues": [...], "total_count": N, ...}``."""
    envelope_type = PageEnvelope[model]

    def parse(data: Any) -> PageEnvelope[M]:
        if not isinstance(data, dict) or key not in data:
            raise DecodeError(f"response does not contain a {key!r} list")
        return envelope_type.model_validate({
            "items": data[key],
            "total_count": data.get("total_count"),
            "offset": data.get("offset"),
            "limit": data.get("limit"),
        })

    return parse


class ResponseDecoder:
    """Decodes responses according to the status policy above."""

    def decode(
        self,
        response: requests.Response,
        success_statuses: Collection[int],
        parse: Optional[Callable[[Any], Any]] = None,
        not_found: Optional[NotFound] = None,
    ) -> Any:
        """
        Decode ``response`` and release it.

        Args:
            response: Response to decode (closed on return)
            success_statuses: Status codes counted as success
            parse: Converts the JSON body of a successful response; when
                None the body is ignored and None is returned
            not_found: Entity description for 404 responses

        Raises:
            NotFoundError, ApiError, TransportError, DecodeError
        """
        with response:
            status = response.status_code
            if status == HTTPStatus.NOT_FOUND and not_found is not None:
                raise not_found.error()

            if status not in success_statuses:
                raise decode_http_error(response)

            if parse is None:
                return None

            try:
                data = response.json()
            except ValueError as e:
                raise DecodeError(f"could not decode JSON body of {status_line(response)}: {e}", cause=e)

            try:
                return parse(data)
            except ValidationError as e:
                raise DecodeError(f"unexpected response structure: {e}", cause=e)
