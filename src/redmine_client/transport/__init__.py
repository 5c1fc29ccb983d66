"""
Transport layer: request construction, HTTP exchange, response decoding and
pagination.
"""

from .request import KeyValue, RequestSpec, RequestBuilder, args_to_key_values
from .http import HttpTransport, redact_url
from .decoder import (
    ResponseDecoder,
    NotFound,
    entity_parser,
    page_parser,
    decode_http_error,
    STATUS_GET,
    STATUS_POST,
    STATUS_PUT,
    STATUS_DELETE,
)
from .paginator import Paginator

__all__ = [
    "KeyValue",
    "RequestSpec",
    "RequestBuilder",
    "args_to_key_values",
    "HttpTransport",
    "redact_url",
    "ResponseDecoder",
    "NotFound",
    "entity_parser",
    "page_parser",
    "decode_http_error",
    "STATUS_GET",
    "STATUS_POST",
    "STATUS_PUT",
    "STATUS_DELETE",
    "Paginator",
]
