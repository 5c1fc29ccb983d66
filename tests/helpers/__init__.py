from .fake_session import (
    FakeBody,
    FakeSession,
    basic_credentials,
    json_body,
    make_response,
    paged,
    path_and_query,
    query_pairs,
    query_value,
)
from .settings import API_KEY, ENDPOINT, PASSWORD, USER

__all__ = [
    "FakeBody",
    "FakeSession",
    "basic_credentials",
    "json_body",
    "make_response",
    "paged",
    "path_and_query",
    "query_pairs",
    "query_value",
    "API_KEY",
    "ENDPOINT",
    "PASSWORD",
    "USER",
]
