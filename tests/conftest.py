"""
Shared fixtures.

Clients are built against a fake session, so no test touches the network.
"""

import pytest

from helpers import API_KEY, ENDPOINT, PASSWORD, USER, FakeSession

from redmine_client import ClientBuilder


@pytest.fixture
def session():
    """Fake session answering 200 with an empty JSON object by default."""
    return FakeSession()


@pytest.fixture
def token_client(session):
    """Client authenticating with an API key query parameter."""
    client = ClientBuilder().endpoint(ENDPOINT).auth_api_token(API_KEY).session(session).build()
    yield client
    client.close()


@pytest.fixture
def basic_client(session):
    """Client authenticating with HTTP Basic credentials."""
    client = ClientBuilder().endpoint(ENDPOINT).auth_basic_auth(USER, PASSWORD).session(session).build()
    yield client
    client.close()


@pytest.fixture
def paging_client(session):
    """Token client requesting pages of two items."""
    client = (
        ClientBuilder()
        .endpoint(ENDPOINT)
        .auth_api_token(API_KEY)
        .limit(2)
        .session(session)
        .build()
    )
    yield client
    client.close()
