"""
Redmine Python Client

This package provides a client for the Redmine REST API: authenticated
requests, offset-based pagination of list endpoints and a uniform error
taxonomy, with typed operations for projects, issues, versions, issue
categories, issue priorities, memberships and users.
"""

from .auth import AuthPolicy, BasicAuth, BasicAuthWithToken, NoAuth, TokenAuth
from .config import ClientBuilder, ClientConfig, NO_SETTING, __version__
from .client import RedmineClient, new_client
from .filters import IssueFilter
from .runtime.errors import *
from .runtime.url import EndpointUrl
from .types import *

__all__ = [
    # Client
    "RedmineClient",
    "ClientBuilder",
    "ClientConfig",
    "new_client",
    "NO_SETTING",

    # Authentication
    "AuthPolicy",
    "BasicAuth",
    "TokenAuth",
    "BasicAuthWithToken",
    "NoAuth",

    # Filters and URLs
    "IssueFilter",
    "EndpointUrl",

    # Errors
    "ErrorCode",
    "RedmineError",
    "ConfigError",
    "NotFoundError",
    "ApiError",
    "TransportError",
    "DecodeError",

    # Types
    "IdName",
    "IdRef",
    "CustomField",
    "PageEnvelope",
    "ErrorEnvelope",
    "Project",
    "Issue",
    "Journal",
    "JournalDetails",
    "Upload",
    "Version",
    "IssueCategory",
    "IssuePriority",
    "Membership",
    "User",
    "USER_STATUS_ACTIVE",
    "USER_STATUS_REGISTERED",
    "USER_STATUS_LOCKED",
]
