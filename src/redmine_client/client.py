"""
Redmine REST API client.

RedmineClient is the entry point of the package. It owns the configuration,
the HTTP session and one service per resource, and exposes their operations
as flat methods.

Example:
    ```python
    with ClientBuilder().endpoint("https://redmine.example.com").auth_api_token(key).build() as client:
        for issue in client.issues_of(1):
            print(issue.title)
    ```
"""

from __future__ import annotations

import logging
from typing import List, Mapping, Optional, Sequence

import requests

from .config import ClientBuilder, ClientConfig
from .filters import IssueFilter
from .resources import (
    IssueCategoryService,
    IssuePriorityService,
    IssueService,
    MembershipService,
    ProjectService,
    UserService,
    VersionService,
)
from .transport import HttpTransport, Paginator, RequestBuilder, ResponseDecoder
from .types import Issue, IssueCategory, IssuePriority, Membership, Project, User, Version


class RedmineClient:
    """
    Client for the Redmine REST API.

    Every call is synchronous. List calls follow pagination to the end and
    may send several requests, one after another. The client keeps no state
    between calls besides its read-only configuration, so it can be shared
    by threads if the underlying session can.
    """

    def __init__(self, config: ClientConfig, session: Optional[requests.Session] = None):
        """
        Initialize the client.

        Args:
            config: Client configuration, validated here
            session: Optional requests.Session for connection pooling

        Raises:
            ConfigError: If the configuration is invalid
        """
        config.validate()
        self._config = config

        self.logger = logging.getLogger(__name__)
        if config.debug:
            logging.getLogger("redmine_client").setLevel(logging.DEBUG)

        self._transport = HttpTransport(config, session)
        builder = RequestBuilder(config)
        decoder = ResponseDecoder()
        paginator = Paginator(self._transport, decoder)
        services = (builder, self._transport, decoder, paginator)

        self._projects = ProjectService(*services)
        self._issues = IssueService(*services)
        self._versions = VersionService(*services)
        self._issue_categories = IssueCategoryService(*services)
        self._issue_priorities = IssuePriorityService(*services)
        self._memberships = MembershipService(*services)
        self._users = UserService(*services)

        self.logger.debug("Client for %s using %s", config.endpoint, config.auth.scheme)

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def endpoint(self) -> str:
        return self._config.endpoint

    def close(self) -> None:
        """Close the HTTP session if owned by this client."""
        self._transport.close()

    def __enter__(self) -> "RedmineClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    # =========================================================================
    # Projects
    # =========================================================================

    def project(self, project_id: int) -> Project:
        return self._projects.get(project_id)

    def projects(self) -> List[Project]:
        return self._projects.list()

    def create_project(self, project: Project) -> Project:
        return self._projects.create(project)

    def update_project(self, project: Project) -> None:
        self._projects.update(project)

    def delete_project(self, project_id: int) -> None:
        self._projects.delete(project_id)

    # =========================================================================
    # Issues
    # =========================================================================

    def issue(self, issue_id: int) -> Issue:
        return self._issues.get(issue_id)

    def issue_with_args(self, issue_id: int, args: Optional[Mapping[str, str]]) -> Issue:
        """Read an issue with extra query parameters, e.g. ``{"include": "journals,watchers"}``."""
        return self._issues.get_with_args(issue_id, args)

    def issues(self) -> List[Issue]:
        return self._issues.list()

    def issues_of(self, project_id: int) -> List[Issue]:
        return self._issues.list_of_project(project_id)

    def issues_by_query(self, query_id: int) -> List[Issue]:
        return self._issues.list_by_query(query_id)

    def issues_by_filter(self, issue_filter: Optional[IssueFilter]) -> List[Issue]:
        return self._issues.list_by_filter(issue_filter)

    def create_issue(self, issue: Issue) -> Issue:
        return self._issues.create(issue)

    def update_issue(self, issue: Issue) -> None:
        self._issues.update(issue)

    def delete_issue(self, issue_id: int) -> None:
        self._issues.delete(issue_id)

    # =========================================================================
    # Versions
    # =========================================================================

    def version(self, version_id: int) -> Version:
        return self._versions.get(version_id)

    def versions(self, project_id: int) -> List[Version]:
        return self._versions.list_of_project(project_id)

    def create_version(self, version: Version) -> Version:
        return self._versions.create(version)

    def update_version(self, version: Version) -> None:
        self._versions.update(version)

    def delete_version(self, version_id: int) -> None:
        self._versions.delete(version_id)

    # =========================================================================
    # Issue categories and priorities
    # =========================================================================

    def issue_category(self, category_id: int) -> IssueCategory:
        return self._issue_categories.get(category_id)

    def issue_categories(self, project_id: int) -> List[IssueCategory]:
        return self._issue_categories.list_of_project(project_id)

    def create_issue_category(self, category: IssueCategory) -> IssueCategory:
        return self._issue_categories.create(category)

    def update_issue_category(self, category: IssueCategory) -> None:
        self._issue_categories.update(category)

    def delete_issue_category(self, category_id: int) -> None:
        self._issue_categories.delete(category_id)

    def issue_priorities(self) -> List[IssuePriority]:
        return self._issue_priorities.list()

    # =========================================================================
    # Memberships
    # =========================================================================

    def membership(self, membership_id: int) -> Membership:
        return self._memberships.get(membership_id)

    def memberships(self, project_id: int) -> List[Membership]:
        return self._memberships.list_of_project(project_id)

    def create_membership(self, project_id: int, user_id: int, role_ids: Sequence[int]) -> Membership:
        return self._memberships.create_for_user(project_id, user_id, role_ids)

    def update_membership(self, membership: Membership) -> None:
        self._memberships.update(membership)

    def delete_membership(self, membership_id: int) -> None:
        self._memberships.delete(membership_id)

    # =========================================================================
    # Users
    # =========================================================================

    def user(self, user_id: int) -> User:
        return self._users.get(user_id)

    def users(self) -> List[User]:
        return self._users.list()

    def create_user(self, user: User) -> User:
        return self._users.create(user)

    def update_user(self, user: User) -> None:
        self._users.update(user)

    def delete_user(self, user_id: int) -> None:
        self._users.delete(user_id)

    def set_user_status(self, user_id: int, status: int) -> None:
        self._users.set_status(user_id, status)

    def users_total_count(self) -> int:
        return self._users.total_count()


def new_client(endpoint: str, api_key: str) -> RedmineClient:
    """
    Create a client authenticating with an API key as query parameter.

    Shorthand for ``ClientBuilder().endpoint(endpoint).auth_api_token(api_key).build()``.
    """
    return ClientBuilder().endpoint(endpoint).auth_api_token(api_key).build()
