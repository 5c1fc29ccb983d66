"""
Tests for the operations each resource service offers.

Services only expose operations for routes their resource actually has.
"""

import pytest

from redmine_client import TransportError
from redmine_client.resources import (
    CollectionService,
    EntityService,
    IssueCategoryService,
    IssuePriorityService,
    IssueService,
    MembershipService,
    ProjectScopedService,
    ProjectService,
    ResourceService,
    UserService,
    VersionService,
)


class TestServiceShapes:
    """Tests for the operation sets of the services."""

    @pytest.mark.parametrize("service", [ProjectService, IssueService, UserService])
    def test_top_level_collections(self, service):
        assert issubclass(service, CollectionService)
        for operation in ("get", "list", "create", "update", "delete"):
            assert hasattr(service, operation)

    @pytest.mark.parametrize("service", [VersionService, IssueCategoryService, MembershipService])
    def test_project_scoped_collections(self, service):
        assert issubclass(service, ProjectScopedService)
        assert not issubclass(service, CollectionService)
        for operation in ("get", "list_of_project", "create", "create_in_project", "update", "delete"):
            assert hasattr(service, operation)
        assert not hasattr(service, "list")

    def test_priorities_only_list(self):
        assert issubclass(IssuePriorityService, ResourceService)
        assert not issubclass(IssuePriorityService, EntityService)
        assert hasattr(IssuePriorityService, "list")
        for operation in ("get", "create", "update", "delete"):
            assert not hasattr(IssuePriorityService, operation)


class TestProjectScopedRoutes:
    """Tests for routes below a project."""

    @pytest.mark.parametrize("service, expected", [
        (VersionService, "projects/4/versions"),
        (IssueCategoryService, "projects/4/issue_categories"),
        (MembershipService, "projects/4/memberships"),
    ])
    def test_project_path(self, service, expected):
        assert service(None, None, None, None).project_path(4) == expected

    def test_item_path_is_top_level(self):
        assert VersionService(None, None, None, None).item_path(9) == "versions/9"

    def test_list_error_names_project(self, token_client, session):
        session.respond(500, "")
        with pytest.raises(TransportError) as exc_info:
            token_client.versions(4)
        assert str(exc_info.value).startswith("error while reading versions for project 4: ")
