"""Resource services built on the shared transport layer."""

from .base import CollectionService, EntityService, ProjectScopedService, ResourceService
from .projects import ProjectService
from .issues import IssueService
from .versions import VersionService
from .issue_categories import IssueCategoryService
from .issue_priorities import IssuePriorityService
from .memberships import MembershipService
from .users import UserService

__all__ = [
    "ResourceService",
    "EntityService",
    "CollectionService",
    "ProjectScopedService",
    "ProjectService",
    "IssueService",
    "VersionService",
    "IssueCategoryService",
    "IssuePriorityService",
    "MembershipService",
    "UserService",
]
