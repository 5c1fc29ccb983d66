"""
Redmine resource types.

Pydantic models for the entities exposed by the Redmine REST API and for the
JSON envelopes wrapping them. Unknown fields in responses are ignored; unset
optional fields are left out of request payloads.

Reference: https://www.redmine.org/projects/redmine/wiki/Rest_api
"""

from __future__ import annotations
from typing import Any, Dict, Generic, List, Optional, TypeVar
from pydantic import BaseModel, Field


T = TypeVar("T")


# =============================================================================
# Shared building blocks
# =============================================================================

class IdName(BaseModel):
    """Reference to another entity by id and display name."""
    id: int = 0
    name: str = ""


class IdRef(BaseModel):
    """Reference to another entity by id only."""
    id: int = 0


class CustomField(BaseModel):
    """Custom field value attached to an entity."""
    id: int = 0
    name: Optional[str] = None
    description: Optional[str] = None
    multiple: Optional[bool] = None
    value: Any = None


class Entity(BaseModel):
    """
    Base class of all Redmine entities.

    ``id`` is assigned by the server; it is left out of request payloads
    while it is unset (0).
    """
    id: int = 0

    model_config = {"populate_by_name": True}

    def to_payload(self) -> Dict[str, Any]:
        """Convert to the dictionary sent inside a request envelope."""
        exclude = {"id"} if not self.id else set()
        return self.model_dump(by_alias=True, exclude_none=True, exclude=exclude)


# =============================================================================
# Envelopes
# =============================================================================

class PageEnvelope(BaseModel, Generic[T]):
    """
    One page of a list response.

    ``total_count`` is the size of the whole collection at the server, not
    the length of this page. Endpoints that do not paginate omit it, in which
    case the page length stands in for it.
    """
    items: List[T] = Field(default_factory=list)
    total_count: Optional[int] = Field(default=None, ge=0)
    offset: Optional[int] = Field(default=None, ge=0)
    limit: Optional[int] = Field(default=None, ge=0)

    @property
    def effective_total(self) -> int:
        if self.total_count is None:
            return len(self.items)
        return self.total_count


class ErrorEnvelope(BaseModel):
    """Body of a failed request: ``{"errors": ["...", ...]}``."""
    errors: List[str]


# =============================================================================
# Projects
# =============================================================================

class Project(Entity):
    """
    A Redmine project.

    ``identifier`` is used in URLs; it must be unique, 1 to 100 characters
    of lowercase latin letters, digits, hyphen and underscore, and cannot be
    changed once the project exists.
    """
    name: Optional[str] = None
    identifier: Optional[str] = None
    description: Optional[str] = None
    homepage: Optional[str] = None
    is_public: Optional[bool] = None
    inherit_members: Optional[bool] = None
    parent: Optional[IdName] = None
    parent_id: Optional[int] = None
    status: Optional[int] = None
    created_on: Optional[str] = None
    updated_on: Optional[str] = None
    custom_fields: Optional[List[CustomField]] = None


# =============================================================================
# Issues
# =============================================================================

class JournalDetails(BaseModel):
    property: Optional[str] = None
    name: Optional[str] = None
    old_value: Optional[str] = None
    new_value: Optional[str] = None


class Journal(BaseModel):
    id: int = 0
    user: Optional[IdName] = None
    notes: Optional[str] = None
    created_on: Optional[str] = None
    details: List[JournalDetails] = Field(default_factory=list)


class Upload(BaseModel):
    token: str
    filename: Optional[str] = None
    content_type: Optional[str] = None
    description: Optional[str] = None


class Issue(Entity):
    """A Redmine issue."""
    subject: Optional[str] = None
    description: Optional[str] = None
    project_id: Optional[int] = None
    project: Optional[IdName] = None
    tracker_id: Optional[int] = None
    tracker: Optional[IdName] = None
    parent_id: Optional[int] = Field(default=None, alias="parent_issue_id")
    parent: Optional[IdRef] = None
    status_id: Optional[int] = None
    status: Optional[IdName] = None
    priority_id: Optional[int] = None
    priority: Optional[IdName] = None
    author: Optional[IdName] = None
    fixed_version: Optional[IdName] = None
    fixed_version_id: Optional[int] = None
    assigned_to: Optional[IdName] = None
    assigned_to_id: Optional[int] = None
    category: Optional[IdName] = None
    category_id: Optional[int] = None
    notes: Optional[str] = None
    is_private: Optional[bool] = None
    status_date: Optional[str] = None
    start_date: Optional[str] = None
    due_date: Optional[str] = None
    done_ratio: Optional[float] = None
    estimated_hours: Optional[float] = None
    created_on: Optional[str] = None
    updated_on: Optional[str] = None
    closed_on: Optional[str] = None
    custom_fields: Optional[List[CustomField]] = None
    uploads: Optional[List[Upload]] = None
    journals: Optional[List[Journal]] = None

    @property
    def title(self) -> str:
        """Display title, e.g. ``Bug #1: Something should be done``."""
        if self.tracker is None:
            return f"#{self.id}: {self.subject or ''}"
        return f"{self.tracker.name} #{self.id}: {self.subject or ''}"

    def to_payload(self) -> Dict[str, Any]:
        """
        Convert to the request payload.

        Redmine keeps the parent issue unless ``parent_issue_id`` is sent, so
        an issue without parent sends an empty value to reset it.
        """
        payload = super().to_payload()
        payload.pop("parent", None)
        if self.parent_id:
            payload["parent_issue_id"] = str(self.parent_id)
        elif self.parent is None:
            payload["parent_issue_id"] = ""
        else:
            payload.pop("parent_issue_id", None)
        return payload


# =============================================================================
# Versions, categories, priorities
# =============================================================================

class Version(Entity):
    """A project version (milestone)."""
    project: Optional[IdName] = None
    name: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None
    sharing: Optional[str] = None
    due_date: Optional[str] = None
    created_on: Optional[str] = None
    updated_on: Optional[str] = None
    custom_fields: Optional[List[CustomField]] = None


class IssueCategory(Entity):
    """An issue category of a project."""
    project: Optional[IdName] = None
    name: Optional[str] = None
    assigned_to: Optional[IdName] = None
    assigned_to_id: Optional[int] = None


class IssuePriority(Entity):
    """An entry of the issue priority enumeration."""
    name: str = ""
    is_default: bool = False
    active: Optional[bool] = None


# =============================================================================
# Memberships and users
# =============================================================================

class Membership(Entity):
    """Membership of a user or group in a project."""
    project: Optional[IdName] = None
    user: Optional[IdName] = None
    group: Optional[IdName] = None
    roles: Optional[List[IdName]] = None
    user_id: Optional[int] = None
    role_ids: Optional[List[int]] = None


class User(Entity):
    """A Redmine user account."""
    login: Optional[str] = None
    firstname: Optional[str] = None
    lastname: Optional[str] = None
    mail: Optional[str] = None
    password: Optional[str] = None
    admin: Optional[bool] = None
    status: Optional[int] = None
    auth_source_id: Optional[int] = None
    must_change_passwd: Optional[bool] = None
    created_on: Optional[str] = None
    last_login_on: Optional[str] = None
    custom_fields: Optional[List[CustomField]] = None


# User status values
USER_STATUS_ACTIVE = 1
USER_STATUS_REGISTERED = 2
USER_STATUS_LOCKED = 3


__all__ = [
    "IdName",
    "IdRef",
    "CustomField",
    "Entity",
    "PageEnvelope",
    "ErrorEnvelope",
    "Project",
    "JournalDetails",
    "Journal",
    "Upload",
    "Issue",
    "Version",
    "IssueCategory",
    "IssuePriority",
    "Membership",
    "User",
    "USER_STATUS_ACTIVE",
    "USER_STATUS_REGISTERED",
    "USER_STATUS_LOCKED",
]
