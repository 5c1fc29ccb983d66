"""Issue categories: listed and created below a project, addressed directly by id."""

from __future__ import annotations

from ..types import IssueCategory
from .base import ProjectScopedService


class IssueCategoryService(ProjectScopedService[IssueCategory]):
    path = "issue_categories"
    key = "issue_category"
    plural_key = "issue_categories"
    kind = "issue category"
    model = IssueCategory

    @property
    def plural_kind(self) -> str:
        return "issue categories"
