"""Issues: ``/issues.json`` and ``/issues/<id>.json``."""

from __future__ import annotations

from typing import List, Mapping, Optional

from ..filters import IssueFilter
from ..transport.request import KeyValue, args_to_key_values
from ..types import Issue
from .base import CollectionService


class IssueService(CollectionService[Issue]):
    path = "issues"
    key = "issue"
    plural_key = "issues"
    kind = "issue"
    model = Issue

    def get_with_args(self, issue_id: int, args: Optional[Mapping[str, str]]) -> Issue:
        """Read an issue with extra query parameters, e.g. ``{"include": "journals"}``."""
        return self.get(issue_id, args_to_key_values(args))

    def list_of_project(self, project_id: int) -> List[Issue]:
        return self._list(
            self.collection_path(),
            [KeyValue("project_id", str(project_id))],
            context=f"error while reading issues for project {project_id}",
        )

    def list_by_query(self, query_id: int) -> List[Issue]:
        """Read the issues of a saved query."""
        return self._list(
            self.collection_path(),
            [KeyValue("query_id", str(query_id))],
            context=f"error while reading issues for query id {query_id}",
        )

    def list_by_filter(self, issue_filter: Optional[IssueFilter]) -> List[Issue]:
        params = issue_filter.to_params() if issue_filter is not None else []
        return self._list(
            self.collection_path(),
            params,
            context=f"error while reading issues by filter {issue_filter!r}",
        )
