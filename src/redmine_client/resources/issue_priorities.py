"""
Issue priorities: the read-only ``/enumerations/issue_priorities.json`` list.

Enumerations are returned in one piece without ``total_count`` and have no
routes for single entries, so the service only lists.
"""

from __future__ import annotations

from typing import List

from ..types import IssuePriority
from .base import ResourceService


class IssuePriorityService(ResourceService[IssuePriority]):
    path = "enumerations/issue_priorities"
    key = "issue_priority"
    plural_key = "issue_priorities"
    kind = "issue priority"
    model = IssuePriority

    @property
    def plural_kind(self) -> str:
        return "issue priorities"

    def list(self) -> List[IssuePriority]:
        return self._list(self.collection_path())
