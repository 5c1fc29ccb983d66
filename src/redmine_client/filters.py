"""
Query filters for list operations.

Filters translate into ordered query parameters that are merged into the
list request after the pagination parameters.
"""

from __future__ import annotations
from typing import Dict, List, Optional
from pydantic import BaseModel, Field

from .transport.request import KeyValue


class IssueFilter(BaseModel):
    """
    Filter criteria for issue lists.

    Values are passed through as strings, so Redmine operators such as
    ``status_id="*"`` or ``updated_on=">=2021-01-01"`` work unchanged.
    ``extra_filters`` carries any criteria without a dedicated field
    (e.g. custom fields ``cf_1``).
    """
    project_id: Optional[str] = Field(default=None, description="Project id or identifier")
    subproject_id: Optional[str] = Field(default=None, description="Subproject id, '!*' excludes subprojects")
    tracker_id: Optional[str] = None
    status_id: Optional[str] = Field(default=None, description="Status id, 'open', 'closed' or '*'")
    assigned_to_id: Optional[str] = Field(default=None, description="User id or 'me'")
    updated_on: Optional[str] = None
    extra_filters: Dict[str, str] = Field(default_factory=dict)

    model_config = {"populate_by_name": True, "coerce_numbers_to_str": True}

    def to_params(self) -> List[KeyValue]:
        """Convert to query parameters; unset criteria are skipped."""
        params: List[KeyValue] = []
        for name in ("project_id", "subproject_id", "tracker_id", "status_id", "assigned_to_id", "updated_on"):
            value = getattr(self, name)
            if value:
                params.append(KeyValue(name, str(value)))
        for key, value in self.extra_filters.items():
            params.append(KeyValue(key, str(value)))
        return params
