"""Project memberships: listed and created below a project, addressed directly by id."""

from __future__ import annotations

from typing import Any, Dict, Sequence

from ..types import Membership
from .base import ProjectScopedService


class MembershipService(ProjectScopedService[Membership]):
    path = "memberships"
    key = "membership"
    plural_key = "memberships"
    kind = "membership"
    model = Membership

    def create_for_user(self, project_id: int, user_id: int, role_ids: Sequence[int]) -> Membership:
        """Add user ``user_id`` to a project with the given roles."""
        return self.create_in_project(project_id, Membership(user_id=user_id, role_ids=list(role_ids)))

    def update_payload(self, membership: Membership) -> Dict[str, Any]:
        # Only the roles of an existing membership can change
        return {"role_ids": list(membership.role_ids or [role.id for role in membership.roles or []])}
