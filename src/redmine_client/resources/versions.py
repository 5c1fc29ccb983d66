"""Versions: listed and created below a project, addressed directly by id."""

from __future__ import annotations

from ..types import Version
from .base import ProjectScopedService


class VersionService(ProjectScopedService[Version]):
    path = "versions"
    key = "version"
    plural_key = "versions"
    kind = "version"
    model = Version
