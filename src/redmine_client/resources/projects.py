"""Projects: ``/projects.json`` and ``/projects/<id>.json``."""

from __future__ import annotations

from ..types import Project
from .base import CollectionService


class ProjectService(CollectionService[Project]):
    path = "projects"
    key = "project"
    plural_key = "projects"
    kind = "project"
    model = Project
