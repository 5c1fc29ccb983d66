"""
Generic CRUD plumbing shared by all resource services.

A resource is described by its path, the envelope keys of its JSON payloads
and the label used in error messages. ResourceService wires RequestBuilder,
HttpTransport, ResponseDecoder and Paginator together. The public operations
are grouped by route shape, so a service only offers the routes its resource
has:

- EntityService: get, update and delete on ``<path>/<id>``
- CollectionService: adds list and create on ``<path>``
- ProjectScopedService: adds list and create on ``projects/<id>/<path>``
"""

from __future__ import annotations

import logging
from typing import Any, Callable, ClassVar, Dict, Generic, Iterable, List, Optional, Type, TypeVar

from ..runtime.errors import ConfigError, DecodeError, NotFoundError, RedmineError, TransportError
from ..transport.decoder import (
    STATUS_DELETE,
    STATUS_GET,
    STATUS_POST,
    STATUS_PUT,
    NotFound,
    ResponseDecoder,
    entity_parser,
    page_parser,
)
from ..transport.http import HttpTransport
from ..transport.paginator import Paginator
from ..transport.request import KeyValue, RequestBuilder, RequestSpec
from ..types import Entity

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Entity)


class ResourceService(Generic[E]):
    """
    Request plumbing for one resource type.

    Class attributes:
        path: Collection path below the endpoint (e.g. ``issues``)
        key: Envelope key of a single entity (e.g. ``issue``)
        plural_key: Envelope key of a list (e.g. ``issues``)
        kind: Label used in messages (e.g. ``issue category``)
        model: Entity model
    """

    path: ClassVar[str]
    key: ClassVar[str]
    plural_key: ClassVar[str]
    kind: ClassVar[str]
    model: ClassVar[Type[Entity]]

    def __init__(self, builder: RequestBuilder, transport: HttpTransport,
                 decoder: ResponseDecoder, paginator: Paginator):
        self._builder = builder
        self._transport = transport
        self._decoder = decoder
        self._paginator = paginator

    # =========================================================================
    # Routes
    # =========================================================================

    def item_path(self, entity_id: int) -> str:
        return f"{self.path}/{entity_id}"

    def collection_path(self) -> str:
        return self.path

    @property
    def plural_kind(self) -> str:
        return self.plural_key

    # =========================================================================
    # Plumbing
    # =========================================================================

    def _get(self, resource_path: str, entity_id: int, args: Optional[Iterable[KeyValue]] = None) -> E:
        spec = self._builder.build("GET", resource_path, params=args,
                                   description=f"{self.kind} {entity_id}")
        return self._execute(
            spec, STATUS_GET, entity_parser(self.model, self.key),
            not_found=NotFound(self.kind, entity_id),
            failed_send=f"could not read {self.kind} {entity_id}",
            failed_status=f"error while reading {self.kind} {entity_id}",
        )

    def _list(self, resource_path: str, params: Optional[Iterable[KeyValue]] = None,
              context: Optional[str] = None) -> List[E]:
        spec = self._builder.build("GET", resource_path, params=params, description=self.plural_kind)
        try:
            items = self._paginator.fetch_all(spec, page_parser(self.model, self.plural_key))
        except DecodeError:
            raise
        except RedmineError as e:
            raise e.wrap(context or f"error while reading {self.plural_kind}")
        logger.debug("Read %d %s", len(items), self.plural_kind)
        return items

    def _create(self, resource_path: str, entity: E) -> E:
        label = self.label(entity)
        spec = self._builder.build("POST", resource_path, body={self.key: entity.to_payload()},
                                   description=f"{self.kind} {label}")
        return self._execute(
            spec, STATUS_POST, entity_parser(self.model, self.key),
            failed_send=f"could not create {self.kind} {label}",
            failed_status=f"error while creating {self.kind} {label}",
        )

    def _update(self, resource_path: str, entity_id: int, body: Dict[str, Any]) -> None:
        spec = self._builder.build("PUT", resource_path, body=body,
                                   description=f"{self.kind} {entity_id}")
        self._execute(
            spec, STATUS_PUT, None,
            not_found=NotFound(self.kind, entity_id, "update"),
            failed_send=f"could not update {self.kind} {entity_id}",
            failed_status=f"error while updating {self.kind} {entity_id}",
        )

    def _delete(self, resource_path: str, entity_id: int) -> None:
        spec = self._builder.build("DELETE", resource_path, description=f"{self.kind} {entity_id}")
        self._execute(
            spec, STATUS_DELETE, None,
            not_found=NotFound(self.kind, entity_id, "delete"),
            failed_send=f"could not delete {self.kind} {entity_id}",
            failed_status=f"error while deleting {self.kind} {entity_id}",
        )

    def _execute(self, spec: RequestSpec, statuses: Iterable[int], parse: Optional[Callable[[Any], Any]],
                 failed_send: str, failed_status: str, not_found: Optional[NotFound] = None) -> Any:
        try:
            response = self._transport.send(spec)
        except (TransportError, ConfigError) as e:
            raise e.wrap(failed_send)
        try:
            return self._decoder.decode(response, statuses, parse, not_found)
        except (NotFoundError, DecodeError):
            raise
        except RedmineError as e:
            raise e.wrap(failed_status)

    @staticmethod
    def label(entity: Entity) -> str:
        """Human-readable name of an entity for messages."""
        for attr in ("name", "subject", "login"):
            value = getattr(entity, attr, None)
            if value:
                return str(value)
        return str(entity.id)


class EntityService(ResourceService[E]):
    """Entities addressed by id: ``<path>/<id>`` for get, update and delete."""

    def get(self, entity_id: int, args: Optional[Iterable[KeyValue]] = None) -> E:
        """Read a single entity, optionally with extra query parameters."""
        return self._get(self.item_path(entity_id), entity_id, args)

    def update(self, entity: E) -> None:
        self._update(self.item_path(entity.id), entity.id, {self.key: self.update_payload(entity)})

    def delete(self, entity_id: int) -> None:
        self._delete(self.item_path(entity_id), entity_id)

    def update_payload(self, entity: E) -> Dict[str, Any]:
        return entity.to_payload()


class CollectionService(EntityService[E]):
    """Entities with a top-level collection: ``<path>`` for list and create."""

    def list(self, params: Optional[Iterable[KeyValue]] = None) -> List[E]:
        """Read all entities of the collection, following pagination."""
        return self._list(self.collection_path(), params)

    def create(self, entity: E) -> E:
        """Create ``entity`` and return the entity as stored by the server."""
        return self._create(self.collection_path(), entity)


class ProjectScopedService(EntityService[E]):
    """
    Entities listed and created below a project
    (``projects/<project_id>/<path>``) but addressed directly by id.
    """

    def project_path(self, project_id: int) -> str:
        return f"projects/{project_id}/{self.path}"

    def list_of_project(self, project_id: int) -> List[E]:
        return self._list(self.project_path(project_id),
                          context=f"error while reading {self.plural_kind} for project {project_id}")

    def create(self, entity: E) -> E:
        """Create ``entity`` in the project referenced by ``entity.project``."""
        project = getattr(entity, "project", None)
        if project is None or not project.id:
            raise ValueError(f"{self.kind} must reference a project to be created in")
        return self._create(self.project_path(project.id), entity)

    def create_in_project(self, project_id: int, entity: E) -> E:
        return self._create(self.project_path(project_id), entity)
