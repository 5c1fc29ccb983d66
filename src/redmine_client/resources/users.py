"""Users: ``/users.json`` and ``/users/<id>.json``."""

from __future__ import annotations

from ..transport.decoder import STATUS_GET, page_parser
from ..types import User
from .base import CollectionService


class UserService(CollectionService[User]):
    path = "users"
    key = "user"
    plural_key = "users"
    kind = "user"
    model = User

    @staticmethod
    def label(entity: User) -> str:
        return entity.login or str(entity.id)

    def set_status(self, user_id: int, status: int) -> None:
        """Change the account status (1 active, 2 registered, 3 locked)."""
        self._update(self.item_path(user_id), user_id, {self.key: {"status": status}})

    def total_count(self) -> int:
        """Number of users at the server, read from a single one-item page."""
        spec = self._builder.build("GET", self.collection_path(), description=self.plural_kind)
        spec.set_query_parameter("limit", 1)
        envelope = self._execute(
            spec, STATUS_GET, page_parser(self.model, self.plural_key),
            failed_send="could not read users total count",
            failed_status="error while reading users total count",
        )
        return envelope.effective_total
