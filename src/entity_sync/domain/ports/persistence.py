"""Ports for the persistence store the synchronizer writes through."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Collection, Hashable, Sequence


@runtime_checkable
class EntityStore(Protocol):
    """Change-tracking store shared by all entity types of one session.

    Writes are pending until ``commit``; ``rollback`` discards them.
    """

    def list_all[TEntity](self, entity_type: type[TEntity]) -> list[TEntity]: ...

    def find_by_ids[TEntity](
        self, entity_type: type[TEntity], ids: Collection[Hashable]
    ) -> list[TEntity]: ...

    def add_all(self, entities: Sequence[Any]) -> None: ...

    def remove_all(self, entities: Sequence[Any]) -> None: ...

    def overwrite(self, entity: Any, values: object) -> None:  # noqa: ANN401
        """Replace the entity's current field values with the ones on ``values``."""
        ...

    def commit(self) -> int:
        """Persist pending changes and return the number of records written."""
        ...

    def rollback(self) -> None: ...
