"""Port for converting transfer objects into new entities."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from entity_sync.domain.model import TransferObject


@runtime_checkable
class EntityMapper(Protocol):
    """Projects a transfer object onto a fresh instance of its entity type."""

    def to_entity[TEntity](self, dto: TransferObject[Any, TEntity]) -> TEntity: ...
