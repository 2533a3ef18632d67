"""Port describing the synchronizer itself."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Collection

    from entity_sync.domain.model import Operation, SynchronizeResult, TransferObject
    from entity_sync.domain.ports.mapping import EntityMapper
    from entity_sync.domain.ports.persistence import EntityStore


@runtime_checkable
class EntitySynchronizerPort(Protocol):
    """Add, update or delete stored entities from a collection of transfer objects."""

    @property
    def store(self) -> EntityStore: ...

    @property
    def mapper(self) -> EntityMapper | None: ...

    def synchronize[TEntity](
        self,
        entities: Collection[TEntity],
        dtos: Collection[TransferObject[Any, TEntity]],
        operation: Operation | str,
        *,
        entity_type: type[TEntity] | None = None,
    ) -> SynchronizeResult:
        """Run ``operation`` for ``dtos`` against the store.

        ``entities`` are the currently stored entities (fetch them right before
        calling); they decide which DTOs count as new for ``Operation.ADD``.
        """
        ...
