"""Synchronize stored entities against a collection of transfer objects.

The synchronizer reconciles in one of three ways, chosen per call:

* ``Operation.ADD`` inserts DTOs whose identifier is not among the known entities.
* ``Operation.UPDATE`` overwrites stored entities whose identifier matches a DTO.
* ``Operation.DELETE`` removes stored entities whose identifier matches a DTO.

Every routine issues one batched write and reports a ``SynchronizeResult``.
Store and mapping failures are logged and reported, never raised; only
caller-contract violations (missing collections, missing mapper) raise.
"""

from __future__ import annotations

from logging import Logger, getLogger
from typing import TYPE_CHECKING, Any, cast

from entity_sync.domain.errors import (
    InvalidSynchronizationArgumentError,
    MissingMapperError,
    SynchronizationError,
)
from entity_sync.domain.model import Operation, SynchronizeResult

if TYPE_CHECKING:
    from collections.abc import Collection, Hashable

    from entity_sync.domain.model import Identifiable, TransferObject
    from entity_sync.domain.ports import EntityMapper, EntityStore


log = getLogger(__name__)


class EntitySynchronizer:
    """Default ``EntitySynchronizerPort`` implementation over an ``EntityStore``."""

    def __init__(
        self,
        store: EntityStore,
        mapper: EntityMapper | None = None,
        *,
        logger: Logger | None = None,
    ) -> None:
        self._store = store
        self._mapper = mapper
        self._log = logger or log

    @property
    def store(self) -> EntityStore:
        return self._store

    @property
    def mapper(self) -> EntityMapper | None:
        return self._mapper

    def synchronize[TEntity](
        self,
        entities: Collection[TEntity],
        dtos: Collection[TransferObject[Any, TEntity]],
        operation: Operation | str,
        *,
        entity_type: type[TEntity] | None = None,
    ) -> SynchronizeResult:
        if entities is None or dtos is None:  # pyright: ignore[reportUnnecessaryComparison]
            raise InvalidSynchronizationArgumentError("Entity list or DTO list cannot be None.")
        resolved_type = _resolve_entity_type(dtos, entity_type)

        try:
            selected = Operation.parse(operation)
            if selected is Operation.ADD:
                return self._add_new(entities, dtos)
            if selected is Operation.UPDATE:
                return self._update_existing(dtos, resolved_type)
            if selected is Operation.DELETE:
                return self._delete_matching(dtos, resolved_type)
            self._log.warning("Rejected unsupported synchronization operation %r", operation)
            return SynchronizeResult.rejected("Invalid operation.")
        except SynchronizationError:
            raise
        except Exception as exc:
            self._log.exception("Synchronization failed")
            return SynchronizeResult.failed(f"Synchronization failed: {exc}")

    def _add_new[TEntity](
        self,
        entities: Collection[TEntity],
        dtos: Collection[TransferObject[Any, TEntity]],
    ) -> SynchronizeResult:
        mapper = self._mapper
        if mapper is None:
            raise MissingMapperError("Adding entities requires a mapper.")

        try:
            existing_ids = {_identifier(entity) for entity in entities}
            new_entities = [
                mapper.to_entity(dto) for dto in dtos if dto.id not in existing_ids
            ]
            if not new_entities:
                return SynchronizeResult.no_op("No entities were added.")

            self._store.add_all(new_entities)
            added = self._store.commit()
        except Exception:
            self._log.exception("Adding entities failed")
            self._discard_pending()
            return SynchronizeResult.failed("Something went wrong while adding entities.")

        self._log.debug("Added %d entities", added)
        return SynchronizeResult.applied(f"{added} entities added.", added)

    def _update_existing[TEntity](
        self,
        dtos: Collection[TransferObject[Any, TEntity]],
        entity_type: type[TEntity] | None,
    ) -> SynchronizeResult:
        try:
            dto_by_id = _first_by_id(dtos)
            if not dto_by_id or entity_type is None:
                return SynchronizeResult.no_op("Couldn't find any entities to update.")

            updated = 0
            for entity in self._store.find_by_ids(entity_type, dto_by_id.keys()):
                dto = dto_by_id.get(_identifier(entity))
                if dto is None:
                    continue
                self._store.overwrite(entity, dto)
                updated += 1

            if updated == 0:
                return SynchronizeResult.no_op("Couldn't find any entities to update.")

            self._store.commit()
        except Exception:
            self._log.exception("Updating entities failed")
            self._discard_pending()
            return SynchronizeResult.failed("Something went wrong while updating entities.")

        self._log.debug("Updated %d entities", updated)
        return SynchronizeResult.applied(f"{updated} entities updated.", updated)

    def _delete_matching[TEntity](
        self,
        dtos: Collection[TransferObject[Any, TEntity]],
        entity_type: type[TEntity] | None,
    ) -> SynchronizeResult:
        try:
            ids = _first_by_id(dtos).keys()
            if not ids or entity_type is None:
                return SynchronizeResult.no_op("No entities to delete.")

            to_delete = self._store.find_by_ids(entity_type, ids)
            if not to_delete:
                return SynchronizeResult.no_op("No entities to delete.")

            self._store.remove_all(to_delete)
            deleted = self._store.commit()
        except Exception:
            self._log.exception("Deleting entities failed")
            self._discard_pending()
            return SynchronizeResult.failed("Something went wrong while deleting entities.")

        self._log.debug("Deleted %d entities", deleted)
        return SynchronizeResult.applied(f"{deleted} entities deleted.", deleted)

    def _discard_pending(self) -> None:
        try:
            self._store.rollback()
        except Exception:
            self._log.exception("Rolling back pending changes failed")


def _identifier(item: object) -> Hashable:
    return cast("Identifiable[Hashable]", item).id


def _first_by_id[TDto: TransferObject[Any, Any]](dtos: Collection[TDto]) -> dict[Hashable, TDto]:
    """Index DTOs by identifier; the first DTO wins for duplicate identifiers."""

    by_id: dict[Hashable, TDto] = {}
    for dto in dtos:
        by_id.setdefault(dto.id, dto)
    return by_id


def _resolve_entity_type[TEntity](
    dtos: Collection[TransferObject[Any, TEntity]],
    explicit: type[TEntity] | None,
) -> type[TEntity] | None:
    declared: set[type[TEntity]] = set()
    for dto in dtos:
        try:
            declared.add(dto.entity_type)
        except AttributeError as exc:
            raise InvalidSynchronizationArgumentError(
                f"{type(dto).__name__} does not declare the entity type it maps to"
            ) from exc
    if explicit is not None:
        declared.discard(explicit)
        if declared:
            names = ", ".join(sorted(cls.__name__ for cls in declared))
            raise InvalidSynchronizationArgumentError(
                f"DTOs map to {names}, expected {explicit.__name__}"
            )
        return explicit
    if len(declared) > 1:
        names = ", ".join(sorted(cls.__name__ for cls in declared))
        raise InvalidSynchronizationArgumentError(f"DTOs map to more than one entity type: {names}")
    return next(iter(declared), None)
