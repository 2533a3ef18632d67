"""Application orchestration entry points."""

from __future__ import annotations

from collections.abc import Callable
from logging import getLogger
from typing import TYPE_CHECKING, Any

from entity_sync.adapters.mapping import FieldMapper
from entity_sync.adapters.sqlalchemy.unit_of_work import SqlAlchemyUnitOfWork
from entity_sync.domain.ports.unit_of_work import SyncUnitOfWork
from entity_sync.domain.synchronizer import EntitySynchronizer

if TYPE_CHECKING:
    from collections.abc import Sequence

    from entity_sync.domain.model import Operation, SynchronizeResult, TransferObject
    from entity_sync.domain.ports import EntityMapper

UnitOfWorkFactory = Callable[[], SyncUnitOfWork]


log = getLogger(__name__)


def synchronize_records[TEntity](
    *,
    entity_type: type[TEntity],
    records: Sequence[TransferObject[Any, TEntity]],
    operation: Operation | str,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    mapper: EntityMapper | None = None,
) -> SynchronizeResult:
    """Synchronise ``records`` into the store using a fresh unit of work.

    The known entities are loaded inside the same session right before the
    synchronizer runs, so ``Operation.ADD`` compares against current rows.
    """

    effective_uow = unit_of_work_factory or SqlAlchemyUnitOfWork
    log.info(
        "Starting %s sync: entity=%s, records=%d",
        operation,
        entity_type.__name__,
        len(records),
    )

    with effective_uow() as uow:
        store = uow.repositories.entities
        known = store.list_all(entity_type)
        synchronizer = EntitySynchronizer(store, mapper or FieldMapper())
        result = synchronizer.synchronize(known, records, operation, entity_type=entity_type)

    log.info(
        "Finished %s sync: outcome=%s, affected=%d, message=%s",
        operation,
        result.outcome,
        result.affected,
        result.message,
    )
    return result
