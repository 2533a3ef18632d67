from __future__ import annotations

from typing import TYPE_CHECKING

from entity_sync.app import synchronize_records
from entity_sync.domain.model import Operation, SyncOutcome
from entity_sync.domain.ports import SyncRepositories
from tests.support.contacts import Contact, RecordingStore, make_contacts, make_dtos

if TYPE_CHECKING:
    from collections.abc import Callable
    from types import TracebackType

    from entity_sync.adapters.sqlalchemy import SqlAlchemyUnitOfWork


class FakeUnitOfWork:
    def __init__(self, store: RecordingStore) -> None:
        self.repositories = SyncRepositories(entities=store)
        self.entered = 0

    def __enter__(self) -> FakeUnitOfWork:
        self.entered += 1
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> bool:
        return False

    def commit(self) -> None:
        return None

    def rollback(self) -> None:
        return None


def test_synchronize_records_loads_known_entities_first() -> None:
    store = RecordingStore(make_contacts((1, "A")))
    uow = FakeUnitOfWork(store)

    result = synchronize_records(
        entity_type=Contact,
        records=make_dtos((1, "A"), (2, "B")),
        operation=Operation.ADD,
        unit_of_work_factory=lambda: uow,
    )

    assert uow.entered == 1
    assert store.calls[0] == "list_all"
    assert result.affected == 1
    assert sorted(store.snapshot(Contact)) == [1, 2]


def test_synchronize_records_with_sqlalchemy(
    sqlite_unit_of_work: Callable[[], SqlAlchemyUnitOfWork],
) -> None:
    first = synchronize_records(
        entity_type=Contact,
        records=make_dtos((1, "A"), (2, "B")),
        operation="add",
        unit_of_work_factory=sqlite_unit_of_work,
    )
    second = synchronize_records(
        entity_type=Contact,
        records=make_dtos((2, "B"), (3, "C")),
        operation="add",
        unit_of_work_factory=sqlite_unit_of_work,
    )
    removed = synchronize_records(
        entity_type=Contact,
        records=make_dtos((1, "A")),
        operation="delete",
        unit_of_work_factory=sqlite_unit_of_work,
    )

    assert (first.affected, second.affected, removed.affected) == (2, 1, 1)
    with sqlite_unit_of_work() as uow:
        names = sorted(contact.name for contact in uow.repositories.entities.list_all(Contact))
    assert names == ["B", "C"]


def test_synchronize_records_reports_rejected_operation() -> None:
    store = RecordingStore()

    result = synchronize_records(
        entity_type=Contact,
        records=make_dtos((1, "A")),
        operation="rename",
        unit_of_work_factory=lambda: FakeUnitOfWork(store),
    )

    assert result.outcome is SyncOutcome.REJECTED
