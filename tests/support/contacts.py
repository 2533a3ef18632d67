"""Sample entities, DTOs and SQLAlchemy mappings used across the test suite."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cache
from typing import Any, ClassVar

from sqlalchemy import Column, Integer, String, Table, orm

from entity_sync.adapters.memory import InMemoryEntityStore
from entity_sync.domain.model import EntityDTO


@dataclass(eq=False, kw_only=True)
class Contact:
    id: int
    name: str
    email: str | None = None


@dataclass(kw_only=True)
class ContactDTO(EntityDTO):
    ENTITY_TYPE: ClassVar[type[Contact]] = Contact

    id: int
    name: str
    email: str | None = None
    # no counterpart on Contact; must be ignored by mappers and stores
    source: str = "test"


@dataclass(eq=False, kw_only=True)
class Tag:
    id: str
    label: str


@dataclass(kw_only=True)
class TagDTO(EntityDTO):
    ENTITY_TYPE: ClassVar[type[Tag]] = Tag

    id: str
    label: str


mapper_registry = orm.registry()

contact_table = Table(
    "contact",
    mapper_registry.metadata,
    Column("id", Integer, primary_key=True, autoincrement=False),
    Column("name", String(200), nullable=False),
    Column("email", String(200), nullable=True),
)


@cache
def start_mappers() -> orm.registry:
    """Map ``Contact`` onto ``contact_table`` (idempotent)."""

    mapper_registry.map_imperatively(Contact, contact_table)
    return mapper_registry


def make_contacts(*pairs: tuple[int, str]) -> list[Contact]:
    return [Contact(id=contact_id, name=name) for contact_id, name in pairs]


def make_dtos(*pairs: tuple[int, str]) -> list[ContactDTO]:
    return [ContactDTO(id=contact_id, name=name) for contact_id, name in pairs]


class RecordingStore(InMemoryEntityStore):
    """In-memory store that records every call made through the store port."""

    def __init__(self, entities: list[Any] | None = None) -> None:
        super().__init__(entities or [])
        self.calls: list[str] = []

    def list_all[TEntity](self, entity_type: type[TEntity]) -> list[TEntity]:
        self.calls.append("list_all")
        return super().list_all(entity_type)

    def find_by_ids(self, entity_type: Any, ids: Any) -> list[Any]:
        self.calls.append("find_by_ids")
        return super().find_by_ids(entity_type, ids)

    def add_all(self, entities: Any) -> None:
        self.calls.append("add_all")
        super().add_all(entities)

    def remove_all(self, entities: Any) -> None:
        self.calls.append("remove_all")
        super().remove_all(entities)

    def overwrite(self, entity: Any, values: object) -> None:
        self.calls.append("overwrite")
        super().overwrite(entity, values)

    def commit(self) -> int:
        self.calls.append("commit")
        return super().commit()

    def rollback(self) -> None:
        self.calls.append("rollback")
        super().rollback()


class FailingCommitStore(RecordingStore):
    """Store whose commit always raises, simulating a database failure."""

    def commit(self) -> int:
        self.calls.append("commit")
        raise RuntimeError("database is locked")
