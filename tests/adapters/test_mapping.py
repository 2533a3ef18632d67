from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from entity_sync.adapters.mapping import FieldMapper
from entity_sync.domain.model import EntityDTO
from tests.support.contacts import Contact, ContactDTO


class Account:
    def __init__(self) -> None:
        self.id: int | None = None
        self.owner: str | None = None


@dataclass(kw_only=True)
class AccountDTO(EntityDTO):
    ENTITY_TYPE: ClassVar[type[Account]] = Account

    id: int
    owner: str
    balance: int = 0


def test_dataclass_entities_are_built_from_matching_fields() -> None:
    entity = FieldMapper().to_entity(ContactDTO(id=4, name="D", email="d@example.com"))

    assert isinstance(entity, Contact)
    assert (entity.id, entity.name, entity.email) == (4, "D", "d@example.com")


def test_plain_entities_receive_declared_attributes_only() -> None:
    entity = FieldMapper().to_entity(AccountDTO(id=1, owner="ann", balance=10))

    assert isinstance(entity, Account)
    assert (entity.id, entity.owner) == (1, "ann")
    assert not hasattr(entity, "balance")


def test_registered_converter_takes_precedence() -> None:
    mapper = FieldMapper()
    mapper.register(Contact, lambda dto: Contact(id=dto.id, name=dto.name.upper()))

    entity = mapper.to_entity(ContactDTO(id=1, name="abc"))

    assert entity.name == "ABC"
