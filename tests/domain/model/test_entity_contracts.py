from __future__ import annotations

from entity_sync.domain.model import Identifiable, TransferObject
from tests.support.contacts import Contact, ContactDTO, Tag, TagDTO


def test_entities_and_dtos_satisfy_identity_protocols() -> None:
    contact = Contact(id=1, name="A")
    dto = ContactDTO(id=1, name="A")

    assert isinstance(contact, Identifiable)
    assert isinstance(dto, Identifiable)
    assert isinstance(dto, TransferObject)
    assert not isinstance(contact, TransferObject)


def test_dto_exposes_its_entity_type() -> None:
    assert ContactDTO(id=1, name="A").entity_type is Contact
    assert TagDTO(id="x", label="X").entity_type is Tag
