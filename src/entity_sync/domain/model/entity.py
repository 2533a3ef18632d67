"""
Identity contracts:
what a persisted entity and a transfer object must expose to be synchronized.
"""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass
from typing import Any, ClassVar, Protocol, runtime_checkable


@runtime_checkable
class Identifiable[TId: Hashable](Protocol):
    """Anything with a value-typed identifier. Identifier equality is the only join key."""

    @property
    def id(self) -> TId: ...


@runtime_checkable
class TransferObject[TId: Hashable, TEntity](Identifiable[TId], Protocol):
    """Desired state for one entity, bound to the entity class it maps to."""

    @property
    def entity_type(self) -> type[TEntity]: ...


@dataclass(kw_only=True)
class EntityDTO:
    """Dataclass base for transfer objects.

    Subclasses declare the entity they map to via ``ENTITY_TYPE`` and narrow
    ``id`` to their identifier type::

        @dataclass(kw_only=True)
        class ContactDTO(EntityDTO):
            ENTITY_TYPE: ClassVar[type[Contact]] = Contact

            id: int
            name: str
    """

    id: Hashable

    # class-level association; subclasses must override
    ENTITY_TYPE: ClassVar[type[Any]]

    @property
    def entity_type(self) -> type[Any]:
        return self.ENTITY_TYPE

