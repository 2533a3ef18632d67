"""Field-by-field projection of transfer objects onto new entities."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, cast

if TYPE_CHECKING:
    from entity_sync.domain.model import TransferObject

type Converter = Callable[[Any], Any]


class FieldMapper:
    """Build entities from DTOs by copying same-named fields.

    Dataclass entities are constructed from their ``init`` fields. Other classes
    are instantiated without arguments and receive every public DTO attribute
    they already declare. DTO fields without an entity counterpart are dropped.
    Custom converters registered per entity type take precedence.
    """

    def __init__(self) -> None:
        self._converters: dict[type[Any], Converter] = {}

    def register[TEntity](
        self, entity_type: type[TEntity], converter: Callable[[Any], TEntity]
    ) -> None:
        self._converters[entity_type] = converter

    def to_entity[TEntity](self, dto: TransferObject[Any, TEntity]) -> TEntity:
        entity_type = dto.entity_type
        converter = self._converters.get(entity_type)
        if converter is not None:
            return cast("TEntity", converter(dto))
        values = _public_values(dto)
        if dataclasses.is_dataclass(entity_type):
            init_names = {field.name for field in dataclasses.fields(entity_type) if field.init}
            return entity_type(**{name: values[name] for name in init_names if name in values})
        entity = entity_type()
        for name, value in values.items():
            if hasattr(entity, name):
                setattr(entity, name, value)
        return entity


def _public_values(dto: object) -> dict[str, object]:
    if dataclasses.is_dataclass(dto):
        names = [field.name for field in dataclasses.fields(dto)]
    else:
        names = [name for name in vars(dto) if not name.startswith("_")]
    return {name: getattr(dto, name) for name in names}


if TYPE_CHECKING:
    from entity_sync.domain.ports import EntityMapper

    _mapper_check: EntityMapper = FieldMapper()
