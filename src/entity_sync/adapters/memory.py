"""In-memory entity store with staged writes."""

from __future__ import annotations

import dataclasses
from collections import defaultdict
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Collection, Hashable, Iterable, Sequence

    from entity_sync.domain.model import Identifiable


class InMemoryEntityStore:
    """Store entities in per-type tables keyed by identifier.

    ``add_all`` and ``remove_all`` are staged until ``commit``; ``overwrite``
    mutates the tracked instance in place and remembers its previous values so
    ``rollback`` can restore them.
    """

    def __init__(self, entities: Iterable[Identifiable[Any]] = ()) -> None:
        self._tables: dict[type[Any], dict[Hashable, Any]] = defaultdict(dict)
        self._pending_add: list[Any] = []
        self._pending_remove: list[Any] = []
        self._originals: dict[int, tuple[Any, dict[str, object]]] = {}
        for entity in entities:
            self._tables[type(entity)][entity.id] = entity

    def list_all[TEntity](self, entity_type: type[TEntity]) -> list[TEntity]:
        return list(self._tables[entity_type].values())

    def find_by_ids[TEntity](
        self, entity_type: type[TEntity], ids: Collection[Hashable]
    ) -> list[TEntity]:
        table = self._tables[entity_type]
        return [table[entity_id] for entity_id in ids if entity_id in table]

    def add_all(self, entities: Sequence[Any]) -> None:
        self._pending_add.extend(entities)

    def remove_all(self, entities: Sequence[Any]) -> None:
        self._pending_remove.extend(entities)

    def overwrite(self, entity: Any, values: object) -> None:  # noqa: ANN401
        names = [name for name in _field_names(entity) if hasattr(values, name)]
        self._originals.setdefault(
            id(entity), (entity, {name: getattr(entity, name) for name in names})
        )
        for name in names:
            setattr(entity, name, getattr(values, name))

    def commit(self) -> int:
        """Apply staged writes and return how many records they touched.

        Raises ``ValueError`` without applying anything when a staged insert
        reuses an identifier that is already stored or staged twice.
        """

        self._check_inserts()
        written = len(self._pending_add) + len(self._pending_remove) + len(self._originals)
        for entity in self._pending_add:
            self._tables[type(entity)][entity.id] = entity
        for entity in self._pending_remove:
            self._tables[type(entity)].pop(entity.id, None)
        self._clear_pending()
        return written

    def rollback(self) -> None:
        for entity, previous in self._originals.values():
            for name, value in previous.items():
                setattr(entity, name, value)
        self._clear_pending()

    def snapshot[TEntity](self, entity_type: type[TEntity]) -> dict[Hashable, TEntity]:
        """Committed rows of ``entity_type`` keyed by identifier."""

        return dict(self._tables[entity_type])

    def _check_inserts(self) -> None:
        removed = {(type(entity), entity.id) for entity in self._pending_remove}
        staged: set[tuple[type[Any], Hashable]] = set()
        for entity in self._pending_add:
            key = (type(entity), entity.id)
            stored = entity.id in self._tables[key[0]] and key not in removed
            if stored or key in staged:
                raise ValueError(
                    f"Duplicate identifier {entity.id!r} for {key[0].__name__}"
                )
            staged.add(key)

    def _clear_pending(self) -> None:
        self._pending_add.clear()
        self._pending_remove.clear()
        self._originals.clear()


def _field_names(entity: object) -> list[str]:
    if dataclasses.is_dataclass(entity):
        names = [field.name for field in dataclasses.fields(entity)]
    else:
        names = [name for name in vars(entity) if not name.startswith("_")]
    return [name for name in names if name != "id"]


if TYPE_CHECKING:
    from entity_sync.domain.ports import EntityStore

    _store_check: EntityStore = InMemoryEntityStore()
