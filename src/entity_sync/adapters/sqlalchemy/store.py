"""Entity store backed by a SQLAlchemy session."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final, cast

from sqlalchemy import inspect, select

if TYPE_CHECKING:
    from collections.abc import Collection, Hashable, Sequence

    from sqlalchemy.orm import InstrumentedAttribute, Mapper, Session

IDENTIFIER_ATTRIBUTE: Final[str] = "id"


class SqlAlchemyEntityStore:
    """Store over a caller-owned session; it never opens or closes the session.

    Queries run without autoflush so pending writes stay pending until ``commit``
    and are counted there.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_all[TEntity](self, entity_type: type[TEntity]) -> list[TEntity]:
        with self.session.no_autoflush:
            return list(self.session.scalars(select(entity_type)).all())

    def find_by_ids[TEntity](
        self, entity_type: type[TEntity], ids: Collection[Hashable]
    ) -> list[TEntity]:
        if not ids:
            return []
        id_column = cast(
            "InstrumentedAttribute[Any]", getattr(entity_type, IDENTIFIER_ATTRIBUTE)
        )
        stmt = select(entity_type).where(id_column.in_(list(ids)))
        with self.session.no_autoflush:
            return list(self.session.scalars(stmt).all())

    def add_all(self, entities: Sequence[Any]) -> None:
        self.session.add_all(entities)

    def remove_all(self, entities: Sequence[Any]) -> None:
        for entity in entities:
            self.session.delete(entity)

    def overwrite(self, entity: Any, values: object) -> None:  # noqa: ANN401
        """Copy every mapped, non-key column value present on ``values`` onto ``entity``."""

        for key in _value_column_keys(type(entity)):
            if hasattr(values, key):
                setattr(entity, key, getattr(values, key))

    def commit(self) -> int:
        session = self.session
        written = (
            len(session.new)
            + len(session.deleted)
            + sum(1 for instance in session.dirty if session.is_modified(instance))
        )
        session.commit()
        return written

    def rollback(self) -> None:
        self.session.rollback()


def _value_column_keys(entity_type: type[Any]) -> list[str]:
    mapper = cast("Mapper[Any]", inspect(entity_type))
    key_columns = set(mapper.primary_key)
    return [
        prop.key
        for prop in mapper.column_attrs
        if not any(column in key_columns for column in prop.columns)
    ]


if TYPE_CHECKING:
    from entity_sync.domain.ports import EntityStore

    _session_stub = cast("Session", object())
    _store_check: EntityStore = SqlAlchemyEntityStore(_session_stub)
