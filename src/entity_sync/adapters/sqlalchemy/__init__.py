"""SQLAlchemy adapter package for entity-sync."""

from __future__ import annotations

from .store import SqlAlchemyEntityStore
from .unit_of_work import (
    SqlAlchemyUnitOfWork,
    StartupError,
    configured_engine,
    create_tables,
    is_started,
    mapped_metadata,
    shutdown,
    startup,
)

__all__ = [
    "SqlAlchemyEntityStore",
    "SqlAlchemyUnitOfWork",
    "StartupError",
    "configured_engine",
    "create_tables",
    "is_started",
    "mapped_metadata",
    "shutdown",
    "startup",
]
