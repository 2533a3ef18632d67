"""Domain port definitions for adapters."""

from __future__ import annotations

from .mapping import EntityMapper
from .persistence import EntityStore
from .synchronization import EntitySynchronizerPort
from .unit_of_work import (
    RepositoryCollection,
    SyncRepositories,
    SyncUnitOfWork,
    UnitOfWork,
)

__all__ = [
    "EntityMapper",
    "EntityStore",
    "EntitySynchronizerPort",
    "RepositoryCollection",
    "SyncRepositories",
    "SyncUnitOfWork",
    "UnitOfWork",
]
