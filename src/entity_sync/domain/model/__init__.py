"""Domain model for entity synchronization."""

from __future__ import annotations

from .entity import EntityDTO, Identifiable, TransferObject
from .enums import Operation, SyncOutcome
from .result import SynchronizeResult

__all__ = [
    "EntityDTO",
    "Identifiable",
    "Operation",
    "SyncOutcome",
    "SynchronizeResult",
    "TransferObject",
]
