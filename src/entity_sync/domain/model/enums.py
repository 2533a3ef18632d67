"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class Operation(StrEnum):
    """Reconciliation action requested by the caller."""

    ADD = "add"
    UPDATE = "update"
    DELETE = "delete"

    @classmethod
    def parse(cls, value: object) -> Operation | None:
        """Return the matching member, or ``None`` for anything outside the enumeration."""

        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


class SyncOutcome(StrEnum):
    APPLIED = "applied"
    NO_OP = "no_op"
    REJECTED = "rejected"
    FAILED = "failed"
