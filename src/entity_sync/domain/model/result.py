"""Value returned by every synchronization attempt."""

from __future__ import annotations

from dataclasses import dataclass

from .enums import SyncOutcome


@dataclass(frozen=True, slots=True)
class SynchronizeResult:
    """Status and message of a synchronization call.

    ``succeeded`` keeps the plain boolean contract; ``outcome`` tells a no-op
    ("nothing qualified") apart from a rejected operation or a genuine failure.
    """

    message: str | None
    succeeded: bool
    outcome: SyncOutcome
    affected: int = 0

    @classmethod
    def applied(cls, message: str, affected: int) -> SynchronizeResult:
        return cls(message=message, succeeded=True, outcome=SyncOutcome.APPLIED, affected=affected)

    @classmethod
    def no_op(cls, message: str) -> SynchronizeResult:
        return cls(message=message, succeeded=False, outcome=SyncOutcome.NO_OP)

    @classmethod
    def rejected(cls, message: str) -> SynchronizeResult:
        return cls(message=message, succeeded=False, outcome=SyncOutcome.REJECTED)

    @classmethod
    def failed(cls, message: str) -> SynchronizeResult:
        return cls(message=message, succeeded=False, outcome=SyncOutcome.FAILED)

    @property
    def is_no_op(self) -> bool:
        return self.outcome is SyncOutcome.NO_OP
