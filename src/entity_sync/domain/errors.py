"""Caller-contract errors raised by the synchronizer."""

from __future__ import annotations


class SynchronizationError(Exception):
    """Base class for errors the synchronizer raises instead of reporting."""


class InvalidSynchronizationArgumentError(SynchronizationError, ValueError):
    """Raised when the entity or DTO collection is missing or inconsistent."""


class MissingMapperError(SynchronizationError, RuntimeError):
    """Raised when the add path runs on a synchronizer built without a mapper."""
