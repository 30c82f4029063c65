"""Custom exception hierarchy for fieldtrack."""

from __future__ import annotations


class FieldTrackError(Exception):
    """Base exception for all fieldtrack errors."""


class FieldTrackConfigError(FieldTrackError):
    """Invalid or missing configuration."""


class StorageReadError(FieldTrackError):
    """A storage backend could not read a collection.

    :class:`fieldtrack.store.Store` always recovers from this by treating
    the collection as empty; it never reaches library callers.
    """

    def __init__(self, message: str, *, key: str = "") -> None:
        self.key = key
        super().__init__(message)


class StorageWriteError(FieldTrackError):
    """A storage backend could not persist a collection."""

    def __init__(self, message: str, *, key: str = "") -> None:
        self.key = key
        super().__init__(message)


class FieldTrackValidationError(FieldTrackError):
    """Caller input was rejected before any mutation happened."""

    def __init__(self, message: str, *, field: str = "") -> None:
        self.field = field
        super().__init__(message)


class InvalidDocumentError(FieldTrackError):
    """Import payload is not a well-formed export document."""
