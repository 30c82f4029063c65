"""Key/value persistence for the three record collections.

A :class:`Store` holds each collection as one JSON array under a fixed key.
Writes replace the whole array; there is no partial update and no
transaction across keys.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from collections.abc import Sequence
from pathlib import Path
from typing import Any, Protocol

from fieldtrack.exceptions import StorageReadError, StorageWriteError

_logger = logging.getLogger(__name__)


class StorageBackend(Protocol):
    """Minimal string key/value capability the store persists through."""

    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...


class MemoryBackend:
    """Process-local backend, mainly for tests and scratch sessions."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class FileBackend:
    """Durable backend storing each key as ``<directory>/<key>.json``."""

    def __init__(self, directory: str | os.PathLike[str]) -> None:
        self._directory = Path(directory)

    @property
    def directory(self) -> Path:
        return self._directory

    def _path(self, key: str) -> Path:
        if not key or "/" in key or "\\" in key or key.startswith("."):
            raise ValueError(f"invalid storage key: {key!r}")
        return self._directory / f"{key}.json"

    def get_item(self, key: str) -> str | None:
        path = self._path(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageReadError(f"Could not read {path}: {exc}", key=key) from exc

    def set_item(self, key: str, value: str) -> None:
        path = self._path(key)
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self._directory, prefix=f".{key}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(value)
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise StorageWriteError(f"Could not write {path}: {exc}", key=key) from exc

    def remove_item(self, key: str) -> None:
        path = self._path(key)
        try:
            path.unlink(missing_ok=True)
        except OSError as exc:
            raise StorageWriteError(f"Could not remove {path}: {exc}", key=key) from exc


class Store:
    """Load and save whole record collections through a backend."""

    def __init__(self, backend: StorageBackend) -> None:
        self._backend = backend

    @property
    def backend(self) -> StorageBackend:
        return self._backend

    def load(self, key: str) -> list[dict[str, Any]]:
        """Return the collection stored under *key*.

        Absent keys, unreadable values and anything that is not a JSON array
        all yield an empty list. Non-object entries inside the array are
        dropped.
        """
        try:
            raw = self._backend.get_item(key)
        except StorageReadError:
            _logger.warning("Failed to load %s", key, exc_info=True)
            return []
        if not raw:
            return []
        try:
            parsed = json.loads(raw)
        except ValueError:
            _logger.warning("Failed to load %s: stored value is not JSON", key, exc_info=True)
            return []
        if not isinstance(parsed, list):
            _logger.warning("Failed to load %s: expected a JSON array, got %s", key, type(parsed).__name__)
            return []

        records = [item for item in parsed if isinstance(item, dict)]
        if len(records) != len(parsed):
            _logger.debug("Dropped %d non-object entries from %s", len(parsed) - len(records), key)
        return records

    def save(self, key: str, records: Sequence[dict[str, Any]]) -> None:
        """Replace the collection stored under *key*."""
        self._backend.set_item(key, json.dumps(list(records), ensure_ascii=False))

    def clear(self, key: str) -> None:
        self._backend.remove_item(key)
