"""Export and import of the full dataset.

The export document carries all three collections plus ``exportedAt`` and
``version``. Import accepts the current document and the legacy shape that
stored activities under ``routes``; either way it replaces the stored
collections wholesale.
"""

from __future__ import annotations

import asyncio
import json
import logging
import os
from collections.abc import Callable, Mapping
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from fieldtrack._constants import EXPORT_FILENAME, LEGACY_ACTIVITIES_FIELD
from fieldtrack.config import CollectionKeys
from fieldtrack.exceptions import InvalidDocumentError
from fieldtrack.legacy import is_legacy_route, translate_route
from fieldtrack.models.snapshot import ExportDocument, ImportResult
from fieldtrack.store import Store

_logger = logging.getLogger(__name__)

Document = str | bytes | bytearray | Mapping[str, Any] | ExportDocument


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _as_list(value: Any) -> list[Any]:
    return list(value) if isinstance(value, list) else []


def parse_document(document: Document) -> dict[str, Any]:
    """Decode *document* into a JSON object.

    Raises
    ------
    InvalidDocumentError
        When the input is not JSON text, or decodes to something other than
        an object.
    """
    if isinstance(document, ExportDocument):
        return document.to_document()
    if isinstance(document, (bytes, bytearray)):
        try:
            document = bytes(document).decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise InvalidDocumentError("Import file is not UTF-8 text") from exc
    if isinstance(document, str):
        try:
            document = json.loads(document)
        except ValueError as exc:
            raise InvalidDocumentError(f"Import file is not valid JSON: {exc}") from exc
    if not isinstance(document, Mapping):
        raise InvalidDocumentError(f"Expected a JSON object, got {type(document).__name__}")
    return dict(document)


class TransferService:
    """Snapshot export and import over a :class:`~fieldtrack.store.Store`."""

    def __init__(
        self,
        store: Store,
        keys: CollectionKeys | None = None,
        *,
        clock: Callable[[], datetime] = _utcnow,
        export_filename: str = EXPORT_FILENAME,
    ) -> None:
        self._store = store
        self._keys = keys or CollectionKeys()
        self._clock = clock
        self._export_filename = export_filename

    def export_snapshot(self) -> ExportDocument:
        """Point-in-time copy of all three collections."""
        return ExportDocument(
            drivers=self._store.load(self._keys.drivers),
            vehicles=self._store.load(self._keys.vehicles),
            activities=self._store.load(self._keys.activities),
            exported_at=self._clock(),
        )

    def write_export(self, target: str | os.PathLike[str]) -> Path:
        """Write an export document and return the file path.

        When *target* is an existing directory the configured export file
        name is used inside it.
        """
        path = Path(target)
        if path.is_dir():
            path = path / self._export_filename
        path.write_text(self.export_snapshot().to_json(), encoding="utf-8")
        _logger.debug("Exported snapshot to %s", path)
        return path

    def import_snapshot(self, document: Document, *, translate_legacy: bool = False) -> ImportResult:
        """Replace all stored collections with the contents of *document*.

        Collections that are missing or not lists import as empty. When
        ``activities`` is absent the legacy ``routes`` list is used as the
        activity list. Its records are kept verbatim unless
        *translate_legacy* is set, in which case ``routeName`` and ``cost``
        are renamed to ``location`` and ``revenue``.

        Raises
        ------
        InvalidDocumentError
            When *document* is not a JSON object or holds values that do not
            serialize to JSON. Nothing is written.
        """
        parsed = parse_document(document)

        drivers = _as_list(parsed.get("drivers"))
        vehicles = _as_list(parsed.get("vehicles"))

        legacy = False
        if isinstance(parsed.get("activities"), list):
            activities = list(parsed["activities"])
        elif isinstance(parsed.get(LEGACY_ACTIVITIES_FIELD), list):
            legacy = True
            activities = list(parsed[LEGACY_ACTIVITIES_FIELD])
            untranslated = sum(1 for record in activities if isinstance(record, Mapping) and is_legacy_route(record))
            if translate_legacy:
                activities = [translate_route(record) if isinstance(record, Mapping) else record for record in activities]
                _logger.info("Translated %d legacy route records", untranslated)
            elif untranslated:
                _logger.warning(
                    "Imported %d legacy route records without renaming routeName/cost",
                    untranslated,
                )
        else:
            activities = []

        # All three collections must serialize before the first one is replaced.
        try:
            json.dumps([drivers, vehicles, activities])
        except (TypeError, ValueError) as exc:
            raise InvalidDocumentError(f"Import document holds a value that is not JSON: {exc}") from exc

        self._store.save(self._keys.drivers, drivers)
        self._store.save(self._keys.vehicles, vehicles)
        self._store.save(self._keys.activities, activities)

        _logger.info(
            "Imported %d drivers, %d vehicles, %d activities%s",
            len(drivers),
            len(vehicles),
            len(activities),
            " (legacy routes)" if legacy else "",
        )
        return ImportResult(drivers=drivers, vehicles=vehicles, activities=activities, legacy=legacy)

    async def import_file(self, path: str | os.PathLike[str], *, translate_legacy: bool = False) -> ImportResult:
        """Read a user-supplied export file and import it.

        The file is read off the event loop. ``OSError`` from opening the
        file propagates; undecodable or malformed content raises
        :class:`~fieldtrack.exceptions.InvalidDocumentError`.
        """
        content = await asyncio.to_thread(Path(path).read_bytes)
        return self.import_snapshot(content, translate_legacy=translate_legacy)
