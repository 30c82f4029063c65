"""High-level entry point wiring the store, repository and report engines."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

from fieldtrack.aggregation import AggregationEngine
from fieldtrack.config import FieldTrackConfig
from fieldtrack.query import QueryEngine
from fieldtrack.repository import Repository
from fieldtrack.store import FileBackend, StorageBackend, Store
from fieldtrack.transfer import TransferService


def _utcnow() -> datetime:
    return datetime.now(UTC)


class FieldTracker:
    """Field activity tracker over a single local store.

    Usage::

        tracker = FieldTracker(FieldTrackConfig.from_env())
        driver = tracker.repository.add_driver("Ama")
        vehicle = tracker.repository.add_vehicle("GT-1234")
        tracker.repository.add_activity(driver.id, vehicle.id, "2026-01-10", "Accra", 150)
        print(tracker.aggregation.overall_totals())

    Parameters
    ----------
    config : FieldTrackConfig or None
        Defaults to :meth:`FieldTrackConfig.from_env`.
    backend : StorageBackend or None
        Storage capability; defaults to a :class:`FileBackend` on
        ``config.data_dir``.
    clock : callable or None
        Reference instant for reports and export timestamps.
    """

    def __init__(
        self,
        config: FieldTrackConfig | None = None,
        *,
        backend: StorageBackend | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._config = config or FieldTrackConfig.from_env()
        clock = clock or _utcnow
        self._store = Store(backend if backend is not None else FileBackend(self._config.data_dir))
        self._repository = Repository(self._store, self._config.keys)
        self._query = QueryEngine(self._repository)
        self._aggregation = AggregationEngine(
            self._repository,
            self._query,
            clock=clock,
            week_days=self._config.week_days,
            month_days=self._config.month_days,
            include_future_dated=self._config.include_future_dated,
        )
        self._transfer = TransferService(
            self._store,
            self._config.keys,
            clock=clock,
            export_filename=self._config.export_filename,
        )

    @property
    def config(self) -> FieldTrackConfig:
        return self._config

    @property
    def store(self) -> Store:
        return self._store

    @property
    def repository(self) -> Repository:
        return self._repository

    @property
    def query(self) -> QueryEngine:
        return self._query

    @property
    def aggregation(self) -> AggregationEngine:
        return self._aggregation

    @property
    def transfer(self) -> TransferService:
        return self._transfer
