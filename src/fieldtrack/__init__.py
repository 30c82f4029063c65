"""fieldtrack - local record keeping and reporting for field activities."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("fieldtrack")
except PackageNotFoundError:
    __version__ = "0+local"
from fieldtrack.aggregation import AggregationEngine
from fieldtrack.config import CollectionKeys, FieldTrackConfig
from fieldtrack.exceptions import (
    FieldTrackConfigError,
    FieldTrackError,
    FieldTrackValidationError,
    InvalidDocumentError,
    StorageReadError,
    StorageWriteError,
)
from fieldtrack.ids import new_id
from fieldtrack.models import (
    Activity,
    ActivityRow,
    DashboardStats,
    Driver,
    DriverOverview,
    DriverTotals,
    ExportDocument,
    ImportResult,
    PeriodSummaries,
    Summary,
    Vehicle,
    VehicleOverview,
    VehicleTotals,
)
from fieldtrack.query import QueryEngine
from fieldtrack.repository import Repository
from fieldtrack.store import FileBackend, MemoryBackend, StorageBackend, Store
from fieldtrack.tracker import FieldTracker
from fieldtrack.transfer import TransferService

__all__ = [
    "__version__",
    "Activity",
    "ActivityRow",
    "AggregationEngine",
    "CollectionKeys",
    "DashboardStats",
    "Driver",
    "DriverOverview",
    "DriverTotals",
    "ExportDocument",
    "FieldTrackConfig",
    "FieldTrackConfigError",
    "FieldTrackError",
    "FieldTrackValidationError",
    "FieldTracker",
    "FileBackend",
    "ImportResult",
    "InvalidDocumentError",
    "MemoryBackend",
    "PeriodSummaries",
    "QueryEngine",
    "Repository",
    "StorageBackend",
    "StorageReadError",
    "StorageWriteError",
    "Store",
    "Summary",
    "TransferService",
    "Vehicle",
    "VehicleOverview",
    "VehicleTotals",
    "new_id",
]
