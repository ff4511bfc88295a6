"""
Service classes for RDS snapshot export operations.
"""

from .base import BaseExportService, SnapshotWaiter
from .snapshot_export import SnapshotExportService
from .cluster_snapshot_export import ClusterSnapshotExportService
from .waiter import BotoClusterSnapshotWaiter
from .error_handler import ErrorHandler
from .logging import configure_logging, StructuredFormatter

__all__ = [
    "BaseExportService",
    "SnapshotWaiter",
    "SnapshotExportService",
    "ClusterSnapshotExportService",
    "BotoClusterSnapshotWaiter",
    "ErrorHandler",
    "configure_logging",
    "StructuredFormatter"
]
