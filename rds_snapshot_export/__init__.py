"""
RDS Snapshot Export

Lambda handlers that start Amazon RDS / Aurora snapshot exports to S3.
"""

__version__ = "1.0.0"
__author__ = "RDS Snapshot Export"

from .config import ConfigurationManager
from .handlers import start_export_handler, create_and_export_handler
from .models import (
    ExportConfig,
    ClusterSnapshotExportConfig,
    InvocationResult,
    ErrorKind,
    SnapshotExportError,
    ConfigurationError,
    ControlPlaneRejectedError,
    SnapshotWaitTimeoutError,
    TransportError
)

__all__ = [
    "ConfigurationManager",
    "start_export_handler",
    "create_and_export_handler",
    "ExportConfig",
    "ClusterSnapshotExportConfig",
    "InvocationResult",
    "ErrorKind",
    "SnapshotExportError",
    "ConfigurationError",
    "ControlPlaneRejectedError",
    "SnapshotWaitTimeoutError",
    "TransportError"
]
