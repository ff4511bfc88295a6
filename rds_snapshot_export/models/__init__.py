"""
Data models for RDS snapshot export operations.
"""

from .config import ExportConfig, ClusterSnapshotExportConfig, DEFAULT_WAIT_TIMEOUT_SECONDS
from .invocation_result import InvocationResult
from .exceptions import (
    ErrorKind,
    SnapshotExportError,
    ConfigurationError,
    ControlPlaneRejectedError,
    SnapshotWaitTimeoutError,
    TransportError
)

__all__ = [
    "ExportConfig",
    "ClusterSnapshotExportConfig",
    "DEFAULT_WAIT_TIMEOUT_SECONDS",
    "InvocationResult",
    "ErrorKind",
    "SnapshotExportError",
    "ConfigurationError",
    "ControlPlaneRejectedError",
    "SnapshotWaitTimeoutError",
    "TransportError"
]
