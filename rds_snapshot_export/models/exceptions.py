"""
Custom exception classes for RDS snapshot export operations.
"""

from enum import Enum
from typing import Optional, Dict, Any


class ErrorKind(Enum):
    """Closed set of failure categories surfaced by the handlers."""
    CONFIGURATION = "Configuration"
    REJECTED = "Rejected"
    TIMEOUT = "Timeout"
    TRANSPORT = "Transport"


class SnapshotExportError(Exception):
    """Base exception for snapshot export operations."""

    kind: ErrorKind = ErrorKind.TRANSPORT

    def __init__(self, message: str, error_code: Optional[str] = None,
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the error for a response body."""
        data: Dict[str, Any] = {
            'kind': self.kind.value,
            'message': self.message
        }
        if self.error_code:
            data['code'] = self.error_code
        if self.context:
            data['context'] = self.context
        return data


class ConfigurationError(SnapshotExportError):
    """Exception raised for missing or invalid configuration."""
    kind = ErrorKind.CONFIGURATION


class ControlPlaneRejectedError(SnapshotExportError):
    """Exception raised when the RDS API rejects a request."""
    kind = ErrorKind.REJECTED


class SnapshotWaitTimeoutError(SnapshotExportError):
    """Exception raised when a snapshot does not become available in time."""
    kind = ErrorKind.TIMEOUT


class TransportError(SnapshotExportError):
    """Exception raised for network or service availability errors."""
    kind = ErrorKind.TRANSPORT
