"""
Response envelope returned by the export handlers.
"""

import json
from dataclasses import dataclass
from typing import Optional, Dict, Any

from .exceptions import SnapshotExportError


@dataclass
class InvocationResult:
    """Outcome of a single handler invocation."""

    status_code: int
    message: str
    export_task_identifier: Optional[str] = None
    error: Optional[SnapshotExportError] = None

    @classmethod
    def success(cls, message: str, export_task_identifier: str) -> 'InvocationResult':
        return cls(status_code=200, message=message,
                   export_task_identifier=export_task_identifier)

    @classmethod
    def failure(cls, message: str, error: SnapshotExportError) -> 'InvocationResult':
        return cls(status_code=500, message=message, error=error)

    @property
    def succeeded(self) -> bool:
        return self.status_code == 200

    def body(self) -> Dict[str, Any]:
        """Build the JSON body for this result."""
        if self.succeeded:
            return {
                'message': self.message,
                'exportTaskIdentifier': self.export_task_identifier
            }
        return {
            'message': self.message,
            'error': self.error.to_dict() if self.error else None
        }

    def to_response(self) -> Dict[str, Any]:
        """Convert to the API Gateway style response envelope."""
        return {
            'statusCode': self.status_code,
            'body': json.dumps(self.body(), default=str)
        }
