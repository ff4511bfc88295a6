"""
Base interfaces and abstract classes for export services.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

from rds_snapshot_export.models.invocation_result import InvocationResult
from rds_snapshot_export.services.error_handler import ErrorHandler


class SnapshotWaiter(ABC):
    """Blocks until a snapshot reaches the available state."""

    @abstractmethod
    def wait_until_available(self, snapshot_identifier: str, timeout_seconds: int) -> None:
        """
        Wait for the snapshot, raising SnapshotWaitTimeoutError when the
        ceiling passes first.
        """
        pass


class BaseExportService(ABC):
    """Abstract base class for the export services."""

    def __init__(self, client: Any, error_handler: Optional[ErrorHandler] = None,
                 logger: Optional[logging.Logger] = None):
        self.client = client
        self.logger = logger or logging.getLogger(self.__class__.__module__)
        self.error_handler = error_handler or ErrorHandler(self.logger)

    @abstractmethod
    def run(self) -> InvocationResult:
        """Execute the export workflow for this service."""
        pass

    def _start_export_task(self, params: dict) -> dict:
        """Issue a single StartExportTask request and log the acknowledgement."""
        self.logger.info(
            f"Starting export task {params['ExportTaskIdentifier']}",
            extra={'context': {'request': params}}
        )
        response = self.client.start_export_task(**params)
        self.logger.info(
            f"Export task started: {params['ExportTaskIdentifier']}",
            extra={'context': {
                'export_task_identifier': response.get('ExportTaskIdentifier'),
                'status': response.get('Status'),
                'source_arn': response.get('SourceArn')
            }}
        )
        return response
