"""
Export service for an existing RDS or Aurora snapshot.
"""

import logging
from datetime import datetime
from typing import Any, Callable, Optional

from rds_snapshot_export.services.base import BaseExportService
from rds_snapshot_export.services.error_handler import ErrorHandler
from rds_snapshot_export.services.identifiers import export_task_identifier_from_timestamp
from rds_snapshot_export.models.config import ExportConfig
from rds_snapshot_export.models.invocation_result import InvocationResult


class SnapshotExportService(BaseExportService):
    """Starts an export task for the snapshot named by SOURCE_ARN."""

    SUCCESS_MESSAGE = 'Export task started successfully'
    FAILURE_MESSAGE = 'Failed to start export task'

    def __init__(self, config: ExportConfig, client: Any,
                 error_handler: Optional[ErrorHandler] = None,
                 logger: Optional[logging.Logger] = None,
                 clock: Optional[Callable[[], datetime]] = None):
        super().__init__(client, error_handler, logger)
        self.config = config
        self._clock = clock

    def start_export(self) -> InvocationResult:
        """
        Issue one StartExportTask request for the configured snapshot.

        The export runs asynchronously in RDS; only the acknowledgement is
        reported. Failures are returned as a 500 result, never raised.

        Returns:
            InvocationResult: 200 with the export task identifier, or 500
        """
        now = self._clock() if self._clock else None
        export_task_identifier = export_task_identifier_from_timestamp(now)
        params = self.config.to_export_params(export_task_identifier)

        try:
            self._start_export_task(params)
        except Exception as e:
            error = self.error_handler.classify(e, 'start_export_task', {
                'export_task_identifier': export_task_identifier,
                'source_arn': self.config.source_arn
            })
            return InvocationResult.failure(self.FAILURE_MESSAGE, error)

        return InvocationResult.success(self.SUCCESS_MESSAGE, export_task_identifier)

    def run(self) -> InvocationResult:
        return self.start_export()
