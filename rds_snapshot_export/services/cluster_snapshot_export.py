"""
Create-wait-export service for Aurora cluster snapshots.
"""

import logging
import time
from typing import Any, Callable, Optional

from rds_snapshot_export.services.base import BaseExportService, SnapshotWaiter
from rds_snapshot_export.services.error_handler import ErrorHandler
from rds_snapshot_export.services.identifiers import cluster_export_task_identifier
from rds_snapshot_export.services.waiter import BotoClusterSnapshotWaiter
from rds_snapshot_export.models.config import ClusterSnapshotExportConfig
from rds_snapshot_export.models.invocation_result import InvocationResult


class ClusterSnapshotExportService(BaseExportService):
    """Creates a cluster snapshot, waits for it, then exports it."""

    SUCCESS_MESSAGE = 'Snapshot created and export task started successfully'
    FAILURE_MESSAGE = 'Failed to create snapshot or start export task'

    def __init__(self, config: ClusterSnapshotExportConfig, client: Any,
                 waiter: Optional[SnapshotWaiter] = None,
                 error_handler: Optional[ErrorHandler] = None,
                 logger: Optional[logging.Logger] = None,
                 clock_ms: Optional[Callable[[], int]] = None):
        super().__init__(client, error_handler, logger)
        self.config = config
        self.waiter = waiter or BotoClusterSnapshotWaiter(client)
        self._clock_ms = clock_ms or (lambda: int(time.time() * 1000))

    def create_snapshot(self) -> str:
        """
        Request a new cluster snapshot.

        Returns:
            str: ARN of the snapshot being created
        """
        self.logger.info(
            f"Creating cluster snapshot {self.config.snapshot_name}",
            extra={'context': {
                'db_cluster_identifier': self.config.db_cluster_identifier,
                'snapshot_name': self.config.snapshot_name
            }}
        )
        response = self.client.create_db_cluster_snapshot(
            DBClusterIdentifier=self.config.db_cluster_identifier,
            DBClusterSnapshotIdentifier=self.config.snapshot_name
        )
        snapshot = response['DBClusterSnapshot']
        self.logger.info(
            f"Cluster snapshot requested: {snapshot['DBClusterSnapshotArn']}",
            extra={'context': {'status': snapshot.get('Status')}}
        )
        return snapshot['DBClusterSnapshotArn']

    def create_and_export(self) -> InvocationResult:
        """
        Create the snapshot, wait until it is available, then export it.

        Each step starts only after the previous one succeeded. The first
        failure aborts the rest; a snapshot that was already created is left
        in place.

        Returns:
            InvocationResult: 200 with the export task identifier, or 500
        """
        operation = 'create_db_cluster_snapshot'
        export_task_identifier = None

        try:
            snapshot_arn = self.create_snapshot()

            operation = 'wait_until_available'
            self.waiter.wait_until_available(
                self.config.snapshot_name, self.config.wait_timeout_seconds
            )

            operation = 'start_export_task'
            export_task_identifier = cluster_export_task_identifier(
                self.config.snapshot_name, self._clock_ms()
            )
            params = self.config.to_export_params(export_task_identifier, snapshot_arn)
            self._start_export_task(params)

        except Exception as e:
            context = {
                'db_cluster_identifier': self.config.db_cluster_identifier,
                'snapshot_name': self.config.snapshot_name
            }
            if export_task_identifier:
                context['export_task_identifier'] = export_task_identifier
            error = self.error_handler.classify(e, operation, context)
            return InvocationResult.failure(self.FAILURE_MESSAGE, error)

        return InvocationResult.success(self.SUCCESS_MESSAGE, export_task_identifier)

    def run(self) -> InvocationResult:
        return self.create_and_export()
