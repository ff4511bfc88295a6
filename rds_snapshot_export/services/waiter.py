"""
boto3-backed waiter for Aurora cluster snapshots.
"""

import logging
import math
from typing import Any

from botocore.exceptions import WaiterError

from rds_snapshot_export.services.base import SnapshotWaiter
from rds_snapshot_export.models.exceptions import SnapshotWaitTimeoutError


logger = logging.getLogger(__name__)


class BotoClusterSnapshotWaiter(SnapshotWaiter):
    """Polls DescribeDBClusterSnapshots through the db_cluster_snapshot_available waiter."""

    WAITER_NAME = 'db_cluster_snapshot_available'

    def __init__(self, client: Any, delay_seconds: int = 30):
        self.client = client
        self.delay_seconds = delay_seconds

    def waiter_config(self, timeout_seconds: int) -> dict:
        """Spread the timeout ceiling over fixed-delay attempts."""
        delay = max(1, min(self.delay_seconds, timeout_seconds))
        return {
            'Delay': delay,
            'MaxAttempts': max(1, math.ceil(timeout_seconds / delay))
        }

    def wait_until_available(self, snapshot_identifier: str, timeout_seconds: int) -> None:
        waiter_config = self.waiter_config(timeout_seconds)
        logger.info(
            f"Waiting for cluster snapshot {snapshot_identifier} to become available",
            extra={'context': {
                'snapshot_identifier': snapshot_identifier,
                'timeout_seconds': timeout_seconds,
                'waiter_config': waiter_config
            }}
        )

        waiter = self.client.get_waiter(self.WAITER_NAME)
        try:
            waiter.wait(
                DBClusterSnapshotIdentifier=snapshot_identifier,
                WaiterConfig=waiter_config
            )
        except WaiterError as e:
            reason = e.kwargs.get('reason', '') or ''
            if reason.startswith('Max attempts exceeded'):
                raise SnapshotWaitTimeoutError(
                    f"Cluster snapshot {snapshot_identifier} not available after {timeout_seconds} seconds",
                    error_code='WaiterTimeout',
                    context={'snapshot_identifier': snapshot_identifier, 'timeout_seconds': timeout_seconds}
                )
            raise

        logger.info(f"Cluster snapshot {snapshot_identifier} is available")
