"""
Tests for the boto3-backed cluster snapshot waiter.
"""

from unittest.mock import MagicMock

import pytest
from botocore.exceptions import WaiterError

from rds_snapshot_export.models.exceptions import SnapshotWaitTimeoutError
from rds_snapshot_export.services.waiter import BotoClusterSnapshotWaiter


@pytest.mark.parametrize('timeout, expected', [
    (600, {'Delay': 30, 'MaxAttempts': 20}),
    (45, {'Delay': 30, 'MaxAttempts': 2}),
    (10, {'Delay': 10, 'MaxAttempts': 1}),
])
def test_waiter_config_covers_ceiling(timeout, expected):
    assert BotoClusterSnapshotWaiter(MagicMock()).waiter_config(timeout) == expected


def test_waits_on_cluster_snapshot_identifier():
    client = MagicMock()

    BotoClusterSnapshotWaiter(client, delay_seconds=5).wait_until_available('snap1', 60)

    client.get_waiter.assert_called_once_with('db_cluster_snapshot_available')
    client.get_waiter.return_value.wait.assert_called_once_with(
        DBClusterSnapshotIdentifier='snap1',
        WaiterConfig={'Delay': 5, 'MaxAttempts': 12}
    )


def test_max_attempts_becomes_timeout():
    client = MagicMock()
    client.get_waiter.return_value.wait.side_effect = WaiterError(
        name='DBClusterSnapshotAvailable', reason='Max attempts exceeded', last_response={}
    )

    with pytest.raises(SnapshotWaitTimeoutError) as exc_info:
        BotoClusterSnapshotWaiter(client).wait_until_available('snap1', 600)

    assert exc_info.value.context == {'snapshot_identifier': 'snap1', 'timeout_seconds': 600}


def test_failure_state_is_reraised():
    client = MagicMock()
    client.get_waiter.return_value.wait.side_effect = WaiterError(
        name='DBClusterSnapshotAvailable',
        reason='Waiter encountered a terminal failure state: For expression "DBClusterSnapshots[].Status" we matched expected path: "failed"',
        last_response={}
    )

    with pytest.raises(WaiterError):
        BotoClusterSnapshotWaiter(client).wait_until_available('snap1', 600)


def test_stubbed_failed_snapshot(stubbed_rds):
    client, stubber = stubbed_rds
    stubber.add_response(
        'describe_db_cluster_snapshots',
        {'DBClusterSnapshots': [{'DBClusterSnapshotIdentifier': 'snap1', 'Status': 'failed'}]},
        {'DBClusterSnapshotIdentifier': 'snap1'}
    )

    with pytest.raises(WaiterError):
        BotoClusterSnapshotWaiter(client).wait_until_available('snap1', 600)

    stubber.assert_no_pending_responses()
