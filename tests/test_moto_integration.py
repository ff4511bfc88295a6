"""
End-to-end tests for both handlers against moto's mocked RDS API.
"""

import json

import boto3
import pytest
from moto import mock_aws

from rds_snapshot_export.handlers import start_export_handler, create_and_export_handler

from .conftest import REGION, ROLE_ARN, KMS_KEY


@pytest.fixture
def rds():
    with mock_aws():
        client = boto3.client('rds', region_name=REGION)
        client.create_db_cluster(
            DBClusterIdentifier='mycluster',
            Engine='aurora-postgresql',
            MasterUsername='exporter',
            MasterUserPassword='export-password-1'
        )
        yield client


def test_create_and_export_end_to_end(rds, cluster_environ):
    response = create_and_export_handler({'source': 'aws.scheduler'}, None,
                                         environ=cluster_environ, rds_client=rds)

    assert response['statusCode'] == 200
    identifier = json.loads(response['body'])['exportTaskIdentifier']
    assert identifier.startswith('snap1-export-')

    snapshots = rds.describe_db_cluster_snapshots(DBClusterSnapshotIdentifier='snap1')['DBClusterSnapshots']
    assert snapshots[0]['Status'] == 'available'

    tasks = rds.describe_export_tasks(ExportTaskIdentifier=identifier)['ExportTasks']
    assert tasks[0]['SourceArn'] == snapshots[0]['DBClusterSnapshotArn']
    assert tasks[0]['S3Bucket'] == 'bucket1'


def test_start_export_for_existing_snapshot(rds, export_environ):
    snapshot = rds.create_db_cluster_snapshot(
        DBClusterIdentifier='mycluster', DBClusterSnapshotIdentifier='nightly'
    )['DBClusterSnapshot']
    export_environ['SOURCE_ARN'] = snapshot['DBClusterSnapshotArn']

    response = start_export_handler({}, None, environ=export_environ, rds_client=rds)

    assert response['statusCode'] == 200
    identifier = json.loads(response['body'])['exportTaskIdentifier']
    tasks = rds.describe_export_tasks(ExportTaskIdentifier=identifier)['ExportTasks']
    assert tasks[0]['IamRoleArn'] == ROLE_ARN
    assert tasks[0]['KmsKeyId'] == KMS_KEY


def test_duplicate_snapshot_name_fails_without_export(rds, cluster_environ):
    rds.create_db_cluster_snapshot(DBClusterIdentifier='mycluster', DBClusterSnapshotIdentifier='snap1')

    response = create_and_export_handler({}, None, environ=cluster_environ, rds_client=rds)

    assert response['statusCode'] == 500
    error = json.loads(response['body'])['error']
    assert error['kind'] == 'Rejected'
    assert error['context']['operation'] == 'create_db_cluster_snapshot'
    assert rds.describe_export_tasks()['ExportTasks'] == []


def test_unknown_cluster_fails(rds, cluster_environ):
    cluster_environ['DB_CLUSTER_IDENTIFIER'] = 'missing-cluster'

    response = create_and_export_handler({}, None, environ=cluster_environ, rds_client=rds)

    assert response['statusCode'] == 500
    assert json.loads(response['body'])['error']['kind'] == 'Rejected'
