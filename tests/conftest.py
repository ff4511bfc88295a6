"""
Shared fixtures for the snapshot export tests.
"""

import logging

import boto3
import pytest
from botocore.stub import Stubber


REGION = 'us-east-1'
CLUSTER_SNAPSHOT_ARN = 'arn:aws:rds:us-east-1:123456789012:cluster-snapshot:snap1'
SOURCE_ARN = 'arn:aws:rds:us-east-1:123456789012:snapshot:existing-snap'
ROLE_ARN = 'arn:aws:iam::123456789012:role/rds-s3-export'
KMS_KEY = 'arn:aws:kms:us-east-1:123456789012:key/1234abcd-12ab-34cd-56ef-1234567890ab'


@pytest.fixture(autouse=True)
def aws_credentials(monkeypatch):
    """Mocked AWS credentials so no test reaches a real account."""
    monkeypatch.setenv('AWS_ACCESS_KEY_ID', 'testing')
    monkeypatch.setenv('AWS_SECRET_ACCESS_KEY', 'testing')
    monkeypatch.setenv('AWS_SECURITY_TOKEN', 'testing')
    monkeypatch.setenv('AWS_SESSION_TOKEN', 'testing')
    monkeypatch.setenv('AWS_DEFAULT_REGION', REGION)


@pytest.fixture
def export_environ():
    return {
        'SOURCE_ARN': SOURCE_ARN,
        'S3_BUCKET_NAME': 'bucket1',
        'IAM_ROLE_ARN': ROLE_ARN,
        'KMS_KEY_ID': KMS_KEY
    }


@pytest.fixture
def cluster_environ():
    return {
        'DB_CLUSTER_IDENTIFIER': 'mycluster',
        'SNAPSHOT_NAME': 'snap1',
        'S3_BUCKET_NAME': 'bucket1',
        'IAM_ROLE_ARN': ROLE_ARN,
        'KMS_KEY_ID': KMS_KEY
    }


@pytest.fixture
def rds_client():
    return boto3.client('rds', region_name=REGION)


@pytest.fixture
def stubbed_rds(rds_client):
    with Stubber(rds_client) as stubber:
        yield rds_client, stubber


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers bound to a per-test captured stdout."""
    yield
    logger = logging.getLogger('rds_snapshot_export')
    logger.setLevel(logging.NOTSET)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
