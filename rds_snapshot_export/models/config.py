"""
Configuration data models for RDS snapshot export operations.
"""

from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any, Tuple
import re


DEFAULT_WAIT_TIMEOUT_SECONDS = 600

_ARN_PATTERN = re.compile(r'^arn:\S+')
_BUCKET_PATTERN = re.compile(r'^[a-z0-9][a-z0-9.-]{1,61}[a-z0-9]$')
_RDS_IDENTIFIER_PATTERN = re.compile(r'^[A-Za-z][A-Za-z0-9-]{0,254}$')


def _is_valid_arn(value: str) -> bool:
    return bool(_ARN_PATTERN.match(value))


def _is_valid_s3_bucket_name(bucket_name: str) -> bool:
    """
    Validate S3 bucket name according to AWS naming rules.

    Args:
        bucket_name: The bucket name to validate

    Returns:
        bool: True if valid, False otherwise
    """
    if not _BUCKET_PATTERN.match(bucket_name):
        return False

    # No consecutive periods, no IP-address style names
    if '..' in bucket_name:
        return False
    if re.match(r'^\d+\.\d+\.\d+\.\d+$', bucket_name):
        return False

    return True


def _is_valid_rds_identifier(identifier: str) -> bool:
    """RDS identifiers start with a letter and never end with or repeat a hyphen."""
    if not _RDS_IDENTIFIER_PATTERN.match(identifier):
        return False
    return not identifier.endswith('-') and '--' not in identifier


def _validate_destination(s3_bucket_name: str, iam_role_arn: str,
                          s3_prefix: Optional[str]) -> List[str]:
    """Validate the export destination settings shared by both handlers."""
    errors = []

    if not s3_bucket_name:
        errors.append("S3_BUCKET_NAME is required")
    elif not _is_valid_s3_bucket_name(s3_bucket_name):
        errors.append(f"S3_BUCKET_NAME is not a valid bucket name: {s3_bucket_name}")

    if not iam_role_arn:
        errors.append("IAM_ROLE_ARN is required")
    elif not _is_valid_arn(iam_role_arn):
        errors.append(f"IAM_ROLE_ARN must be an ARN: {iam_role_arn}")

    if s3_prefix and s3_prefix.startswith('/'):
        errors.append("S3_PREFIX must not start with '/'")

    return errors


def _build_export_params(export_task_identifier: str, source_arn: str,
                         s3_bucket_name: str, iam_role_arn: str,
                         kms_key_id: Optional[str], s3_prefix: Optional[str],
                         export_only: Tuple[str, ...]) -> Dict[str, Any]:
    """Build StartExportTask keyword arguments, omitting unset optional fields."""
    params: Dict[str, Any] = {
        'ExportTaskIdentifier': export_task_identifier,
        'SourceArn': source_arn,
        'S3BucketName': s3_bucket_name,
        'IamRoleArn': iam_role_arn
    }
    if kms_key_id:
        params['KmsKeyId'] = kms_key_id
    if s3_prefix:
        params['S3Prefix'] = s3_prefix
    if export_only:
        params['ExportOnly'] = list(export_only)
    return params


@dataclass(frozen=True)
class ExportConfig:
    """Settings for starting an export from an existing snapshot."""

    source_arn: str
    s3_bucket_name: str
    iam_role_arn: str

    # Optional destination settings
    kms_key_id: Optional[str] = None
    s3_prefix: Optional[str] = None
    export_only: Tuple[str, ...] = field(default_factory=tuple)

    aws_region: Optional[str] = None

    def validate(self) -> List[str]:
        """
        Validate configuration settings and return list of validation errors.

        Returns:
            List[str]: List of validation error messages. Empty if valid.
        """
        errors = []

        if not self.source_arn:
            errors.append("SOURCE_ARN is required")
        elif not _is_valid_arn(self.source_arn):
            errors.append(f"SOURCE_ARN must be an ARN: {self.source_arn}")

        errors.extend(_validate_destination(self.s3_bucket_name, self.iam_role_arn, self.s3_prefix))

        return errors

    def to_export_params(self, export_task_identifier: str) -> Dict[str, Any]:
        """Build the StartExportTask request for this configuration."""
        return _build_export_params(
            export_task_identifier,
            self.source_arn,
            self.s3_bucket_name,
            self.iam_role_arn,
            self.kms_key_id,
            self.s3_prefix,
            self.export_only
        )


@dataclass(frozen=True)
class ClusterSnapshotExportConfig:
    """Settings for creating a cluster snapshot and exporting it."""

    db_cluster_identifier: str
    snapshot_name: str
    s3_bucket_name: str
    iam_role_arn: str

    # Optional destination settings
    kms_key_id: Optional[str] = None
    s3_prefix: Optional[str] = None
    export_only: Tuple[str, ...] = field(default_factory=tuple)

    wait_timeout_seconds: int = DEFAULT_WAIT_TIMEOUT_SECONDS
    aws_region: Optional[str] = None

    def validate(self) -> List[str]:
        """
        Validate configuration settings and return list of validation errors.

        Returns:
            List[str]: List of validation error messages. Empty if valid.
        """
        errors = []

        if not self.db_cluster_identifier:
            errors.append("DB_CLUSTER_IDENTIFIER is required")

        if not self.snapshot_name:
            errors.append("SNAPSHOT_NAME is required")
        elif not _is_valid_rds_identifier(self.snapshot_name):
            errors.append(f"SNAPSHOT_NAME is not a valid snapshot identifier: {self.snapshot_name}")

        errors.extend(_validate_destination(self.s3_bucket_name, self.iam_role_arn, self.s3_prefix))

        if not isinstance(self.wait_timeout_seconds, int) or self.wait_timeout_seconds <= 0:
            errors.append(
                f"SNAPSHOT_WAIT_TIMEOUT_SECONDS must be a positive integer: {self.wait_timeout_seconds}"
            )

        return errors

    def to_export_params(self, export_task_identifier: str, source_arn: str) -> Dict[str, Any]:
        """Build the StartExportTask request for the created snapshot."""
        return _build_export_params(
            export_task_identifier,
            source_arn,
            self.s3_bucket_name,
            self.iam_role_arn,
            self.kms_key_id,
            self.s3_prefix,
            self.export_only
        )
