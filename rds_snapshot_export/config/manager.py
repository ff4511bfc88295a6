"""
Configuration management for RDS snapshot export operations.
"""

import json
import yaml
import os
from pathlib import Path
from typing import Dict, Any, Optional, Mapping, Tuple, Union
import boto3
from botocore.exceptions import NoCredentialsError

from ..models.config import ExportConfig, ClusterSnapshotExportConfig, DEFAULT_WAIT_TIMEOUT_SECONDS
from ..models.exceptions import ConfigurationError


class ConfigurationManager:
    """Loads export settings from the environment and creates AWS clients."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self._environ = environ if environ is not None else os.environ

    def _get(self, name: str) -> Optional[str]:
        """Return a stripped environment value, or None when unset or blank."""
        value = self._environ.get(name)
        if value is None:
            return None
        value = str(value).strip()
        return value or None

    def _get_export_only(self) -> Tuple[str, ...]:
        raw = self._get('EXPORT_ONLY')
        if not raw:
            return ()
        return tuple(item.strip() for item in raw.split(',') if item.strip())

    def _get_wait_timeout(self) -> Union[int, str]:
        """Parse the wait ceiling; unparseable text is left for validate() to report."""
        raw = self._get('SNAPSHOT_WAIT_TIMEOUT_SECONDS')
        if raw is None:
            return DEFAULT_WAIT_TIMEOUT_SECONDS
        try:
            return int(raw)
        except ValueError:
            return raw

    @staticmethod
    def _raise_if_invalid(validation_errors) -> None:
        if validation_errors:
            raise ConfigurationError(
                "Configuration validation failed:\n" +
                "\n".join(f"- {error}" for error in validation_errors),
                context={'errors': validation_errors}
            )

    def load_export_config(self) -> ExportConfig:
        """
        Load settings for exporting an existing snapshot.

        Returns:
            ExportConfig: Loaded and validated configuration

        Raises:
            ConfigurationError: If a required value is missing or invalid
        """
        config = ExportConfig(
            source_arn=self._get('SOURCE_ARN') or '',
            s3_bucket_name=self._get('S3_BUCKET_NAME') or '',
            iam_role_arn=self._get('IAM_ROLE_ARN') or '',
            kms_key_id=self._get('KMS_KEY_ID'),
            s3_prefix=self._get('S3_PREFIX'),
            export_only=self._get_export_only(),
            aws_region=self._get('AWS_REGION')
        )
        self._raise_if_invalid(config.validate())
        return config

    def load_cluster_snapshot_config(self) -> ClusterSnapshotExportConfig:
        """
        Load settings for creating and exporting a cluster snapshot.

        Returns:
            ClusterSnapshotExportConfig: Loaded and validated configuration

        Raises:
            ConfigurationError: If a required value is missing or invalid
        """
        config = ClusterSnapshotExportConfig(
            db_cluster_identifier=self._get('DB_CLUSTER_IDENTIFIER') or '',
            snapshot_name=self._get('SNAPSHOT_NAME') or '',
            s3_bucket_name=self._get('S3_BUCKET_NAME') or '',
            iam_role_arn=self._get('IAM_ROLE_ARN') or '',
            kms_key_id=self._get('KMS_KEY_ID'),
            s3_prefix=self._get('S3_PREFIX'),
            export_only=self._get_export_only(),
            wait_timeout_seconds=self._get_wait_timeout(),
            aws_region=self._get('AWS_REGION')
        )
        self._raise_if_invalid(config.validate())
        return config

    @staticmethod
    def load_overrides(config_path: str) -> Dict[str, str]:
        """
        Load environment-style overrides from a YAML or JSON file.

        The file holds a flat mapping of variable names (``S3_BUCKET_NAME``,
        ``SOURCE_ARN``, ...) to values.

        Args:
            config_path: Path to configuration file

        Returns:
            Dict[str, str]: Variable name to value

        Raises:
            ConfigurationError: If the file cannot be read or parsed
        """
        config_file = Path(config_path)

        if not config_file.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                if config_file.suffix.lower() in ['.yaml', '.yml']:
                    config_data = yaml.safe_load(f)
                elif config_file.suffix.lower() == '.json':
                    config_data = json.load(f)
                else:
                    raise ConfigurationError(
                        f"Unsupported configuration file format: {config_file.suffix}. "
                        "Supported formats: .yaml, .yml, .json"
                    )
        except yaml.YAMLError as e:
            raise ConfigurationError(f"YAML parsing error: {str(e)}")
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"JSON parsing error: {str(e)}")

        if config_data is None:
            return {}
        if not isinstance(config_data, dict):
            raise ConfigurationError(
                f"Configuration file must contain a mapping of variable names to values: {config_path}"
            )

        return {str(key): str(value) for key, value in config_data.items() if value is not None}

    @staticmethod
    def create_rds_client(region: Optional[str] = None):
        """
        Create an RDS client using the default credential chain.

        Args:
            region: Optional region override

        Returns:
            boto3.client: RDS client
        """
        session_kwargs: Dict[str, Any] = {}
        if region:
            session_kwargs['region_name'] = region

        try:
            session = boto3.Session(**session_kwargs)
            return session.client('rds')
        except NoCredentialsError as e:
            raise ConfigurationError(f"AWS credentials not found: {str(e)}")
