"""
Lambda entry points for RDS snapshot export.
"""

import json
import logging
from typing import Any, Dict, Mapping, Optional

from rds_snapshot_export.config.manager import ConfigurationManager
from rds_snapshot_export.models.invocation_result import InvocationResult
from rds_snapshot_export.services.base import SnapshotWaiter
from rds_snapshot_export.services.error_handler import ErrorHandler
from rds_snapshot_export.services.logging import configure_logging
from rds_snapshot_export.services.snapshot_export import SnapshotExportService
from rds_snapshot_export.services.cluster_snapshot_export import ClusterSnapshotExportService


logger = logging.getLogger(__name__)


def _log_event(event: Any) -> None:
    logger.info(f"Received event: {json.dumps(event, indent=2, default=str)}")


def start_export_handler(event: Any, context: Any,
                         environ: Optional[Mapping[str, str]] = None,
                         rds_client: Any = None) -> Dict[str, Any]:
    """
    Start an export task for the snapshot named by SOURCE_ARN.

    Args:
        event: Trigger event, only logged
        context: Lambda context, unused
        environ: Configuration mapping, defaults to os.environ
        rds_client: Optional preconfigured RDS client

    Returns:
        Dict[str, Any]: ``{"statusCode": ..., "body": ...}``
    """
    configure_logging(environ=environ)
    _log_event(event)

    try:
        config = ConfigurationManager(environ).load_export_config()
        client = rds_client or ConfigurationManager.create_rds_client(config.aws_region)
    except Exception as e:
        error = ErrorHandler(logger).classify(e, 'load_configuration')
        return InvocationResult.failure(SnapshotExportService.FAILURE_MESSAGE, error).to_response()

    result = SnapshotExportService(config, client).start_export()
    return result.to_response()


def create_and_export_handler(event: Any, context: Any,
                              environ: Optional[Mapping[str, str]] = None,
                              rds_client: Any = None,
                              waiter: Optional[SnapshotWaiter] = None) -> Dict[str, Any]:
    """
    Create an Aurora cluster snapshot, wait for it, and export it to S3.

    Args:
        event: Trigger event, only logged
        context: Lambda context, unused
        environ: Configuration mapping, defaults to os.environ
        rds_client: Optional preconfigured RDS client
        waiter: Optional snapshot waiter, defaults to the boto3 waiter

    Returns:
        Dict[str, Any]: ``{"statusCode": ..., "body": ...}``
    """
    configure_logging(environ=environ)
    _log_event(event)

    try:
        config = ConfigurationManager(environ).load_cluster_snapshot_config()
        client = rds_client or ConfigurationManager.create_rds_client(config.aws_region)
    except Exception as e:
        error = ErrorHandler(logger).classify(e, 'load_configuration')
        return InvocationResult.failure(ClusterSnapshotExportService.FAILURE_MESSAGE, error).to_response()

    result = ClusterSnapshotExportService(config, client, waiter=waiter).create_and_export()
    return result.to_response()


# Short names for Lambda handler settings
handler = start_export_handler
create_and_export = create_and_export_handler
