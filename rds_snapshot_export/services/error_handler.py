"""
Error classification for RDS snapshot export operations.
"""

import logging
from typing import Optional, Dict, Any
from botocore.exceptions import (
    ClientError, BotoCoreError, NoCredentialsError, ParamValidationError,
    EndpointConnectionError, ConnectTimeoutError, ReadTimeoutError, WaiterError
)

from ..models.exceptions import (
    SnapshotExportError, ConfigurationError, ControlPlaneRejectedError,
    SnapshotWaitTimeoutError, TransportError
)


class ErrorHandler:
    """Maps boto3 and botocore failures onto the export error kinds."""

    # Waiter failure reasons that mean the attempt budget ran out
    TIMEOUT_REASONS = ('Max attempts exceeded',)

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the error handler.

        Args:
            logger: Optional logger instance for error reporting
        """
        self.logger = logger or logging.getLogger(__name__)

    def classify(self, error: Exception, operation: str,
                 context: Optional[Dict[str, Any]] = None) -> SnapshotExportError:
        """
        Convert any exception raised during an operation into a SnapshotExportError.

        The original message is preserved and the classified error is logged
        once with its context.

        Args:
            error: The exception that occurred
            operation: Name of the RDS operation that failed
            context: Additional context to attach

        Returns:
            SnapshotExportError: The classified error
        """
        error_context = {'operation': operation}
        if context:
            error_context.update(context)

        if isinstance(error, SnapshotExportError):
            error.context = {**error_context, **error.context}
            classified = error

        elif isinstance(error, ClientError):
            error_code = error.response.get('Error', {}).get('Code', 'Unknown')
            error_message = error.response.get('Error', {}).get('Message', str(error))
            request_id = error.response.get('ResponseMetadata', {}).get('RequestId')
            if request_id:
                error_context['request_id'] = request_id
            classified = ControlPlaneRejectedError(
                f"RDS rejected {operation}: {error_message}",
                error_code=error_code,
                context=error_context
            )

        elif isinstance(error, WaiterError):
            classified = self._classify_waiter_error(error, operation, error_context)

        elif isinstance(error, (NoCredentialsError, ParamValidationError)):
            classified = ConfigurationError(
                f"Invalid request for {operation}: {str(error)}",
                error_code=type(error).__name__,
                context=error_context
            )

        elif isinstance(error, (EndpointConnectionError, ConnectTimeoutError, ReadTimeoutError)):
            classified = TransportError(
                f"Network error in {operation}: {str(error)}",
                error_code=type(error).__name__,
                context=error_context
            )

        elif isinstance(error, BotoCoreError):
            classified = TransportError(
                f"Boto3 error in {operation}: {str(error)}",
                error_code=type(error).__name__,
                context=error_context
            )

        else:
            classified = TransportError(
                f"Unknown error in {operation}: {str(error)}",
                error_code=type(error).__name__,
                context=error_context
            )

        self.logger.error(
            f"{classified.kind.value} error in {operation}: {classified.message}",
            exc_info=error,
            extra={'context': classified.to_dict()}
        )
        return classified

    def _classify_waiter_error(self, error: WaiterError, operation: str,
                               error_context: Dict[str, Any]) -> SnapshotExportError:
        reason = error.kwargs.get('reason', '') or ''
        last_response = error.last_response or {}
        error_context['waiter'] = error.kwargs.get('name')
        error_context['reason'] = reason

        if reason.startswith(self.TIMEOUT_REASONS):
            return SnapshotWaitTimeoutError(
                f"Snapshot did not become available during {operation}: {reason}",
                error_code='WaiterTimeout',
                context=error_context
            )

        service_error = last_response.get('Error', {})
        return ControlPlaneRejectedError(
            f"Waiter {error.kwargs.get('name')} failed during {operation}: {reason}",
            error_code=service_error.get('Code'),
            context=error_context
        )
