"""
Structured logging for RDS snapshot export operations.
"""

import logging
import json
import os
import sys
from datetime import datetime
from typing import Mapping, Optional


PACKAGE_LOGGER = 'rds_snapshot_export'


class StructuredFormatter(logging.Formatter):
    """Custom formatter for structured logging with JSON output."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as structured JSON."""
        log_data = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno
        }

        # Add context data if available
        if hasattr(record, 'context') and record.context:
            log_data['context'] = record.context

        # Add exception info if available
        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


def configure_logging(level: Optional[str] = None,
                      environ: Optional[Mapping[str, str]] = None) -> logging.Logger:
    """
    Set up the package logger with a structured stdout handler.

    Safe to call on every invocation; the handler is installed once per
    process so warm Lambda containers do not duplicate output.

    Without either, a level set by an earlier call is kept and a fresh
    logger starts at INFO.

    Args:
        level: Logging level name, defaults to LOG_LEVEL from environ
        environ: Mapping holding LOG_LEVEL, defaults to os.environ

    Returns:
        logging.Logger: The package logger
    """
    environ = environ if environ is not None else os.environ
    level_name = level or environ.get('LOG_LEVEL')
    logger = logging.getLogger(PACKAGE_LOGGER)
    if level_name:
        logger.setLevel(getattr(logging, level_name.upper(), logging.INFO))
    elif logger.level == logging.NOTSET:
        logger.setLevel(logging.INFO)

    if not any(getattr(handler, '_rds_snapshot_export', False) for handler in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(StructuredFormatter())
        handler._rds_snapshot_export = True
        logger.addHandler(handler)
        # The Lambda runtime installs its own root handler
        logger.propagate = False

    logging.getLogger('boto3').setLevel(logging.WARNING)
    logging.getLogger('botocore').setLevel(logging.WARNING)

    return logger
