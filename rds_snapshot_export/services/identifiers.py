"""
Export task identifier generation.
"""

import time
from datetime import datetime, timezone
from typing import Optional


EXPORT_TASK_PREFIX = 'snapshot'


def export_task_identifier_from_timestamp(now: Optional[datetime] = None) -> str:
    """
    Build an identifier for exporting an existing snapshot.

    Format is ``snapshot`` followed by the UTC time as ``YYYYMMDDHHMMSS``.
    The value only changes once per second, so two invocations within the
    same second produce the same identifier and RDS rejects the second export.
    """
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    return f"{EXPORT_TASK_PREFIX}{now.strftime('%Y%m%d%H%M%S')}"


def cluster_export_task_identifier(snapshot_name: str, now_ms: Optional[int] = None) -> str:
    """Build ``<snapshot_name>-export-<epoch milliseconds>``."""
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    return f"{snapshot_name}-export-{now_ms}"
