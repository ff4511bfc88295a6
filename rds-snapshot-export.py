"""
Command-line interface for RDS Snapshot Export.

This script provides a direct entry point for running the export handlers
locally. It delegates to the main CLI module in the package.
"""

import sys
from rds_snapshot_export.cli import main

if __name__ == '__main__':
    sys.exit(main())
