"""
Command-line interface for running the snapshot export handlers locally.
"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .config.manager import ConfigurationManager
from .handlers import start_export_handler, create_and_export_handler
from .models.exceptions import ConfigurationError
from .services.logging import configure_logging


def validate_config_file(config_path: str) -> str:
    """
    Validate that the configuration file exists and is readable.

    Args:
        config_path: Path to configuration file

    Returns:
        str: Absolute path to configuration file

    Raises:
        argparse.ArgumentTypeError: If file doesn't exist or isn't readable
    """
    path = Path(config_path)

    if not path.exists():
        raise argparse.ArgumentTypeError(f"Configuration file does not exist: {config_path}")

    if not path.is_file():
        raise argparse.ArgumentTypeError(f"Configuration path is not a file: {config_path}")

    if not path.suffix.lower() in ['.yaml', '.yml', '.json']:
        raise argparse.ArgumentTypeError(f"Configuration file must be YAML or JSON: {config_path}")

    return str(path.absolute())


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the argument parser for the CLI.

    Returns:
        argparse.ArgumentParser: Configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog='rds-snapshot-export',
        description='Start RDS snapshot exports to S3 using the same code as the Lambda handlers',
        epilog='''
Settings are read from the environment (SOURCE_ARN, DB_CLUSTER_IDENTIFIER,
SNAPSHOT_NAME, S3_BUCKET_NAME, IAM_ROLE_ARN, KMS_KEY_ID, S3_PREFIX, ...).
Values in --config override the environment.

Examples:
  %(prog)s start-export
  %(prog)s create-and-export --config export.yaml --verbose
        ''',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument(
        'command',
        choices=['start-export', 'create-and-export'],
        help='start-export: export an existing snapshot; '
             'create-and-export: create a cluster snapshot, wait, then export it'
    )

    parser.add_argument(
        '--config', '-c',
        type=validate_config_file,
        help='YAML or JSON file of environment variable overrides'
    )

    parser.add_argument(
        '--region', '-r',
        type=str,
        help='AWS region (overrides AWS_REGION)'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose (DEBUG) logging'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    return parser


def run_command(args: argparse.Namespace) -> int:
    """
    Run the selected handler and print its response.

    Args:
        args: Parsed command line arguments

    Returns:
        int: Exit code (0 for a 200 response, 1 otherwise)
    """
    logger = logging.getLogger(__name__)

    environ = dict(os.environ)
    try:
        if args.config:
            environ.update(ConfigurationManager.load_overrides(args.config))
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        print(f"Configuration Error: {e}", file=sys.stderr)
        return 1

    if args.verbose:
        environ['LOG_LEVEL'] = 'DEBUG'
    if args.region:
        environ['AWS_REGION'] = args.region

    configure_logging(environ=environ)

    event = {'source': 'rds-snapshot-export.cli', 'command': args.command}
    if args.command == 'start-export':
        response = start_export_handler(event, None, environ=environ)
    else:
        response = create_and_export_handler(event, None, environ=environ)

    print(json.dumps({
        'statusCode': response['statusCode'],
        'body': json.loads(response['body'])
    }, indent=2))

    return 0 if response['statusCode'] == 200 else 1


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI application.

    Returns:
        int: Exit code
    """
    parser = create_argument_parser()

    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        return e.code

    configure_logging('DEBUG' if args.verbose else None)

    try:
        return run_command(args)
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 130


if __name__ == '__main__':
    sys.exit(main())
