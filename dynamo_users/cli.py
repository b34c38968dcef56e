"""
CLI entry point for the users service.

Usage:
    # Start the HTTP server (SIGINT/SIGTERM trigger a graceful shutdown)
    python -m dynamo_users serve --port 8080

    # Create the users table and exit
    python -m dynamo_users init-table
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from dynamo_users.core.config import settings
from dynamo_users.domain.users.errors import UserStoreError
from dynamo_users.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def cmd_serve(args: argparse.Namespace) -> None:
    """Run the API with uvicorn.

    uvicorn stops accepting connections on SIGINT/SIGTERM and waits up to
    ``--grace`` seconds for in-flight requests before terminating.
    """
    import uvicorn

    logger.info(
        "Starting users API at http://%s:%d (env=%s)",
        args.host, args.port, settings.env,
    )
    uvicorn.run(
        "dynamo_users.main:app",
        host=args.host,
        port=args.port,
        timeout_graceful_shutdown=args.grace,
        log_level=settings.log_level.lower(),
    )
    logger.info("Server shut down")


def cmd_init_table(args: argparse.Namespace) -> None:
    """Create the users table if it is missing."""
    from dynamo_users.main import build_user_repository

    repository = build_user_repository(settings)
    try:
        repository.ensure_schema()
    except UserStoreError as exc:
        logger.error("Could not create table %s: %s", repository.table_name, exc)
        sys.exit(1)
    logger.info("Table %s is ready", repository.table_name)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="DynamoDB-backed users API")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # Serve
    serve_parser = subparsers.add_parser("serve", help="Start the HTTP server")
    serve_parser.add_argument(
        "--host", default=settings.host,
        help=f"Interface to bind (default {settings.host})",
    )
    serve_parser.add_argument(
        "--port", type=int, default=settings.port,
        help=f"Port to listen on (default {settings.port})",
    )
    serve_parser.add_argument(
        "--grace", type=int, default=settings.shutdown_grace_seconds,
        help="Seconds to wait for in-flight requests on shutdown "
             f"(default {settings.shutdown_grace_seconds})",
    )
    serve_parser.set_defaults(func=cmd_serve)

    # Init table
    table_parser = subparsers.add_parser(
        "init-table", help=f"Create the '{settings.dynamo_table}' table and exit"
    )
    table_parser.set_defaults(func=cmd_init_table)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    configure_logging(level=settings.log_level)
    args = build_parser().parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
