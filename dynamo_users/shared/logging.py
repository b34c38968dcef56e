"""
Process-wide logging setup for the users service.

Both the API factory and the CLI call ``configure_logging`` so that uvicorn,
the use cases and the DynamoDB adapter write through one stdout handler.
Request bodies and credentials are never passed to a logger.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# AWS SDK and access-log chatter stays at WARNING whatever the app level is.
QUIET_LOGGERS = ("botocore", "boto3", "urllib3", "uvicorn.access")


def resolve_level(level: str) -> int:
    """Map a level name such as ``"debug"`` to its numeric value.

    Unknown names fall back to INFO.
    """
    value = logging.getLevelName(level.strip().upper())
    return value if isinstance(value, int) else logging.INFO


def configure_logging(level: str = "INFO") -> None:
    """Install the stdout handler and quiet the SDK loggers.

    Safe to call repeatedly; each call replaces the previous root handlers.
    """
    logging.basicConfig(
        level=resolve_level(level),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
