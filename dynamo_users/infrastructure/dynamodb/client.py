"""
Adapter: DynamoDB client factory.

Builds a boto3 low-level DynamoDB client for the configured backend.
In "aws" mode the default credential chain is used (IAM role, env vars
or ~/.aws/credentials). In "local" mode the client targets DynamoDB Local
with static placeholder credentials, which DynamoDB Local accepts.
"""

import logging

import boto3
from botocore.config import Config

from dynamo_users.core.config import Settings

logger = logging.getLogger(__name__)

LOCAL_REGION = "us-east-1"
LOCAL_CREDENTIAL = "local"


def _client_config(settings: Settings) -> Config:
    """Timeouts bound every store call; a single attempt means no SDK retries."""
    return Config(
        connect_timeout=settings.dynamo_connect_timeout,
        read_timeout=settings.dynamo_read_timeout,
        retries={"max_attempts": 1, "mode": "standard"},
    )


def build_dynamodb_client(settings: Settings):
    """Return a DynamoDB client for the backend selected in settings.

    Args:
        settings: Application settings (env, region, endpoint, timeouts).

    Returns:
        A boto3 ``DynamoDB.Client``.
    """
    config = _client_config(settings)

    if settings.is_local:
        logger.info(
            "Using DynamoDB Local at %s", settings.dynamo_local_endpoint
        )
        return boto3.client(
            "dynamodb",
            region_name=LOCAL_REGION,
            endpoint_url=settings.dynamo_local_endpoint,
            aws_access_key_id=LOCAL_CREDENTIAL,
            aws_secret_access_key=LOCAL_CREDENTIAL,
            aws_session_token=LOCAL_CREDENTIAL,
            config=config,
        )

    logger.info("Using managed DynamoDB in region %s", settings.aws_region)
    return boto3.client("dynamodb", region_name=settings.aws_region, config=config)
