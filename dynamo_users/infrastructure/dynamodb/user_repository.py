"""
Adapter: User repository backed by DynamoDB.

Implements the UserRepository port.
Responsible for persisting and retrieving users from a single table
keyed by ``id``. Every botocore failure is translated into a
UserDomainError so the rest of the application never handles boto types.
"""

import logging
from typing import Any, Optional

from boto3.dynamodb.conditions import Attr, ConditionExpressionBuilder
from botocore.exceptions import BotoCoreError, ClientError

from dynamo_users.domain.users.entities import User
from dynamo_users.domain.users.errors import (
    UserConditionalUpdateError,
    UserStoreError,
)
from dynamo_users.domain.users.ports import UserRepository
from dynamo_users.infrastructure.dynamodb.mapper import (
    ATTR_EMAIL,
    ATTR_ID,
    ATTR_NAME,
    from_item,
    key_for,
    serialize_value,
    to_item,
)

logger = logging.getLogger(__name__)

TABLE_EXISTS_CODE = "ResourceInUseException"
CONDITION_FAILED_CODE = "ConditionalCheckFailedException"

# "name" is a DynamoDB reserved word, hence the placeholders.
UPDATE_EXPRESSION = "SET #name = :name, #email = :email"


def _error_code(exc: ClientError) -> str:
    return exc.response.get("Error", {}).get("Code", "")


class DynamoUserRepository(UserRepository):
    """DynamoDB implementation of the user repository.

    Args:
        client: A boto3 low-level DynamoDB client.
        table_name: Name of the table holding user records.
    """

    def __init__(self, client: Any, table_name: str) -> None:
        self._client = client
        self._table_name = table_name

    @property
    def table_name(self) -> str:
        return self._table_name

    def ensure_schema(self) -> None:
        """Create the users table with ``id`` as partition key.

        PAY_PER_REQUEST billing avoids provisioning capacity. A table that
        already exists is treated as success.

        Raises:
            UserStoreError: On any other failure.
        """
        try:
            self._client.create_table(
                TableName=self._table_name,
                KeySchema=[{"AttributeName": ATTR_ID, "KeyType": "HASH"}],
                AttributeDefinitions=[
                    {"AttributeName": ATTR_ID, "AttributeType": "S"}
                ],
                BillingMode="PAY_PER_REQUEST",
            )
        except ClientError as exc:
            if _error_code(exc) == TABLE_EXISTS_CODE:
                logger.info("Table %s already exists", self._table_name)
                return
            raise UserStoreError("create_table", str(exc)) from exc
        except BotoCoreError as exc:
            raise UserStoreError("create_table", str(exc)) from exc

        logger.info("Created table %s", self._table_name)

    def create(self, user: User) -> None:
        """Write a user record with PutItem. Overwrites on key collision."""
        try:
            self._client.put_item(TableName=self._table_name, Item=to_item(user))
        except (BotoCoreError, ClientError) as exc:
            raise UserStoreError("put_item", str(exc)) from exc

    def get_by_id(self, user_id: str) -> Optional[User]:
        """Return a user by id via GetItem, or None if absent."""
        try:
            response = self._client.get_item(
                TableName=self._table_name, Key=key_for(user_id)
            )
        except (BotoCoreError, ClientError) as exc:
            raise UserStoreError("get_item", str(exc)) from exc

        item = response.get("Item")
        if not item:
            return None
        return from_item(item)

    def list(self) -> list[User]:
        """Return all users via a full table scan.

        Follows LastEvaluatedKey until the table is exhausted, so cost grows
        with table size. Only suitable for small datasets.
        """
        users: list[User] = []
        try:
            paginator = self._client.get_paginator("scan")
            for page in paginator.paginate(TableName=self._table_name):
                users.extend(from_item(item) for item in page.get("Items", []))
        except (BotoCoreError, ClientError) as exc:
            raise UserStoreError("scan", str(exc)) from exc
        return users

    def update(self, user_id: str, name: str, email: str) -> None:
        """Set name and email on an existing user with UpdateItem.

        The write carries ``attribute_exists(id)`` as condition, so a
        missing user is rejected by DynamoDB instead of being created.

        Raises:
            UserConditionalUpdateError: If the user does not exist.
            UserStoreError: On any other failure.
        """
        condition = ConditionExpressionBuilder().build_expression(
            Attr(ATTR_ID).exists()
        )
        names = {"#name": ATTR_NAME, "#email": ATTR_EMAIL}
        names.update(condition.attribute_name_placeholders)
        values = {
            ":name": serialize_value(name),
            ":email": serialize_value(email),
        }
        values.update(
            {
                placeholder: serialize_value(value)
                for placeholder, value in condition.attribute_value_placeholders.items()
            }
        )

        try:
            self._client.update_item(
                TableName=self._table_name,
                Key=key_for(user_id),
                UpdateExpression=UPDATE_EXPRESSION,
                ConditionExpression=condition.condition_expression,
                ExpressionAttributeNames=names,
                ExpressionAttributeValues=values,
            )
        except ClientError as exc:
            if _error_code(exc) == CONDITION_FAILED_CODE:
                raise UserConditionalUpdateError(user_id) from exc
            raise UserStoreError("update_item", str(exc)) from exc
        except BotoCoreError as exc:
            raise UserStoreError("update_item", str(exc)) from exc

    def delete(self, user_id: str) -> None:
        """Remove a user with DeleteItem. Missing ids are a no-op."""
        try:
            self._client.delete_item(TableName=self._table_name, Key=key_for(user_id))
        except (BotoCoreError, ClientError) as exc:
            raise UserStoreError("delete_item", str(exc)) from exc
