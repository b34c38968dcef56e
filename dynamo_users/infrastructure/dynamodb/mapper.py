"""
Adapter: User record mapping.

Converts between the User entity and DynamoDB's attribute-value wire
format. Pure and stateless; no validation beyond what is needed to
rebuild the entity.
"""

from typing import Any

from boto3.dynamodb.types import TypeDeserializer, TypeSerializer

from dynamo_users.domain.users.entities import User
from dynamo_users.domain.users.errors import UserSerializationError

ATTR_ID = "id"
ATTR_NAME = "name"
ATTR_EMAIL = "email"
ATTR_CREATED_AT = "created_at"

_serializer = TypeSerializer()
_deserializer = TypeDeserializer()


def serialize_value(value: Any) -> dict[str, Any]:
    """Encode a single Python value as a DynamoDB attribute value."""
    return _serializer.serialize(value)


def key_for(user_id: str) -> dict[str, dict[str, Any]]:
    """Return the primary key of a user record."""
    return {ATTR_ID: serialize_value(user_id)}


def to_item(user: User) -> dict[str, dict[str, Any]]:
    """Convert a User into a DynamoDB item."""
    return {
        ATTR_ID: serialize_value(user.id),
        ATTR_NAME: serialize_value(user.name),
        ATTR_EMAIL: serialize_value(user.email),
        ATTR_CREATED_AT: serialize_value(user.created_at),
    }


def from_item(item: dict[str, dict[str, Any]]) -> User:
    """Convert a DynamoDB item into a User.

    Raises:
        UserSerializationError: If an attribute is missing or not decodable.
    """
    try:
        plain = {key: _deserializer.deserialize(value) for key, value in item.items()}
        return User(
            id=plain[ATTR_ID],
            name=plain[ATTR_NAME],
            email=plain[ATTR_EMAIL],
            created_at=plain[ATTR_CREATED_AT],
        )
    except KeyError as exc:
        raise UserSerializationError(f"missing attribute {exc}") from exc
    except (TypeError, ValueError) as exc:
        raise UserSerializationError(str(exc)) from exc
