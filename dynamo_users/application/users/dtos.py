"""
Data Transfer Objects for the users application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass

from dynamo_users.domain.users.entities import User


@dataclass(frozen=True)
class CreateUserCommand:
    """Input DTO for registering a user.

    Attributes:
        name: Display name. Must not be blank.
        email: Contact email. Must not be blank.
    """

    name: str
    email: str


@dataclass(frozen=True)
class UpdateUserCommand:
    """Input DTO for replacing a user's name and email.

    Attributes:
        user_id: Identifier of the user to update.
        name: New display name. Must not be blank.
        email: New contact email. Must not be blank.
    """

    user_id: str
    name: str
    email: str


@dataclass(frozen=True)
class GetUserQuery:
    """Input DTO for fetching a single user."""

    user_id: str


@dataclass(frozen=True)
class DeleteUserCommand:
    """Input DTO for deleting a user."""

    user_id: str


@dataclass(frozen=True)
class UserResult:
    """Output DTO for a user.

    Attributes:
        id: Server-generated identifier.
        name: Display name.
        email: Contact email.
        created_at: RFC 3339 creation timestamp.
    """

    id: str
    name: str
    email: str
    created_at: str

    @classmethod
    def from_entity(cls, user: User) -> "UserResult":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            created_at=user.created_at,
        )
