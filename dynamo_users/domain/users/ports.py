"""
Port interfaces (ABCs) for the users bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from dynamo_users.domain.users.entities import User


class UserRepository(ABC):
    """Port for persisting and retrieving users.

    Implementations translate backend failures into UserDomainError
    subclasses so callers only deal with ErrorKind values.
    """

    @abstractmethod
    def ensure_schema(self) -> None:
        """Create the backing collection if it does not exist yet.

        An already existing collection is not an error.
        """
        raise NotImplementedError

    @abstractmethod
    def create(self, user: User) -> None:
        """Persist a user, overwriting any record with the same id."""
        raise NotImplementedError

    @abstractmethod
    def get_by_id(self, user_id: str) -> Optional[User]:
        """Return a user by its id, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def list(self) -> list[User]:
        """Return every stored user. Unpaginated."""
        raise NotImplementedError

    @abstractmethod
    def update(self, user_id: str, name: str, email: str) -> None:
        """Replace name and email of an existing user.

        Raises:
            UserConditionalUpdateError: If no user exists for user_id.
        """
        raise NotImplementedError

    @abstractmethod
    def delete(self, user_id: str) -> None:
        """Remove a user. Deleting an unknown id is a no-op."""
        raise NotImplementedError
