"""
Domain entities for the users bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import uuid4


def new_user_id() -> str:
    """Return a fresh opaque user identifier."""
    return str(uuid4())


def utc_timestamp() -> str:
    """Return the current UTC time as an RFC 3339 string."""
    return datetime.now(timezone.utc).replace(microsecond=0).isoformat()


@dataclass(frozen=True)
class User:
    """A registered user.

    ``id`` and ``created_at`` are fixed at creation. Only ``name`` and
    ``email`` change afterwards, and always together.
    """

    id: str
    name: str
    email: str
    created_at: str

    @classmethod
    def register(cls, name: str, email: str) -> "User":
        """Create a new user with a generated id and creation timestamp."""
        return cls(
            id=new_user_id(),
            name=name,
            email=email,
            created_at=utc_timestamp(),
        )
