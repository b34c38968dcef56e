"""
Domain-specific errors for the users bounded context.

All errors raised from the domain and the repository adapter are defined
here and carry an ErrorKind. The interface layer maps kinds to HTTP
responses, so it never depends on boto3 exception types.
No framework imports allowed.
"""

from enum import Enum


class ErrorKind(Enum):
    """Closed set of failure categories known to the users context."""

    INVALID_INPUT = "invalid_input"
    NOT_FOUND = "not_found"
    CONDITIONAL_FAILURE = "conditional_failure"
    STORE_UNAVAILABLE = "store_unavailable"
    SERIALIZATION_FAILURE = "serialization_failure"


class UserDomainError(Exception):
    """Base error for all users domain errors."""

    kind = ErrorKind.STORE_UNAVAILABLE

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class InvalidUserInputError(UserDomainError):
    """Raised when name or email is blank."""

    kind = ErrorKind.INVALID_INPUT

    def __init__(self, message: str = "name and email are required") -> None:
        super().__init__(message)


class UserNotFoundError(UserDomainError):
    """Raised when no user exists for the requested id."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, user_id: str) -> None:
        super().__init__(f"User not found: {user_id}")
        self.user_id = user_id


class UserConditionalUpdateError(UserDomainError):
    """Raised when an update targets a user that does not exist."""

    kind = ErrorKind.CONDITIONAL_FAILURE

    def __init__(self, user_id: str) -> None:
        super().__init__(f"Update precondition failed for user: {user_id}")
        self.user_id = user_id


class UserStoreError(UserDomainError):
    """Raised when the backing store cannot complete an operation."""

    kind = ErrorKind.STORE_UNAVAILABLE

    def __init__(self, operation: str, reason: str) -> None:
        super().__init__(f"Store operation '{operation}' failed: {reason}")
        self.operation = operation
        self.reason = reason


class UserSerializationError(UserDomainError):
    """Raised when a stored record cannot be converted to or from a User."""

    kind = ErrorKind.SERIALIZATION_FAILURE

    def __init__(self, reason: str) -> None:
        super().__init__(f"User record serialization failed: {reason}")
        self.reason = reason
