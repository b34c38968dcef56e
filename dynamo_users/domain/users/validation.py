"""Input rules shared by the create and update use cases."""

from dynamo_users.domain.users.errors import InvalidUserInputError


def ensure_user_fields(name: str | None, email: str | None) -> None:
    """Reject a name or email that is missing or blank.

    Raises:
        InvalidUserInputError: If either field is empty after trimming.
    """
    if not (name or "").strip() or not (email or "").strip():
        raise InvalidUserInputError()
