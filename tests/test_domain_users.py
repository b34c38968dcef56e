"""
Tests for the users domain layer.

Tests the User entity, input rules and error classes in isolation.
No external dependencies or IO required.
"""

from datetime import datetime, timezone
from uuid import UUID

import pytest

from dynamo_users.domain.users.entities import User
from dynamo_users.domain.users.errors import (
    ErrorKind,
    InvalidUserInputError,
    UserConditionalUpdateError,
    UserDomainError,
    UserNotFoundError,
    UserSerializationError,
    UserStoreError,
)
from dynamo_users.domain.users.validation import ensure_user_fields


class TestUserEntity:
    """Tests for the User entity."""

    def test_register_generates_identity_and_timestamp(self) -> None:
        user = User.register(name="Ana", email="ana@x.com")

        assert user.name == "Ana"
        assert user.email == "ana@x.com"
        assert UUID(user.id).version == 4
        created = datetime.fromisoformat(user.created_at)
        assert created.tzinfo is not None
        assert abs((datetime.now(timezone.utc) - created).total_seconds()) < 60

    def test_register_gives_distinct_ids(self) -> None:
        first = User.register(name="Ana", email="ana@x.com")
        second = User.register(name="Ana", email="ana@x.com")
        assert first.id != second.id

    def test_user_is_immutable(self) -> None:
        user = User.register(name="Ana", email="ana@x.com")
        with pytest.raises(AttributeError):
            user.name = "Other"  # type: ignore[misc]


class TestEnsureUserFields:
    """Tests for the blank-field rule."""

    def test_accepts_non_blank_fields(self) -> None:
        ensure_user_fields("Ana", "ana@x.com")

    @pytest.mark.parametrize(
        ("name", "email"),
        [
            ("", "ana@x.com"),
            ("Ana", ""),
            ("   ", "ana@x.com"),
            ("Ana", "\t\n"),
            (None, "ana@x.com"),
            ("Ana", None),
        ],
    )
    def test_rejects_blank_fields(self, name, email) -> None:
        with pytest.raises(InvalidUserInputError):
            ensure_user_fields(name, email)


class TestDomainErrors:
    """Tests for domain error classes."""

    def test_kinds(self) -> None:
        assert InvalidUserInputError().kind is ErrorKind.INVALID_INPUT
        assert UserNotFoundError("u1").kind is ErrorKind.NOT_FOUND
        assert UserConditionalUpdateError("u1").kind is ErrorKind.CONDITIONAL_FAILURE
        assert UserStoreError("scan", "timeout").kind is ErrorKind.STORE_UNAVAILABLE
        assert UserSerializationError("bad").kind is ErrorKind.SERIALIZATION_FAILURE

    def test_all_errors_share_base(self) -> None:
        for error in (
            InvalidUserInputError(),
            UserNotFoundError("u1"),
            UserConditionalUpdateError("u1"),
            UserStoreError("scan", "timeout"),
            UserSerializationError("bad"),
        ):
            assert isinstance(error, UserDomainError)

    def test_not_found_message_contains_id(self) -> None:
        error = UserNotFoundError("abc-123")
        assert "abc-123" in error.message
        assert error.user_id == "abc-123"

    def test_store_error_keeps_operation_context(self) -> None:
        error = UserStoreError("put_item", "connection refused")
        assert error.operation == "put_item"
        assert "put_item" in str(error)
        assert "connection refused" in str(error)
