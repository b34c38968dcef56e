"""
Use case: List every user.

Input: None
Output: list[UserResult]
Side effects: None (read-only query). Performs a full scan of the store.
Failure cases: UserStoreError, UserSerializationError.
"""

from dynamo_users.application.users.dtos import UserResult
from dynamo_users.domain.users.ports import UserRepository


class ListUsersUseCase:
    """Returns all stored users without pagination."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self) -> list[UserResult]:
        return [UserResult.from_entity(user) for user in self._user_repo.list()]
