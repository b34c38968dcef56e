"""
Use case: Fetch a single user by id.

Input: GetUserQuery (user_id)
Output: UserResult
Side effects: None (read-only query).
Failure cases: UserNotFoundError, UserStoreError.
"""

import logging

from dynamo_users.application.users.dtos import GetUserQuery, UserResult
from dynamo_users.domain.users.errors import UserNotFoundError
from dynamo_users.domain.users.ports import UserRepository

logger = logging.getLogger(__name__)


class GetUserUseCase:
    """Orchestrates a point lookup of a user."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self, query: GetUserQuery) -> UserResult:
        """Run the get user use case.

        Raises:
            UserNotFoundError: If the repository has no such user.
        """
        user = self._user_repo.get_by_id(query.user_id)
        if user is None:
            logger.info("User id=%s not found", query.user_id)
            raise UserNotFoundError(query.user_id)
        return UserResult.from_entity(user)
