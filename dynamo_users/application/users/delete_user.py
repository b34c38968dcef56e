"""
Use case: Delete a user.

Input: DeleteUserCommand (user_id)
Output: None
Side effects: Removes one record from the user repository.
Failure cases: UserStoreError. Deleting an unknown id succeeds.
"""

import logging

from dynamo_users.application.users.dtos import DeleteUserCommand
from dynamo_users.domain.users.ports import UserRepository

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    """Orchestrates idempotent user deletion."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self, command: DeleteUserCommand) -> None:
        self._user_repo.delete(command.user_id)
        logger.info("Deleted user id=%s", command.user_id)
