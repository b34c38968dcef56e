"""
Use case: Replace the name and email of an existing user.

Input: UpdateUserCommand (user_id, name, email)
Output: None
Side effects: Conditionally updates one record in the user repository.
Failure cases: InvalidUserInputError, UserConditionalUpdateError, UserStoreError.
"""

import logging

from dynamo_users.application.users.dtos import UpdateUserCommand
from dynamo_users.domain.users.ports import UserRepository
from dynamo_users.domain.users.validation import ensure_user_fields

logger = logging.getLogger(__name__)


class UpdateUserUseCase:
    """Orchestrates a user update.

    Existence is not checked here: the repository applies the update
    only if the record exists at write time.
    """

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self, command: UpdateUserCommand) -> None:
        """Run the update user use case.

        Raises:
            InvalidUserInputError: If name or email is blank.
            UserConditionalUpdateError: If the user does not exist.
        """
        ensure_user_fields(command.name, command.email)

        self._user_repo.update(
            user_id=command.user_id,
            name=command.name,
            email=command.email,
        )
        logger.info("Updated user id=%s", command.user_id)
