"""
Use case: Register a new user.

Input: CreateUserCommand (name, email)
Output: UserResult
Side effects: Writes one record to the user repository.
Failure cases: InvalidUserInputError, UserStoreError.
"""

import logging

from dynamo_users.application.users.dtos import CreateUserCommand, UserResult
from dynamo_users.domain.users.entities import User
from dynamo_users.domain.users.ports import UserRepository
from dynamo_users.domain.users.validation import ensure_user_fields

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """Orchestrates user registration.

    Validates the input before any IO, assigns identity and
    creation timestamp, then persists the new user.
    """

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self, command: CreateUserCommand) -> UserResult:
        """Run the create user use case.

        Args:
            command: Name and email of the user to register.

        Returns:
            The persisted user, including its generated id.

        Raises:
            InvalidUserInputError: If name or email is blank.
        """
        ensure_user_fields(command.name, command.email)

        user = User.register(name=command.name, email=command.email)
        self._user_repo.create(user)

        logger.info("Created user id=%s", user.id)
        return UserResult.from_entity(user)
