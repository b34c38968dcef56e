"""
Dependency injection for the users bounded context.

Provides FastAPI dependency functions that wire the repository adapter
held on ``app.state`` into use cases via constructor injection.
Tests swap the repository by overriding ``get_user_repository``.
"""

from fastapi import Depends, Request

from dynamo_users.application.users.create_user import CreateUserUseCase
from dynamo_users.application.users.delete_user import DeleteUserUseCase
from dynamo_users.application.users.get_user import GetUserUseCase
from dynamo_users.application.users.list_users import ListUsersUseCase
from dynamo_users.application.users.update_user import UpdateUserUseCase
from dynamo_users.domain.users.ports import UserRepository


def get_user_repository(request: Request) -> UserRepository:
    """Return the repository built by the application factory."""
    return request.app.state.user_repository


def get_create_user_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
) -> CreateUserUseCase:
    """Build CreateUserUseCase with its infrastructure dependencies."""
    return CreateUserUseCase(user_repo=user_repo)


def get_get_user_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
) -> GetUserUseCase:
    """Build GetUserUseCase with its infrastructure dependencies."""
    return GetUserUseCase(user_repo=user_repo)


def get_list_users_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
) -> ListUsersUseCase:
    """Build ListUsersUseCase with its infrastructure dependencies."""
    return ListUsersUseCase(user_repo=user_repo)


def get_update_user_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
) -> UpdateUserUseCase:
    """Build UpdateUserUseCase with its infrastructure dependencies."""
    return UpdateUserUseCase(user_repo=user_repo)


def get_delete_user_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
) -> DeleteUserUseCase:
    """Build DeleteUserUseCase with its infrastructure dependencies."""
    return DeleteUserUseCase(user_repo=user_repo)
