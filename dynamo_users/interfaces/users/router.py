"""
FastAPI router for the users bounded context.

All routes delegate to use cases. No business logic here.
Body decoding is handled by Pydantic schemas.
Error mapping is handled by centralized error handlers.
"""

from fastapi import APIRouter, Depends, Response, status

from dynamo_users.application.users.create_user import CreateUserUseCase
from dynamo_users.application.users.delete_user import DeleteUserUseCase
from dynamo_users.application.users.dtos import (
    CreateUserCommand,
    DeleteUserCommand,
    GetUserQuery,
    UpdateUserCommand,
    UserResult,
)
from dynamo_users.application.users.get_user import GetUserUseCase
from dynamo_users.application.users.list_users import ListUsersUseCase
from dynamo_users.application.users.update_user import UpdateUserUseCase
from dynamo_users.interfaces.users.dependencies import (
    get_create_user_use_case,
    get_delete_user_use_case,
    get_get_user_use_case,
    get_list_users_use_case,
    get_update_user_use_case,
)
from dynamo_users.interfaces.users.schemas import (
    ErrorResponse,
    MessageResponse,
    UserResponse,
    UserWriteRequest,
)

router = APIRouter(prefix="/users", tags=["users"])

UPDATED_MESSAGE = "user updated successfully"


def _to_response(result: UserResult) -> UserResponse:
    return UserResponse(
        id=result.id,
        name=result.name,
        email=result.email,
        created_at=result.created_at,
    )


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Create a user",
)
def create_user(
    request: UserWriteRequest,
    use_case: CreateUserUseCase = Depends(get_create_user_use_case),
) -> UserResponse:
    """Register a user and return it with its generated id."""
    result = use_case.execute(
        CreateUserCommand(name=request.name, email=request.email)
    )
    return _to_response(result)


@router.get(
    "",
    response_model=list[UserResponse],
    responses={500: {"model": ErrorResponse}},
    summary="List users",
)
def list_users(
    use_case: ListUsersUseCase = Depends(get_list_users_use_case),
) -> list[UserResponse]:
    """Return every user. Not paginated."""
    return [_to_response(r) for r in use_case.execute()]


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Get a user",
)
def get_user(
    user_id: str,
    use_case: GetUserUseCase = Depends(get_get_user_use_case),
) -> UserResponse:
    """Return a single user by id."""
    return _to_response(use_case.execute(GetUserQuery(user_id=user_id)))


@router.put(
    "/{user_id}",
    response_model=MessageResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Update a user",
)
def update_user(
    user_id: str,
    request: UserWriteRequest,
    use_case: UpdateUserUseCase = Depends(get_update_user_use_case),
) -> MessageResponse:
    """Replace name and email of an existing user."""
    use_case.execute(
        UpdateUserCommand(user_id=user_id, name=request.name, email=request.email)
    )
    return MessageResponse(message=UPDATED_MESSAGE)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={500: {"model": ErrorResponse}},
    summary="Delete a user",
)
def delete_user(
    user_id: str,
    use_case: DeleteUserUseCase = Depends(get_delete_user_use_case),
) -> Response:
    """Delete a user. Unknown ids succeed as well."""
    use_case.execute(DeleteUserCommand(user_id=user_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
