"""Auth resource handlers.

Handlers:
    register         - Create a user (public)
    login            - Exchange credentials for a JWT (public)
    get_me           - Current user's profile
    update_me        - Update profile fields
    delete_me        - Delete the user (password confirmation)
    change_password  - Replace the password
"""

from fastapi import Depends, Request, status
from fastapi.responses import JSONResponse, Response

from src.application.commands.handlers.user_handlers import (
    ChangePasswordHandler,
    DeleteUserHandler,
    LoginUserHandler,
    RegisterUserHandler,
    UpdateUserHandler,
)
from src.application.commands.user_commands import (
    ChangePassword,
    DeleteUser,
    LoginUser,
    RegisterUser,
    UpdateUser,
)
from src.application.queries.handlers.user_handlers import GetUserHandler
from src.application.queries.user_queries import GetUser
from src.core.container import handler_factory
from src.core.result import Failure, Success
from src.presentation.routers.api.middleware.auth_dependencies import AuthenticatedUser
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.auth_schemas import (
    ChangePasswordRequest,
    DeleteAccountRequest,
    LoginRequest,
    RegisterRequest,
    TokenResponse,
    UpdateProfileRequest,
    UserResponse,
)
from src.schemas.common_schemas import MessageResponse


async def register(
    request: Request,
    data: RegisterRequest,
    handler: RegisterUserHandler = Depends(handler_factory(RegisterUserHandler)),
) -> UserResponse | JSONResponse:
    """Register a new user.

    POST /api/v1/auth/register → 201 Created
    """
    command = RegisterUser(
        email=data.email,
        password=data.password,
        first_name=data.first_name,
        last_name=data.last_name,
    )
    match await handler.handle(command):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success(value=user):
            return UserResponse.from_entity(user)


async def login(
    request: Request,
    data: LoginRequest,
    handler: LoginUserHandler = Depends(handler_factory(LoginUserHandler)),
) -> TokenResponse | JSONResponse:
    """Authenticate and issue an access token.

    POST /api/v1/auth/login → 200 OK
    """
    match await handler.handle(LoginUser(email=data.email, password=data.password)):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success(value=result):
            return TokenResponse(
                access_token=result.access_token,
                token_type=result.token_type,
                user=UserResponse.from_entity(result.user),
            )


async def get_me(
    request: Request,
    current_user: AuthenticatedUser,
    handler: GetUserHandler = Depends(handler_factory(GetUserHandler)),
) -> UserResponse | JSONResponse:
    """GET /api/v1/auth/me → 200 OK"""
    match await handler.handle(GetUser(user_id=current_user.user_id)):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success(value=user):
            return UserResponse.from_entity(user)


async def update_me(
    request: Request,
    current_user: AuthenticatedUser,
    data: UpdateProfileRequest,
    handler: UpdateUserHandler = Depends(handler_factory(UpdateUserHandler)),
) -> UserResponse | JSONResponse:
    """PUT /api/v1/auth/me → 200 OK"""
    command = UpdateUser(
        user_id=current_user.user_id,
        first_name=data.first_name,
        last_name=data.last_name,
    )
    match await handler.handle(command):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success(value=user):
            return UserResponse.from_entity(user)


async def delete_me(
    request: Request,
    current_user: AuthenticatedUser,
    data: DeleteAccountRequest,
    handler: DeleteUserHandler = Depends(handler_factory(DeleteUserHandler)),
) -> Response:
    """Delete the caller and everything they own.

    DELETE /api/v1/auth/me → 204 No Content
    """
    command = DeleteUser(user_id=current_user.user_id, password=data.password)
    match await handler.handle(command):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success():
            return Response(status_code=status.HTTP_204_NO_CONTENT)


async def change_password(
    request: Request,
    current_user: AuthenticatedUser,
    data: ChangePasswordRequest,
    handler: ChangePasswordHandler = Depends(handler_factory(ChangePasswordHandler)),
) -> MessageResponse | JSONResponse:
    """PUT /api/v1/auth/change-password → 200 OK"""
    command = ChangePassword(
        user_id=current_user.user_id,
        old_password=data.old_password,
        new_password=data.new_password,
    )
    match await handler.handle(command):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success():
            return MessageResponse(message="Password changed successfully")
