"""User command handlers (identity-provider boundary).

Registration, login and profile upkeep. Password hashing and token
issuance are delegated to the injected identity services; the handlers
only orchestrate and map outcomes to the error taxonomy.

Security:
    - Unknown email and wrong password produce the same error
    - Password changes and account deletion re-verify the current password
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from uuid_extensions import uuid7

from src.application.commands.user_commands import (
    ChangePassword,
    DeleteUser,
    LoginUser,
    RegisterUser,
    UpdateUser,
    ValidatePassword,
)
from src.core.enums import ErrorCode
from src.core.errors import (
    AuthenticationError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from src.core.result import Failure, Result, Success
from src.domain.entities.user import User
from src.domain.errors import UserError
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
from src.domain.protocols.token_generation_protocol import TokenGenerationProtocol
from src.domain.protocols.user_repository import UserRepository
from src.domain.value_objects.email import Email
from src.domain.value_objects.password import Password


@dataclass(frozen=True, kw_only=True)
class LoginResult:
    """Access token issued on successful login."""

    access_token: str
    token_type: str
    user: User


def _invalid_credentials() -> AuthenticationError:
    return AuthenticationError(
        code=ErrorCode.INVALID_CREDENTIALS,
        message=UserError.INVALID_CREDENTIALS,
    )


def _user_not_found(user_id: UUID) -> NotFoundError:
    return NotFoundError(
        code=ErrorCode.USER_NOT_FOUND,
        message=UserError.USER_NOT_FOUND,
        resource_type="User",
        resource_id=str(user_id),
    )


def _check_password_policy(password: str, field: str) -> ValidationError | None:
    try:
        Password(password)
    except ValueError as e:
        return ValidationError(
            code=ErrorCode.INVALID_PASSWORD,
            message=str(e),
            field=field,
        )
    return None


class RegisterUserHandler:
    """Handler for RegisterUser command.

    Flow:
    1. Validate email format and password length
    2. Check email uniqueness
    3. Hash password
    4. Persist user
    """

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._password_service = password_service
        self._logger = logger

    async def handle(self, cmd: RegisterUser) -> Result[User, DomainError]:
        """Register a new user.

        Returns:
            Success(User): Registered user.
            Failure(ValidationError): Invalid email or short password.
            Failure(ConflictError): Email already registered.
        """
        try:
            email = Email(cmd.email)
        except ValueError as e:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_EMAIL, message=str(e), field="email"
                )
            )
        if error := _check_password_policy(cmd.password, "password"):
            return Failure(error=error)

        if await self._user_repo.find_by_email(email.value) is not None:
            return Failure(
                error=ConflictError(
                    code=ErrorCode.EMAIL_ALREADY_EXISTS,
                    message=UserError.EMAIL_ALREADY_EXISTS,
                    resource_type="User",
                    conflicting_field="email",
                )
            )

        now = datetime.now(UTC)
        user = User(
            id=uuid7(),
            email=email.value,
            password_hash=self._password_service.hash_password(cmd.password),
            first_name=cmd.first_name.strip(),
            last_name=cmd.last_name.strip(),
            created_at=now,
            updated_at=now,
        )
        await self._user_repo.save(user)

        self._logger.info("user_registered", user_id=str(user.id))
        return Success(value=user)


class LoginUserHandler:
    """Handler for LoginUser command.

    Verifies credentials and asks the token service for an access token.
    No session state is kept.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        token_service: TokenGenerationProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._password_service = password_service
        self._token_service = token_service
        self._logger = logger

    async def handle(self, cmd: LoginUser) -> Result[LoginResult, DomainError]:
        user = await self._user_repo.find_by_email(cmd.email.strip().lower())
        if user is None or not self._password_service.verify_password(
            cmd.password, user.password_hash
        ):
            self._logger.warning("login_failed")
            return Failure(error=_invalid_credentials())

        token = self._token_service.generate_access_token(
            user_id=user.id, email=user.email
        )
        self._logger.info("user_logged_in", user_id=str(user.id))
        return Success(
            value=LoginResult(access_token=token, token_type="bearer", user=user)
        )


class UpdateUserHandler:
    """Handler for UpdateUser command."""

    def __init__(self, user_repo: UserRepository, logger: LoggerProtocol) -> None:
        self._user_repo = user_repo
        self._logger = logger

    async def handle(self, cmd: UpdateUser) -> Result[User, DomainError]:
        user = await self._user_repo.find_by_id(cmd.user_id)
        if user is None:
            return Failure(error=_user_not_found(cmd.user_id))

        user.update_profile(
            first_name=cmd.first_name.strip() if cmd.first_name is not None else None,
            last_name=cmd.last_name.strip() if cmd.last_name is not None else None,
        )
        await self._user_repo.update(user)
        self._logger.info("user_updated", user_id=str(user.id))
        return Success(value=user)


class ChangePasswordHandler:
    """Handler for ChangePassword command."""

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._password_service = password_service
        self._logger = logger

    async def handle(self, cmd: ChangePassword) -> Result[None, DomainError]:
        """Replace the password once the current one is re-verified.

        Returns:
            Success(None): Password changed.
            Failure(ValidationError): New password too short.
            Failure(AuthenticationError): Current password incorrect.
            Failure(NotFoundError): User no longer exists.
        """
        if error := _check_password_policy(cmd.new_password, "new_password"):
            return Failure(error=error)

        user = await self._user_repo.find_by_id(cmd.user_id)
        if user is None:
            return Failure(error=_user_not_found(cmd.user_id))
        if not self._password_service.verify_password(
            cmd.old_password, user.password_hash
        ):
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.INVALID_CREDENTIALS,
                    message=UserError.INVALID_OLD_PASSWORD,
                )
            )

        user.change_password_hash(self._password_service.hash_password(cmd.new_password))
        await self._user_repo.update(user)
        self._logger.info("password_changed", user_id=str(user.id))
        return Success(value=None)


class DeleteUserHandler:
    """Handler for DeleteUser command (password confirmation required)."""

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._password_service = password_service
        self._logger = logger

    async def handle(self, cmd: DeleteUser) -> Result[None, DomainError]:
        user = await self._user_repo.find_by_id(cmd.user_id)
        if user is None:
            return Failure(error=_user_not_found(cmd.user_id))
        if not self._password_service.verify_password(cmd.password, user.password_hash):
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.INVALID_CREDENTIALS,
                    message=UserError.INVALID_PASSWORD_CONFIRMATION,
                )
            )

        await self._user_repo.delete(user.id)
        self._logger.info("user_deleted", user_id=str(user.id))
        return Success(value=None)


class ValidatePasswordHandler:
    """Handler for ValidatePassword command."""

    def __init__(
        self, user_repo: UserRepository, password_service: PasswordHashingProtocol
    ) -> None:
        self._user_repo = user_repo
        self._password_service = password_service

    async def handle(self, cmd: ValidatePassword) -> Result[None, DomainError]:
        user = await self._user_repo.find_by_id(cmd.user_id)
        if user is None:
            return Failure(error=_user_not_found(cmd.user_id))
        if not self._password_service.verify_password(cmd.password, user.password_hash):
            return Failure(error=_invalid_credentials())
        return Success(value=None)
