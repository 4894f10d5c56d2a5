"""Unit tests for user command handlers.

Architecture:
- Repository mocked with AsyncMock
- Password and token services mocked with MagicMock (sync protocols)
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from uuid_extensions import uuid7

from src.application.commands.handlers.user_handlers import (
    ChangePasswordHandler,
    DeleteUserHandler,
    LoginUserHandler,
    RegisterUserHandler,
    UpdateUserHandler,
    ValidatePasswordHandler,
)
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
    NotFoundError,
    ValidationError,
)
from src.core.result import Failure, Success
from tests.conftest import make_user


@pytest.fixture
def user_repo():
    repo = AsyncMock()
    repo.find_by_email.return_value = None
    return repo


@pytest.fixture
def password_service():
    service = MagicMock()
    service.hash_password.return_value = "$2b$12$hashed"
    service.verify_password.return_value = True
    return service


@pytest.mark.unit
class TestRegisterUserHandler:
    async def test_register_success(self, user_repo, password_service):
        # Arrange
        handler = RegisterUserHandler(
            user_repo=user_repo,
            password_service=password_service,
            logger=MagicMock(),
        )

        # Act
        result = await handler.handle(
            RegisterUser(
                email="Ada@Ledger.io",
                password="correct horse",
                first_name=" Ada ",
            )
        )

        # Assert
        assert isinstance(result, Success)
        user = result.value
        assert user.email == "ada@ledger.io"
        assert user.first_name == "Ada"
        assert user.password_hash == "$2b$12$hashed"
        password_service.hash_password.assert_called_once_with("correct horse")
        user_repo.save.assert_awaited_once_with(user)

    async def test_invalid_email(self, user_repo, password_service):
        handler = RegisterUserHandler(
            user_repo=user_repo, password_service=password_service, logger=MagicMock()
        )

        result = await handler.handle(
            RegisterUser(email="not-an-email", password="correct horse")
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, ValidationError)
        assert result.error.code == ErrorCode.INVALID_EMAIL

    async def test_short_password(self, user_repo, password_service):
        handler = RegisterUserHandler(
            user_repo=user_repo, password_service=password_service, logger=MagicMock()
        )

        result = await handler.handle(RegisterUser(email="ada@ledger.io", password="short"))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_PASSWORD
        user_repo.find_by_email.assert_not_awaited()

    async def test_duplicate_email(self, user_repo, password_service):
        user_repo.find_by_email.return_value = make_user()
        handler = RegisterUserHandler(
            user_repo=user_repo, password_service=password_service, logger=MagicMock()
        )

        result = await handler.handle(
            RegisterUser(email="ada@ledger.io", password="correct horse")
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, ConflictError)
        user_repo.save.assert_not_awaited()


@pytest.mark.unit
class TestLoginUserHandler:
    async def test_login_issues_token(self, user_repo, password_service):
        user = make_user()
        user_repo.find_by_email.return_value = user
        token_service = MagicMock()
        token_service.generate_access_token.return_value = "jwt-token"
        handler = LoginUserHandler(
            user_repo=user_repo,
            password_service=password_service,
            token_service=token_service,
            logger=MagicMock(),
        )

        result = await handler.handle(LoginUser(email=" ADA@example.com", password="pw"))

        assert isinstance(result, Success)
        assert result.value.access_token == "jwt-token"
        assert result.value.token_type == "bearer"
        user_repo.find_by_email.assert_awaited_once_with("ada@example.com")
        token_service.generate_access_token.assert_called_once_with(
            user_id=user.id, email=user.email
        )

    @pytest.mark.parametrize("known_user", [True, False])
    async def test_unknown_email_and_wrong_password_look_alike(
        self, user_repo, password_service, known_user
    ):
        if known_user:
            user_repo.find_by_email.return_value = make_user()
            password_service.verify_password.return_value = False
        token_service = MagicMock()
        handler = LoginUserHandler(
            user_repo=user_repo,
            password_service=password_service,
            token_service=token_service,
            logger=MagicMock(),
        )

        result = await handler.handle(LoginUser(email="ada@example.com", password="pw"))

        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthenticationError)
        assert result.error.code == ErrorCode.INVALID_CREDENTIALS
        token_service.generate_access_token.assert_not_called()


@pytest.mark.unit
class TestProfileHandlers:
    async def test_update_profile(self, user_repo):
        user = make_user()
        user_repo.find_by_id.return_value = user
        handler = UpdateUserHandler(user_repo=user_repo, logger=MagicMock())

        result = await handler.handle(UpdateUser(user_id=user.id, last_name=" Byron "))

        assert isinstance(result, Success)
        assert user.last_name == "Byron"
        assert user.first_name == "Ada"

    async def test_update_missing_user(self, user_repo):
        user_repo.find_by_id.return_value = None
        handler = UpdateUserHandler(user_repo=user_repo, logger=MagicMock())

        result = await handler.handle(UpdateUser(user_id=uuid7(), first_name="x"))

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)

    async def test_change_password(self, user_repo, password_service):
        user = make_user()
        user_repo.find_by_id.return_value = user
        password_service.hash_password.return_value = "$2b$12$new"
        handler = ChangePasswordHandler(
            user_repo=user_repo, password_service=password_service, logger=MagicMock()
        )

        result = await handler.handle(
            ChangePassword(
                user_id=user.id, old_password="old-secret", new_password="new-secret"
            )
        )

        assert isinstance(result, Success)
        assert user.password_hash == "$2b$12$new"
        user_repo.update.assert_awaited_once_with(user)

    async def test_change_password_wrong_old(self, user_repo, password_service):
        user = make_user()
        user_repo.find_by_id.return_value = user
        password_service.verify_password.return_value = False
        handler = ChangePasswordHandler(
            user_repo=user_repo, password_service=password_service, logger=MagicMock()
        )

        result = await handler.handle(
            ChangePassword(user_id=user.id, old_password="nope", new_password="new-secret")
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthenticationError)
        user_repo.update.assert_not_awaited()

    async def test_delete_requires_password(self, user_repo, password_service):
        user = make_user()
        user_repo.find_by_id.return_value = user
        password_service.verify_password.return_value = False
        handler = DeleteUserHandler(
            user_repo=user_repo, password_service=password_service, logger=MagicMock()
        )

        result = await handler.handle(DeleteUser(user_id=user.id, password="nope"))

        assert isinstance(result, Failure)
        user_repo.delete.assert_not_awaited()


@pytest.mark.unit
class TestValidatePasswordHandler:
    async def test_matching_password(self, user_repo, password_service):
        user = make_user()
        user_repo.find_by_id.return_value = user
        handler = ValidatePasswordHandler(
            user_repo=user_repo, password_service=password_service
        )

        result = await handler.handle(
            ValidatePassword(user_id=user.id, password="correct-horse")
        )

        assert isinstance(result, Success)
        password_service.verify_password.assert_called_once_with(
            "correct-horse", user.password_hash
        )

    async def test_mismatch_is_authentication_error(self, user_repo, password_service):
        user_repo.find_by_id.return_value = make_user()
        password_service.verify_password.return_value = False
        handler = ValidatePasswordHandler(
            user_repo=user_repo, password_service=password_service
        )

        result = await handler.handle(ValidatePassword(user_id=uuid7(), password="x"))

        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthenticationError)

    async def test_unknown_user(self, user_repo, password_service):
        user_repo.find_by_id.return_value = None
        handler = ValidatePasswordHandler(
            user_repo=user_repo, password_service=password_service
        )

        result = await handler.handle(ValidatePassword(user_id=uuid7(), password="x"))

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)
