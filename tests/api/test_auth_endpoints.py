"""API tests for registration, login and profile endpoints."""

import pytest

from src.application.commands.handlers.user_handlers import (
    ChangePasswordHandler,
    DeleteUserHandler,
    LoginResult,
    LoginUserHandler,
    RegisterUserHandler,
    UpdateUserHandler,
)
from src.application.queries.handlers.user_handlers import GetUserHandler
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError, ConflictError
from src.core.result import Failure, Success
from src.main import app
from src.presentation.routers.api.middleware.auth_dependencies import get_current_user
from tests.conftest import make_user

CREDENTIALS = {"email": "ada@example.com", "password": "correct-horse"}


@pytest.mark.api
class TestRegister:
    def test_register_returns_201_without_password(self, client, override_handler):
        app.dependency_overrides.pop(get_current_user, None)
        user = make_user()
        handler = override_handler(RegisterUserHandler, Success(value=user))

        response = client.post(
            "/api/v1/auth/register", json={**CREDENTIALS, "first_name": "Ada"}
        )

        assert response.status_code == 201
        data = response.json()
        assert data["email"] == "ada@example.com"
        assert "password_hash" not in data
        assert handler.calls[0].first_name == "Ada"
        assert handler.calls[0].last_name == ""

    def test_duplicate_email_is_409(self, client, override_handler):
        override_handler(
            RegisterUserHandler,
            Failure(
                error=ConflictError(
                    code=ErrorCode.EMAIL_ALREADY_EXISTS,
                    message="Email already registered",
                    resource_type="User",
                    conflicting_field="email",
                )
            ),
        )

        response = client.post("/api/v1/auth/register", json=CREDENTIALS)

        assert response.status_code == 409


@pytest.mark.api
class TestLogin:
    def test_login_returns_token(self, client, override_handler):
        app.dependency_overrides.pop(get_current_user, None)
        user = make_user()
        override_handler(
            LoginUserHandler,
            Success(
                value=LoginResult(
                    access_token="header.payload.signature",
                    token_type="bearer",
                    user=user,
                )
            ),
        )

        response = client.post("/api/v1/auth/login", json=CREDENTIALS)

        assert response.status_code == 200
        data = response.json()
        assert data["access_token"] == "header.payload.signature"
        assert data["token_type"] == "bearer"
        assert data["user"]["id"] == str(user.id)

    def test_bad_credentials_are_401(self, client, override_handler):
        override_handler(
            LoginUserHandler,
            Failure(
                error=AuthenticationError(
                    code=ErrorCode.INVALID_CREDENTIALS,
                    message="Invalid email or password",
                )
            ),
        )

        response = client.post("/api/v1/auth/login", json=CREDENTIALS)

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid email or password"


@pytest.mark.api
class TestProfile:
    def test_me_uses_token_subject(self, client, override_handler, mock_user_id):
        handler = override_handler(
            GetUserHandler, Success(value=make_user(user_id=mock_user_id))
        )

        response = client.get("/api/v1/auth/me")

        assert response.status_code == 200
        assert response.json()["id"] == str(mock_user_id)
        assert handler.calls[0].user_id == mock_user_id

    def test_me_requires_token(self, client):
        app.dependency_overrides.pop(get_current_user, None)

        response = client.get("/api/v1/auth/me")

        assert response.status_code == 401

    def test_update_profile(self, client, override_handler, mock_user_id):
        handler = override_handler(
            UpdateUserHandler, Success(value=make_user(user_id=mock_user_id))
        )

        response = client.put("/api/v1/auth/me", json={"last_name": "Byron"})

        assert response.status_code == 200
        assert handler.calls[0].first_name is None
        assert handler.calls[0].last_name == "Byron"

    def test_change_password(self, client, override_handler):
        handler = override_handler(ChangePasswordHandler, Success(value=None))

        response = client.put(
            "/api/v1/auth/change-password",
            json={"old_password": "correct-horse", "new_password": "battery-staple"},
        )

        assert response.status_code == 200
        assert response.json()["message"] == "Password changed successfully"
        assert handler.calls[0].new_password == "battery-staple"

    def test_delete_requires_password_confirmation(self, client, override_handler):
        handler = override_handler(DeleteUserHandler, Success(value=None))

        response = client.request(
            "DELETE", "/api/v1/auth/me", json={"password": "correct-horse"}
        )

        assert response.status_code == 204
        assert handler.calls[0].password == "correct-horse"

    def test_delete_with_wrong_password_is_401(self, client, override_handler):
        override_handler(
            DeleteUserHandler,
            Failure(
                error=AuthenticationError(
                    code=ErrorCode.INVALID_CREDENTIALS, message="Invalid password"
                )
            ),
        )

        response = client.request(
            "DELETE", "/api/v1/auth/me", json={"password": "nope"}
        )

        assert response.status_code == 401
