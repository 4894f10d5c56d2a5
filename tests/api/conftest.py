"""Shared fixtures for API tests.

Every test runs as an authenticated caller unless it removes the
``get_current_user`` override itself. Handlers are replaced per test via
``override_handler``; overrides are cleared after each test.
"""

from collections.abc import Iterator
from typing import Any
from uuid import UUID

import pytest
from fastapi.testclient import TestClient
from uuid_extensions import uuid7

from src.core.container import handler_factory
from src.main import app
from src.presentation.routers.api.middleware.auth_dependencies import (
    CurrentUser,
    get_current_user,
)


class MockHandler:
    """Handler double returning a fixed Result and recording queries."""

    def __init__(self, result: Any) -> None:
        self._result = result
        self.calls: list[Any] = []

    async def handle(self, message: Any) -> Any:
        self.calls.append(message)
        return self._result


@pytest.fixture
def mock_user_id() -> UUID:
    """Provide consistent user ID for tests."""
    return uuid7()


@pytest.fixture(autouse=True)
def override_auth(mock_user_id) -> Iterator[None]:
    """Override authentication for all tests."""
    user = CurrentUser(user_id=mock_user_id, email="ada@example.com")

    async def mock_get_current_user() -> CurrentUser:
        return user

    app.dependency_overrides[get_current_user] = mock_get_current_user
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def override_handler():
    """Install a MockHandler for a handler class.

    Usage:
        handler = override_handler(GetAccountHandler, Success(value=account))
        client.get(...)
        assert handler.calls[0].account_id == account.id
    """

    def _override(handler_class: type, result: Any) -> MockHandler:
        mock = MockHandler(result)
        app.dependency_overrides[handler_factory(handler_class)] = lambda: mock
        return mock

    return _override


@pytest.fixture
def client() -> TestClient:
    """Provide test client."""
    return TestClient(app)
