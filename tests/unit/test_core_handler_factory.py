"""Unit tests for handler_factory auto-wiring."""

from unittest.mock import MagicMock, patch

import pytest

from src.application.commands.handlers.account_handlers import CreateAccountHandler
from src.application.commands.handlers.user_handlers import LoginUserHandler
from src.application.queries.handlers.account_handlers import (
    GetAccountWithAssetsHandler,
)
from src.core.container.handler_factory import (
    create_handler,
    get_type_name,
    handler_factory,
)
from src.domain.protocols.account_repository import AccountRepository
from src.infrastructure.persistence.repositories import (
    AccountRepository as SQLAccountRepository,
)
from src.infrastructure.persistence.repositories import (
    AssetRepository as SQLAssetRepository,
)


class _Unresolvable:
    def __init__(self, clock: MagicMock) -> None:
        self.clock = clock


@pytest.mark.unit
class TestGetTypeName:
    def test_plain_class(self):
        assert get_type_name(AccountRepository) == "AccountRepository"

    def test_optional_is_unwrapped(self):
        assert get_type_name(AccountRepository | None) == "AccountRepository"


@pytest.mark.unit
class TestCreateHandler:
    def test_repositories_bound_to_session(self):
        session = MagicMock()

        handler = create_handler(GetAccountWithAssetsHandler, session)

        assert isinstance(handler._asset_repo, SQLAssetRepository)
        assert isinstance(handler._verifier._account_repo, SQLAccountRepository)

    def test_singletons_resolved_from_container(self):
        logger = MagicMock()
        password_service = MagicMock()
        token_service = MagicMock()
        factories = {
            "LoggerProtocol": lambda: logger,
            "PasswordHashingProtocol": lambda: password_service,
            "TokenGenerationProtocol": lambda: token_service,
        }

        with patch.dict(
            "src.core.container.handler_factory.SINGLETON_FACTORIES", factories
        ):
            handler = create_handler(LoginUserHandler, MagicMock())

        assert handler._logger is logger
        assert handler._password_service is password_service
        assert handler._token_service is token_service

    def test_overrides_take_precedence(self):
        account_repo = MagicMock()
        logger = MagicMock()

        handler = create_handler(
            CreateAccountHandler, MagicMock(), account_repo=account_repo, logger=logger
        )

        assert handler._account_repo is account_repo
        assert handler._logger is logger

    def test_unknown_dependency_raises(self):
        with pytest.raises(ValueError, match="Cannot resolve dependency 'clock'"):
            create_handler(_Unresolvable, MagicMock())


@pytest.mark.unit
def test_handler_factory_is_cached_per_class():
    assert handler_factory(CreateAccountHandler) is handler_factory(
        CreateAccountHandler
    )
    assert handler_factory(CreateAccountHandler) is not handler_factory(
        LoginUserHandler
    )
