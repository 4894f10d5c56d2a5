"""Unit tests for single-entity lookups and scoped listings.

Tests cover:
- Ownership checks on get-by-id (NotFound vs Authorization)
- Account- and asset-scoped listings verify the scope first
- Currency normalization and category pass-through
"""

from unittest.mock import AsyncMock

import pytest
from uuid_extensions import uuid7

from src.application.queries.account_queries import ListAccountsByCurrency
from src.application.queries.asset_queries import GetAsset, ListAssetsByAccount
from src.application.queries.definition_queries import GetDefinition
from src.application.queries.handlers.account_handlers import (
    ListAccountsByCurrencyHandler,
)
from src.application.queries.handlers.asset_handlers import (
    GetAssetHandler,
    ListAssetsByAccountHandler,
)
from src.application.queries.handlers.definition_handlers import GetDefinitionHandler
from src.application.queries.handlers.transaction_handlers import (
    GetTransactionHandler,
    ListTransactionsByAssetHandler,
    ListTransactionsByCategoryHandler,
)
from src.application.queries.transaction_queries import (
    GetTransaction,
    ListTransactionsByAsset,
    ListTransactionsByCategory,
)
from src.core.enums import ErrorCode
from src.core.errors import AuthorizationError, NotFoundError, ValidationError
from src.core.result import Failure, Success
from tests.conftest import make_account, make_asset, make_definition, make_transaction


@pytest.mark.unit
class TestGetTransactionHandler:
    async def test_owner_gets_transaction(self):
        tx = make_transaction()
        repo = AsyncMock()
        repo.find_by_id.return_value = tx

        result = await GetTransactionHandler(transaction_repo=repo).handle(
            GetTransaction(transaction_id=tx.id, user_id=tx.user_id)
        )

        assert result == Success(value=tx)

    async def test_foreign_transaction_is_authorization_error(self):
        repo = AsyncMock()
        repo.find_by_id.return_value = make_transaction()

        result = await GetTransactionHandler(transaction_repo=repo).handle(
            GetTransaction(transaction_id=uuid7(), user_id=uuid7())
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthorizationError)
        assert result.error.code == ErrorCode.RESOURCE_NOT_OWNED

    async def test_missing_transaction(self):
        repo = AsyncMock()
        repo.find_by_id.return_value = None

        result = await GetTransactionHandler(transaction_repo=repo).handle(
            GetTransaction(transaction_id=uuid7(), user_id=uuid7())
        )

        assert isinstance(result.error, NotFoundError)
        assert result.error.code == ErrorCode.TRANSACTION_NOT_FOUND


@pytest.mark.unit
class TestListTransactionsByAssetHandler:
    async def test_pages_with_defaults(self):
        asset = make_asset()
        asset_repo = AsyncMock()
        asset_repo.find_by_id.return_value = asset
        transaction_repo = AsyncMock()
        transaction_repo.find_by_asset_id.return_value = []
        handler = ListTransactionsByAssetHandler(
            transaction_repo=transaction_repo, asset_repo=asset_repo
        )

        result = await handler.handle(
            ListTransactionsByAsset(asset_id=asset.id, user_id=asset.user_id, limit=0)
        )

        assert isinstance(result, Success)
        transaction_repo.find_by_asset_id.assert_awaited_once_with(asset.id, 20, 0)

    async def test_foreign_asset_short_circuits(self):
        asset_repo = AsyncMock()
        asset_repo.find_by_id.return_value = make_asset()
        transaction_repo = AsyncMock()
        handler = ListTransactionsByAssetHandler(
            transaction_repo=transaction_repo, asset_repo=asset_repo
        )

        result = await handler.handle(
            ListTransactionsByAsset(asset_id=uuid7(), user_id=uuid7())
        )

        assert isinstance(result.error, AuthorizationError)
        transaction_repo.find_by_asset_id.assert_not_awaited()


@pytest.mark.unit
async def test_transactions_by_category_pass_through():
    user_id = uuid7()
    tx = make_transaction(user_id=user_id, category="groceries")
    repo = AsyncMock()
    repo.find_by_category.return_value = [tx]

    result = await ListTransactionsByCategoryHandler(transaction_repo=repo).handle(
        ListTransactionsByCategory(user_id=user_id, category="groceries")
    )

    assert result == Success(value=[tx])
    repo.find_by_category.assert_awaited_once_with(user_id, "groceries")


@pytest.mark.unit
class TestAssetLookups:
    async def test_get_asset_owner(self):
        asset = make_asset()
        repo = AsyncMock()
        repo.find_by_id.return_value = asset

        result = await GetAssetHandler(asset_repo=repo).handle(
            GetAsset(asset_id=asset.id, user_id=asset.user_id)
        )

        assert result == Success(value=asset)

    async def test_get_asset_missing(self):
        repo = AsyncMock()
        repo.find_by_id.return_value = None

        result = await GetAssetHandler(asset_repo=repo).handle(
            GetAsset(asset_id=uuid7(), user_id=uuid7())
        )

        assert isinstance(result.error, NotFoundError)
        assert result.error.code == ErrorCode.ASSET_NOT_FOUND

    async def test_list_by_account_requires_owned_account(self):
        account_repo = AsyncMock()
        account_repo.find_by_id.return_value = None
        asset_repo = AsyncMock()
        handler = ListAssetsByAccountHandler(
            asset_repo=asset_repo, account_repo=account_repo
        )

        result = await handler.handle(
            ListAssetsByAccount(account_id=uuid7(), user_id=uuid7())
        )

        assert isinstance(result.error, NotFoundError)
        asset_repo.find_by_account_id.assert_not_awaited()

    async def test_list_by_account(self):
        account = make_account()
        asset = make_asset(user_id=account.user_id, account_id=account.id)
        account_repo = AsyncMock()
        account_repo.find_by_id.return_value = account
        asset_repo = AsyncMock()
        asset_repo.find_by_account_id.return_value = [asset]
        handler = ListAssetsByAccountHandler(
            asset_repo=asset_repo, account_repo=account_repo
        )

        result = await handler.handle(
            ListAssetsByAccount(account_id=account.id, user_id=account.user_id)
        )

        assert result == Success(value=[asset])


@pytest.mark.unit
class TestListAccountsByCurrencyHandler:
    async def test_currency_is_normalized(self):
        user_id = uuid7()
        repo = AsyncMock()
        repo.find_by_currency.return_value = []

        result = await ListAccountsByCurrencyHandler(account_repo=repo).handle(
            ListAccountsByCurrency(user_id=user_id, currency=" usd ")
        )

        assert isinstance(result, Success)
        repo.find_by_currency.assert_awaited_once_with(user_id, "USD")

    async def test_blank_currency_rejected(self):
        repo = AsyncMock()

        result = await ListAccountsByCurrencyHandler(account_repo=repo).handle(
            ListAccountsByCurrency(user_id=uuid7(), currency="  ")
        )

        assert isinstance(result.error, ValidationError)
        assert result.error.field == "currency"
        repo.find_by_currency.assert_not_awaited()


@pytest.mark.unit
class TestGetDefinitionHandler:
    async def test_found(self):
        definition = make_definition()
        repo = AsyncMock()
        repo.find_by_id.return_value = definition

        result = await GetDefinitionHandler(definition_repo=repo).handle(
            GetDefinition(definition_id=definition.id)
        )

        assert result == Success(value=definition)

    async def test_missing(self):
        repo = AsyncMock()
        repo.find_by_id.return_value = None

        result = await GetDefinitionHandler(definition_repo=repo).handle(
            GetDefinition(definition_id=uuid7())
        )

        assert isinstance(result.error, NotFoundError)
        assert result.error.code == ErrorCode.DEFINITION_NOT_FOUND
