"""Unit tests for asset command handlers."""

from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest
from uuid_extensions import uuid7

from src.application.commands.asset_commands import (
    CreateAsset,
    UpdateAsset,
    UpdateAssetPrice,
)
from src.application.commands.handlers.asset_handlers import (
    CreateAssetHandler,
    UpdateAssetHandler,
    UpdateAssetPriceHandler,
)
from src.core.enums import ErrorCode
from src.core.errors import AuthorizationError, NotFoundError
from src.core.result import Failure, Success
from src.domain.enums.asset_type import AssetType
from tests.conftest import make_account, make_asset, make_definition


@pytest.fixture
def repos():
    return {
        "asset_repo": AsyncMock(),
        "account_repo": AsyncMock(),
        "definition_repo": AsyncMock(),
    }


@pytest.mark.unit
class TestCreateAssetHandler:
    async def test_create_asset_derives_symbol_price_and_currency(self, repos):
        # Arrange
        account = make_account(currency="EUR")
        definition = make_definition(abbreviation="ETH")
        repos["account_repo"].find_by_id.return_value = account
        repos["definition_repo"].find_by_id.return_value = definition
        handler = CreateAssetHandler(**repos, logger=MagicMock())

        # Act
        result = await handler.handle(
            CreateAsset(
                user_id=account.user_id,
                account_id=account.id,
                definition_id=definition.id,
                asset_type="CRYPTOCURRENCY",
                quantity=Decimal("1.5"),
                purchase_price=Decimal("2000"),
            )
        )

        # Assert
        assert isinstance(result, Success)
        asset = result.value
        assert asset.symbol == "ETH"
        assert asset.asset_type == AssetType.CRYPTOCURRENCY
        assert asset.current_price == Decimal("2000")
        assert asset.currency == "EUR"
        repos["asset_repo"].save.assert_awaited_once_with(asset)

    @pytest.mark.parametrize(
        "overrides,code",
        [
            ({"asset_type": "crypto"}, ErrorCode.INVALID_ASSET_TYPE),
            ({"quantity": Decimal("0")}, ErrorCode.INVALID_QUANTITY),
            ({"purchase_price": Decimal("-1")}, ErrorCode.INVALID_PRICE),
            ({"current_price": Decimal("-1")}, ErrorCode.INVALID_PRICE),
        ],
    )
    async def test_invalid_input(self, repos, overrides, code):
        handler = CreateAssetHandler(**repos, logger=MagicMock())
        fields = {
            "user_id": uuid7(),
            "account_id": uuid7(),
            "definition_id": uuid7(),
            "asset_type": "STOCK",
            "quantity": Decimal("1"),
        }
        fields.update(overrides)

        result = await handler.handle(CreateAsset(**fields))

        assert isinstance(result, Failure)
        assert result.error.code == code
        repos["account_repo"].find_by_id.assert_not_awaited()

    async def test_unknown_definition(self, repos):
        account = make_account()
        repos["account_repo"].find_by_id.return_value = account
        repos["definition_repo"].find_by_id.return_value = None
        handler = CreateAssetHandler(**repos, logger=MagicMock())

        result = await handler.handle(
            CreateAsset(
                user_id=account.user_id,
                account_id=account.id,
                definition_id=uuid7(),
                asset_type="STOCK",
                quantity=Decimal("1"),
            )
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)
        assert result.error.code == ErrorCode.DEFINITION_NOT_FOUND
        repos["asset_repo"].save.assert_not_awaited()

    async def test_foreign_account(self, repos):
        repos["account_repo"].find_by_id.return_value = make_account()
        handler = CreateAssetHandler(**repos, logger=MagicMock())

        result = await handler.handle(
            CreateAsset(
                user_id=uuid7(),
                account_id=uuid7(),
                definition_id=uuid7(),
                asset_type="STOCK",
                quantity=Decimal("1"),
            )
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthorizationError)


@pytest.mark.unit
class TestUpdateAssetHandler:
    async def test_quantity_increase_averages_price(self, repos):
        asset = make_asset(quantity=Decimal("10"), purchase_price=Decimal("100"))
        repos["asset_repo"].find_by_id.return_value = asset
        handler = UpdateAssetHandler(**repos, logger=MagicMock())

        result = await handler.handle(
            UpdateAsset(
                asset_id=asset.id,
                user_id=asset.user_id,
                quantity=Decimal("15"),
                price=Decimal("130"),
            )
        )

        assert isinstance(result, Success)
        assert result.value.purchase_price == Decimal("110")
        repos["asset_repo"].update.assert_awaited_once_with(asset)

    async def test_price_only_update_sets_current_price(self, repos):
        asset = make_asset(current_price=Decimal("80"))
        repos["asset_repo"].find_by_id.return_value = asset
        handler = UpdateAssetHandler(**repos, logger=MagicMock())

        result = await handler.handle(
            UpdateAsset(asset_id=asset.id, user_id=asset.user_id, price=Decimal("95"))
        )

        assert isinstance(result, Success)
        assert result.value.current_price == Decimal("95")
        assert result.value.purchase_price == Decimal("50")

    async def test_moving_to_foreign_account_is_rejected(self, repos):
        asset = make_asset()
        repos["asset_repo"].find_by_id.return_value = asset
        repos["account_repo"].find_by_id.return_value = make_account()
        handler = UpdateAssetHandler(**repos, logger=MagicMock())

        result = await handler.handle(
            UpdateAsset(asset_id=asset.id, user_id=asset.user_id, account_id=uuid7())
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthorizationError)
        repos["asset_repo"].update.assert_not_awaited()


@pytest.mark.unit
class TestUpdateAssetPriceHandler:
    async def test_records_price(self, repos):
        asset = make_asset()
        repos["asset_repo"].find_by_id.return_value = asset
        handler = UpdateAssetPriceHandler(
            asset_repo=repos["asset_repo"], logger=MagicMock()
        )

        result = await handler.handle(
            UpdateAssetPrice(asset_id=asset.id, user_id=asset.user_id, price=Decimal("1"))
        )

        assert isinstance(result, Success)
        assert asset.current_price == Decimal("1")

    async def test_missing_asset(self, repos):
        repos["asset_repo"].find_by_id.return_value = None
        handler = UpdateAssetPriceHandler(
            asset_repo=repos["asset_repo"], logger=MagicMock()
        )

        result = await handler.handle(
            UpdateAssetPrice(asset_id=uuid7(), user_id=uuid7(), price=Decimal("1"))
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)
