"""Unit tests for account and asset query handlers.

Tests cover:
- FilterAccounts validation and pagination clamping
- FilterAssets AND-combined predicate and plain slicing
- With-assets views: aggregation and cancellation between store calls
- Shared clamp_pagination rules
"""

from datetime import UTC, datetime
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest
from uuid_extensions import uuid7

from src.application.queries.account_queries import (
    FilterAccounts,
    GetAccountWithAssets,
    ListAccountsWithAssets,
)
from src.application.queries.asset_queries import FilterAssets, GetTotalValue
from src.application.queries.handlers.account_handlers import (
    FilterAccountsHandler,
    GetAccountWithAssetsHandler,
    ListAccountsWithAssetsHandler,
)
from src.application.queries.handlers.asset_handlers import (
    FilterAssetsHandler,
    GetTotalValueHandler,
)
from src.application.queries.pagination import Page, clamp_pagination
from src.core.enums import ErrorCode
from src.core.errors import AbortedError
from src.core.result import Failure, Success
from src.domain.enums.account_type import AccountType
from src.domain.enums.asset_type import AssetType
from src.domain.value_objects.account_with_assets import AssetInfo
from tests.conftest import make_account, make_asset


def _info(asset_type: AssetType, quantity: str, suffix: str, day: int) -> AssetInfo:
    return AssetInfo(
        id=uuid7(),
        definition_id=uuid7(),
        asset_type=asset_type,
        quantity=Decimal(quantity),
        symbol=suffix,
        name=suffix,
        suffix=suffix,
        updated_at=datetime(2026, 10, day, tzinfo=UTC),
    )


def _cancel_after(calls: int):
    """Predicate reporting a disconnect from the given call onward."""
    seen = 0

    async def is_cancelled() -> bool:
        nonlocal seen
        seen += 1
        return seen > calls

    return is_cancelled


@pytest.mark.unit
class TestClampPagination:
    @pytest.mark.parametrize(
        "limit,offset,expected",
        [
            (None, None, Page(limit=20, offset=0)),
            (-1, -1, Page(limit=20, offset=0)),
            (101, 3, Page(limit=100, offset=3)),
            (100, 0, Page(limit=100, offset=0)),
        ],
    )
    def test_rules(self, limit, offset, expected):
        assert clamp_pagination(limit, offset, default=20) == expected


@pytest.mark.unit
class TestFilterAccountsHandler:
    async def test_filters_are_forwarded_normalized(self):
        account_repo = AsyncMock()
        account_repo.filter.return_value = []
        user_id = uuid7()
        handler = FilterAccountsHandler(account_repo=account_repo)

        result = await handler.handle(
            FilterAccounts(
                user_id=user_id,
                account_type="savings",
                currency=" usd ",
                min_balance=Decimal("10"),
                limit=1000,
            )
        )

        assert isinstance(result, Success)
        account_repo.filter.assert_awaited_once_with(
            user_id,
            account_type=AccountType.SAVINGS,
            currency="USD",
            min_balance=Decimal("10"),
            max_balance=None,
            limit=100,
            offset=0,
        )

    async def test_inverted_balance_bounds(self):
        account_repo = AsyncMock()
        handler = FilterAccountsHandler(account_repo=account_repo)

        result = await handler.handle(
            FilterAccounts(
                user_id=uuid7(),
                min_balance=Decimal("100"),
                max_balance=Decimal("1"),
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_BALANCE
        account_repo.filter.assert_not_awaited()

    async def test_unknown_type(self):
        handler = FilterAccountsHandler(account_repo=AsyncMock())

        result = await handler.handle(
            FilterAccounts(user_id=uuid7(), account_type="vault")
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_ACCOUNT_TYPE


@pytest.mark.unit
class TestFilterAssetsHandler:
    async def test_predicates_are_and_combined(self):
        user_id = uuid7()
        account_id = uuid7()
        match = make_asset(user_id=user_id, account_id=account_id, quantity=Decimal("5"))
        wrong_account = make_asset(user_id=user_id, quantity=Decimal("5"))
        too_small = make_asset(
            user_id=user_id, account_id=account_id, quantity=Decimal("0.5")
        )
        asset_repo = AsyncMock()
        asset_repo.find_by_user_id.return_value = [match, wrong_account, too_small]
        handler = FilterAssetsHandler(asset_repo=asset_repo)

        result = await handler.handle(
            FilterAssets(
                user_id=user_id,
                account_id=account_id,
                asset_type="CRYPTOCURRENCY",
                min_quantity=Decimal("1"),
            )
        )

        assert isinstance(result, Success)
        assert result.value == [match]

    async def test_offset_past_end_is_empty(self):
        asset_repo = AsyncMock()
        asset_repo.find_by_user_id.return_value = [make_asset(), make_asset()]
        handler = FilterAssetsHandler(asset_repo=asset_repo)

        result = await handler.handle(FilterAssets(user_id=uuid7(), offset=5))

        assert isinstance(result, Success)
        assert result.value == []

    async def test_missing_limit_returns_rest(self):
        assets = [make_asset() for _ in range(3)]
        asset_repo = AsyncMock()
        asset_repo.find_by_user_id.return_value = assets
        handler = FilterAssetsHandler(asset_repo=asset_repo)

        result = await handler.handle(FilterAssets(user_id=uuid7(), offset=1, limit=0))

        assert result.value == assets[1:]


@pytest.mark.unit
class TestGetTotalValueHandler:
    async def test_empty_types_mean_all(self):
        asset_repo = AsyncMock()
        asset_repo.get_total_value.return_value = Decimal("12.5")
        user_id = uuid7()
        handler = GetTotalValueHandler(asset_repo=asset_repo)

        result = await handler.handle(GetTotalValue(user_id=user_id, asset_types=[]))

        assert result.value == Decimal("12.5")
        asset_repo.get_total_value.assert_awaited_once_with(user_id, None)

    async def test_unknown_type(self):
        handler = GetTotalValueHandler(asset_repo=AsyncMock())

        result = await handler.handle(
            GetTotalValue(user_id=uuid7(), asset_types=["STOCK", "BEANIE_BABY"])
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_ASSET_TYPE


@pytest.mark.unit
class TestAccountWithAssetsHandlers:
    async def test_single_account_view_aggregates(self):
        account = make_account()
        account_repo = AsyncMock()
        account_repo.find_by_id.return_value = account
        asset_repo = AsyncMock()
        asset_repo.find_infos_by_account_id.return_value = [
            _info(AssetType.CRYPTOCURRENCY, "1.5", "BTC", 1),
            _info(AssetType.CRYPTOCURRENCY, "0.5", "BTC", 3),
            _info(AssetType.CASH, "100", "USD", 2),
        ]
        handler = GetAccountWithAssetsHandler(
            account_repo=account_repo, asset_repo=asset_repo
        )

        result = await handler.handle(
            GetAccountWithAssets(account_id=account.id, user_id=account.user_id)
        )

        assert isinstance(result, Success)
        view = result.value
        assert view.total_balances == {"BTC": Decimal("2.0"), "USD": Decimal("100")}
        assert view.asset_counts == {AssetType.CRYPTOCURRENCY: 2, AssetType.CASH: 1}
        assert view.last_updated == datetime(2026, 10, 3, tzinfo=UTC)

    async def test_empty_account_has_no_last_updated(self):
        account = make_account()
        account_repo = AsyncMock()
        account_repo.find_by_id.return_value = account
        asset_repo = AsyncMock()
        asset_repo.find_infos_by_account_id.return_value = []
        handler = GetAccountWithAssetsHandler(
            account_repo=account_repo, asset_repo=asset_repo
        )

        result = await handler.handle(
            GetAccountWithAssets(account_id=account.id, user_id=account.user_id)
        )

        assert result.value.last_updated is None
        assert result.value.total_balances == {}

    async def test_cancelled_before_holdings_lookup(self):
        account = make_account()
        account_repo = AsyncMock()
        account_repo.find_by_id.return_value = account
        asset_repo = AsyncMock()
        handler = GetAccountWithAssetsHandler(
            account_repo=account_repo, asset_repo=asset_repo
        )

        result = await handler.handle(
            GetAccountWithAssets(
                account_id=account.id,
                user_id=account.user_id,
                is_cancelled=_cancel_after(1),
            )
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, AbortedError)
        asset_repo.find_infos_by_account_id.assert_not_awaited()

    async def test_list_view_aborts_mid_iteration(self):
        user_id = uuid7()
        account_repo = AsyncMock()
        account_repo.find_by_user_id.return_value = [
            make_account(user_id=user_id) for _ in range(3)
        ]
        asset_repo = AsyncMock()
        asset_repo.find_infos_by_account_id.return_value = []
        handler = ListAccountsWithAssetsHandler(
            account_repo=account_repo, asset_repo=asset_repo
        )

        result = await handler.handle(
            ListAccountsWithAssets(user_id=user_id, is_cancelled=_cancel_after(2))
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.OPERATION_ABORTED
        assert asset_repo.find_infos_by_account_id.await_count == 1

    async def test_list_view_without_cancellation(self):
        user_id = uuid7()
        account_repo = AsyncMock()
        account_repo.find_by_user_id.return_value = [
            make_account(user_id=user_id) for _ in range(2)
        ]
        asset_repo = AsyncMock()
        asset_repo.find_infos_by_account_id.return_value = []
        handler = ListAccountsWithAssetsHandler(
            account_repo=account_repo, asset_repo=asset_repo
        )

        result = await handler.handle(ListAccountsWithAssets(user_id=user_id))

        assert isinstance(result, Success)
        assert len(result.value) == 2
