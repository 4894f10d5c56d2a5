"""Asset query handlers.

FilterAssets runs in memory over the caller's holdings: every supplied
predicate must hold, then offset and limit slice the filtered list.
"""

from decimal import Decimal

from src.application.commands.handlers.asset_handlers import parse_asset_type
from src.application.queries.asset_queries import (
    FilterAssets,
    GetAsset,
    GetAssetPerformance,
    GetTotalValue,
    ListAssets,
    ListAssetsByAccount,
    ListAssetsByType,
)
from src.application.services.ownership_verifier import OwnershipVerifier
from src.core.enums import ErrorCode
from src.core.errors import DomainError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities.asset import Asset
from src.domain.enums.asset_type import AssetType
from src.domain.errors import TransactionError
from src.domain.protocols.account_repository import AccountRepository
from src.domain.protocols.asset_repository import AssetRepository
from src.domain.value_objects.asset_performance import AssetPerformance


def _matches(asset: Asset, query: FilterAssets, asset_type: AssetType | None) -> bool:
    if query.account_id is not None and asset.account_id != query.account_id:
        return False
    if asset_type is not None and asset.asset_type != asset_type:
        return False
    if query.min_quantity is not None and asset.quantity < query.min_quantity:
        return False
    if query.max_quantity is not None and asset.quantity > query.max_quantity:
        return False
    if query.created_from is not None and asset.created_at < query.created_from:
        return False
    if query.created_to is not None and asset.created_at > query.created_to:
        return False
    return True


class GetAssetHandler:
    """Handler for GetAsset query."""

    def __init__(self, asset_repo: AssetRepository) -> None:
        self._verifier = OwnershipVerifier(asset_repo=asset_repo)

    async def handle(self, query: GetAsset) -> Result[Asset, DomainError]:
        return await self._verifier.verify_asset_ownership(
            query.asset_id, query.user_id
        )


class ListAssetsHandler:
    """Handler for ListAssets query."""

    def __init__(self, asset_repo: AssetRepository) -> None:
        self._asset_repo = asset_repo

    async def handle(self, query: ListAssets) -> Result[list[Asset], DomainError]:
        return Success(value=await self._asset_repo.find_by_user_id(query.user_id))


class ListAssetsByAccountHandler:
    """Handler for ListAssetsByAccount query (account must be owned)."""

    def __init__(
        self, asset_repo: AssetRepository, account_repo: AccountRepository
    ) -> None:
        self._asset_repo = asset_repo
        self._verifier = OwnershipVerifier(account_repo=account_repo)

    async def handle(
        self, query: ListAssetsByAccount
    ) -> Result[list[Asset], DomainError]:
        match await self._verifier.verify_account_ownership(
            query.account_id, query.user_id
        ):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=account):
                pass
        return Success(value=await self._asset_repo.find_by_account_id(account.id))


class ListAssetsByTypeHandler:
    """Handler for ListAssetsByType query."""

    def __init__(self, asset_repo: AssetRepository) -> None:
        self._asset_repo = asset_repo

    async def handle(self, query: ListAssetsByType) -> Result[list[Asset], DomainError]:
        match parse_asset_type(query.asset_type):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=asset_type):
                pass
        return Success(
            value=await self._asset_repo.find_by_type(query.user_id, asset_type)
        )


class FilterAssetsHandler:
    """Handler for FilterAssets query.

    Pagination here is a plain slice of the filtered list: a missing or
    non-positive limit returns everything after the offset.
    """

    def __init__(self, asset_repo: AssetRepository) -> None:
        self._asset_repo = asset_repo

    async def handle(self, query: FilterAssets) -> Result[list[Asset], DomainError]:
        asset_type: AssetType | None = None
        if query.asset_type:
            match parse_asset_type(query.asset_type):
                case Failure(error=error):
                    return Failure(error=error)
                case Success(value=parsed):
                    asset_type = parsed

        assets = await self._asset_repo.find_by_user_id(query.user_id)
        matched = [asset for asset in assets if _matches(asset, query, asset_type)]

        offset = query.offset if query.offset and query.offset > 0 else 0
        if query.limit is not None and query.limit > 0:
            return Success(value=matched[offset : offset + query.limit])
        return Success(value=matched[offset:])


class GetAssetPerformanceHandler:
    """Handler for GetAssetPerformance query."""

    def __init__(self, asset_repo: AssetRepository) -> None:
        self._asset_repo = asset_repo

    async def handle(
        self, query: GetAssetPerformance
    ) -> Result[list[AssetPerformance], DomainError]:
        if query.start_date > query.end_date:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_DATE_RANGE,
                    message=TransactionError.INVALID_DATE_RANGE,
                    field="start_date",
                )
            )
        performance = await self._asset_repo.get_performance(
            query.user_id, query.start_date, query.end_date
        )
        return Success(value=performance)


class GetTotalValueHandler:
    """Handler for GetTotalValue query.

    An absent or empty type list means every holding counts.
    """

    def __init__(self, asset_repo: AssetRepository) -> None:
        self._asset_repo = asset_repo

    async def handle(self, query: GetTotalValue) -> Result[Decimal, DomainError]:
        asset_types: list[AssetType] = []
        for raw in query.asset_types or []:
            match parse_asset_type(raw):
                case Failure(error=error):
                    return Failure(error=error)
                case Success(value=asset_type):
                    asset_types.append(asset_type)
        total = await self._asset_repo.get_total_value(
            query.user_id, asset_types or None
        )
        return Success(value=total)
