"""Assets resource handlers.

Handlers:
    list_asset_types          - Allowed asset types (public)
    create_asset
    list_assets               - All holdings, or one type via ?type=
    filter_assets
    get_asset_performance     - Per-holding profit/loss for a purchase window
    get_total_value           - Current value, optionally restricted by type
    list_assets_by_account
    get_asset
    update_asset
    update_asset_price
    delete_asset
"""

from datetime import datetime
from typing import Annotated
from uuid import UUID

from fastapi import Depends, Path, Query, Request, status
from fastapi.responses import JSONResponse, Response

from src.application.commands.asset_commands import (
    CreateAsset,
    DeleteAsset,
    UpdateAsset,
    UpdateAssetPrice,
)
from src.application.commands.handlers.asset_handlers import (
    CreateAssetHandler,
    DeleteAssetHandler,
    UpdateAssetHandler,
    UpdateAssetPriceHandler,
)
from src.application.queries.asset_queries import (
    FilterAssets,
    GetAsset,
    GetAssetPerformance,
    GetTotalValue,
    ListAssets,
    ListAssetsByAccount,
    ListAssetsByType,
)
from src.application.queries.handlers.asset_handlers import (
    FilterAssetsHandler,
    GetAssetHandler,
    GetAssetPerformanceHandler,
    GetTotalValueHandler,
    ListAssetsByAccountHandler,
    ListAssetsByTypeHandler,
    ListAssetsHandler,
)
from src.core.container import handler_factory
from src.core.result import Failure, Success
from src.domain.enums.asset_type import AssetType
from src.presentation.routers.api.middleware.auth_dependencies import AuthenticatedUser
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.presentation.routers.api.v1.query_params import (
    parse_csv,
    parse_decimal,
    parse_int,
)
from src.schemas.asset_schemas import (
    AssetListResponse,
    AssetPerformanceListResponse,
    AssetResponse,
    CreateAssetRequest,
    TotalValueResponse,
    UpdateAssetRequest,
    UpdatePriceRequest,
)
from src.schemas.common_schemas import TypeListResponse

AssetId = Annotated[UUID, Path(description="Asset UUID")]


async def list_asset_types() -> TypeListResponse:
    """GET /api/v1/assets/types → 200 OK"""
    return TypeListResponse(types=AssetType.values())


async def create_asset(
    request: Request,
    current_user: AuthenticatedUser,
    data: CreateAssetRequest,
    handler: CreateAssetHandler = Depends(handler_factory(CreateAssetHandler)),
) -> AssetResponse | JSONResponse:
    """POST /api/v1/assets → 201 Created"""
    command = CreateAsset(
        user_id=current_user.user_id,
        account_id=data.account_id,
        definition_id=data.definition_id,
        asset_type=data.asset_type,
        quantity=data.quantity,
        notes=data.notes,
        purchase_date=data.purchase_date,
        purchase_price=data.purchase_price,
        current_price=data.current_price,
        currency=data.currency,
    )
    match await handler.handle(command):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success(value=asset):
            return AssetResponse.from_entity(asset)


async def list_assets(
    request: Request,
    current_user: AuthenticatedUser,
    asset_type: Annotated[
        str | None,
        Query(alias="type", description="Only holdings of this type"),
    ] = None,
    list_handler: ListAssetsHandler = Depends(handler_factory(ListAssetsHandler)),
    by_type_handler: ListAssetsByTypeHandler = Depends(
        handler_factory(ListAssetsByTypeHandler)
    ),
) -> AssetListResponse | JSONResponse:
    """GET /api/v1/assets → 200 OK"""
    if asset_type:
        result = await by_type_handler.handle(
            ListAssetsByType(user_id=current_user.user_id, asset_type=asset_type)
        )
    else:
        result = await list_handler.handle(ListAssets(user_id=current_user.user_id))

    match result:
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success(value=assets):
            return AssetListResponse.from_entities(assets)


async def filter_assets(
    request: Request,
    current_user: AuthenticatedUser,
    account_id: Annotated[UUID | None, Query(alias="accountId")] = None,
    asset_type: Annotated[str | None, Query(alias="type")] = None,
    min_quantity: Annotated[str | None, Query(alias="minQuantity")] = None,
    max_quantity: Annotated[str | None, Query(alias="maxQuantity")] = None,
    created_from: Annotated[datetime | None, Query(alias="createdFrom")] = None,
    created_to: Annotated[datetime | None, Query(alias="createdTo")] = None,
    limit: Annotated[str | None, Query()] = None,
    offset: Annotated[str | None, Query()] = None,
    handler: FilterAssetsHandler = Depends(handler_factory(FilterAssetsHandler)),
) -> AssetListResponse | JSONResponse:
    """Filter holdings; every criterion is optional.

    GET /api/v1/assets/filter?type=CRYPTOCURRENCY&minQuantity=1 → 200 OK
    """
    query = FilterAssets(
        user_id=current_user.user_id,
        account_id=account_id,
        asset_type=asset_type or None,
        min_quantity=parse_decimal(min_quantity),
        max_quantity=parse_decimal(max_quantity),
        created_from=created_from,
        created_to=created_to,
        limit=parse_int(limit),
        offset=parse_int(offset),
    )
    match await handler.handle(query):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success(value=assets):
            return AssetListResponse.from_entities(assets)


async def get_asset_performance(
    request: Request,
    current_user: AuthenticatedUser,
    start_date: Annotated[datetime, Query(alias="startDate")],
    end_date: Annotated[datetime, Query(alias="endDate")],
    handler: GetAssetPerformanceHandler = Depends(
        handler_factory(GetAssetPerformanceHandler)
    ),
) -> AssetPerformanceListResponse | JSONResponse:
    """GET /api/v1/assets/performance?startDate=...&endDate=... → 200 OK"""
    query = GetAssetPerformance(
        user_id=current_user.user_id, start_date=start_date, end_date=end_date
    )
    match await handler.handle(query):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success(value=performance):
            return AssetPerformanceListResponse.from_performance(performance)


async def get_total_value(
    request: Request,
    current_user: AuthenticatedUser,
    types: Annotated[
        str | None,
        Query(description="Comma-separated asset types; omit for all"),
    ] = None,
    handler: GetTotalValueHandler = Depends(handler_factory(GetTotalValueHandler)),
) -> TotalValueResponse | JSONResponse:
    """GET /api/v1/assets/total-value?types=STOCK,ETF → 200 OK"""
    asset_types = parse_csv(types)
    query = GetTotalValue(user_id=current_user.user_id, asset_types=asset_types)
    match await handler.handle(query):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success(value=total):
            return TotalValueResponse(total_value=total, asset_types=asset_types or [])


async def list_assets_by_account(
    request: Request,
    current_user: AuthenticatedUser,
    account_id: Annotated[UUID, Path(description="Account UUID")],
    handler: ListAssetsByAccountHandler = Depends(
        handler_factory(ListAssetsByAccountHandler)
    ),
) -> AssetListResponse | JSONResponse:
    """GET /api/v1/assets/account/{account_id} → 200 OK"""
    query = ListAssetsByAccount(account_id=account_id, user_id=current_user.user_id)
    match await handler.handle(query):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success(value=assets):
            return AssetListResponse.from_entities(assets)


async def get_asset(
    request: Request,
    current_user: AuthenticatedUser,
    asset_id: AssetId,
    handler: GetAssetHandler = Depends(handler_factory(GetAssetHandler)),
) -> AssetResponse | JSONResponse:
    """GET /api/v1/assets/{asset_id} → 200 OK"""
    match await handler.handle(GetAsset(asset_id=asset_id, user_id=current_user.user_id)):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success(value=asset):
            return AssetResponse.from_entity(asset)


async def update_asset(
    request: Request,
    current_user: AuthenticatedUser,
    asset_id: AssetId,
    data: UpdateAssetRequest,
    handler: UpdateAssetHandler = Depends(handler_factory(UpdateAssetHandler)),
) -> AssetResponse | JSONResponse:
    """PUT /api/v1/assets/{asset_id} → 200 OK"""
    command = UpdateAsset(
        asset_id=asset_id,
        user_id=current_user.user_id,
        asset_type=data.asset_type,
        quantity=data.quantity,
        price=data.price,
        account_id=data.account_id,
        definition_id=data.definition_id,
        notes=data.notes,
        purchase_date=data.purchase_date,
    )
    match await handler.handle(command):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success(value=asset):
            return AssetResponse.from_entity(asset)


async def update_asset_price(
    request: Request,
    current_user: AuthenticatedUser,
    asset_id: AssetId,
    data: UpdatePriceRequest,
    handler: UpdateAssetPriceHandler = Depends(
        handler_factory(UpdateAssetPriceHandler)
    ),
) -> AssetResponse | JSONResponse:
    """PUT /api/v1/assets/{asset_id}/price → 200 OK"""
    command = UpdateAssetPrice(
        asset_id=asset_id, user_id=current_user.user_id, price=data.price
    )
    match await handler.handle(command):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success(value=asset):
            return AssetResponse.from_entity(asset)


async def delete_asset(
    request: Request,
    current_user: AuthenticatedUser,
    asset_id: AssetId,
    handler: DeleteAssetHandler = Depends(handler_factory(DeleteAssetHandler)),
) -> Response:
    """DELETE /api/v1/assets/{asset_id} → 204 No Content"""
    command = DeleteAsset(asset_id=asset_id, user_id=current_user.user_id)
    match await handler.handle(command):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
