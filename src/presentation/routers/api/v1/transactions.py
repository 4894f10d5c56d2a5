"""Transactions resource handlers.

Recording, editing or deleting a transaction never moves an account
balance; balances change only through the account balance endpoint.

Handlers:
    list_transaction_types     - Allowed transaction types (public)
    create_transaction
    list_transactions          - Newest first, paginated
    list_transactions_by_date_range
    list_transactions_by_type
    list_transactions_by_category
    get_totals_by_category     - Signed sums per category
    get_totals_by_type         - Signed sums per type
    get_monthly_totals         - In/out/net per calendar month
    list_transactions_by_account
    list_transactions_by_asset
    get_transaction
    update_transaction
    delete_transaction
"""

from datetime import datetime
from typing import Annotated
from uuid import UUID

from fastapi import Depends, Path, Query, Request, status
from fastapi.responses import JSONResponse, Response

from src.application.commands.handlers.transaction_handlers import (
    CreateTransactionHandler,
    DeleteTransactionHandler,
    UpdateTransactionHandler,
)
from src.application.commands.transaction_commands import (
    CreateTransaction,
    DeleteTransaction,
    UpdateTransaction,
)
from src.application.queries.handlers.transaction_handlers import (
    GetMonthlyTotalsHandler,
    GetTotalsByCategoryHandler,
    GetTotalsByTypeHandler,
    GetTransactionHandler,
    ListTransactionsByAccountHandler,
    ListTransactionsByAssetHandler,
    ListTransactionsByCategoryHandler,
    ListTransactionsByDateRangeHandler,
    ListTransactionsByTypeHandler,
    ListTransactionsHandler,
)
from src.application.queries.transaction_queries import (
    GetMonthlyTotals,
    GetTotalsByCategory,
    GetTotalsByType,
    GetTransaction,
    ListTransactions,
    ListTransactionsByAccount,
    ListTransactionsByAsset,
    ListTransactionsByCategory,
    ListTransactionsByDateRange,
    ListTransactionsByType,
)
from src.core.container import handler_factory
from src.core.result import Failure, Success
from src.domain.enums.transaction_type import TransactionType
from src.presentation.routers.api.middleware.auth_dependencies import AuthenticatedUser
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.presentation.routers.api.v1.query_params import parse_int
from src.schemas.common_schemas import TypeListResponse
from src.schemas.transaction_schemas import (
    CreateTransactionRequest,
    MonthlyTotalResponse,
    MonthlyTotalsResponse,
    TotalsResponse,
    TransactionListResponse,
    TransactionResponse,
    UpdateTransactionRequest,
)

TransactionId = Annotated[UUID, Path(description="Transaction UUID")]
StartDate = Annotated[datetime, Query(alias="startDate", description="Inclusive")]
EndDate = Annotated[datetime, Query(alias="endDate", description="Inclusive")]
Limit = Annotated[str | None, Query(description="Page size (default 20, max 100)")]
Offset = Annotated[str | None, Query(description="Rows to skip")]


async def list_transaction_types() -> TypeListResponse:
    """GET /api/v1/transactions/types → 200 OK"""
    return TypeListResponse(types=TransactionType.values())


async def create_transaction(
    request: Request,
    current_user: AuthenticatedUser,
    data: CreateTransactionRequest,
    handler: CreateTransactionHandler = Depends(
        handler_factory(CreateTransactionHandler)
    ),
) -> TransactionResponse | JSONResponse:
    """Record a transaction.

    POST /api/v1/transactions → 201 Created
    """
    command = CreateTransaction(
        user_id=current_user.user_id,
        account_id=data.account_id,
        transaction_type=data.transaction_type,
        amount=data.amount,
        date=data.date,
        asset_id=data.asset_id,
        quantity=data.quantity,
        price=data.price,
        fee=data.fee,
        currency=data.currency,
        description=data.description,
        category=data.category,
        to_account_id=data.to_account_id,
        transaction_hash=data.transaction_hash,
    )
    match await handler.handle(command):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success(value=transaction):
            return TransactionResponse.from_entity(transaction)


async def list_transactions(
    request: Request,
    current_user: AuthenticatedUser,
    limit: Limit = None,
    offset: Offset = None,
    handler: ListTransactionsHandler = Depends(
        handler_factory(ListTransactionsHandler)
    ),
) -> TransactionListResponse | JSONResponse:
    """GET /api/v1/transactions?limit=20&offset=0 → 200 OK

    Non-numeric limit or offset falls back to the default.
    """
    query = ListTransactions(
        user_id=current_user.user_id,
        limit=parse_int(limit),
        offset=parse_int(offset),
    )
    match await handler.handle(query):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success(value=transactions):
            return TransactionListResponse.from_entities(transactions)


async def list_transactions_by_date_range(
    request: Request,
    current_user: AuthenticatedUser,
    start_date: StartDate,
    end_date: EndDate,
    handler: ListTransactionsByDateRangeHandler = Depends(
        handler_factory(ListTransactionsByDateRangeHandler)
    ),
) -> TransactionListResponse | JSONResponse:
    """GET /api/v1/transactions/date-range?startDate=...&endDate=... → 200 OK"""
    query = ListTransactionsByDateRange(
        user_id=current_user.user_id, start_date=start_date, end_date=end_date
    )
    match await handler.handle(query):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success(value=transactions):
            return TransactionListResponse.from_entities(transactions)


async def list_transactions_by_type(
    request: Request,
    current_user: AuthenticatedUser,
    transaction_type: Annotated[str, Path(description="Transaction type value")],
    handler: ListTransactionsByTypeHandler = Depends(
        handler_factory(ListTransactionsByTypeHandler)
    ),
) -> TransactionListResponse | JSONResponse:
    """GET /api/v1/transactions/type/{transaction_type} → 200 OK"""
    query = ListTransactionsByType(
        user_id=current_user.user_id, transaction_type=transaction_type
    )
    match await handler.handle(query):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success(value=transactions):
            return TransactionListResponse.from_entities(transactions)


async def list_transactions_by_category(
    request: Request,
    current_user: AuthenticatedUser,
    category: Annotated[str, Path(description="Category label")],
    handler: ListTransactionsByCategoryHandler = Depends(
        handler_factory(ListTransactionsByCategoryHandler)
    ),
) -> TransactionListResponse | JSONResponse:
    """GET /api/v1/transactions/category/{category} → 200 OK"""
    query = ListTransactionsByCategory(user_id=current_user.user_id, category=category)
    match await handler.handle(query):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success(value=transactions):
            return TransactionListResponse.from_entities(transactions)


async def get_totals_by_category(
    request: Request,
    current_user: AuthenticatedUser,
    start_date: StartDate,
    end_date: EndDate,
    handler: GetTotalsByCategoryHandler = Depends(
        handler_factory(GetTotalsByCategoryHandler)
    ),
) -> TotalsResponse | JSONResponse:
    """GET /api/v1/transactions/totals/category → 200 OK

    Credits count positive, debits negative.
    """
    query = GetTotalsByCategory(
        user_id=current_user.user_id, start_date=start_date, end_date=end_date
    )
    match await handler.handle(query):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success(value=totals):
            return TotalsResponse(totals=totals)


async def get_totals_by_type(
    request: Request,
    current_user: AuthenticatedUser,
    start_date: StartDate,
    end_date: EndDate,
    handler: GetTotalsByTypeHandler = Depends(handler_factory(GetTotalsByTypeHandler)),
) -> TotalsResponse | JSONResponse:
    """GET /api/v1/transactions/totals/type → 200 OK"""
    query = GetTotalsByType(
        user_id=current_user.user_id, start_date=start_date, end_date=end_date
    )
    match await handler.handle(query):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success(value=totals):
            return TotalsResponse(
                totals={t.value: amount for t, amount in totals.items()}
            )


async def get_monthly_totals(
    request: Request,
    current_user: AuthenticatedUser,
    start_date: StartDate,
    end_date: EndDate,
    handler: GetMonthlyTotalsHandler = Depends(
        handler_factory(GetMonthlyTotalsHandler)
    ),
) -> MonthlyTotalsResponse | JSONResponse:
    """GET /api/v1/transactions/totals/monthly → 200 OK"""
    query = GetMonthlyTotals(
        user_id=current_user.user_id, start_date=start_date, end_date=end_date
    )
    match await handler.handle(query):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success(value=months):
            return MonthlyTotalsResponse(
                months=[MonthlyTotalResponse.from_total(m) for m in months]
            )


async def list_transactions_by_account(
    request: Request,
    current_user: AuthenticatedUser,
    account_id: Annotated[UUID, Path(description="Account UUID")],
    limit: Limit = None,
    offset: Offset = None,
    handler: ListTransactionsByAccountHandler = Depends(
        handler_factory(ListTransactionsByAccountHandler)
    ),
) -> TransactionListResponse | JSONResponse:
    """GET /api/v1/transactions/account/{account_id} → 200 OK"""
    query = ListTransactionsByAccount(
        account_id=account_id,
        user_id=current_user.user_id,
        limit=parse_int(limit),
        offset=parse_int(offset),
    )
    match await handler.handle(query):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success(value=transactions):
            return TransactionListResponse.from_entities(transactions)


async def list_transactions_by_asset(
    request: Request,
    current_user: AuthenticatedUser,
    asset_id: Annotated[UUID, Path(description="Asset UUID")],
    limit: Limit = None,
    offset: Offset = None,
    handler: ListTransactionsByAssetHandler = Depends(
        handler_factory(ListTransactionsByAssetHandler)
    ),
) -> TransactionListResponse | JSONResponse:
    """GET /api/v1/transactions/asset/{asset_id} → 200 OK"""
    query = ListTransactionsByAsset(
        asset_id=asset_id,
        user_id=current_user.user_id,
        limit=parse_int(limit),
        offset=parse_int(offset),
    )
    match await handler.handle(query):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success(value=transactions):
            return TransactionListResponse.from_entities(transactions)


async def get_transaction(
    request: Request,
    current_user: AuthenticatedUser,
    transaction_id: TransactionId,
    handler: GetTransactionHandler = Depends(handler_factory(GetTransactionHandler)),
) -> TransactionResponse | JSONResponse:
    """GET /api/v1/transactions/{transaction_id} → 200 OK"""
    query = GetTransaction(transaction_id=transaction_id, user_id=current_user.user_id)
    match await handler.handle(query):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success(value=transaction):
            return TransactionResponse.from_entity(transaction)


async def update_transaction(
    request: Request,
    current_user: AuthenticatedUser,
    transaction_id: TransactionId,
    data: UpdateTransactionRequest,
    handler: UpdateTransactionHandler = Depends(
        handler_factory(UpdateTransactionHandler)
    ),
) -> TransactionResponse | JSONResponse:
    """PUT /api/v1/transactions/{transaction_id} → 200 OK"""
    command = UpdateTransaction(
        transaction_id=transaction_id,
        user_id=current_user.user_id,
        account_id=data.account_id,
        transaction_type=data.transaction_type,
        amount=data.amount,
        date=data.date,
        asset_id=data.asset_id,
        quantity=data.quantity,
        price=data.price,
        fee=data.fee,
        currency=data.currency,
        description=data.description,
        category=data.category,
        to_account_id=data.to_account_id,
        transaction_hash=data.transaction_hash,
    )
    match await handler.handle(command):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success(value=transaction):
            return TransactionResponse.from_entity(transaction)


async def delete_transaction(
    request: Request,
    current_user: AuthenticatedUser,
    transaction_id: TransactionId,
    handler: DeleteTransactionHandler = Depends(
        handler_factory(DeleteTransactionHandler)
    ),
) -> Response:
    """DELETE /api/v1/transactions/{transaction_id} → 204 No Content"""
    command = DeleteTransaction(
        transaction_id=transaction_id, user_id=current_user.user_id
    )
    match await handler.handle(command):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
