"""Accounts resource handlers.

Handlers:
    list_account_types         - Allowed account types (public)
    create_account
    list_accounts              - All accounts, or one type via ?type=
    list_accounts_with_assets  - Accounts joined with their holdings
    filter_accounts            - Type/currency/balance filters, paginated
    get_account_summary        - Totals per type and currency
    list_accounts_by_type
    list_accounts_by_currency
    get_account
    get_account_with_assets
    update_account
    update_account_balance     - Atomic signed delta
    delete_account             - Cascades holdings and transactions
"""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Path, Query, Request, status
from fastapi.responses import JSONResponse, Response

from src.application.commands.account_commands import (
    CreateAccount,
    DeleteAccount,
    UpdateAccount,
    UpdateAccountBalance,
)
from src.application.commands.handlers.account_handlers import (
    CreateAccountHandler,
    DeleteAccountHandler,
    UpdateAccountBalanceHandler,
    UpdateAccountHandler,
)
from src.application.queries.account_queries import (
    FilterAccounts,
    GetAccount,
    GetAccountSummary,
    GetAccountWithAssets,
    ListAccounts,
    ListAccountsByCurrency,
    ListAccountsByType,
    ListAccountsWithAssets,
)
from src.application.queries.handlers.account_handlers import (
    FilterAccountsHandler,
    GetAccountHandler,
    GetAccountSummaryHandler,
    GetAccountWithAssetsHandler,
    ListAccountsByCurrencyHandler,
    ListAccountsByTypeHandler,
    ListAccountsHandler,
    ListAccountsWithAssetsHandler,
)
from src.core.container import handler_factory
from src.core.result import Failure, Success
from src.domain.enums.account_type import AccountType
from src.presentation.routers.api.middleware.auth_dependencies import AuthenticatedUser
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.presentation.routers.api.v1.query_params import parse_decimal, parse_int
from src.schemas.account_schemas import (
    AccountListResponse,
    AccountResponse,
    AccountSummaryResponse,
    AccountWithAssetsListResponse,
    AccountWithAssetsResponse,
    CreateAccountRequest,
    UpdateAccountRequest,
    UpdateBalanceRequest,
)
from src.schemas.common_schemas import TypeListResponse

AccountId = Annotated[UUID, Path(description="Account UUID")]


async def list_account_types() -> TypeListResponse:
    """GET /api/v1/accounts/types → 200 OK"""
    return TypeListResponse(types=AccountType.values())


async def create_account(
    request: Request,
    current_user: AuthenticatedUser,
    data: CreateAccountRequest,
    handler: CreateAccountHandler = Depends(handler_factory(CreateAccountHandler)),
) -> AccountResponse | JSONResponse:
    """Open an account.

    POST /api/v1/accounts → 201 Created
    """
    command = CreateAccount(
        user_id=current_user.user_id,
        name=data.name,
        account_type=data.account_type,
        balance=data.balance,
        currency=data.currency,
    )
    match await handler.handle(command):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success(value=account):
            return AccountResponse.from_entity(account)


async def list_accounts(
    request: Request,
    current_user: AuthenticatedUser,
    account_type: Annotated[
        str | None,
        Query(alias="type", description="Only accounts of this type"),
    ] = None,
    list_handler: ListAccountsHandler = Depends(handler_factory(ListAccountsHandler)),
    by_type_handler: ListAccountsByTypeHandler = Depends(
        handler_factory(ListAccountsByTypeHandler)
    ),
) -> AccountListResponse | JSONResponse:
    """List the caller's accounts.

    GET /api/v1/accounts → 200 OK
    GET /api/v1/accounts?type=checking → 200 OK
    """
    if account_type:
        result = await by_type_handler.handle(
            ListAccountsByType(user_id=current_user.user_id, account_type=account_type)
        )
    else:
        result = await list_handler.handle(ListAccounts(user_id=current_user.user_id))

    match result:
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success(value=accounts):
            return AccountListResponse.from_entities(accounts)


async def list_accounts_with_assets(
    request: Request,
    current_user: AuthenticatedUser,
    handler: ListAccountsWithAssetsHandler = Depends(
        handler_factory(ListAccountsWithAssetsHandler)
    ),
) -> AccountWithAssetsListResponse | JSONResponse:
    """GET /api/v1/accounts/with-assets → 200 OK

    Stops early (499) when the client disconnects mid-request.
    """
    query = ListAccountsWithAssets(
        user_id=current_user.user_id, is_cancelled=request.is_disconnected
    )
    match await handler.handle(query):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success(value=views):
            return AccountWithAssetsListResponse.from_views(views)


async def filter_accounts(
    request: Request,
    current_user: AuthenticatedUser,
    account_type: Annotated[str | None, Query(alias="type")] = None,
    currency: Annotated[str | None, Query()] = None,
    min_balance: Annotated[str | None, Query(alias="minBalance")] = None,
    max_balance: Annotated[str | None, Query(alias="maxBalance")] = None,
    limit: Annotated[str | None, Query()] = None,
    offset: Annotated[str | None, Query()] = None,
    handler: FilterAccountsHandler = Depends(handler_factory(FilterAccountsHandler)),
) -> AccountListResponse | JSONResponse:
    """Filter accounts.

    GET /api/v1/accounts/filter?type=savings&minBalance=100 → 200 OK

    Unparseable numbers are ignored rather than rejected.
    """
    query = FilterAccounts(
        user_id=current_user.user_id,
        account_type=account_type or None,
        currency=currency or None,
        min_balance=parse_decimal(min_balance),
        max_balance=parse_decimal(max_balance),
        limit=parse_int(limit),
        offset=parse_int(offset),
    )
    match await handler.handle(query):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success(value=accounts):
            return AccountListResponse.from_entities(accounts)


async def get_account_summary(
    request: Request,
    current_user: AuthenticatedUser,
    handler: GetAccountSummaryHandler = Depends(
        handler_factory(GetAccountSummaryHandler)
    ),
) -> AccountSummaryResponse | JSONResponse:
    """GET /api/v1/accounts/summary → 200 OK"""
    match await handler.handle(GetAccountSummary(user_id=current_user.user_id)):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success(value=summary):
            return AccountSummaryResponse.from_summary(summary)


async def list_accounts_by_type(
    request: Request,
    current_user: AuthenticatedUser,
    account_type: Annotated[str, Path(description="Account type value")],
    handler: ListAccountsByTypeHandler = Depends(
        handler_factory(ListAccountsByTypeHandler)
    ),
) -> AccountListResponse | JSONResponse:
    """GET /api/v1/accounts/type/{account_type} → 200 OK"""
    query = ListAccountsByType(user_id=current_user.user_id, account_type=account_type)
    match await handler.handle(query):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success(value=accounts):
            return AccountListResponse.from_entities(accounts)


async def list_accounts_by_currency(
    request: Request,
    current_user: AuthenticatedUser,
    currency: Annotated[str, Path(description="Currency label, any case")],
    handler: ListAccountsByCurrencyHandler = Depends(
        handler_factory(ListAccountsByCurrencyHandler)
    ),
) -> AccountListResponse | JSONResponse:
    """GET /api/v1/accounts/currency/{currency} → 200 OK"""
    query = ListAccountsByCurrency(user_id=current_user.user_id, currency=currency)
    match await handler.handle(query):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success(value=accounts):
            return AccountListResponse.from_entities(accounts)


async def get_account(
    request: Request,
    current_user: AuthenticatedUser,
    account_id: AccountId,
    handler: GetAccountHandler = Depends(handler_factory(GetAccountHandler)),
) -> AccountResponse | JSONResponse:
    """GET /api/v1/accounts/{account_id} → 200 OK"""
    query = GetAccount(account_id=account_id, user_id=current_user.user_id)
    match await handler.handle(query):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success(value=account):
            return AccountResponse.from_entity(account)


async def get_account_with_assets(
    request: Request,
    current_user: AuthenticatedUser,
    account_id: AccountId,
    handler: GetAccountWithAssetsHandler = Depends(
        handler_factory(GetAccountWithAssetsHandler)
    ),
) -> AccountWithAssetsResponse | JSONResponse:
    """GET /api/v1/accounts/{account_id}/with-assets → 200 OK"""
    query = GetAccountWithAssets(
        account_id=account_id,
        user_id=current_user.user_id,
        is_cancelled=request.is_disconnected,
    )
    match await handler.handle(query):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success(value=view):
            return AccountWithAssetsResponse.from_view(view)


async def update_account(
    request: Request,
    current_user: AuthenticatedUser,
    account_id: AccountId,
    data: UpdateAccountRequest,
    handler: UpdateAccountHandler = Depends(handler_factory(UpdateAccountHandler)),
) -> AccountResponse | JSONResponse:
    """PUT /api/v1/accounts/{account_id} → 200 OK"""
    command = UpdateAccount(
        account_id=account_id,
        user_id=current_user.user_id,
        name=data.name,
        account_type=data.account_type,
        balance=data.balance,
        currency=data.currency,
    )
    match await handler.handle(command):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success(value=account):
            return AccountResponse.from_entity(account)


async def update_account_balance(
    request: Request,
    current_user: AuthenticatedUser,
    account_id: AccountId,
    data: UpdateBalanceRequest,
    handler: UpdateAccountBalanceHandler = Depends(
        handler_factory(UpdateAccountBalanceHandler)
    ),
) -> AccountResponse | JSONResponse:
    """Apply a signed delta to the balance.

    PATCH /api/v1/accounts/{account_id}/balance → 200 OK

    A delta that would leave the balance negative is refused (400) and
    the balance is left unchanged.
    """
    command = UpdateAccountBalance(
        account_id=account_id, user_id=current_user.user_id, amount=data.amount
    )
    match await handler.handle(command):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success(value=account):
            return AccountResponse.from_entity(account)


async def delete_account(
    request: Request,
    current_user: AuthenticatedUser,
    account_id: AccountId,
    handler: DeleteAccountHandler = Depends(handler_factory(DeleteAccountHandler)),
) -> Response:
    """DELETE /api/v1/accounts/{account_id} → 204 No Content"""
    command = DeleteAccount(account_id=account_id, user_id=current_user.user_id)
    match await handler.handle(command):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
