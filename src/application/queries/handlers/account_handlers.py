"""Account query handlers.

Read-side handlers for the account aggregate. Every handler scopes reads
to the caller; single-entity reads go through OwnershipVerifier.

The with-assets views issue several store calls in sequence and consult
the query's ``is_cancelled`` predicate before each one, returning
AbortedError as soon as the caller has gone away.
"""

from src.application.commands.handlers.account_handlers import parse_account_type
from src.application.queries.account_queries import (
    CancellationCheck,
    FilterAccounts,
    GetAccount,
    GetAccountSummary,
    GetAccountWithAssets,
    ListAccounts,
    ListAccountsByCurrency,
    ListAccountsByType,
    ListAccountsWithAssets,
)
from src.application.queries.pagination import ACCOUNT_DEFAULT_LIMIT, clamp_pagination
from src.application.services.ownership_verifier import OwnershipVerifier
from src.core.enums import ErrorCode
from src.core.errors import AbortedError, DomainError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities.account import Account
from src.domain.enums.account_type import AccountType
from src.domain.protocols.account_repository import AccountRepository
from src.domain.protocols.asset_repository import AssetRepository
from src.domain.value_objects.account_summary import AccountSummary
from src.domain.value_objects.account_with_assets import AccountWithAssets


async def _aborted(is_cancelled: CancellationCheck | None) -> bool:
    return is_cancelled is not None and await is_cancelled()


def _abort_error(operation: str) -> AbortedError:
    return AbortedError(
        code=ErrorCode.OPERATION_ABORTED,
        message="Request cancelled by client",
        operation=operation,
    )


class GetAccountHandler:
    """Handler for GetAccount query."""

    def __init__(self, account_repo: AccountRepository) -> None:
        self._verifier = OwnershipVerifier(account_repo=account_repo)

    async def handle(self, query: GetAccount) -> Result[Account, DomainError]:
        return await self._verifier.verify_account_ownership(
            query.account_id, query.user_id
        )


class ListAccountsHandler:
    """Handler for ListAccounts query."""

    def __init__(self, account_repo: AccountRepository) -> None:
        self._account_repo = account_repo

    async def handle(self, query: ListAccounts) -> Result[list[Account], DomainError]:
        return Success(value=await self._account_repo.find_by_user_id(query.user_id))


class ListAccountsByTypeHandler:
    """Handler for ListAccountsByType query."""

    def __init__(self, account_repo: AccountRepository) -> None:
        self._account_repo = account_repo

    async def handle(
        self, query: ListAccountsByType
    ) -> Result[list[Account], DomainError]:
        match parse_account_type(query.account_type):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=account_type):
                pass
        accounts = await self._account_repo.find_by_type(query.user_id, account_type)
        return Success(value=accounts)


class ListAccountsByCurrencyHandler:
    """Handler for ListAccountsByCurrency query."""

    def __init__(self, account_repo: AccountRepository) -> None:
        self._account_repo = account_repo

    async def handle(
        self, query: ListAccountsByCurrency
    ) -> Result[list[Account], DomainError]:
        currency = query.currency.strip().upper()
        if not currency:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_CURRENCY,
                    message="Currency code cannot be empty",
                    field="currency",
                )
            )
        accounts = await self._account_repo.find_by_currency(query.user_id, currency)
        return Success(value=accounts)


class FilterAccountsHandler:
    """Handler for FilterAccounts query.

    Validates the type string and the balance bounds, clamps pagination,
    then delegates the AND-combined predicate to the repository.
    """

    def __init__(self, account_repo: AccountRepository) -> None:
        self._account_repo = account_repo

    async def handle(self, query: FilterAccounts) -> Result[list[Account], DomainError]:
        account_type: AccountType | None = None
        if query.account_type:
            match parse_account_type(query.account_type):
                case Failure(error=error):
                    return Failure(error=error)
                case Success(value=parsed):
                    account_type = parsed

        if (
            query.min_balance is not None
            and query.max_balance is not None
            and query.min_balance > query.max_balance
        ):
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_BALANCE,
                    message="Minimum balance cannot exceed maximum balance",
                    field="min_balance",
                )
            )

        page = clamp_pagination(
            query.limit, query.offset, default=ACCOUNT_DEFAULT_LIMIT
        )
        accounts = await self._account_repo.filter(
            query.user_id,
            account_type=account_type,
            currency=query.currency.strip().upper() if query.currency else None,
            min_balance=query.min_balance,
            max_balance=query.max_balance,
            limit=page.limit,
            offset=page.offset,
        )
        return Success(value=accounts)


class GetAccountSummaryHandler:
    """Handler for GetAccountSummary query."""

    def __init__(self, account_repo: AccountRepository) -> None:
        self._account_repo = account_repo

    async def handle(
        self, query: GetAccountSummary
    ) -> Result[AccountSummary, DomainError]:
        return Success(value=await self._account_repo.get_summary(query.user_id))


class GetAccountWithAssetsHandler:
    """Handler for GetAccountWithAssets query."""

    def __init__(
        self, account_repo: AccountRepository, asset_repo: AssetRepository
    ) -> None:
        self._verifier = OwnershipVerifier(account_repo=account_repo)
        self._asset_repo = asset_repo

    async def handle(
        self, query: GetAccountWithAssets
    ) -> Result[AccountWithAssets, DomainError]:
        operation = "get_account_with_assets"
        if await _aborted(query.is_cancelled):
            return Failure(error=_abort_error(operation))

        match await self._verifier.verify_account_ownership(
            query.account_id, query.user_id
        ):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=account):
                pass

        if await _aborted(query.is_cancelled):
            return Failure(error=_abort_error(operation))

        infos = await self._asset_repo.find_infos_by_account_id(account.id)
        return Success(value=AccountWithAssets.build(account, infos))


class ListAccountsWithAssetsHandler:
    """Handler for ListAccountsWithAssets query.

    One holdings lookup per account, issued sequentially; a cancellation
    observed between lookups discards the partial result.
    """

    def __init__(
        self, account_repo: AccountRepository, asset_repo: AssetRepository
    ) -> None:
        self._account_repo = account_repo
        self._asset_repo = asset_repo

    async def handle(
        self, query: ListAccountsWithAssets
    ) -> Result[list[AccountWithAssets], DomainError]:
        operation = "list_accounts_with_assets"
        if await _aborted(query.is_cancelled):
            return Failure(error=_abort_error(operation))

        accounts = await self._account_repo.find_by_user_id(query.user_id)
        views: list[AccountWithAssets] = []
        for account in accounts:
            if await _aborted(query.is_cancelled):
                return Failure(error=_abort_error(operation))
            infos = await self._asset_repo.find_infos_by_account_id(account.id)
            views.append(AccountWithAssets.build(account, infos))
        return Success(value=views)


__all__ = [
    "GetAccountHandler",
    "ListAccountsHandler",
    "ListAccountsByTypeHandler",
    "ListAccountsByCurrencyHandler",
    "FilterAccountsHandler",
    "GetAccountSummaryHandler",
    "GetAccountWithAssetsHandler",
    "ListAccountsWithAssetsHandler",
]
