"""Transaction query handlers.

Paginated listings clamp limit and offset before hitting the store.
Listings scoped to an account or asset verify the caller owns it first.
Range queries reject start_date > end_date.
"""

from datetime import datetime
from decimal import Decimal

from src.application.commands.handlers.transaction_handlers import (
    parse_transaction_type,
)
from src.application.queries.pagination import (
    TRANSACTION_DEFAULT_LIMIT,
    clamp_pagination,
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
from src.application.services.ownership_verifier import OwnershipVerifier
from src.core.enums import ErrorCode
from src.core.errors import DomainError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities.transaction import Transaction
from src.domain.enums.transaction_type import TransactionType
from src.domain.errors import TransactionError
from src.domain.protocols.account_repository import AccountRepository
from src.domain.protocols.asset_repository import AssetRepository
from src.domain.protocols.transaction_repository import TransactionRepository
from src.domain.value_objects.monthly_total import MonthlyTotal


def _check_range(start_date: datetime, end_date: datetime) -> ValidationError | None:
    if start_date > end_date:
        return ValidationError(
            code=ErrorCode.INVALID_DATE_RANGE,
            message=TransactionError.INVALID_DATE_RANGE,
            field="start_date",
        )
    return None


class GetTransactionHandler:
    """Handler for GetTransaction query."""

    def __init__(self, transaction_repo: TransactionRepository) -> None:
        self._verifier = OwnershipVerifier(transaction_repo=transaction_repo)

    async def handle(self, query: GetTransaction) -> Result[Transaction, DomainError]:
        return await self._verifier.verify_transaction_ownership(
            query.transaction_id, query.user_id
        )


class ListTransactionsHandler:
    """Handler for ListTransactions query."""

    def __init__(self, transaction_repo: TransactionRepository) -> None:
        self._transaction_repo = transaction_repo

    async def handle(
        self, query: ListTransactions
    ) -> Result[list[Transaction], DomainError]:
        page = clamp_pagination(
            query.limit, query.offset, default=TRANSACTION_DEFAULT_LIMIT
        )
        transactions = await self._transaction_repo.find_by_user_id(
            query.user_id, page.limit, page.offset
        )
        return Success(value=transactions)


class ListTransactionsByAccountHandler:
    """Handler for ListTransactionsByAccount query."""

    def __init__(
        self,
        transaction_repo: TransactionRepository,
        account_repo: AccountRepository,
    ) -> None:
        self._transaction_repo = transaction_repo
        self._verifier = OwnershipVerifier(account_repo=account_repo)

    async def handle(
        self, query: ListTransactionsByAccount
    ) -> Result[list[Transaction], DomainError]:
        match await self._verifier.verify_account_ownership(
            query.account_id, query.user_id
        ):
            case Failure(error=error):
                return Failure(error=error)
            case Success():
                pass
        page = clamp_pagination(
            query.limit, query.offset, default=TRANSACTION_DEFAULT_LIMIT
        )
        transactions = await self._transaction_repo.find_by_account_id(
            query.account_id, page.limit, page.offset
        )
        return Success(value=transactions)


class ListTransactionsByAssetHandler:
    """Handler for ListTransactionsByAsset query."""

    def __init__(
        self,
        transaction_repo: TransactionRepository,
        asset_repo: AssetRepository,
    ) -> None:
        self._transaction_repo = transaction_repo
        self._verifier = OwnershipVerifier(asset_repo=asset_repo)

    async def handle(
        self, query: ListTransactionsByAsset
    ) -> Result[list[Transaction], DomainError]:
        match await self._verifier.verify_asset_ownership(
            query.asset_id, query.user_id
        ):
            case Failure(error=error):
                return Failure(error=error)
            case Success():
                pass
        page = clamp_pagination(
            query.limit, query.offset, default=TRANSACTION_DEFAULT_LIMIT
        )
        transactions = await self._transaction_repo.find_by_asset_id(
            query.asset_id, page.limit, page.offset
        )
        return Success(value=transactions)


class ListTransactionsByDateRangeHandler:
    """Handler for ListTransactionsByDateRange query."""

    def __init__(self, transaction_repo: TransactionRepository) -> None:
        self._transaction_repo = transaction_repo

    async def handle(
        self, query: ListTransactionsByDateRange
    ) -> Result[list[Transaction], DomainError]:
        if error := _check_range(query.start_date, query.end_date):
            return Failure(error=error)
        transactions = await self._transaction_repo.find_by_date_range(
            query.user_id, query.start_date, query.end_date
        )
        return Success(value=transactions)


class ListTransactionsByTypeHandler:
    """Handler for ListTransactionsByType query."""

    def __init__(self, transaction_repo: TransactionRepository) -> None:
        self._transaction_repo = transaction_repo

    async def handle(
        self, query: ListTransactionsByType
    ) -> Result[list[Transaction], DomainError]:
        match parse_transaction_type(query.transaction_type):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=transaction_type):
                pass
        transactions = await self._transaction_repo.find_by_type(
            query.user_id, transaction_type
        )
        return Success(value=transactions)


class ListTransactionsByCategoryHandler:
    """Handler for ListTransactionsByCategory query."""

    def __init__(self, transaction_repo: TransactionRepository) -> None:
        self._transaction_repo = transaction_repo

    async def handle(
        self, query: ListTransactionsByCategory
    ) -> Result[list[Transaction], DomainError]:
        transactions = await self._transaction_repo.find_by_category(
            query.user_id, query.category
        )
        return Success(value=transactions)


class GetTotalsByCategoryHandler:
    """Handler for GetTotalsByCategory query.

    Debit types count negative and every other type positive, so BORROWING
    is negative here.
    """

    def __init__(self, transaction_repo: TransactionRepository) -> None:
        self._transaction_repo = transaction_repo

    async def handle(
        self, query: GetTotalsByCategory
    ) -> Result[dict[str, Decimal], DomainError]:
        if error := _check_range(query.start_date, query.end_date):
            return Failure(error=error)
        totals = await self._transaction_repo.get_totals_by_category(
            query.user_id, query.start_date, query.end_date
        )
        return Success(value=totals)


class GetTotalsByTypeHandler:
    """Handler for GetTotalsByType query."""

    def __init__(self, transaction_repo: TransactionRepository) -> None:
        self._transaction_repo = transaction_repo

    async def handle(
        self, query: GetTotalsByType
    ) -> Result[dict[TransactionType, Decimal], DomainError]:
        if error := _check_range(query.start_date, query.end_date):
            return Failure(error=error)
        totals = await self._transaction_repo.get_totals_by_type(
            query.user_id, query.start_date, query.end_date
        )
        return Success(value=totals)


class GetMonthlyTotalsHandler:
    """Handler for GetMonthlyTotals query."""

    def __init__(self, transaction_repo: TransactionRepository) -> None:
        self._transaction_repo = transaction_repo

    async def handle(
        self, query: GetMonthlyTotals
    ) -> Result[list[MonthlyTotal], DomainError]:
        if error := _check_range(query.start_date, query.end_date):
            return Failure(error=error)
        totals = await self._transaction_repo.get_monthly_totals(
            query.user_id, query.start_date, query.end_date
        )
        return Success(value=totals)
