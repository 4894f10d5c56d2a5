"""Account command handlers.

Validation always runs before any store call, ownership right after the
existence check and before any mutation.

Architecture:
- Application layer ONLY imports from domain/core (entities, protocols)
- Repositories injected via protocols
- Returns Result[Account, DomainError]; store exceptions propagate
"""

from datetime import UTC, datetime
from decimal import Decimal

from uuid_extensions import uuid7

from src.application.commands.account_commands import (
    CreateAccount,
    DeleteAccount,
    UpdateAccount,
    UpdateAccountBalance,
)
from src.application.services.ownership_verifier import OwnershipVerifier
from src.core.enums import ErrorCode
from src.core.errors import DomainError, InsufficientBalanceError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities.account import Account
from src.domain.enums.account_type import AccountType
from src.domain.errors import AccountError
from src.domain.protocols.account_repository import AccountRepository
from src.domain.protocols.logger_protocol import LoggerProtocol


def _validate_name(name: str) -> ValidationError | None:
    if not name or not name.strip():
        return ValidationError(
            code=ErrorCode.INVALID_NAME,
            message=AccountError.INVALID_ACCOUNT_NAME,
            field="name",
        )
    return None


def parse_account_type(value: str) -> Result[AccountType, ValidationError]:
    """Resolve a raw account type string, failing if unknown."""
    if not AccountType.is_valid(value):
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_ACCOUNT_TYPE,
                message=AccountError.INVALID_ACCOUNT_TYPE,
                field="account_type",
                details={"allowed": ", ".join(AccountType.values())},
            )
        )
    return Success(value=AccountType(value))


def _validate_currency(currency: str) -> ValidationError | None:
    if not currency or not currency.strip():
        return ValidationError(
            code=ErrorCode.INVALID_CURRENCY,
            message=AccountError.INVALID_CURRENCY,
            field="currency",
        )
    return None


def _validate_balance(balance: Decimal) -> ValidationError | None:
    if balance < 0:
        return ValidationError(
            code=ErrorCode.INVALID_BALANCE,
            message=AccountError.NEGATIVE_BALANCE,
            field="balance",
        )
    return None


class CreateAccountHandler:
    """Handler for CreateAccount command."""

    def __init__(self, account_repo: AccountRepository, logger: LoggerProtocol) -> None:
        self._account_repo = account_repo
        self._logger = logger

    async def handle(self, cmd: CreateAccount) -> Result[Account, DomainError]:
        """Validate input and persist a new account.

        Returns:
            Success(Account): Newly created account.
            Failure(ValidationError): Blank name or currency, unknown type,
                negative balance.
        """
        if error := _validate_name(cmd.name):
            return Failure(error=error)
        type_result = parse_account_type(cmd.account_type)
        if isinstance(type_result, Failure):
            return type_result
        if error := _validate_currency(cmd.currency):
            return Failure(error=error)
        if error := _validate_balance(cmd.balance):
            return Failure(error=error)

        now = datetime.now(UTC)
        account = Account(
            id=uuid7(),
            user_id=cmd.user_id,
            name=cmd.name.strip(),
            account_type=type_result.value,
            balance=cmd.balance,
            currency=cmd.currency,
            created_at=now,
            updated_at=now,
        )
        await self._account_repo.save(account)

        self._logger.info(
            "account_created",
            account_id=str(account.id),
            user_id=str(cmd.user_id),
            account_type=account.account_type.value,
        )
        return Success(value=account)


class UpdateAccountHandler:
    """Handler for UpdateAccount command.

    Only supplied fields are validated and applied.
    """

    def __init__(self, account_repo: AccountRepository, logger: LoggerProtocol) -> None:
        self._account_repo = account_repo
        self._verifier = OwnershipVerifier(account_repo=account_repo)
        self._logger = logger

    async def handle(self, cmd: UpdateAccount) -> Result[Account, DomainError]:
        """Validate, authorize and apply an account update.

        Returns:
            Success(Account): Updated account.
            Failure(ValidationError | NotFoundError | AuthorizationError)
        """
        if cmd.name is not None and (error := _validate_name(cmd.name)):
            return Failure(error=error)
        account_type: AccountType | None = None
        if cmd.account_type is not None:
            type_result = parse_account_type(cmd.account_type)
            if isinstance(type_result, Failure):
                return type_result
            account_type = type_result.value
        if cmd.currency is not None and (error := _validate_currency(cmd.currency)):
            return Failure(error=error)
        if cmd.balance is not None and (error := _validate_balance(cmd.balance)):
            return Failure(error=error)

        ownership = await self._verifier.verify_account_ownership(
            cmd.account_id, cmd.user_id
        )
        if isinstance(ownership, Failure):
            return ownership
        account = ownership.value

        account.update(
            name=cmd.name.strip() if cmd.name is not None else None,
            account_type=account_type,
            balance=cmd.balance,
            currency=cmd.currency,
        )
        stored_balance = await self._account_repo.update(
            account, include_balance=cmd.balance is not None
        )
        account.balance = stored_balance

        self._logger.info("account_updated", account_id=str(account.id))
        return Success(value=account)


class UpdateAccountBalanceHandler:
    """Handler for UpdateAccountBalance command.

    The only path that adjusts a balance outside a full update. The
    store applies the delta atomically and refuses to go negative, so two
    concurrent adjustments cannot both spend the same funds.
    """

    def __init__(self, account_repo: AccountRepository, logger: LoggerProtocol) -> None:
        self._account_repo = account_repo
        self._verifier = OwnershipVerifier(account_repo=account_repo)
        self._logger = logger

    async def handle(self, cmd: UpdateAccountBalance) -> Result[Account, DomainError]:
        """Apply a signed delta to an owned account.

        Returns:
            Success(Account): Account carrying the new balance.
            Failure(InsufficientBalanceError): Balance would go negative;
                nothing was written.
            Failure(NotFoundError | AuthorizationError)
        """
        ownership = await self._verifier.verify_account_ownership(
            cmd.account_id, cmd.user_id
        )
        if isinstance(ownership, Failure):
            return ownership
        account = ownership.value

        new_balance = await self._account_repo.apply_delta(account.id, cmd.amount)
        if new_balance is None:
            self._logger.warning(
                "balance_update_rejected",
                account_id=str(account.id),
                delta=str(cmd.amount),
            )
            return Failure(
                error=InsufficientBalanceError(
                    code=ErrorCode.INSUFFICIENT_BALANCE,
                    message=AccountError.INSUFFICIENT_BALANCE,
                    resource_id=str(account.id),
                    current_balance=account.balance,
                    requested_delta=cmd.amount,
                )
            )

        account.update(balance=new_balance)
        self._logger.info(
            "balance_updated",
            account_id=str(account.id),
            delta=str(cmd.amount),
            balance=str(new_balance),
        )
        return Success(value=account)


class DeleteAccountHandler:
    """Handler for DeleteAccount command.

    Assets and transactions of the account are removed by the store's
    ON DELETE CASCADE, so no orphaned rows remain.
    """

    def __init__(self, account_repo: AccountRepository, logger: LoggerProtocol) -> None:
        self._account_repo = account_repo
        self._verifier = OwnershipVerifier(account_repo=account_repo)
        self._logger = logger

    async def handle(self, cmd: DeleteAccount) -> Result[None, DomainError]:
        ownership = await self._verifier.verify_account_ownership(
            cmd.account_id, cmd.user_id
        )
        if isinstance(ownership, Failure):
            return ownership

        await self._account_repo.delete(cmd.account_id)
        self._logger.info("account_deleted", account_id=str(cmd.account_id))
        return Success(value=None)
