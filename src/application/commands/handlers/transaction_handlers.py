"""Transaction command handlers.

Enforces the type-specific rules (amount sign exceptions, transfer
destination, asset for BUY/SELL) before touching the store, then checks
that every referenced account and asset belongs to the caller.

Note:
    Handlers record movements only. A transfer does not debit the source
    nor credit the destination balance.
"""

from datetime import UTC, datetime
from decimal import Decimal
from uuid import UUID

from uuid_extensions import uuid7

from src.application.commands.transaction_commands import (
    CreateTransaction,
    DeleteTransaction,
    UpdateTransaction,
)
from src.application.services.ownership_verifier import OwnershipVerifier
from src.core.enums import ErrorCode
from src.core.errors import DomainError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities.transaction import Transaction, validate_transaction_fields
from src.domain.enums.transaction_type import TransactionType
from src.domain.errors import TransactionError
from src.domain.protocols.account_repository import AccountRepository
from src.domain.protocols.asset_repository import AssetRepository
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.transaction_repository import TransactionRepository


def parse_transaction_type(value: str) -> Result[TransactionType, ValidationError]:
    """Resolve a raw type string, failing with ValidationError if unknown."""
    if not TransactionType.is_valid(value):
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_TRANSACTION_TYPE,
                message=TransactionError.INVALID_TRANSACTION_TYPE,
                field="transaction_type",
                details={"allowed": ", ".join(TransactionType.values())},
            )
        )
    return Success(value=TransactionType(value))


def _validate_fee(fee: Decimal) -> ValidationError | None:
    if fee < 0:
        return ValidationError(
            code=ErrorCode.INVALID_AMOUNT,
            message=TransactionError.NEGATIVE_FEE,
            field="fee",
        )
    return None


class _ReferenceChecker:
    """Ownership of the accounts and asset a transaction points at."""

    def __init__(self, verifier: OwnershipVerifier) -> None:
        self._verifier = verifier

    async def check(
        self,
        user_id: UUID,
        account_id: UUID,
        to_account_id: UUID | None,
        asset_id: UUID | None,
    ) -> DomainError | None:
        result = await self._verifier.verify_account_ownership(account_id, user_id)
        if isinstance(result, Failure):
            return result.error
        if to_account_id is not None:
            result = await self._verifier.verify_account_ownership(
                to_account_id, user_id
            )
            if isinstance(result, Failure):
                return result.error
        if asset_id is not None:
            asset_result = await self._verifier.verify_asset_ownership(
                asset_id, user_id
            )
            if isinstance(asset_result, Failure):
                return asset_result.error
        return None


class CreateTransactionHandler:
    """Handler for CreateTransaction command.

    Dependencies (injected via constructor):
        - TransactionRepository: Persistence
        - AccountRepository: Ownership of source and destination accounts
        - AssetRepository: Ownership of the referenced asset
    """

    def __init__(
        self,
        transaction_repo: TransactionRepository,
        account_repo: AccountRepository,
        asset_repo: AssetRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._transaction_repo = transaction_repo
        self._references = _ReferenceChecker(
            OwnershipVerifier(account_repo=account_repo, asset_repo=asset_repo)
        )
        self._logger = logger

    async def handle(self, cmd: CreateTransaction) -> Result[Transaction, DomainError]:
        """Validate, authorize and record a new transaction.

        Returns:
            Success(Transaction): Recorded transaction.
            Failure(ValidationError): Type-specific rule violated.
            Failure(NotFoundError | AuthorizationError): Referenced entity.
        """
        type_result = parse_transaction_type(cmd.transaction_type)
        if isinstance(type_result, Failure):
            return type_result
        transaction_type = type_result.value

        validity = validate_transaction_fields(
            transaction_type=transaction_type,
            amount=cmd.amount,
            asset_id=cmd.asset_id,
            to_account_id=cmd.to_account_id,
        )
        if isinstance(validity, Failure):
            return validity
        if error := _validate_fee(cmd.fee):
            return Failure(error=error)

        if error := await self._references.check(
            cmd.user_id, cmd.account_id, cmd.to_account_id, cmd.asset_id
        ):
            return Failure(error=error)

        now = datetime.now(UTC)
        transaction = Transaction(
            id=uuid7(),
            user_id=cmd.user_id,
            account_id=cmd.account_id,
            transaction_type=transaction_type,
            amount=cmd.amount,
            date=cmd.date or now,
            asset_id=cmd.asset_id,
            quantity=cmd.quantity,
            price=cmd.price,
            fee=cmd.fee,
            currency=cmd.currency,
            description=cmd.description,
            category=cmd.category,
            to_account_id=cmd.to_account_id,
            transaction_hash=cmd.transaction_hash,
            created_at=now,
            updated_at=now,
        )
        await self._transaction_repo.save(transaction)

        self._logger.info(
            "transaction_created",
            transaction_id=str(transaction.id),
            account_id=str(transaction.account_id),
            transaction_type=transaction_type.value,
        )
        return Success(value=transaction)


class UpdateTransactionHandler:
    """Handler for UpdateTransaction command."""

    def __init__(
        self,
        transaction_repo: TransactionRepository,
        account_repo: AccountRepository,
        asset_repo: AssetRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._transaction_repo = transaction_repo
        verifier = OwnershipVerifier(
            account_repo=account_repo,
            asset_repo=asset_repo,
            transaction_repo=transaction_repo,
        )
        self._verifier = verifier
        self._references = _ReferenceChecker(verifier)
        self._logger = logger

    async def handle(self, cmd: UpdateTransaction) -> Result[Transaction, DomainError]:
        type_result = parse_transaction_type(cmd.transaction_type)
        if isinstance(type_result, Failure):
            return type_result
        transaction_type = type_result.value

        validity = validate_transaction_fields(
            transaction_type=transaction_type,
            amount=cmd.amount,
            asset_id=cmd.asset_id,
            to_account_id=cmd.to_account_id,
        )
        if isinstance(validity, Failure):
            return validity
        if error := _validate_fee(cmd.fee):
            return Failure(error=error)

        ownership = await self._verifier.verify_transaction_ownership(
            cmd.transaction_id, cmd.user_id
        )
        if isinstance(ownership, Failure):
            return ownership
        transaction = ownership.value

        if error := await self._references.check(
            cmd.user_id, cmd.account_id, cmd.to_account_id, cmd.asset_id
        ):
            return Failure(error=error)

        transaction.account_id = cmd.account_id
        transaction.transaction_type = transaction_type
        transaction.amount = cmd.amount
        transaction.date = cmd.date
        transaction.asset_id = cmd.asset_id
        transaction.quantity = cmd.quantity
        transaction.price = cmd.price
        transaction.fee = cmd.fee
        transaction.currency = cmd.currency
        transaction.description = cmd.description
        transaction.category = cmd.category
        transaction.to_account_id = cmd.to_account_id
        transaction.transaction_hash = cmd.transaction_hash
        transaction.updated_at = datetime.now(UTC)

        await self._transaction_repo.update(transaction)
        self._logger.info("transaction_updated", transaction_id=str(transaction.id))
        return Success(value=transaction)


class DeleteTransactionHandler:
    """Handler for DeleteTransaction command."""

    def __init__(
        self, transaction_repo: TransactionRepository, logger: LoggerProtocol
    ) -> None:
        self._transaction_repo = transaction_repo
        self._verifier = OwnershipVerifier(transaction_repo=transaction_repo)
        self._logger = logger

    async def handle(self, cmd: DeleteTransaction) -> Result[None, DomainError]:
        ownership = await self._verifier.verify_transaction_ownership(
            cmd.transaction_id, cmd.user_id
        )
        if isinstance(ownership, Failure):
            return ownership

        await self._transaction_repo.delete(cmd.transaction_id)
        self._logger.info("transaction_deleted", transaction_id=str(cmd.transaction_id))
        return Success(value=None)
