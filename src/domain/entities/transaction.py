"""Transaction domain entity.

Records a directional value movement on an account, optionally tied to an
asset and, for transfers, to a destination account. Classification
(debit/credit) comes from ``TransactionType``; this entity adds the
fee-adjusted total and the type-specific validity rules.

Validity rules:
    - amount > 0, except for WITHDRAWAL, EXPENSE, FEE, TAX and REPAYMENT
    - TRANSFER requires ``to_account_id``
    - BUY and SELL require ``asset_id``

Note:
    Transfers record the movement only. Neither account balance is changed
    by creating a transaction.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from decimal import Decimal
from uuid import UUID

from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success
from src.domain.enums.transaction_type import TransactionType
from src.domain.errors.transaction_error import TransactionError

_ZERO = Decimal("0")


@dataclass
class Transaction:
    """Recorded value movement.

    Attributes:
        id: Unique transaction identifier.
        user_id: Owning user.
        account_id: Account the movement is booked on.
        transaction_type: Kind of movement.
        amount: Monetary amount (sign handled by classification).
        date: When the movement happened.
        asset_id: Holding concerned (required for BUY/SELL).
        quantity: Units moved, for asset transactions.
        price: Unit price, for asset transactions.
        fee: Fee charged on top of (debit) or out of (credit) the amount.
        currency: Currency label.
        description: Free-form description.
        category: User-defined category used by category totals.
        to_account_id: Destination account (required for TRANSFER).
        transaction_hash: On-chain hash for crypto movements.
        created_at: Creation timestamp.
        updated_at: Last modification timestamp.

    Example:
        >>> tx = Transaction(..., transaction_type=TransactionType.WITHDRAWAL,
        ...     amount=Decimal("100"), fee=Decimal("5"))
        >>> tx.total_amount()
        Decimal('105')
    """

    # ========================================================================
    # Core Identifiers
    # ========================================================================

    id: UUID
    user_id: UUID
    account_id: UUID

    # ========================================================================
    # Classification and Amounts
    # ========================================================================

    transaction_type: TransactionType
    amount: Decimal
    date: datetime
    asset_id: UUID | None = None
    quantity: Decimal = _ZERO
    price: Decimal = _ZERO
    fee: Decimal = _ZERO
    currency: str = ""

    # ========================================================================
    # Descriptive
    # ========================================================================

    description: str = ""
    category: str = ""
    to_account_id: UUID | None = None
    transaction_hash: str | None = None

    # ========================================================================
    # Timestamps
    # ========================================================================

    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    # -------------------------------------------------------------------------
    # Query Methods
    # -------------------------------------------------------------------------

    def is_owned_by(self, user_id: UUID) -> bool:
        return self.user_id == user_id

    def is_debit(self) -> bool:
        return self.transaction_type.is_debit()

    def is_credit(self) -> bool:
        return self.transaction_type.is_credit()

    def is_transfer(self) -> bool:
        return self.transaction_type == TransactionType.TRANSFER

    def is_asset_transaction(self) -> bool:
        return self.transaction_type in TransactionType.asset_transaction_types()

    def total_amount(self) -> Decimal:
        """Fee-adjusted total.

        Debits cost the amount plus the fee; everything else yields the
        amount minus the fee.
        """
        if self.is_debit():
            return self.amount + self.fee
        return self.amount - self.fee

    def validate(self) -> Result[None, ValidationError]:
        """Check the type-specific validity rules.

        Returns:
            Success(None): Transaction is valid.
            Failure(ValidationError): First rule violated.
        """
        return validate_transaction_fields(
            transaction_type=self.transaction_type,
            amount=self.amount,
            asset_id=self.asset_id,
            to_account_id=self.to_account_id,
        )


def validate_transaction_fields(
    *,
    transaction_type: TransactionType,
    amount: Decimal,
    asset_id: UUID | None,
    to_account_id: UUID | None,
) -> Result[None, ValidationError]:
    """Validity rules shared by the entity and the command handlers."""
    if amount <= 0 and not transaction_type.allows_non_positive_amount():
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_AMOUNT,
                message=TransactionError.INVALID_AMOUNT,
                field="amount",
            )
        )
    if transaction_type == TransactionType.TRANSFER and to_account_id is None:
        return Failure(
            error=ValidationError(
                code=ErrorCode.TRANSFER_DESTINATION_REQUIRED,
                message=TransactionError.TRANSFER_DESTINATION_REQUIRED,
                field="to_account_id",
            )
        )
    if transaction_type.requires_asset() and asset_id is None:
        return Failure(
            error=ValidationError(
                code=ErrorCode.ASSET_REQUIRED,
                message=TransactionError.ASSET_REQUIRED,
                field="asset_id",
            )
        )
    return Success(value=None)
