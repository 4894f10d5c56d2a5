"""Transaction commands (CQRS write operations).

Creating or updating a transaction never moves balances; amounts are
recorded exactly as supplied.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class CreateTransaction:
    """Record a value movement on an owned account.

    Attributes:
        user_id: Authenticated caller.
        account_id: Owned account the movement is booked on.
        transaction_type: One of TransactionType.values().
        amount: Monetary amount (> 0 unless the type is a cost type).
        date: When the movement happened (defaults to now).
        asset_id: Owned asset (required for BUY/SELL).
        to_account_id: Owned destination account (required for TRANSFER).
    """

    user_id: UUID
    account_id: UUID
    transaction_type: str
    amount: Decimal
    date: datetime | None = None
    asset_id: UUID | None = None
    quantity: Decimal = Decimal("0")
    price: Decimal = Decimal("0")
    fee: Decimal = Decimal("0")
    currency: str = ""
    description: str = ""
    category: str = ""
    to_account_id: UUID | None = None
    transaction_hash: str | None = None


@dataclass(frozen=True, kw_only=True)
class UpdateTransaction:
    """Replace the fields of an owned transaction.

    The result is re-validated with the same rules as CreateTransaction.
    """

    transaction_id: UUID
    user_id: UUID
    account_id: UUID
    transaction_type: str
    amount: Decimal
    date: datetime
    asset_id: UUID | None = None
    quantity: Decimal = Decimal("0")
    price: Decimal = Decimal("0")
    fee: Decimal = Decimal("0")
    currency: str = ""
    description: str = ""
    category: str = ""
    to_account_id: UUID | None = None
    transaction_hash: str | None = None


@dataclass(frozen=True, kw_only=True)
class DeleteTransaction:
    """Delete an owned transaction."""

    transaction_id: UUID
    user_id: UUID
