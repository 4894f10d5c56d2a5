"""Transaction request and response schemas."""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field

from src.domain.entities.transaction import Transaction
from src.domain.value_objects.monthly_total import MonthlyTotal
from src.schemas.common_schemas import JsonDecimal


class CreateTransactionRequest(BaseModel):
    """Create payload.

    Type-specific rules (positive amount, transfer destination, asset for
    BUY/SELL) are enforced by the handlers.
    """

    account_id: UUID
    transaction_type: str = Field(..., examples=["DEPOSIT", "BUY", "TRANSFER"])
    amount: Decimal
    date: datetime | None = None
    asset_id: UUID | None = None
    quantity: Decimal = Decimal("0")
    price: Decimal = Decimal("0")
    fee: Decimal = Decimal("0")
    currency: str = Field(default="USD", max_length=10)
    description: str = ""
    category: str = Field(default="", max_length=100)
    to_account_id: UUID | None = None
    transaction_hash: str | None = Field(default=None, max_length=255)


class UpdateTransactionRequest(CreateTransactionRequest):
    """Full replacement; the date is required."""

    date: datetime


class TransactionResponse(BaseModel):
    id: UUID
    user_id: UUID
    account_id: UUID
    transaction_type: str
    amount: JsonDecimal
    total_amount: JsonDecimal
    date: datetime
    asset_id: UUID | None
    quantity: JsonDecimal
    price: JsonDecimal
    fee: JsonDecimal
    currency: str
    description: str
    category: str
    to_account_id: UUID | None
    transaction_hash: str | None
    is_debit: bool
    is_credit: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, transaction: Transaction) -> "TransactionResponse":
        return cls(
            id=transaction.id,
            user_id=transaction.user_id,
            account_id=transaction.account_id,
            transaction_type=transaction.transaction_type.value,
            amount=transaction.amount,
            total_amount=transaction.total_amount(),
            date=transaction.date,
            asset_id=transaction.asset_id,
            quantity=transaction.quantity,
            price=transaction.price,
            fee=transaction.fee,
            currency=transaction.currency,
            description=transaction.description,
            category=transaction.category,
            to_account_id=transaction.to_account_id,
            transaction_hash=transaction.transaction_hash,
            is_debit=transaction.is_debit(),
            is_credit=transaction.is_credit(),
            created_at=transaction.created_at,
            updated_at=transaction.updated_at,
        )


class TransactionListResponse(BaseModel):
    transactions: list[TransactionResponse]
    count: int

    @classmethod
    def from_entities(
        cls, transactions: list[Transaction]
    ) -> "TransactionListResponse":
        return cls(
            transactions=[TransactionResponse.from_entity(t) for t in transactions],
            count=len(transactions),
        )


class TotalsResponse(BaseModel):
    """Signed totals keyed by category or by type."""

    totals: dict[str, JsonDecimal]


class MonthlyTotalResponse(BaseModel):
    year: int
    month: int
    total_in: JsonDecimal
    total_out: JsonDecimal
    net_amount: JsonDecimal

    @classmethod
    def from_total(cls, total: MonthlyTotal) -> "MonthlyTotalResponse":
        return cls(
            year=total.year,
            month=total.month,
            total_in=total.total_in,
            total_out=total.total_out,
            net_amount=total.net_amount,
        )


class MonthlyTotalsResponse(BaseModel):
    months: list[MonthlyTotalResponse]
