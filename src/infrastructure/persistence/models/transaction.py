"""Transaction database model.

Architecture:
    - Transactions are booked on an account (FK, CASCADE delete)
    - Optional asset and transfer destination references are cleared
      (SET NULL) when the referenced row disappears
    - Transaction type stored as its uppercase string value
"""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, Index, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class Transaction(BaseMutableModel):
    """Transaction model.

    Fields:
        user_id: Owner (FK users, CASCADE)
        account_id: Booking account (FK accounts, CASCADE)
        transaction_type: DEPOSIT, WITHDRAWAL, BUY, SELL, TRANSFER, ...
        amount: Signed per type rules (Decimal)
        date: When the movement happened
        asset_id: Asset concerned (FK assets, SET NULL)
        quantity: Units moved, for asset transactions
        price: Price per unit, for asset transactions
        fee: Fee charged (>= 0)
        currency: Currency label
        description: Free text
        category: User-defined grouping label
        to_account_id: Transfer destination (FK accounts, SET NULL)
        transaction_hash: External reference (e.g., on-chain hash)

    Indexes:
        - ix_transactions_user_date: per-user date ordering and ranges
        - ix_transactions_user_category: category totals
    """

    __tablename__ = "transactions"

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="FK to users table",
    )

    account_id: Mapped[UUID] = mapped_column(
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="FK to accounts table",
    )

    transaction_type: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        index=True,
        comment="Transaction type (DEPOSIT, BUY, ...)",
    )

    amount: Mapped[Decimal] = mapped_column(
        Numeric(precision=19, scale=4),
        nullable=False,
        comment="Transaction amount",
    )

    date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        comment="When the movement happened",
    )

    asset_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("assets.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
        comment="FK to assets table",
    )

    quantity: Mapped[Decimal] = mapped_column(
        Numeric(precision=28, scale=8),
        nullable=False,
        default=Decimal("0"),
        comment="Units moved",
    )

    price: Mapped[Decimal] = mapped_column(
        Numeric(precision=19, scale=4),
        nullable=False,
        default=Decimal("0.0000"),
        comment="Price per unit",
    )

    fee: Mapped[Decimal] = mapped_column(
        Numeric(precision=19, scale=4),
        nullable=False,
        default=Decimal("0.0000"),
        comment="Fee charged",
    )

    currency: Mapped[str] = mapped_column(
        String(10),
        nullable=False,
        default="USD",
        comment="Currency label",
    )

    description: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
        comment="Free-text description",
    )

    category: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        default="",
        comment="Grouping label",
    )

    to_account_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("accounts.id", ondelete="SET NULL"),
        nullable=True,
        comment="Transfer destination account",
    )

    transaction_hash: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
        comment="External reference",
    )

    __table_args__ = (
        Index("ix_transactions_user_date", "user_id", "date"),
        Index("ix_transactions_user_category", "user_id", "category"),
    )

    def __repr__(self) -> str:
        return (
            f"<Transaction(id={self.id}, type={self.transaction_type!r}, "
            f"amount={self.amount})>"
        )
