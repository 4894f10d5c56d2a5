"""Account database model.

Architecture:
    - Accounts belong to users (FK, CASCADE delete)
    - Balance stored as Decimal with a separate currency label
    - Account type stored as its lowercase string value
    - A CHECK constraint keeps balance non-negative
"""

from decimal import Decimal
from uuid import UUID

from sqlalchemy import CheckConstraint, ForeignKey, Index, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class Account(BaseMutableModel):
    """Account model.

    Fields:
        id: UUID primary key (from BaseMutableModel)
        created_at: Timestamp when created (from BaseMutableModel)
        updated_at: Timestamp when last updated (from BaseMutableModel)
        user_id: FK to users table
        name: Account name chosen by the user
        account_type: Type (bank, savings, credit-card, ...)
        balance: Current balance (Decimal, >= 0)
        currency: Currency label, never converted

    Indexes:
        - ix_accounts_user_id: owner lookup
        - ix_accounts_user_type: per-user type filter

    Example:
        account = Account(
            user_id=user_id,
            name="Main checking",
            account_type="checking",
            balance=Decimal("1200.00"),
            currency="USD",
        )
        session.add(account)
        await session.flush()
    """

    __tablename__ = "accounts"

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="FK to users table",
    )

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Account name",
    )

    account_type: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        comment="Account type (bank, savings, credit-card, ...)",
    )

    balance: Mapped[Decimal] = mapped_column(
        Numeric(precision=19, scale=4),
        nullable=False,
        default=Decimal("0.0000"),
        comment="Current balance amount",
    )

    currency: Mapped[str] = mapped_column(
        String(10),
        nullable=False,
        default="USD",
        comment="Currency label (no conversion)",
    )

    __table_args__ = (
        CheckConstraint("balance >= 0", name="ck_accounts_balance_non_negative"),
        Index("ix_accounts_user_type", "user_id", "account_type"),
    )

    def __repr__(self) -> str:
        return (
            f"<Account(id={self.id}, name={self.name!r}, "
            f"account_type={self.account_type!r}, balance={self.balance})>"
        )
