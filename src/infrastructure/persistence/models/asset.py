"""Asset (holding) database model.

Architecture:
    - Assets live inside an account (FK, CASCADE delete)
    - Assets point at a shared definition (FK, RESTRICT delete), so a
      definition still in use cannot be removed
    - Quantities use 8 decimal places for crypto; prices use 4
"""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class Asset(BaseMutableModel):
    """Asset model.

    Fields:
        user_id: Owner (FK users, CASCADE)
        account_id: Containing account (FK accounts, CASCADE)
        definition_id: What is held (FK definitions, RESTRICT)
        asset_type: Uppercase type value (STOCK, CRYPTO, ...)
        quantity: Units held (> 0)
        symbol: Display symbol, usually the definition's abbreviation
        purchase_price: Average price per unit paid
        current_price: Latest known price per unit
        currency: Price currency label
        purchase_date: When the position was opened
        last_updated: When the price was last refreshed
        notes: Free text
    """

    __tablename__ = "assets"

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

    definition_id: Mapped[UUID] = mapped_column(
        ForeignKey("definitions.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
        comment="FK to definitions table",
    )

    asset_type: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        index=True,
        comment="Asset type (STOCK, CRYPTO, ...)",
    )

    quantity: Mapped[Decimal] = mapped_column(
        Numeric(precision=28, scale=8),
        nullable=False,
        comment="Units held",
    )

    symbol: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        default="",
        comment="Display symbol",
    )

    purchase_price: Mapped[Decimal] = mapped_column(
        Numeric(precision=19, scale=4),
        nullable=False,
        default=Decimal("0.0000"),
        comment="Average purchase price per unit",
    )

    current_price: Mapped[Decimal] = mapped_column(
        Numeric(precision=19, scale=4),
        nullable=False,
        default=Decimal("0.0000"),
        comment="Latest price per unit",
    )

    currency: Mapped[str] = mapped_column(
        String(10),
        nullable=False,
        default="USD",
        comment="Price currency label",
    )

    purchase_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
        comment="When the position was opened",
    )

    last_updated: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        comment="Last price refresh",
    )

    notes: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
        comment="Free-text notes",
    )

    def __repr__(self) -> str:
        return (
            f"<Asset(id={self.id}, symbol={self.symbol!r}, "
            f"quantity={self.quantity})>"
        )
