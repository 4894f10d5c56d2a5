"""Asset domain entity.

An asset is a quantity of a defined unit held inside one account. It
carries its own pricing fields so valuation and profit/loss are derived
locally: no live price feed exists, prices are whatever was last recorded.

Derived values:
    current_value   = quantity * current_price
    purchase_value  = quantity * purchase_price
    profit_loss     = current_value - purchase_value
    profit_loss_pct = profit_loss / purchase_value * 100 (0 when purchase_value is 0)

Reference:
    Weighted-average purchase price on a quantity increase:
        new_avg = (old_qty * old_price + (new_qty - old_qty) * new_price) / new_qty
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from decimal import Decimal
from uuid import UUID

from src.domain.enums.asset_type import AssetType

_ZERO = Decimal("0")
_HUNDRED = Decimal("100")


@dataclass
class Asset:
    """Holding of a defined unit within an account.

    Attributes:
        id: Unique asset identifier.
        user_id: Owning user (must match on every access).
        account_id: Account holding the asset.
        definition_id: Canonical unit definition.
        asset_type: Closed-set classification.
        quantity: Units held, always > 0.
        notes: Free-form notes.
        purchase_date: When the holding was acquired.
        symbol: Ticker or symbol used for display.
        purchase_price: Average price paid per unit.
        current_price: Last recorded price per unit.
        currency: Price currency label.
        last_updated: When the current price was last recorded.
        created_at: Creation timestamp.
        updated_at: Last modification timestamp.

    Example:
        >>> asset = Asset(..., quantity=Decimal("2"),
        ...     purchase_price=Decimal("50"), current_price=Decimal("80"))
        >>> asset.profit_loss(), asset.profit_loss_percentage()
        (Decimal('60'), Decimal('60'))
    """

    id: UUID
    user_id: UUID
    account_id: UUID
    definition_id: UUID
    asset_type: AssetType
    quantity: Decimal
    notes: str = ""
    purchase_date: datetime = field(default_factory=lambda: datetime.now(UTC))
    symbol: str = ""
    purchase_price: Decimal = _ZERO
    current_price: Decimal = _ZERO
    currency: str = ""
    last_updated: datetime = field(default_factory=lambda: datetime.now(UTC))
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    # -------------------------------------------------------------------------
    # Query Methods - Valuation
    # -------------------------------------------------------------------------

    def is_owned_by(self, user_id: UUID) -> bool:
        return self.user_id == user_id

    def current_value(self) -> Decimal:
        """Quantity valued at the last recorded price."""
        return self.quantity * self.current_price

    def purchase_value(self) -> Decimal:
        """Quantity valued at the average purchase price."""
        return self.quantity * self.purchase_price

    def profit_loss(self) -> Decimal:
        return self.current_value() - self.purchase_value()

    def profit_loss_percentage(self) -> Decimal:
        """Profit/loss relative to purchase value, in percent.

        Returns 0 when nothing was paid for the holding.
        """
        purchase_value = self.purchase_value()
        if purchase_value == 0:
            return _ZERO
        return self.profit_loss() / purchase_value * _HUNDRED

    # -------------------------------------------------------------------------
    # Update Methods
    # -------------------------------------------------------------------------

    def update_price(self, price: Decimal) -> None:
        """Record a new current price and bump ``last_updated``."""
        now = datetime.now(UTC)
        self.current_price = price
        self.last_updated = now
        self.updated_at = now

    def update_quantity(self, quantity: Decimal, price: Decimal) -> None:
        """Set a new quantity, averaging the purchase price on increases.

        The purchase price is recomputed only when the quantity grows and a
        positive acquisition price is supplied; decreases and zero prices
        keep the existing average.

        Args:
            quantity: New total quantity.
            price: Price paid per unit for the added quantity.

        Example:
            >>> asset.quantity, asset.purchase_price = Decimal("10"), Decimal("100")
            >>> asset.update_quantity(Decimal("15"), Decimal("130"))
            >>> asset.purchase_price
            Decimal('110')
        """
        if quantity > self.quantity and price > 0:
            added = quantity - self.quantity
            total_cost = self.quantity * self.purchase_price + added * price
            self.purchase_price = total_cost / quantity
        self.quantity = quantity
        self.updated_at = datetime.now(UTC)
