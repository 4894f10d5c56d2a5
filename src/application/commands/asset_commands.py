"""Asset commands (CQRS write operations)."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class CreateAsset:
    """Record a new holding inside an owned account.

    Attributes:
        user_id: Authenticated caller.
        account_id: Owned account receiving the holding.
        definition_id: Existing definition describing the unit.
        asset_type: One of AssetType.values().
        quantity: Units held, must be > 0.
        notes: Free-form notes.
        purchase_date: Acquisition time (defaults to now).
        purchase_price: Price paid per unit.
        current_price: Last known price per unit (defaults to purchase price).
        currency: Price currency label.
    """

    user_id: UUID
    account_id: UUID
    definition_id: UUID
    asset_type: str
    quantity: Decimal
    notes: str = ""
    purchase_date: datetime | None = None
    purchase_price: Decimal = Decimal("0")
    current_price: Decimal | None = None
    currency: str = ""


@dataclass(frozen=True, kw_only=True)
class UpdateAsset:
    """Update an owned holding.

    When ``quantity`` grows and ``price`` is positive, the purchase price
    becomes the weighted average of the old and added units. Fields left
    as None are not changed.

    Attributes:
        price: Price paid per added unit (used only for the average).
    """

    asset_id: UUID
    user_id: UUID
    asset_type: str | None = None
    quantity: Decimal | None = None
    price: Decimal | None = None
    account_id: UUID | None = None
    definition_id: UUID | None = None
    notes: str | None = None
    purchase_date: datetime | None = None


@dataclass(frozen=True, kw_only=True)
class UpdateAssetPrice:
    """Record a new current price for an owned holding."""

    asset_id: UUID
    user_id: UUID
    price: Decimal


@dataclass(frozen=True, kw_only=True)
class DeleteAsset:
    """Delete an owned holding."""

    asset_id: UUID
    user_id: UUID
