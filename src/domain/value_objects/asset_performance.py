"""Asset performance read model."""

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from src.domain.enums.asset_type import AssetType


@dataclass(frozen=True, kw_only=True)
class AssetPerformance:
    """Valuation of one holding bought inside the requested window.

    Attributes:
        asset_id: Holding identifier.
        name: Definition name.
        symbol: Holding symbol.
        asset_type: Holding classification.
        initial_value: Quantity at purchase price.
        current_value: Quantity at current price.
        profit_loss: current_value - initial_value.
        profit_loss_percentage: Percent change, 0 when initial_value is 0.
        currency: Price currency label.
    """

    asset_id: UUID
    name: str
    symbol: str
    asset_type: AssetType
    initial_value: Decimal
    current_value: Decimal
    profit_loss: Decimal
    profit_loss_percentage: Decimal
    currency: str
