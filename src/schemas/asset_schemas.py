"""Asset (holding) request and response schemas."""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field

from src.domain.entities.asset import Asset
from src.domain.value_objects.asset_performance import AssetPerformance
from src.schemas.common_schemas import JsonDecimal


class CreateAssetRequest(BaseModel):
    account_id: UUID
    definition_id: UUID
    asset_type: str = Field(..., examples=["CRYPTO", "STOCK"])
    quantity: Decimal = Field(..., description="Units held (> 0)")
    notes: str = ""
    purchase_date: datetime | None = None
    purchase_price: Decimal = Decimal("0")
    current_price: Decimal | None = None
    currency: str = Field(default="USD", max_length=10)


class UpdateAssetRequest(BaseModel):
    """Partial update.

    A quantity increase together with ``price`` re-averages the purchase
    price; ``price`` alone only refreshes the current price.
    """

    account_id: UUID | None = None
    definition_id: UUID | None = None
    asset_type: str | None = None
    quantity: Decimal | None = None
    price: Decimal | None = None
    notes: str | None = None
    purchase_date: datetime | None = None


class UpdatePriceRequest(BaseModel):
    price: Decimal = Field(..., description="New current price per unit")


class AssetResponse(BaseModel):
    id: UUID
    user_id: UUID
    account_id: UUID
    definition_id: UUID
    asset_type: str
    quantity: JsonDecimal
    symbol: str
    purchase_price: JsonDecimal
    current_price: JsonDecimal
    current_value: JsonDecimal
    profit_loss: JsonDecimal
    profit_loss_percentage: JsonDecimal
    currency: str
    notes: str
    purchase_date: datetime
    last_updated: datetime
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, asset: Asset) -> "AssetResponse":
        return cls(
            id=asset.id,
            user_id=asset.user_id,
            account_id=asset.account_id,
            definition_id=asset.definition_id,
            asset_type=asset.asset_type.value,
            quantity=asset.quantity,
            symbol=asset.symbol,
            purchase_price=asset.purchase_price,
            current_price=asset.current_price,
            current_value=asset.current_value(),
            profit_loss=asset.profit_loss(),
            profit_loss_percentage=asset.profit_loss_percentage(),
            currency=asset.currency,
            notes=asset.notes,
            purchase_date=asset.purchase_date,
            last_updated=asset.last_updated,
            created_at=asset.created_at,
            updated_at=asset.updated_at,
        )


class AssetListResponse(BaseModel):
    assets: list[AssetResponse]
    count: int

    @classmethod
    def from_entities(cls, assets: list[Asset]) -> "AssetListResponse":
        return cls(
            assets=[AssetResponse.from_entity(a) for a in assets],
            count=len(assets),
        )


class AssetPerformanceResponse(BaseModel):
    asset_id: UUID
    name: str
    symbol: str
    asset_type: str
    initial_value: JsonDecimal
    current_value: JsonDecimal
    profit_loss: JsonDecimal
    profit_loss_percentage: JsonDecimal
    currency: str

    @classmethod
    def from_performance(cls, p: AssetPerformance) -> "AssetPerformanceResponse":
        return cls(
            asset_id=p.asset_id,
            name=p.name,
            symbol=p.symbol,
            asset_type=p.asset_type.value,
            initial_value=p.initial_value,
            current_value=p.current_value,
            profit_loss=p.profit_loss,
            profit_loss_percentage=p.profit_loss_percentage,
            currency=p.currency,
        )


class TotalValueResponse(BaseModel):
    total_value: JsonDecimal
    asset_types: list[str]


class AssetPerformanceListResponse(BaseModel):
    assets: list[AssetPerformanceResponse]

    @classmethod
    def from_performance(
        cls, performance: list[AssetPerformance]
    ) -> "AssetPerformanceListResponse":
        return cls(
            assets=[AssetPerformanceResponse.from_performance(p) for p in performance]
        )
