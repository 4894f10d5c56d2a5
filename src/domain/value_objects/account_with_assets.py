"""Denormalized account view joining the account's holdings.

The quantity totals are grouped by the definition suffix of each asset,
which makes them a per-unit proxy for balance, not a converted amount.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from src.domain.entities.account import Account
from src.domain.enums.asset_type import AssetType


@dataclass(frozen=True, kw_only=True)
class AssetInfo:
    """Asset enriched with its definition's name and abbreviation."""

    id: UUID
    definition_id: UUID
    asset_type: AssetType
    quantity: Decimal
    symbol: str
    name: str
    suffix: str
    updated_at: datetime


@dataclass(frozen=True, kw_only=True)
class AccountWithAssets:
    """Account plus its holdings and per-unit totals.

    Attributes:
        account: The account itself.
        assets: Holdings in the account.
        total_balances: Sum of asset quantities per definition suffix.
        asset_counts: Number of holdings per asset type.
        last_updated: Most recent asset update, None when the account is empty.
    """

    account: Account
    assets: list[AssetInfo] = field(default_factory=list)
    total_balances: dict[str, Decimal] = field(default_factory=dict)
    asset_counts: dict[AssetType, int] = field(default_factory=dict)
    last_updated: datetime | None = None

    @classmethod
    def build(cls, account: Account, assets: list[AssetInfo]) -> "AccountWithAssets":
        """Aggregate holdings into per-suffix and per-type totals."""
        total_balances: dict[str, Decimal] = {}
        asset_counts: dict[AssetType, int] = {}
        last_updated: datetime | None = None
        for info in assets:
            total_balances[info.suffix] = (
                total_balances.get(info.suffix, Decimal("0")) + info.quantity
            )
            asset_counts[info.asset_type] = asset_counts.get(info.asset_type, 0) + 1
            if last_updated is None or info.updated_at > last_updated:
                last_updated = info.updated_at
        return cls(
            account=account,
            assets=assets,
            total_balances=total_balances,
            asset_counts=asset_counts,
            last_updated=last_updated,
        )
