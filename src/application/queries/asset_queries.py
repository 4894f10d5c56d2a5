"""Asset queries (CQRS read operations)."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class GetAsset:
    """Get a single owned holding by ID."""

    asset_id: UUID
    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListAssets:
    """List every holding of the caller."""

    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListAssetsByAccount:
    """List holdings inside one owned account."""

    account_id: UUID
    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListAssetsByType:
    """List the caller's holdings of one type (string validated by handler)."""

    user_id: UUID
    asset_type: str


@dataclass(frozen=True, kw_only=True)
class FilterAssets:
    """Filter the caller's holdings in memory.

    All supplied predicates are combined with AND. Offset and limit are
    applied after filtering: an offset past the end yields an empty list,
    a limit larger than what remains yields everything remaining.

    Attributes:
        account_id: Holding's account.
        asset_type: Exact type (validated by handler).
        min_quantity: Inclusive lower bound.
        max_quantity: Inclusive upper bound.
        created_from: Inclusive lower bound on created_at.
        created_to: Inclusive upper bound on created_at.
        limit: Page size; None or <= 0 returns everything after offset.
        offset: Items to skip; None or < 0 means 0.
    """

    user_id: UUID
    account_id: UUID | None = None
    asset_type: str | None = None
    min_quantity: Decimal | None = None
    max_quantity: Decimal | None = None
    created_from: datetime | None = None
    created_to: datetime | None = None
    limit: int | None = None
    offset: int | None = None


@dataclass(frozen=True, kw_only=True)
class GetAssetPerformance:
    """Valuation of holdings purchased within [start_date, end_date]."""

    user_id: UUID
    start_date: datetime
    end_date: datetime


@dataclass(frozen=True, kw_only=True)
class GetTotalValue:
    """Sum of current values, optionally restricted to some asset types."""

    user_id: UUID
    asset_types: list[str] | None = None
