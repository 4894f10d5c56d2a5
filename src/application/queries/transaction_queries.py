"""Transaction queries (CQRS read operations).

Paginated listings clamp limit to 1..100 (default 20) and offset to >= 0.
Date-range queries require start_date <= end_date.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class GetTransaction:
    """Get a single owned transaction by ID."""

    transaction_id: UUID
    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListTransactions:
    """Page through the caller's transactions, newest first."""

    user_id: UUID
    limit: int | None = None
    offset: int | None = None


@dataclass(frozen=True, kw_only=True)
class ListTransactionsByAccount:
    """Page through transactions of one owned account."""

    account_id: UUID
    user_id: UUID
    limit: int | None = None
    offset: int | None = None


@dataclass(frozen=True, kw_only=True)
class ListTransactionsByAsset:
    """Page through transactions of one owned asset."""

    asset_id: UUID
    user_id: UUID
    limit: int | None = None
    offset: int | None = None


@dataclass(frozen=True, kw_only=True)
class ListTransactionsByDateRange:
    """List the caller's transactions dated within [start_date, end_date]."""

    user_id: UUID
    start_date: datetime
    end_date: datetime


@dataclass(frozen=True, kw_only=True)
class ListTransactionsByType:
    """List the caller's transactions of one type (validated by handler)."""

    user_id: UUID
    transaction_type: str


@dataclass(frozen=True, kw_only=True)
class ListTransactionsByCategory:
    """List the caller's transactions in one category."""

    user_id: UUID
    category: str


@dataclass(frozen=True, kw_only=True)
class GetTotalsByCategory:
    """Signed totals per category within a date range."""

    user_id: UUID
    start_date: datetime
    end_date: datetime


@dataclass(frozen=True, kw_only=True)
class GetTotalsByType:
    """Signed totals per transaction type within a date range."""

    user_id: UUID
    start_date: datetime
    end_date: datetime


@dataclass(frozen=True, kw_only=True)
class GetMonthlyTotals:
    """Money in/out/net per month within a date range."""

    user_id: UUID
    start_date: datetime
    end_date: datetime
