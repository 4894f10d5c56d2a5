"""Account queries (CQRS read operations).

Queries represent requests for account data. They are immutable
dataclasses with question-like names. Queries NEVER change state.
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

CancellationCheck = Callable[[], Awaitable[bool]]
"""Async predicate answering "has the caller gone away?".

The API layer passes ``Request.is_disconnected``; handlers issuing several
store calls consult it before each one.
"""


@dataclass(frozen=True, kw_only=True)
class GetAccount:
    """Get a single owned account by ID."""

    account_id: UUID
    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListAccounts:
    """List all accounts owned by the caller."""

    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListAccountsByType:
    """List the caller's accounts of one type (string validated by handler)."""

    user_id: UUID
    account_type: str


@dataclass(frozen=True, kw_only=True)
class ListAccountsByCurrency:
    """List the caller's accounts labelled with one currency."""

    user_id: UUID
    currency: str


@dataclass(frozen=True, kw_only=True)
class FilterAccounts:
    """Filter the caller's accounts.

    Every supplied predicate must match (AND). Pagination is clamped to
    limit 1..100 (default 20) and offset >= 0.

    Attributes:
        account_type: Exact type (validated by handler).
        currency: Exact currency label.
        min_balance: Inclusive lower bound.
        max_balance: Inclusive upper bound.
    """

    user_id: UUID
    account_type: str | None = None
    currency: str | None = None
    min_balance: Decimal | None = None
    max_balance: Decimal | None = None
    limit: int | None = None
    offset: int | None = None


@dataclass(frozen=True, kw_only=True)
class GetAccountSummary:
    """Counts by type and balances by currency for the caller."""

    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class GetAccountWithAssets:
    """Get one owned account joined with its holdings."""

    account_id: UUID
    user_id: UUID
    is_cancelled: CancellationCheck | None = None


@dataclass(frozen=True, kw_only=True)
class ListAccountsWithAssets:
    """Get every account of the caller joined with its holdings.

    Issues one holdings lookup per account, sequentially.
    """

    user_id: UUID
    is_cancelled: CancellationCheck | None = None
