"""TransactionRepository protocol for transaction persistence.

Port (interface) for hexagonal architecture. Every listing is ordered by
transaction date, most recent first.
"""

from datetime import datetime
from decimal import Decimal
from typing import Protocol
from uuid import UUID

from src.domain.entities.transaction import Transaction
from src.domain.enums.transaction_type import TransactionType
from src.domain.value_objects.monthly_total import MonthlyTotal


class TransactionRepository(Protocol):
    """Transaction repository protocol (port).

    Aggregate methods use the signed convention: debit-classified types
    contribute ``-amount``, everything else ``+amount``.
    """

    async def find_by_id(self, transaction_id: UUID) -> Transaction | None:
        """Find transaction by ID, None if not found."""
        ...

    async def find_by_user_id(
        self, user_id: UUID, limit: int, offset: int
    ) -> list[Transaction]:
        """Find a page of the user's transactions."""
        ...

    async def find_by_account_id(
        self, account_id: UUID, limit: int, offset: int
    ) -> list[Transaction]:
        """Find a page of transactions booked on an account."""
        ...

    async def find_by_asset_id(
        self, asset_id: UUID, limit: int, offset: int
    ) -> list[Transaction]:
        """Find a page of transactions concerning an asset."""
        ...

    async def find_by_date_range(
        self, user_id: UUID, start_date: datetime, end_date: datetime
    ) -> list[Transaction]:
        """Find the user's transactions dated within [start, end]."""
        ...

    async def find_by_type(
        self, user_id: UUID, transaction_type: TransactionType
    ) -> list[Transaction]:
        """Find the user's transactions of one type."""
        ...

    async def find_by_category(
        self, user_id: UUID, category: str
    ) -> list[Transaction]:
        """Find the user's transactions in one category."""
        ...

    async def save(self, transaction: Transaction) -> None:
        """Insert a new transaction."""
        ...

    async def update(self, transaction: Transaction) -> None:
        """Persist all fields of an existing transaction."""
        ...

    async def delete(self, transaction_id: UUID) -> None:
        """Delete a transaction."""
        ...

    async def get_totals_by_category(
        self, user_id: UUID, start_date: datetime, end_date: datetime
    ) -> dict[str, Decimal]:
        """Signed sum per category within [start, end]."""
        ...

    async def get_totals_by_type(
        self, user_id: UUID, start_date: datetime, end_date: datetime
    ) -> dict[TransactionType, Decimal]:
        """Signed sum per transaction type within [start, end]."""
        ...

    async def get_monthly_totals(
        self, user_id: UUID, start_date: datetime, end_date: datetime
    ) -> list[MonthlyTotal]:
        """Money in/out/net per calendar month, ordered by year and month."""
        ...
