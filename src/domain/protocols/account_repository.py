"""AccountRepository protocol for account persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from decimal import Decimal
from typing import Protocol
from uuid import UUID

from src.domain.entities.account import Account
from src.domain.enums.account_type import AccountType
from src.domain.value_objects.account_summary import AccountSummary


class AccountRepository(Protocol):
    """Account repository protocol (port).

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.

    Methods:
        find_by_id: Retrieve account by ID
        find_by_user_id: All accounts of a user, newest first
        find_by_type: User's accounts of one type
        find_by_currency: User's accounts in one currency
        filter: Predicate + pagination query
        save: Insert a new account
        update: Persist changes to an existing account
        delete: Remove account (assets and transactions cascade)
        apply_delta: Atomic signed balance change
        get_summary: Count/balance aggregates for a user
    """

    async def find_by_id(self, account_id: UUID) -> Account | None:
        """Find account by ID.

        Returns:
            Account if found, None otherwise.
        """
        ...

    async def find_by_user_id(self, user_id: UUID) -> list[Account]:
        """Find all accounts owned by a user, newest first."""
        ...

    async def find_by_type(
        self, user_id: UUID, account_type: AccountType
    ) -> list[Account]:
        """Find a user's accounts of the given type."""
        ...

    async def find_by_currency(self, user_id: UUID, currency: str) -> list[Account]:
        """Find a user's accounts labelled with the given currency."""
        ...

    async def filter(
        self,
        user_id: UUID,
        *,
        account_type: AccountType | None = None,
        currency: str | None = None,
        min_balance: Decimal | None = None,
        max_balance: Decimal | None = None,
        limit: int,
        offset: int,
    ) -> list[Account]:
        """Find a user's accounts matching every supplied predicate.

        Unset predicates are ignored. Results are ordered newest first and
        paginated after filtering.
        """
        ...

    async def save(self, account: Account) -> None:
        """Insert a new account."""
        ...

    async def update(
        self, account: Account, *, include_balance: bool = False
    ) -> Decimal:
        """Persist name, type and currency of an existing account.

        The balance column is written only when ``include_balance`` is True,
        so a rename cannot overwrite a concurrent ``apply_delta``.

        Returns:
            Balance stored after the update.
        """
        ...

    async def delete(self, account_id: UUID) -> None:
        """Delete an account and, by cascade, its assets and transactions."""
        ...

    async def apply_delta(self, account_id: UUID, delta: Decimal) -> Decimal | None:
        """Atomically add ``delta`` to the balance unless it would go negative.

        Implementations must perform the read-modify-write as one store
        operation so concurrent adjustments cannot both read the old balance.

        Returns:
            New balance on success, None if the result would be negative
            (balance unchanged).
        """
        ...

    async def get_summary(self, user_id: UUID) -> AccountSummary:
        """Aggregate counts by type and balances by currency for a user."""
        ...
