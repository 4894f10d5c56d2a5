"""Account commands (CQRS write operations).

Commands carry raw caller input. Enum-typed fields arrive as strings so the
handler, not the transport, decides whether a value is acceptable and
answers with a ValidationError otherwise.

Pattern:
- Commands are data containers (no logic)
- Handlers validate, authorize and persist
"""

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class CreateAccount:
    """Open a new account for the caller.

    Attributes:
        user_id: Authenticated caller (becomes the owner).
        name: Display name, must not be blank.
        account_type: One of AccountType.values().
        balance: Opening balance, must not be negative.
        currency: Currency label, must not be blank.

    Example:
        >>> cmd = CreateAccount(
        ...     user_id=user_id,
        ...     name="Everyday Checking",
        ...     account_type="checking",
        ...     balance=Decimal("100.00"),
        ...     currency="USD",
        ... )
    """

    user_id: UUID
    name: str
    account_type: str
    balance: Decimal = Decimal("0")
    currency: str = "USD"


@dataclass(frozen=True, kw_only=True)
class UpdateAccount:
    """Update the supplied fields of an owned account.

    Fields left as None are not changed. Supplied fields are validated
    with the same rules as CreateAccount.
    """

    account_id: UUID
    user_id: UUID
    name: str | None = None
    account_type: str | None = None
    balance: Decimal | None = None
    currency: str | None = None


@dataclass(frozen=True, kw_only=True)
class UpdateAccountBalance:
    """Apply a signed delta to an owned account's balance.

    Attributes:
        amount: Delta to add; negative to withdraw.
    """

    account_id: UUID
    user_id: UUID
    amount: Decimal


@dataclass(frozen=True, kw_only=True)
class DeleteAccount:
    """Delete an owned account (its assets and transactions cascade)."""

    account_id: UUID
    user_id: UUID
