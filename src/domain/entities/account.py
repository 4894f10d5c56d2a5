"""Account domain entity.

An account is owned by exactly one user, has a closed-set type, and keeps a
cash balance in a single currency. Holdings (assets) and transactions point
at the account by ID.

Architecture:
    - Pure domain entity (no infrastructure dependencies)
    - Validation of incoming commands happens in the account handlers
    - Balance changes go through ``apply_delta`` (the rule) and the
      repository's atomic ``apply_delta`` (the write)

Usage:
    from uuid_extensions import uuid7
    from decimal import Decimal

    account = Account(
        id=uuid7(),
        user_id=user_id,
        name="Everyday Checking",
        account_type=AccountType.CHECKING,
        balance=Decimal("1250.00"),
        currency="USD",
    )
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from decimal import Decimal
from uuid import UUID

from src.core.result import Failure, Result, Success
from src.domain.enums.account_type import AccountType


@dataclass
class Account:
    """User-owned financial account.

    Attributes:
        id: Unique account identifier.
        user_id: Owning user.
        name: Display name.
        account_type: Closed-set classification.
        balance: Cash balance, never negative.
        currency: Currency label (no conversion is ever applied).
        created_at: Creation timestamp.
        updated_at: Last modification timestamp.

    Example:
        >>> account.is_owned_by(account.user_id)
        True
        >>> account.apply_delta(Decimal("-1000000"))
        Failure(error=Decimal('1250.00'))
    """

    id: UUID
    user_id: UUID
    name: str
    account_type: AccountType
    balance: Decimal = Decimal("0")
    currency: str = "USD"
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        self.currency = self.currency.strip().upper()

    # -------------------------------------------------------------------------
    # Query Methods
    # -------------------------------------------------------------------------

    def is_owned_by(self, user_id: UUID) -> bool:
        """Check the ownership rule for this account."""
        return self.user_id == user_id

    def is_investment_account(self) -> bool:
        return self.account_type.is_investment()

    def is_crypto_account(self) -> bool:
        return self.account_type.is_crypto()

    # -------------------------------------------------------------------------
    # Update Methods
    # -------------------------------------------------------------------------

    def update(
        self,
        name: str | None = None,
        account_type: AccountType | None = None,
        balance: Decimal | None = None,
        currency: str | None = None,
    ) -> None:
        """Apply only the supplied fields and refresh ``updated_at``.

        Callers validate values first; this method does not.
        """
        if name is not None:
            self.name = name
        if account_type is not None:
            self.account_type = account_type
        if balance is not None:
            self.balance = balance
        if currency is not None:
            self.currency = currency.strip().upper()
        self.updated_at = datetime.now(UTC)

    def apply_delta(self, delta: Decimal) -> Result[Decimal, Decimal]:
        """Apply a signed delta to the balance.

        Args:
            delta: Amount to add (negative to subtract).

        Returns:
            Success(new_balance): Balance updated.
            Failure(current_balance): Result would be negative; balance unchanged.
        """
        new_balance = self.balance + delta
        if new_balance < 0:
            return Failure(error=self.balance)
        self.balance = new_balance
        self.updated_at = datetime.now(UTC)
        return Success(value=new_balance)
