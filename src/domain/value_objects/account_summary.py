"""Account summary read model.

Computed on demand from the store; never persisted.
"""

from dataclasses import dataclass, field
from decimal import Decimal

from src.domain.enums.account_type import AccountType


@dataclass(frozen=True, kw_only=True)
class AccountSummary:
    """Per-user overview of accounts.

    Attributes:
        total_accounts: Number of accounts owned by the user.
        total_balance: Sum of all balances (currency labels are not converted).
        by_type: Account count per account type.
        by_currency: Sum of balances per currency label.
    """

    total_accounts: int = 0
    total_balance: Decimal = Decimal("0")
    by_type: dict[AccountType, int] = field(default_factory=dict)
    by_currency: dict[str, Decimal] = field(default_factory=dict)
