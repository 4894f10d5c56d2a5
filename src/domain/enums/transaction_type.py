"""Transaction type enumeration.

Single source of truth for transaction classification. Every directional
rule (debit, credit, amount sign exceptions, asset requirement) is a
membership check against one of the sets defined here, so validation,
aggregation and the type listing endpoint cannot drift apart.

Note:
    BORROWING is deliberately a member of both the debit and the credit set.
    It appears in both the money-in and money-out monthly totals. Monthly
    net checks the credit set first and counts it positive, while category
    and type totals check the debit set first and count it negative.
"""

from enum import Enum


class TransactionType(str, Enum):
    """Kind of value movement recorded by a transaction.

    Examples:
        >>> TransactionType.WITHDRAWAL.is_debit()
        True
        >>> TransactionType.BORROWING.is_debit(), TransactionType.BORROWING.is_credit()
        (True, True)
    """

    # Cash movements
    DEPOSIT = "DEPOSIT"
    WITHDRAWAL = "WITHDRAWAL"
    TRANSFER = "TRANSFER"

    # Trading
    BUY = "BUY"
    SELL = "SELL"
    REBALANCE = "REBALANCE"
    SPLIT = "SPLIT"
    MERGER = "MERGER"

    # Income
    DIVIDEND = "DIVIDEND"
    INTEREST = "INTEREST"
    INCOME = "INCOME"

    # Costs
    FEE = "FEE"
    EXPENSE = "EXPENSE"
    TAX = "TAX"

    # Crypto rewards
    STAKING = "STAKING"
    MINING = "MINING"
    AIRDROP = "AIRDROP"

    # Credit
    LENDING = "LENDING"
    BORROWING = "BORROWING"
    REPAYMENT = "REPAYMENT"

    # -------------------------------------------------------------------------
    # Class Methods - Listing and Classification Sets
    # -------------------------------------------------------------------------

    @classmethod
    def values(cls) -> list[str]:
        """Get all transaction type values as strings."""
        return [transaction_type.value for transaction_type in cls]

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check if a string is a valid transaction type."""
        return value in cls.values()

    @classmethod
    def debit_types(cls) -> frozenset["TransactionType"]:
        """Types that take value out of the account."""
        return frozenset(
            {
                cls.WITHDRAWAL,
                cls.BUY,
                cls.TRANSFER,
                cls.FEE,
                cls.EXPENSE,
                cls.TAX,
                cls.BORROWING,
                cls.REPAYMENT,
                cls.LENDING,
            }
        )

    @classmethod
    def credit_types(cls) -> frozenset["TransactionType"]:
        """Types that bring value into the account."""
        return frozenset(
            {
                cls.DEPOSIT,
                cls.SELL,
                cls.DIVIDEND,
                cls.INTEREST,
                cls.INCOME,
                cls.STAKING,
                cls.MINING,
                cls.AIRDROP,
                cls.BORROWING,
            }
        )

    @classmethod
    def non_positive_amount_types(cls) -> frozenset["TransactionType"]:
        """Cost types whose amount may be zero or negative."""
        return frozenset(
            {cls.WITHDRAWAL, cls.EXPENSE, cls.FEE, cls.TAX, cls.REPAYMENT}
        )

    @classmethod
    def asset_transaction_types(cls) -> frozenset["TransactionType"]:
        """Types that concern a specific holding."""
        return frozenset(
            {
                cls.BUY,
                cls.SELL,
                cls.DIVIDEND,
                cls.SPLIT,
                cls.MERGER,
                cls.STAKING,
                cls.MINING,
                cls.AIRDROP,
            }
        )

    @classmethod
    def asset_required_types(cls) -> frozenset["TransactionType"]:
        """Types that cannot be recorded without an asset reference."""
        return frozenset({cls.BUY, cls.SELL})

    # -------------------------------------------------------------------------
    # Instance Methods
    # -------------------------------------------------------------------------

    def is_debit(self) -> bool:
        """Check if this type takes value out of the account."""
        return self in self.debit_types()

    def is_credit(self) -> bool:
        """Check if this type brings value into the account."""
        return self in self.credit_types()

    def allows_non_positive_amount(self) -> bool:
        """Check if amount <= 0 is acceptable for this type."""
        return self in self.non_positive_amount_types()

    def requires_asset(self) -> bool:
        """Check if an asset reference is mandatory."""
        return self in self.asset_required_types()
