"""Account type classification.

Closed set of account kinds a user can open. Values are the wire format
accepted by the API; anything outside this set is rejected by the account
handlers.

Categories:
    Banking: bank, savings, checking, credit-card
    Investment: investment, broker, pension
    Crypto: crypto-wallet, crypto-exchange
    Other: insurance, home, safe, other

Usage:
    from src.domain.enums import AccountType

    if AccountType.is_valid(raw):
        account_type = AccountType(raw)
"""

from enum import Enum


class AccountType(str, Enum):
    """Account type classification.

    Inherits from str for easy serialization and database storage.

    Example:
        >>> AccountType("crypto-wallet").is_crypto()
        True
        >>> AccountType.is_valid("brokerage")
        False
    """

    # -------------------------------------------------------------------------
    # Banking
    # -------------------------------------------------------------------------

    BANK = "bank"
    SAVINGS = "savings"
    CHECKING = "checking"
    CREDIT_CARD = "credit-card"

    # -------------------------------------------------------------------------
    # Investment
    # -------------------------------------------------------------------------

    INVESTMENT = "investment"
    BROKER = "broker"
    PENSION = "pension"

    # -------------------------------------------------------------------------
    # Crypto
    # -------------------------------------------------------------------------

    CRYPTO_WALLET = "crypto-wallet"
    CRYPTO_EXCHANGE = "crypto-exchange"

    # -------------------------------------------------------------------------
    # Other
    # -------------------------------------------------------------------------

    INSURANCE = "insurance"
    HOME = "home"
    """Physical cash kept at home."""

    SAFE = "safe"
    """Safe deposit box (precious metals, documents, cash)."""

    OTHER = "other"

    # -------------------------------------------------------------------------
    # Class Methods - Listing and Membership
    # -------------------------------------------------------------------------

    @classmethod
    def values(cls) -> list[str]:
        """Get all account type values as strings.

        Example:
            >>> AccountType.values()[:3]
            ['bank', 'savings', 'checking']
        """
        return [account_type.value for account_type in cls]

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check if a string is a valid account type.

        Example:
            >>> AccountType.is_valid("safe")
            True
            >>> AccountType.is_valid("SAFE")
            False
        """
        return value in cls.values()

    @classmethod
    def bank_types(cls) -> list["AccountType"]:
        """Deposit and card accounts held at a bank."""
        return [cls.BANK, cls.SAVINGS, cls.CHECKING, cls.CREDIT_CARD]

    @classmethod
    def investment_types(cls) -> list["AccountType"]:
        """Accounts that hold securities."""
        return [cls.INVESTMENT, cls.BROKER, cls.PENSION]

    @classmethod
    def crypto_types(cls) -> list["AccountType"]:
        """Accounts that hold crypto assets."""
        return [cls.CRYPTO_WALLET, cls.CRYPTO_EXCHANGE]

    # -------------------------------------------------------------------------
    # Instance Methods - Type Checks
    # -------------------------------------------------------------------------

    def is_bank(self) -> bool:
        """Check if this account type is a banking account."""
        return self in self.bank_types()

    def is_investment(self) -> bool:
        """Check if this account type holds securities."""
        return self in self.investment_types()

    def is_crypto(self) -> bool:
        """Check if this account type holds crypto assets."""
        return self in self.crypto_types()

    @property
    def category(self) -> str:
        """Category string: "banking", "investment", "crypto", or "other".

        Example:
            >>> AccountType.BROKER.category
            'investment'
        """
        if self.is_bank():
            return "banking"
        if self.is_investment():
            return "investment"
        if self.is_crypto():
            return "crypto"
        return "other"
