"""Asset type enumeration.

Classifies what kind of holding an asset is. Values are uppercase on the
wire and in storage.
"""

from enum import Enum


class AssetType(str, Enum):
    """Kind of holding kept inside an account.

    Examples:
        >>> AssetType("CRYPTOCURRENCY").is_crypto()
        True
        >>> AssetType.is_valid("equity")
        False
    """

    # Cash and deposits
    CASH = "CASH"
    TERM_DEPOSIT = "TERM_DEPOSIT"

    # Securities
    STOCK = "STOCK"
    ETF = "ETF"
    FUND = "FUND"
    BOND = "BOND"
    OPTION = "OPTION"
    FUTURE = "FUTURE"

    # Crypto
    CRYPTOCURRENCY = "CRYPTOCURRENCY"
    NFT = "NFT"
    DEFI_TOKEN = "DEFI_TOKEN"

    # Physical and other
    PRECIOUS_METAL = "PRECIOUS_METAL"
    REAL_ESTATE = "REAL_ESTATE"
    DEBT = "DEBT"
    RECEIVABLE = "RECEIVABLE"
    SALARY = "SALARY"
    OTHER = "OTHER"

    @classmethod
    def values(cls) -> list[str]:
        """Get all asset type values as strings."""
        return [asset_type.value for asset_type in cls]

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check if a string is a valid asset type."""
        return value in cls.values()

    @classmethod
    def security_types(cls) -> list["AssetType"]:
        """Exchange-traded or contract-based securities."""
        return [cls.STOCK, cls.ETF, cls.FUND, cls.BOND, cls.OPTION, cls.FUTURE]

    @classmethod
    def crypto_types(cls) -> list["AssetType"]:
        """On-chain holdings."""
        return [cls.CRYPTOCURRENCY, cls.NFT, cls.DEFI_TOKEN]

    def is_security(self) -> bool:
        """Check if this asset type is a security."""
        return self in self.security_types()

    def is_crypto(self) -> bool:
        """Check if this asset type is a crypto holding."""
        return self in self.crypto_types()
