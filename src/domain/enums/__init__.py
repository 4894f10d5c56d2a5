"""Domain enums.

Each enum is the single source of truth for its closed value set: the
membership predicate used by validation and the listing served by the
``/types`` endpoints both come from here.

Available Enums:
    - AccountType: Kind of account (bank, broker, crypto-wallet, ...)
    - AssetType: Kind of holding (STOCK, CRYPTOCURRENCY, ...)
    - TransactionType: Kind of value movement, with debit/credit sets
"""

from src.domain.enums.account_type import AccountType
from src.domain.enums.asset_type import AssetType
from src.domain.enums.transaction_type import TransactionType

__all__ = [
    "AccountType",
    "AssetType",
    "TransactionType",
]
