"""Domain errors package.

Message constants per aggregate plus the store-level duplicate exception.

Usage:
    from src.domain.errors import AccountError, AssetError, TransactionError
"""

from src.domain.errors.account_error import AccountError
from src.domain.errors.asset_error import AssetError
from src.domain.errors.definition_error import (
    DefinitionError,
    DuplicateAbbreviationError,
)
from src.domain.errors.transaction_error import TransactionError
from src.domain.errors.user_error import UserError

__all__ = [
    "AccountError",
    "AssetError",
    "DefinitionError",
    "DuplicateAbbreviationError",
    "TransactionError",
    "UserError",
]
