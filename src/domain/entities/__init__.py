"""Domain entities for business logic.

Pure business logic entities with no framework dependencies.
"""

from src.domain.entities.account import Account
from src.domain.entities.asset import Asset
from src.domain.entities.definition import Definition
from src.domain.entities.transaction import Transaction
from src.domain.entities.user import User

__all__ = [
    "Account",
    "Asset",
    "Definition",
    "Transaction",
    "User",
]
