"""Database models for the persistence layer.

Models map to tables and are infrastructure concerns only; repositories
translate them to and from domain entities.

Models Organization:
    - user.py: users
    - definition.py: shared definition registry
    - account.py: user accounts
    - asset.py: holdings inside accounts
    - transaction.py: ledger movements
"""

from src.infrastructure.persistence.models.account import Account
from src.infrastructure.persistence.models.asset import Asset
from src.infrastructure.persistence.models.definition import Definition
from src.infrastructure.persistence.models.transaction import Transaction
from src.infrastructure.persistence.models.user import User

__all__ = [
    "Account",
    "Asset",
    "Definition",
    "Transaction",
    "User",
]
