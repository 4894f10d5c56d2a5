"""Repository implementations (adapters for hexagonal architecture).

Concrete implementations of the repository protocols defined in the
domain layer.
"""

from src.infrastructure.persistence.repositories.account_repository import (
    AccountRepository,
)
from src.infrastructure.persistence.repositories.asset_repository import (
    AssetRepository,
)
from src.infrastructure.persistence.repositories.definition_repository import (
    DefinitionRepository,
)
from src.infrastructure.persistence.repositories.transaction_repository import (
    TransactionRepository,
)
from src.infrastructure.persistence.repositories.user_repository import UserRepository

__all__ = [
    "AccountRepository",
    "AssetRepository",
    "DefinitionRepository",
    "TransactionRepository",
    "UserRepository",
]
