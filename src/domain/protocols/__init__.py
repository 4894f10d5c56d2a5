"""Domain protocols (ports) package.

Infrastructure adapters implement these protocols without inheritance.

Usage:
    from src.domain.protocols import AccountRepository, PasswordHashingProtocol
"""

# Service protocols
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
from src.domain.protocols.token_generation_protocol import TokenGenerationProtocol

# Repository protocols
from src.domain.protocols.account_repository import AccountRepository
from src.domain.protocols.asset_repository import AssetRepository
from src.domain.protocols.definition_repository import DefinitionRepository
from src.domain.protocols.transaction_repository import TransactionRepository
from src.domain.protocols.user_repository import UserRepository

__all__ = [
    # Service protocols
    "LoggerProtocol",
    "PasswordHashingProtocol",
    "TokenGenerationProtocol",
    # Repository protocols
    "AccountRepository",
    "AssetRepository",
    "DefinitionRepository",
    "TransactionRepository",
    "UserRepository",
]
