"""Database persistence infrastructure.

- Declarative base for all tables
- Async engine and session management
- Repository implementations
"""

from src.infrastructure.persistence.base import BaseModel
from src.infrastructure.persistence.database import Database

__all__ = [
    "BaseModel",
    "Database",
]
