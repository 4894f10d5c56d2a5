"""UserRepository protocol for user persistence.

Port (interface) for hexagonal architecture.
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.user import User


class UserRepository(Protocol):
    """User repository protocol (port)."""

    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find user by ID, None if not found."""
        ...

    async def find_by_email(self, email: str) -> User | None:
        """Find user by email (case-insensitive), None if not found."""
        ...

    async def save(self, user: User) -> None:
        """Insert a new user."""
        ...

    async def update(self, user: User) -> None:
        """Persist profile and password changes."""
        ...

    async def delete(self, user_id: UUID) -> None:
        """Delete a user and, by cascade, everything they own."""
        ...
