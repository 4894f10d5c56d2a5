"""DefinitionRepository protocol for the definition registry.

Port (interface) for hexagonal architecture. The store is the authority on
abbreviation uniqueness: ``save`` and ``update`` raise
``DuplicateAbbreviationError`` when the unique constraint rejects a write.
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.definition import Definition


class DefinitionRepository(Protocol):
    """Definition repository protocol (port)."""

    async def find_by_id(self, definition_id: UUID) -> Definition | None:
        """Find definition by ID, None if not found."""
        ...

    async def find_by_abbreviation(self, abbreviation: str) -> Definition | None:
        """Find definition by abbreviation, ignoring case."""
        ...

    async def find_all(self, limit: int, offset: int) -> list[Definition]:
        """Page through all definitions ordered by name."""
        ...

    async def search(self, term: str, limit: int, offset: int) -> list[Definition]:
        """Case-insensitive substring search over name and abbreviation.

        Ranking: exact abbreviation, abbreviation prefix, exact name,
        name prefix, everything else; ties ordered by name.
        """
        ...

    async def save(self, definition: Definition) -> None:
        """Insert a new definition.

        Raises:
            DuplicateAbbreviationError: Abbreviation already taken.
        """
        ...

    async def update(self, definition: Definition) -> None:
        """Persist all fields of an existing definition.

        Raises:
            DuplicateAbbreviationError: Abbreviation already taken.
        """
        ...

    async def delete(self, definition_id: UUID) -> None:
        """Delete a definition."""
        ...

    async def is_referenced(self, definition_id: UUID) -> bool:
        """Check whether any asset still points at the definition."""
        ...
