"""Definition registry queries."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class GetDefinition:
    """Get a definition by ID."""

    definition_id: UUID


@dataclass(frozen=True, kw_only=True)
class GetDefinitionByAbbreviation:
    """Get a definition by abbreviation (case-insensitive)."""

    abbreviation: str


@dataclass(frozen=True, kw_only=True)
class ListDefinitions:
    """Page through all definitions ordered by name (limit default 50, max 100)."""

    limit: int | None = None
    offset: int | None = None


@dataclass(frozen=True, kw_only=True)
class SearchDefinitions:
    """Ranked case-insensitive search over name and abbreviation.

    Attributes:
        term: Required, non-blank search text.
    """

    term: str
    limit: int | None = None
    offset: int | None = None
