"""Definition domain entity.

A definition is the canonical description of a holdable unit (a currency,
a coin, a stock). Assets reference a definition by ID instead of repeating
its name and symbol.

Usage:
    definition = Definition(
        id=uuid7(),
        name="Bitcoin",
        abbreviation="BTC",
        suffix="BTC",
    )
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID


@dataclass
class Definition:
    """Canonical unit definition.

    Attributes:
        id: Unique definition identifier.
        name: Display name ("Bitcoin", "US Dollar").
        abbreviation: Symbol, unique across all definitions regardless of case.
        suffix: Unit label used when grouping balances ("BTC", "USD", "gr").
        created_at: Creation timestamp.
        updated_at: Last modification timestamp.
    """

    id: UUID
    name: str
    abbreviation: str
    suffix: str = ""
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def has_abbreviation(self, abbreviation: str) -> bool:
        """Case-insensitive abbreviation comparison."""
        return self.abbreviation.lower() == abbreviation.strip().lower()

    def update(self, name: str, abbreviation: str, suffix: str) -> None:
        """Replace all editable fields and refresh ``updated_at``."""
        self.name = name
        self.abbreviation = abbreviation
        self.suffix = suffix
        self.updated_at = datetime.now(UTC)
