"""Definition registry commands.

Definitions are global (not user-owned); any authenticated user may manage
them.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class CreateDefinition:
    """Register a new unit definition.

    Attributes:
        name: Display name, must not be blank.
        abbreviation: Symbol, unique regardless of case.
        suffix: Unit label used for grouping balances.
    """

    name: str
    abbreviation: str
    suffix: str = ""


@dataclass(frozen=True, kw_only=True)
class UpdateDefinition:
    """Replace name, abbreviation and suffix of a definition."""

    definition_id: UUID
    name: str
    abbreviation: str
    suffix: str = ""


@dataclass(frozen=True, kw_only=True)
class DeleteDefinition:
    """Delete a definition that no asset references."""

    definition_id: UUID
