"""User queries."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class GetUser:
    """Get the caller's own profile."""

    user_id: UUID
