"""User domain entity.

The identity provider owns credentials; the ledger core only ever sees the
user's ID. This entity exists for registration, login and profile upkeep.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID


@dataclass
class User:
    """Registered user.

    Attributes:
        id: Unique user identifier.
        email: Login email (stored lowercase).
        password_hash: Bcrypt hash, never plaintext.
        first_name: Given name.
        last_name: Family name.
        created_at: Registration timestamp.
        updated_at: Last profile or password change.

    Example:
        >>> user = User(
        ...     id=uuid7(),
        ...     email="ada@example.com",
        ...     password_hash="$2b$12$...",
        ...     first_name="Ada",
        ...     last_name="Lovelace",
        ... )
        >>> user.full_name()
        'Ada Lovelace'
    """

    id: UUID
    email: str
    password_hash: str
    first_name: str = ""
    last_name: str = ""
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        self.email = self.email.strip().lower()

    def full_name(self) -> str:
        """First and last name joined, ignoring blanks."""
        return " ".join(part for part in (self.first_name, self.last_name) if part)

    def update_profile(
        self,
        first_name: str | None = None,
        last_name: str | None = None,
    ) -> None:
        """Apply supplied profile fields and refresh ``updated_at``."""
        if first_name is not None:
            self.first_name = first_name
        if last_name is not None:
            self.last_name = last_name
        self.updated_at = datetime.now(UTC)

    def change_password_hash(self, password_hash: str) -> None:
        """Replace the stored hash after the old password was re-verified."""
        self.password_hash = password_hash
        self.updated_at = datetime.now(UTC)
