"""User database model.

Security:
    - password_hash: bcrypt hash, never plaintext
    - email: stored lowercase, unique
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class User(BaseMutableModel):
    """User model for authentication and ownership.

    Fields:
        id: UUID primary key (from BaseMutableModel)
        created_at: Registration time (from BaseMutableModel)
        updated_at: Last profile change (from BaseMutableModel)
        email: Unique lowercase email address
        password_hash: Bcrypt hash
        first_name: Given name (may be empty)
        last_name: Family name (may be empty)

    Relationships:
        Accounts, assets and transactions reference users.id with
        ON DELETE CASCADE, so deleting a user removes their ledger.
    """

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        index=True,
        nullable=False,
        comment="User email address (lowercase)",
    )

    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Bcrypt password hash",
    )

    first_name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        default="",
        comment="Given name",
    )

    last_name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        default="",
        comment="Family name",
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email!r})>"
