"""Definition database model (shared registry of tradable things).

Abbreviations are unique regardless of case: the functional index on
``lower(abbreviation)`` is the authority, handlers only pre-check.
"""

from sqlalchemy import Index, String, func
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class Definition(BaseMutableModel):
    """Definition model.

    Fields:
        name: Display name (e.g., "Bitcoin")
        abbreviation: Ticker-like code (e.g., "BTC"), case-insensitive unique
        suffix: Unit label appended to quantities (e.g., "BTC", "oz")

    Indexes:
        - uq_definitions_abbreviation_lower: unique on lower(abbreviation)
        - ix_definitions_name: ordering and search
    """

    __tablename__ = "definitions"

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
        comment="Display name",
    )

    abbreviation: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        comment="Ticker-like code, unique ignoring case",
    )

    suffix: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        default="",
        comment="Unit label for quantities",
    )

    def __repr__(self) -> str:
        return (
            f"<Definition(id={self.id}, abbreviation={self.abbreviation!r}, "
            f"name={self.name!r})>"
        )


Index(
    "uq_definitions_abbreviation_lower",
    func.lower(Definition.abbreviation),
    unique=True,
)
