"""Declarative base and mixins shared by every table.

- BaseModel: id (UUID primary key) and created_at
- TimestampMixin: adds updated_at, refreshed by the database on UPDATE
- BaseMutableModel: BaseModel + TimestampMixin in the right MRO

Domain entities never inherit from these classes; repositories map
between the two.

Usage:
    class DefinitionModel(BaseMutableModel):
        __tablename__ = "definitions"
        name: Mapped[str]
        # Has: id, created_at, updated_at
"""

from datetime import datetime
from typing import Any
from uuid import UUID as PythonUUID

from sqlalchemy import DateTime, Uuid, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from uuid_extensions import uuid7


class BaseModel(DeclarativeBase):
    """Base class for all database models.

    Entities are created with a time-ordered UUIDv7 by the application;
    the column default only applies to rows inserted without one.
    """

    __abstract__ = True

    id: Mapped[PythonUUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid7,
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(id={self.id})>"

    def to_dict(self) -> dict[str, Any]:
        """Identity and creation time, for debugging and logging."""
        return {
            "id": str(self.id),
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }


class TimestampMixin:
    """Adds ``updated_at`` to mutable models."""

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = super().to_dict()  # type: ignore[misc]
        data["updated_at"] = self.updated_at.isoformat() if self.updated_at else None
        return data


class BaseMutableModel(TimestampMixin, BaseModel):
    """Base class for tables whose rows are updated after insert."""

    __abstract__ = True
