"""DefinitionRepository - SQLAlchemy implementation of the DefinitionRepository protocol.

The unique index on ``lower(abbreviation)`` is the authority for
abbreviation uniqueness; violations surface as DuplicateAbbreviationError.
"""

from uuid import UUID

from sqlalchemy import case, delete, exists, func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.definition import Definition
from src.domain.errors import DuplicateAbbreviationError
from src.infrastructure.persistence.models.asset import Asset as AssetModel
from src.infrastructure.persistence.models.definition import (
    Definition as DefinitionModel,
)


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class DefinitionRepository:
    """SQLAlchemy implementation of DefinitionRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, definition_id: UUID) -> Definition | None:
        stmt = select(DefinitionModel).where(DefinitionModel.id == definition_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model is not None else None

    async def find_by_abbreviation(self, abbreviation: str) -> Definition | None:
        """Find definition by abbreviation, ignoring case."""
        stmt = select(DefinitionModel).where(
            func.lower(DefinitionModel.abbreviation) == abbreviation.lower()
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model is not None else None

    async def find_all(self, limit: int, offset: int) -> list[Definition]:
        stmt = (
            select(DefinitionModel)
            .order_by(DefinitionModel.name, DefinitionModel.abbreviation)
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def search(self, term: str, limit: int, offset: int) -> list[Definition]:
        """Case-insensitive substring search over name and abbreviation.

        Rank:
            0. abbreviation equals term
            1. abbreviation starts with term
            2. name equals term
            3. name starts with term
            4. anything else containing term
        Ties are broken alphabetically by name.
        """
        lowered = term.lower()
        escaped = _escape_like(lowered)
        abbreviation = func.lower(DefinitionModel.abbreviation)
        name = func.lower(DefinitionModel.name)

        rank = case(
            (abbreviation == lowered, 0),
            (abbreviation.like(f"{escaped}%", escape="\\"), 1),
            (name == lowered, 2),
            (name.like(f"{escaped}%", escape="\\"), 3),
            else_=4,
        )
        stmt = (
            select(DefinitionModel)
            .where(
                or_(
                    abbreviation.like(f"%{escaped}%", escape="\\"),
                    name.like(f"%{escaped}%", escape="\\"),
                )
            )
            .order_by(rank, DefinitionModel.name)
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def save(self, definition: Definition) -> None:
        """Insert a definition.

        Raises:
            DuplicateAbbreviationError: Abbreviation taken (any case).
        """
        self.session.add(self._to_model(definition))
        await self._flush(definition.abbreviation)

    async def update(self, definition: Definition) -> None:
        """Persist name, abbreviation and suffix.

        Raises:
            DuplicateAbbreviationError: Abbreviation taken (any case).
            NoResultFound: If the row no longer exists.
        """
        stmt = select(DefinitionModel).where(DefinitionModel.id == definition.id)
        result = await self.session.execute(stmt)
        model = result.scalar_one()
        model.name = definition.name
        model.abbreviation = definition.abbreviation
        model.suffix = definition.suffix
        model.updated_at = definition.updated_at
        await self._flush(definition.abbreviation)

    async def delete(self, definition_id: UUID) -> None:
        await self.session.execute(
            delete(DefinitionModel).where(DefinitionModel.id == definition_id)
        )
        await self.session.flush()

    async def is_referenced(self, definition_id: UUID) -> bool:
        """True when at least one asset points at the definition."""
        stmt = select(exists().where(AssetModel.definition_id == definition_id))
        result = await self.session.execute(stmt)
        return bool(result.scalar())

    async def _flush(self, abbreviation: str) -> None:
        try:
            await self.session.flush()
        except IntegrityError as e:
            await self.session.rollback()
            raise DuplicateAbbreviationError(abbreviation) from e

    def _to_domain(self, model: DefinitionModel) -> Definition:
        return Definition(
            id=model.id,
            name=model.name,
            abbreviation=model.abbreviation,
            suffix=model.suffix,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Definition) -> DefinitionModel:
        return DefinitionModel(
            id=entity.id,
            name=entity.name,
            abbreviation=entity.abbreviation,
            suffix=entity.suffix,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
