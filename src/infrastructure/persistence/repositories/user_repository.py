"""UserRepository - SQLAlchemy implementation of the UserRepository protocol.

Adapter for hexagonal architecture: maps between the domain User entity
and the ``users`` table model.
"""

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.user import User
from src.infrastructure.persistence.models.user import User as UserModel


class UserRepository:
    """SQLAlchemy implementation of UserRepository protocol.

    Does not inherit from the protocol (structural typing). Writes are
    flushed, not committed; the request-scoped session commits.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = UserRepository(session)
        ...     user = await repo.find_by_email("ada@example.com")
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, user_id: UUID) -> User | None:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model is not None else None

    async def find_by_email(self, email: str) -> User | None:
        """Find user by email (case-insensitive, emails are stored lowercase)."""
        stmt = select(UserModel).where(UserModel.email == email.lower())
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model is not None else None

    async def save(self, user: User) -> None:
        self.session.add(self._to_model(user))
        await self.session.flush()

    async def update(self, user: User) -> None:
        """Persist profile and password changes.

        Raises:
            NoResultFound: If the user row no longer exists.
        """
        stmt = select(UserModel).where(UserModel.id == user.id)
        result = await self.session.execute(stmt)
        model = result.scalar_one()
        model.email = user.email
        model.password_hash = user.password_hash
        model.first_name = user.first_name
        model.last_name = user.last_name
        model.updated_at = user.updated_at
        await self.session.flush()

    async def delete(self, user_id: UUID) -> None:
        await self.session.execute(delete(UserModel).where(UserModel.id == user_id))
        await self.session.flush()

    def _to_domain(self, model: UserModel) -> User:
        return User(
            id=model.id,
            email=model.email,
            password_hash=model.password_hash,
            first_name=model.first_name,
            last_name=model.last_name,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: User) -> UserModel:
        return UserModel(
            id=entity.id,
            email=entity.email,
            password_hash=entity.password_hash,
            first_name=entity.first_name,
            last_name=entity.last_name,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
