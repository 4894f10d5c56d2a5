"""AccountRepository - SQLAlchemy implementation of AccountRepository protocol.

Adapter for hexagonal architecture.
Maps between domain Account entities and database AccountModel.
"""

from datetime import UTC, datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import Select, delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.account import Account
from src.domain.enums.account_type import AccountType
from src.domain.value_objects.account_summary import AccountSummary
from src.infrastructure.persistence.models.account import Account as AccountModel


class AccountRepository:
    """SQLAlchemy implementation of AccountRepository protocol.

    This class does NOT inherit from the protocol (Protocol uses structural
    typing). Listings are ordered newest first.

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = AccountRepository(session)
        ...     account = await repo.find_by_id(account_id)
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def find_by_id(self, account_id: UUID) -> Account | None:
        """Find account by ID.

        Returns:
            Domain Account entity if found, None otherwise.
        """
        stmt = select(AccountModel).where(AccountModel.id == account_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_domain(model)

    async def find_by_user_id(self, user_id: UUID) -> list[Account]:
        stmt = (
            select(AccountModel)
            .where(AccountModel.user_id == user_id)
            .order_by(AccountModel.created_at.desc())
        )
        return await self._fetch(stmt)

    async def find_by_type(
        self, user_id: UUID, account_type: AccountType
    ) -> list[Account]:
        stmt = (
            select(AccountModel)
            .where(
                AccountModel.user_id == user_id,
                AccountModel.account_type == account_type.value,
            )
            .order_by(AccountModel.created_at.desc())
        )
        return await self._fetch(stmt)

    async def find_by_currency(self, user_id: UUID, currency: str) -> list[Account]:
        stmt = (
            select(AccountModel)
            .where(
                AccountModel.user_id == user_id,
                AccountModel.currency == currency,
            )
            .order_by(AccountModel.created_at.desc())
        )
        return await self._fetch(stmt)

    async def filter(
        self,
        user_id: UUID,
        *,
        account_type: AccountType | None = None,
        currency: str | None = None,
        min_balance: Decimal | None = None,
        max_balance: Decimal | None = None,
        limit: int,
        offset: int,
    ) -> list[Account]:
        """Find a user's accounts matching every supplied predicate.

        Args:
            user_id: Owner.
            account_type: Exact type, ignored when None.
            currency: Exact currency label, ignored when None.
            min_balance: Inclusive lower bound, ignored when None.
            max_balance: Inclusive upper bound, ignored when None.
            limit: Page size (already clamped by the caller).
            offset: Rows to skip.
        """
        stmt = select(AccountModel).where(AccountModel.user_id == user_id)
        if account_type is not None:
            stmt = stmt.where(AccountModel.account_type == account_type.value)
        if currency is not None:
            stmt = stmt.where(AccountModel.currency == currency)
        if min_balance is not None:
            stmt = stmt.where(AccountModel.balance >= min_balance)
        if max_balance is not None:
            stmt = stmt.where(AccountModel.balance <= max_balance)
        stmt = (
            stmt.order_by(AccountModel.created_at.desc()).limit(limit).offset(offset)
        )
        return await self._fetch(stmt)

    async def save(self, account: Account) -> None:
        """Insert a new account."""
        self.session.add(self._to_model(account))
        await self.session.flush()

    async def update(
        self, account: Account, *, include_balance: bool = False
    ) -> Decimal:
        """Write the account's columns in one UPDATE, balance only on request.

        Returns:
            Balance as stored after the statement.

        Raises:
            NoResultFound: If account doesn't exist.
        """
        values = {
            "name": account.name,
            "account_type": account.account_type.value,
            "currency": account.currency,
            "updated_at": account.updated_at,
        }
        if include_balance:
            values["balance"] = account.balance
        stmt = (
            update(AccountModel)
            .where(AccountModel.id == account.id)
            .values(**values)
            .returning(AccountModel.balance)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def delete(self, account_id: UUID) -> None:
        """Hard delete; assets and transactions go with it (ON DELETE CASCADE)."""
        await self.session.execute(
            delete(AccountModel).where(AccountModel.id == account_id)
        )
        await self.session.flush()

    async def apply_delta(self, account_id: UUID, delta: Decimal) -> Decimal | None:
        """Add ``delta`` to the balance in a single guarded UPDATE.

        The WHERE clause rejects any change that would take the balance
        below zero, so concurrent adjustments serialize on the row lock
        instead of racing on a stale read.

        Returns:
            New balance, or None when the row is missing or the guard failed.
        """
        stmt = (
            update(AccountModel)
            .where(
                AccountModel.id == account_id,
                AccountModel.balance + delta >= 0,
            )
            .values(
                balance=AccountModel.balance + delta,
                updated_at=datetime.now(UTC),
            )
            .returning(AccountModel.balance)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_summary(self, user_id: UUID) -> AccountSummary:
        """Count accounts by type and sum balances by currency in SQL."""
        by_type_stmt = (
            select(AccountModel.account_type, func.count(AccountModel.id))
            .where(AccountModel.user_id == user_id)
            .group_by(AccountModel.account_type)
        )
        by_currency_stmt = (
            select(
                AccountModel.currency,
                func.coalesce(func.sum(AccountModel.balance), 0),
            )
            .where(AccountModel.user_id == user_id)
            .group_by(AccountModel.currency)
        )

        by_type = {
            AccountType(account_type): count
            for account_type, count in (await self.session.execute(by_type_stmt)).all()
        }
        by_currency = {
            currency: Decimal(total)
            for currency, total in (await self.session.execute(by_currency_stmt)).all()
        }
        return AccountSummary(
            total_accounts=sum(by_type.values()),
            total_balance=sum(by_currency.values(), Decimal("0")),
            by_type=by_type,
            by_currency=by_currency,
        )

    async def _fetch(self, stmt: Select[tuple[AccountModel]]) -> list[Account]:
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    # =========================================================================
    # Entity <-> Model Mapping (Private Methods)
    # =========================================================================

    def _to_domain(self, model: AccountModel) -> Account:
        return Account(
            id=model.id,
            user_id=model.user_id,
            name=model.name,
            account_type=AccountType(model.account_type),
            balance=model.balance,
            currency=model.currency,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Account) -> AccountModel:
        return AccountModel(
            id=entity.id,
            user_id=entity.user_id,
            name=entity.name,
            account_type=entity.account_type.value,
            balance=entity.balance,
            currency=entity.currency,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
