"""TransactionRepository - SQLAlchemy implementation of TransactionRepository protocol.

Signed aggregates are computed in SQL with a CASE over the type value.
Category and type totals are debit-first: debit types subtract and every
other type adds, so BORROWING is negative and REBALANCE, SPLIT and MERGER
count positive. Monthly net is credit-first and scores types in neither
set as 0, so BORROWING is positive there.
"""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import ColumnElement, Select, case, delete, extract, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.transaction import Transaction
from src.domain.enums.transaction_type import TransactionType
from src.domain.value_objects.monthly_total import MonthlyTotal
from src.infrastructure.persistence.models.transaction import (
    Transaction as TransactionModel,
)

_CREDIT_VALUES = [t.value for t in TransactionType.credit_types()]
_DEBIT_VALUES = [t.value for t in TransactionType.debit_types()]

_SIGNED_AMOUNT = case(
    (TransactionModel.transaction_type.in_(_CREDIT_VALUES), TransactionModel.amount),
    (TransactionModel.transaction_type.in_(_DEBIT_VALUES), -TransactionModel.amount),
    else_=0,
)

_DEBIT_FIRST_AMOUNT = case(
    (TransactionModel.transaction_type.in_(_DEBIT_VALUES), -TransactionModel.amount),
    else_=TransactionModel.amount,
)


class TransactionRepository:
    """SQLAlchemy implementation of TransactionRepository protocol.

    Listings are ordered by transaction date, newest first.

    Example:
        >>> repo = TransactionRepository(session)
        >>> page = await repo.find_by_user_id(user_id, limit=20, offset=0)
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, transaction_id: UUID) -> Transaction | None:
        stmt = select(TransactionModel).where(TransactionModel.id == transaction_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model is not None else None

    async def find_by_user_id(
        self, user_id: UUID, limit: int, offset: int
    ) -> list[Transaction]:
        stmt = self._newest_first(TransactionModel.user_id == user_id)
        return await self._fetch(stmt.limit(limit).offset(offset))

    async def find_by_account_id(
        self, account_id: UUID, limit: int, offset: int
    ) -> list[Transaction]:
        stmt = self._newest_first(TransactionModel.account_id == account_id)
        return await self._fetch(stmt.limit(limit).offset(offset))

    async def find_by_asset_id(
        self, asset_id: UUID, limit: int, offset: int
    ) -> list[Transaction]:
        stmt = self._newest_first(TransactionModel.asset_id == asset_id)
        return await self._fetch(stmt.limit(limit).offset(offset))

    async def find_by_date_range(
        self, user_id: UUID, start_date: datetime, end_date: datetime
    ) -> list[Transaction]:
        stmt = self._newest_first(
            TransactionModel.user_id == user_id,
            TransactionModel.date >= start_date,
            TransactionModel.date <= end_date,
        )
        return await self._fetch(stmt)

    async def find_by_type(
        self, user_id: UUID, transaction_type: TransactionType
    ) -> list[Transaction]:
        stmt = self._newest_first(
            TransactionModel.user_id == user_id,
            TransactionModel.transaction_type == transaction_type.value,
        )
        return await self._fetch(stmt)

    async def find_by_category(
        self, user_id: UUID, category: str
    ) -> list[Transaction]:
        stmt = self._newest_first(
            TransactionModel.user_id == user_id,
            TransactionModel.category == category,
        )
        return await self._fetch(stmt)

    async def save(self, transaction: Transaction) -> None:
        self._session.add(self._to_model(transaction))
        await self._session.flush()

    async def update(self, transaction: Transaction) -> None:
        """Persist all mutable fields of an existing transaction.

        Raises:
            NoResultFound: If the transaction row no longer exists.
        """
        stmt = select(TransactionModel).where(TransactionModel.id == transaction.id)
        result = await self._session.execute(stmt)
        model = result.scalar_one()
        model.account_id = transaction.account_id
        model.transaction_type = transaction.transaction_type.value
        model.amount = transaction.amount
        model.date = transaction.date
        model.asset_id = transaction.asset_id
        model.quantity = transaction.quantity
        model.price = transaction.price
        model.fee = transaction.fee
        model.currency = transaction.currency
        model.description = transaction.description
        model.category = transaction.category
        model.to_account_id = transaction.to_account_id
        model.transaction_hash = transaction.transaction_hash
        model.updated_at = transaction.updated_at
        await self._session.flush()

    async def delete(self, transaction_id: UUID) -> None:
        await self._session.execute(
            delete(TransactionModel).where(TransactionModel.id == transaction_id)
        )
        await self._session.flush()

    async def get_totals_by_category(
        self, user_id: UUID, start_date: datetime, end_date: datetime
    ) -> dict[str, Decimal]:
        stmt = (
            select(TransactionModel.category, func.sum(_DEBIT_FIRST_AMOUNT))
            .where(*self._in_range(user_id, start_date, end_date))
            .group_by(TransactionModel.category)
        )
        result = await self._session.execute(stmt)
        return {category: Decimal(total) for category, total in result.all()}

    async def get_totals_by_type(
        self, user_id: UUID, start_date: datetime, end_date: datetime
    ) -> dict[TransactionType, Decimal]:
        stmt = (
            select(TransactionModel.transaction_type, func.sum(_DEBIT_FIRST_AMOUNT))
            .where(*self._in_range(user_id, start_date, end_date))
            .group_by(TransactionModel.transaction_type)
        )
        result = await self._session.execute(stmt)
        return {
            TransactionType(transaction_type): Decimal(total)
            for transaction_type, total in result.all()
        }

    async def get_monthly_totals(
        self, user_id: UUID, start_date: datetime, end_date: datetime
    ) -> list[MonthlyTotal]:
        """Money in, money out and net per calendar month.

        total_in sums every credit-classified amount and total_out every
        debit-classified amount; a type in both sets lands in both.
        """
        year = extract("year", TransactionModel.date)
        month = extract("month", TransactionModel.date)
        total_in = func.sum(
            case(
                (
                    TransactionModel.transaction_type.in_(_CREDIT_VALUES),
                    TransactionModel.amount,
                ),
                else_=0,
            )
        )
        total_out = func.sum(
            case(
                (
                    TransactionModel.transaction_type.in_(_DEBIT_VALUES),
                    TransactionModel.amount,
                ),
                else_=0,
            )
        )
        stmt = (
            select(
                year.label("year"),
                month.label("month"),
                total_in.label("total_in"),
                total_out.label("total_out"),
                func.sum(_SIGNED_AMOUNT).label("net_amount"),
            )
            .where(*self._in_range(user_id, start_date, end_date))
            .group_by(year, month)
            .order_by(year, month)
        )
        result = await self._session.execute(stmt)
        return [
            MonthlyTotal(
                year=int(row.year),
                month=int(row.month),
                total_in=Decimal(row.total_in),
                total_out=Decimal(row.total_out),
                net_amount=Decimal(row.net_amount),
            )
            for row in result.all()
        ]

    @staticmethod
    def _in_range(
        user_id: UUID, start_date: datetime, end_date: datetime
    ) -> tuple[ColumnElement[bool], ...]:
        return (
            TransactionModel.user_id == user_id,
            TransactionModel.date >= start_date,
            TransactionModel.date <= end_date,
        )

    @staticmethod
    def _newest_first(
        *criteria: ColumnElement[bool],
    ) -> Select[tuple[TransactionModel]]:
        return (
            select(TransactionModel)
            .where(*criteria)
            .order_by(TransactionModel.date.desc(), TransactionModel.created_at.desc())
        )

    async def _fetch(self, stmt: Select[tuple[TransactionModel]]) -> list[Transaction]:
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    def _to_domain(self, model: TransactionModel) -> Transaction:
        return Transaction(
            id=model.id,
            user_id=model.user_id,
            account_id=model.account_id,
            transaction_type=TransactionType(model.transaction_type),
            amount=model.amount,
            date=model.date,
            asset_id=model.asset_id,
            quantity=model.quantity,
            price=model.price,
            fee=model.fee,
            currency=model.currency,
            description=model.description,
            category=model.category,
            to_account_id=model.to_account_id,
            transaction_hash=model.transaction_hash,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Transaction) -> TransactionModel:
        return TransactionModel(
            id=entity.id,
            user_id=entity.user_id,
            account_id=entity.account_id,
            transaction_type=entity.transaction_type.value,
            amount=entity.amount,
            date=entity.date,
            asset_id=entity.asset_id,
            quantity=entity.quantity,
            price=entity.price,
            fee=entity.fee,
            currency=entity.currency,
            description=entity.description,
            category=entity.category,
            to_account_id=entity.to_account_id,
            transaction_hash=entity.transaction_hash,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
