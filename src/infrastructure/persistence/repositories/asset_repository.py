"""AssetRepository - SQLAlchemy implementation of AssetRepository protocol.

Valuation reads (total value, performance) are computed in SQL; the
account view joins definitions to label each holding.
"""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import Select, case, delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.asset import Asset
from src.domain.enums.asset_type import AssetType
from src.domain.value_objects.account_with_assets import AssetInfo
from src.domain.value_objects.asset_performance import AssetPerformance
from src.infrastructure.persistence.models.asset import Asset as AssetModel
from src.infrastructure.persistence.models.definition import (
    Definition as DefinitionModel,
)


class AssetRepository:
    """SQLAlchemy implementation of AssetRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, asset_id: UUID) -> Asset | None:
        stmt = select(AssetModel).where(AssetModel.id == asset_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model is not None else None

    async def find_by_user_id(self, user_id: UUID) -> list[Asset]:
        stmt = (
            select(AssetModel)
            .where(AssetModel.user_id == user_id)
            .order_by(AssetModel.created_at.desc())
        )
        return await self._fetch(stmt)

    async def find_by_account_id(self, account_id: UUID) -> list[Asset]:
        stmt = (
            select(AssetModel)
            .where(AssetModel.account_id == account_id)
            .order_by(AssetModel.created_at.desc())
        )
        return await self._fetch(stmt)

    async def find_by_type(self, user_id: UUID, asset_type: AssetType) -> list[Asset]:
        stmt = (
            select(AssetModel)
            .where(
                AssetModel.user_id == user_id,
                AssetModel.asset_type == asset_type.value,
            )
            .order_by(AssetModel.created_at.desc())
        )
        return await self._fetch(stmt)

    async def find_infos_by_account_id(self, account_id: UUID) -> list[AssetInfo]:
        """Holdings of an account joined with their definition labels."""
        stmt = (
            select(AssetModel, DefinitionModel.name, DefinitionModel.suffix)
            .join(DefinitionModel, DefinitionModel.id == AssetModel.definition_id)
            .where(AssetModel.account_id == account_id)
            .order_by(DefinitionModel.name)
        )
        result = await self._session.execute(stmt)
        return [
            AssetInfo(
                id=model.id,
                definition_id=model.definition_id,
                asset_type=AssetType(model.asset_type),
                quantity=model.quantity,
                symbol=model.symbol,
                name=name,
                suffix=suffix,
                updated_at=model.updated_at,
            )
            for model, name, suffix in result.all()
        ]

    async def save(self, asset: Asset) -> None:
        self._session.add(self._to_model(asset))
        await self._session.flush()

    async def update(self, asset: Asset) -> None:
        """Persist all mutable fields of an existing asset.

        Raises:
            NoResultFound: If the asset row no longer exists.
        """
        stmt = select(AssetModel).where(AssetModel.id == asset.id)
        result = await self._session.execute(stmt)
        model = result.scalar_one()
        model.account_id = asset.account_id
        model.definition_id = asset.definition_id
        model.asset_type = asset.asset_type.value
        model.quantity = asset.quantity
        model.symbol = asset.symbol
        model.purchase_price = asset.purchase_price
        model.current_price = asset.current_price
        model.currency = asset.currency
        model.purchase_date = asset.purchase_date
        model.last_updated = asset.last_updated
        model.notes = asset.notes
        model.updated_at = asset.updated_at
        await self._session.flush()

    async def delete(self, asset_id: UUID) -> None:
        await self._session.execute(delete(AssetModel).where(AssetModel.id == asset_id))
        await self._session.flush()

    async def get_total_value(
        self, user_id: UUID, asset_types: list[AssetType] | None = None
    ) -> Decimal:
        """Sum of quantity * current_price, optionally limited to some types."""
        stmt = select(
            func.coalesce(
                func.sum(AssetModel.quantity * AssetModel.current_price), 0
            )
        ).where(AssetModel.user_id == user_id)
        if asset_types:
            values = [asset_type.value for asset_type in asset_types]
            stmt = stmt.where(AssetModel.asset_type.in_(values))
        result = await self._session.execute(stmt)
        return Decimal(result.scalar_one())

    async def get_performance(
        self, user_id: UUID, start_date: datetime, end_date: datetime
    ) -> list[AssetPerformance]:
        """Valuation of holdings purchased within [start_date, end_date].

        Percentage is (current - initial) / initial * 100, or 0 when the
        initial value is 0.
        """
        initial = AssetModel.quantity * AssetModel.purchase_price
        current = AssetModel.quantity * AssetModel.current_price
        percentage = case(
            (initial == 0, 0),
            else_=(current - initial) / initial * 100,
        )
        stmt = (
            select(
                AssetModel.id,
                DefinitionModel.name,
                AssetModel.symbol,
                AssetModel.asset_type,
                initial.label("initial_value"),
                current.label("current_value"),
                percentage.label("profit_loss_percentage"),
                AssetModel.currency,
            )
            .join(DefinitionModel, DefinitionModel.id == AssetModel.definition_id)
            .where(
                AssetModel.user_id == user_id,
                AssetModel.purchase_date >= start_date,
                AssetModel.purchase_date <= end_date,
            )
            .order_by(AssetModel.purchase_date)
        )
        result = await self._session.execute(stmt)
        return [
            AssetPerformance(
                asset_id=row.id,
                name=row.name,
                symbol=row.symbol,
                asset_type=AssetType(row.asset_type),
                initial_value=Decimal(row.initial_value),
                current_value=Decimal(row.current_value),
                profit_loss=Decimal(row.current_value) - Decimal(row.initial_value),
                profit_loss_percentage=Decimal(row.profit_loss_percentage),
                currency=row.currency,
            )
            for row in result.all()
        ]

    async def _fetch(self, stmt: Select[tuple[AssetModel]]) -> list[Asset]:
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    def _to_domain(self, model: AssetModel) -> Asset:
        return Asset(
            id=model.id,
            user_id=model.user_id,
            account_id=model.account_id,
            definition_id=model.definition_id,
            asset_type=AssetType(model.asset_type),
            quantity=model.quantity,
            notes=model.notes,
            purchase_date=model.purchase_date,
            symbol=model.symbol,
            purchase_price=model.purchase_price,
            current_price=model.current_price,
            currency=model.currency,
            last_updated=model.last_updated,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Asset) -> AssetModel:
        return AssetModel(
            id=entity.id,
            user_id=entity.user_id,
            account_id=entity.account_id,
            definition_id=entity.definition_id,
            asset_type=entity.asset_type.value,
            quantity=entity.quantity,
            notes=entity.notes,
            purchase_date=entity.purchase_date,
            symbol=entity.symbol,
            purchase_price=entity.purchase_price,
            current_price=entity.current_price,
            currency=entity.currency,
            last_updated=entity.last_updated,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
