"""AssetRepository protocol for asset persistence.

Port (interface) for hexagonal architecture.
"""

from datetime import datetime
from decimal import Decimal
from typing import Protocol
from uuid import UUID

from src.domain.entities.asset import Asset
from src.domain.enums.asset_type import AssetType
from src.domain.value_objects.account_with_assets import AssetInfo
from src.domain.value_objects.asset_performance import AssetPerformance


class AssetRepository(Protocol):
    """Asset repository protocol (port).

    Methods:
        find_by_id: Retrieve asset by ID
        find_by_user_id: All holdings of a user
        find_by_account_id: Holdings inside one account
        find_by_type: User's holdings of one type
        find_infos_by_account_id: Holdings joined with their definitions
        save / update / delete: Persistence
        get_total_value: Sum of current values
        get_performance: Valuation of holdings bought inside a window
    """

    async def find_by_id(self, asset_id: UUID) -> Asset | None:
        """Find asset by ID, None if not found."""
        ...

    async def find_by_user_id(self, user_id: UUID) -> list[Asset]:
        """Find all holdings of a user, newest first."""
        ...

    async def find_by_account_id(self, account_id: UUID) -> list[Asset]:
        """Find all holdings inside one account, newest first."""
        ...

    async def find_by_type(self, user_id: UUID, asset_type: AssetType) -> list[Asset]:
        """Find a user's holdings of the given type."""
        ...

    async def find_infos_by_account_id(self, account_id: UUID) -> list[AssetInfo]:
        """Find holdings of an account joined with definition name and suffix."""
        ...

    async def save(self, asset: Asset) -> None:
        """Insert a new asset."""
        ...

    async def update(self, asset: Asset) -> None:
        """Persist all fields of an existing asset."""
        ...

    async def delete(self, asset_id: UUID) -> None:
        """Delete an asset."""
        ...

    async def get_total_value(
        self, user_id: UUID, asset_types: list[AssetType] | None = None
    ) -> Decimal:
        """Sum quantity * current_price over the user's holdings.

        Args:
            user_id: Owning user.
            asset_types: Restrict to these types; None or empty means all.
        """
        ...

    async def get_performance(
        self, user_id: UUID, start_date: datetime, end_date: datetime
    ) -> list[AssetPerformance]:
        """Valuation of holdings whose purchase date falls in [start, end]."""
        ...
