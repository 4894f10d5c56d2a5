"""Asset command handlers.

Architecture:
- Validation (type, quantity, prices) before any store call
- Ownership checked on the asset and on every account it is moved into
- Returns Result[Asset, DomainError]; store exceptions propagate
"""

from datetime import UTC, datetime
from decimal import Decimal
from uuid import UUID

from uuid_extensions import uuid7

from src.application.commands.asset_commands import (
    CreateAsset,
    DeleteAsset,
    UpdateAsset,
    UpdateAssetPrice,
)
from src.application.services.ownership_verifier import OwnershipVerifier
from src.core.enums import ErrorCode
from src.core.errors import DomainError, NotFoundError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities.asset import Asset
from src.domain.entities.definition import Definition
from src.domain.enums.asset_type import AssetType
from src.domain.errors import AssetError, DefinitionError
from src.domain.protocols.account_repository import AccountRepository
from src.domain.protocols.asset_repository import AssetRepository
from src.domain.protocols.definition_repository import DefinitionRepository
from src.domain.protocols.logger_protocol import LoggerProtocol


def parse_asset_type(value: str) -> Result[AssetType, ValidationError]:
    """Resolve a raw asset type string, failing if unknown."""
    if not AssetType.is_valid(value):
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_ASSET_TYPE,
                message=AssetError.INVALID_ASSET_TYPE,
                field="asset_type",
                details={"allowed": ", ".join(AssetType.values())},
            )
        )
    return Success(value=AssetType(value))


def _validate_quantity(quantity: Decimal) -> ValidationError | None:
    if quantity <= 0:
        return ValidationError(
            code=ErrorCode.INVALID_QUANTITY,
            message=AssetError.INVALID_QUANTITY,
            field="quantity",
        )
    return None


def _validate_price(price: Decimal | None, field: str) -> ValidationError | None:
    if price is not None and price < 0:
        return ValidationError(
            code=ErrorCode.INVALID_PRICE,
            message=AssetError.INVALID_PRICE,
            field=field,
        )
    return None


async def _load_definition(
    definition_repo: DefinitionRepository, definition_id: UUID
) -> Result[Definition, DomainError]:
    definition = await definition_repo.find_by_id(definition_id)
    if definition is None:
        return Failure(
            error=NotFoundError(
                code=ErrorCode.DEFINITION_NOT_FOUND,
                message=DefinitionError.DEFINITION_NOT_FOUND,
                resource_type="Definition",
                resource_id=str(definition_id),
            )
        )
    return Success(value=definition)


class CreateAssetHandler:
    """Handler for CreateAsset command.

    Dependencies (injected via constructor):
        - AssetRepository: Persistence
        - AccountRepository: Ownership of the receiving account
        - DefinitionRepository: Existence of the unit definition
    """

    def __init__(
        self,
        asset_repo: AssetRepository,
        account_repo: AccountRepository,
        definition_repo: DefinitionRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._asset_repo = asset_repo
        self._definition_repo = definition_repo
        self._verifier = OwnershipVerifier(account_repo=account_repo)
        self._logger = logger

    async def handle(self, cmd: CreateAsset) -> Result[Asset, DomainError]:
        """Validate, authorize and persist a new holding.

        Returns:
            Success(Asset): Newly created holding.
            Failure(ValidationError): Unknown type, quantity <= 0, negative price.
            Failure(NotFoundError | AuthorizationError): Account or definition.
        """
        type_result = parse_asset_type(cmd.asset_type)
        if isinstance(type_result, Failure):
            return type_result
        if error := _validate_quantity(cmd.quantity):
            return Failure(error=error)
        if error := _validate_price(cmd.purchase_price, "purchase_price"):
            return Failure(error=error)
        if error := _validate_price(cmd.current_price, "current_price"):
            return Failure(error=error)

        ownership = await self._verifier.verify_account_ownership(
            cmd.account_id, cmd.user_id
        )
        if isinstance(ownership, Failure):
            return ownership
        account = ownership.value

        definition_result = await _load_definition(
            self._definition_repo, cmd.definition_id
        )
        if isinstance(definition_result, Failure):
            return definition_result
        definition = definition_result.value

        now = datetime.now(UTC)
        asset = Asset(
            id=uuid7(),
            user_id=cmd.user_id,
            account_id=account.id,
            definition_id=definition.id,
            asset_type=type_result.value,
            quantity=cmd.quantity,
            notes=cmd.notes,
            purchase_date=cmd.purchase_date or now,
            symbol=definition.abbreviation,
            purchase_price=cmd.purchase_price,
            current_price=(
                cmd.current_price
                if cmd.current_price is not None
                else cmd.purchase_price
            ),
            currency=cmd.currency or account.currency,
            last_updated=now,
            created_at=now,
            updated_at=now,
        )
        await self._asset_repo.save(asset)

        self._logger.info(
            "asset_created",
            asset_id=str(asset.id),
            account_id=str(asset.account_id),
            asset_type=asset.asset_type.value,
        )
        return Success(value=asset)


class UpdateAssetHandler:
    """Handler for UpdateAsset command.

    Quantity increases with a positive price average the purchase price.
    A price without a quantity is treated as a price-only update.
    """

    def __init__(
        self,
        asset_repo: AssetRepository,
        account_repo: AccountRepository,
        definition_repo: DefinitionRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._asset_repo = asset_repo
        self._definition_repo = definition_repo
        self._verifier = OwnershipVerifier(
            account_repo=account_repo, asset_repo=asset_repo
        )
        self._logger = logger

    async def handle(self, cmd: UpdateAsset) -> Result[Asset, DomainError]:
        asset_type: AssetType | None = None
        if cmd.asset_type is not None:
            type_result = parse_asset_type(cmd.asset_type)
            if isinstance(type_result, Failure):
                return type_result
            asset_type = type_result.value
        if cmd.quantity is not None and (error := _validate_quantity(cmd.quantity)):
            return Failure(error=error)
        if error := _validate_price(cmd.price, "price"):
            return Failure(error=error)

        ownership = await self._verifier.verify_asset_ownership(
            cmd.asset_id, cmd.user_id
        )
        if isinstance(ownership, Failure):
            return ownership
        asset = ownership.value

        # Moving the holding requires owning the destination account
        if cmd.account_id is not None and cmd.account_id != asset.account_id:
            account_result = await self._verifier.verify_account_ownership(
                cmd.account_id, cmd.user_id
            )
            if isinstance(account_result, Failure):
                return account_result
            asset.account_id = cmd.account_id

        if cmd.definition_id is not None and cmd.definition_id != asset.definition_id:
            definition_result = await _load_definition(
                self._definition_repo, cmd.definition_id
            )
            if isinstance(definition_result, Failure):
                return definition_result
            asset.definition_id = definition_result.value.id
            asset.symbol = definition_result.value.abbreviation

        if asset_type is not None:
            asset.asset_type = asset_type
        if cmd.notes is not None:
            asset.notes = cmd.notes
        if cmd.purchase_date is not None:
            asset.purchase_date = cmd.purchase_date

        if cmd.quantity is not None:
            asset.update_quantity(cmd.quantity, cmd.price or Decimal("0"))
        elif cmd.price is not None:
            asset.update_price(cmd.price)
        else:
            asset.updated_at = datetime.now(UTC)

        await self._asset_repo.update(asset)
        self._logger.info(
            "asset_updated",
            asset_id=str(asset.id),
            quantity=str(asset.quantity),
            purchase_price=str(asset.purchase_price),
        )
        return Success(value=asset)


class UpdateAssetPriceHandler:
    """Handler for UpdateAssetPrice command (records a new current price)."""

    def __init__(self, asset_repo: AssetRepository, logger: LoggerProtocol) -> None:
        self._asset_repo = asset_repo
        self._verifier = OwnershipVerifier(asset_repo=asset_repo)
        self._logger = logger

    async def handle(self, cmd: UpdateAssetPrice) -> Result[Asset, DomainError]:
        if error := _validate_price(cmd.price, "price"):
            return Failure(error=error)

        ownership = await self._verifier.verify_asset_ownership(
            cmd.asset_id, cmd.user_id
        )
        if isinstance(ownership, Failure):
            return ownership
        asset = ownership.value

        asset.update_price(cmd.price)
        await self._asset_repo.update(asset)
        self._logger.info(
            "asset_price_updated", asset_id=str(asset.id), price=str(cmd.price)
        )
        return Success(value=asset)


class DeleteAssetHandler:
    """Handler for DeleteAsset command."""

    def __init__(self, asset_repo: AssetRepository, logger: LoggerProtocol) -> None:
        self._asset_repo = asset_repo
        self._verifier = OwnershipVerifier(asset_repo=asset_repo)
        self._logger = logger

    async def handle(self, cmd: DeleteAsset) -> Result[None, DomainError]:
        ownership = await self._verifier.verify_asset_ownership(
            cmd.asset_id, cmd.user_id
        )
        if isinstance(ownership, Failure):
            return ownership

        await self._asset_repo.delete(cmd.asset_id)
        self._logger.info("asset_deleted", asset_id=str(cmd.asset_id))
        return Success(value=None)
