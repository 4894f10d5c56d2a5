"""Ownership verification service.

Centralizes the "load, then compare user_id" check every handler performs
before reading or mutating a single entity. Existence is checked first
(NotFoundError), ownership second (AuthorizationError); the entity is
returned on success so callers avoid a second fetch.

Usage:
    verifier = OwnershipVerifier(account_repo, asset_repo, transaction_repo)

    result = await verifier.verify_account_ownership(account_id, user_id)
    if isinstance(result, Failure):
        return result
    account = result.value
"""

from uuid import UUID

from src.core.enums import ErrorCode
from src.core.errors import AuthorizationError, DomainError, NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.entities import Account, Asset, Transaction
from src.domain.errors import AccountError, AssetError, TransactionError
from src.domain.protocols.account_repository import AccountRepository
from src.domain.protocols.asset_repository import AssetRepository
from src.domain.protocols.transaction_repository import TransactionRepository


def _not_owned(resource_type: str, message: str) -> AuthorizationError:
    return AuthorizationError(
        code=ErrorCode.RESOURCE_NOT_OWNED,
        message=message,
        required_permission=f"{resource_type.lower()}:owner",
    )


class OwnershipVerifier:
    """Service for verifying entity ownership.

    Repositories are optional so handlers only wire the ones they need;
    calling a verify method whose repository was not supplied is a
    programming error.
    """

    def __init__(
        self,
        account_repo: AccountRepository | None = None,
        asset_repo: AssetRepository | None = None,
        transaction_repo: TransactionRepository | None = None,
    ) -> None:
        self._account_repo = account_repo
        self._asset_repo = asset_repo
        self._transaction_repo = transaction_repo

    async def verify_account_ownership(
        self, account_id: UUID, user_id: UUID
    ) -> Result[Account, DomainError]:
        """Verify user owns an account.

        Returns:
            Success(Account): Account exists and is owned by user.
            Failure(NotFoundError | AuthorizationError): Otherwise.
        """
        assert self._account_repo is not None
        account = await self._account_repo.find_by_id(account_id)
        if account is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.ACCOUNT_NOT_FOUND,
                    message=AccountError.ACCOUNT_NOT_FOUND,
                    resource_type="Account",
                    resource_id=str(account_id),
                )
            )
        if not account.is_owned_by(user_id):
            return Failure(error=_not_owned("Account", AccountError.ACCOUNT_NOT_OWNED))
        return Success(value=account)

    async def verify_asset_ownership(
        self, asset_id: UUID, user_id: UUID
    ) -> Result[Asset, DomainError]:
        """Verify user owns an asset."""
        assert self._asset_repo is not None
        asset = await self._asset_repo.find_by_id(asset_id)
        if asset is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.ASSET_NOT_FOUND,
                    message=AssetError.ASSET_NOT_FOUND,
                    resource_type="Asset",
                    resource_id=str(asset_id),
                )
            )
        if not asset.is_owned_by(user_id):
            return Failure(error=_not_owned("Asset", AssetError.ASSET_NOT_OWNED))
        return Success(value=asset)

    async def verify_transaction_ownership(
        self, transaction_id: UUID, user_id: UUID
    ) -> Result[Transaction, DomainError]:
        """Verify user owns a transaction."""
        assert self._transaction_repo is not None
        transaction = await self._transaction_repo.find_by_id(transaction_id)
        if transaction is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.TRANSACTION_NOT_FOUND,
                    message=TransactionError.TRANSACTION_NOT_FOUND,
                    resource_type="Transaction",
                    resource_id=str(transaction_id),
                )
            )
        if not transaction.is_owned_by(user_id):
            return Failure(
                error=_not_owned("Transaction", TransactionError.TRANSACTION_NOT_OWNED)
            )
        return Success(value=transaction)
