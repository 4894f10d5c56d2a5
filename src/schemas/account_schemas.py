"""Account request and response schemas.

- Request schemas (client -> API); enum values arrive as plain strings
  and are validated by the handlers
- Response schemas (API -> client) with entity conversion helpers
"""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field

from src.domain.entities.account import Account
from src.domain.value_objects.account_summary import AccountSummary
from src.domain.value_objects.account_with_assets import AccountWithAssets, AssetInfo
from src.schemas.common_schemas import JsonDecimal


# =============================================================================
# Request Schemas
# =============================================================================


class CreateAccountRequest(BaseModel):
    name: str = Field(..., max_length=255, examples=["Main checking"])
    account_type: str = Field(..., examples=["checking", "crypto-wallet"])
    balance: Decimal = Field(default=Decimal("0"), description="Opening balance")
    currency: str = Field(default="USD", max_length=10)


class UpdateAccountRequest(BaseModel):
    """Partial update; omitted fields keep their value."""

    name: str | None = Field(default=None, max_length=255)
    account_type: str | None = None
    balance: Decimal | None = None
    currency: str | None = Field(default=None, max_length=10)


class UpdateBalanceRequest(BaseModel):
    amount: Decimal = Field(..., description="Signed delta applied to the balance")


# =============================================================================
# Response Schemas
# =============================================================================


class AccountResponse(BaseModel):
    """Single account.

    Attributes:
        id: Account identifier.
        user_id: Owner.
        name: Display name.
        account_type: Type value (e.g., "checking").
        balance: Current balance.
        currency: Currency label.
        is_investment: Investment-style type (investment, broker, pension).
        is_crypto: Crypto wallet or exchange.
        created_at: Creation timestamp.
        updated_at: Last modification timestamp.
    """

    id: UUID
    user_id: UUID
    name: str
    account_type: str
    balance: JsonDecimal
    currency: str
    is_investment: bool
    is_crypto: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, account: Account) -> "AccountResponse":
        return cls(
            id=account.id,
            user_id=account.user_id,
            name=account.name,
            account_type=account.account_type.value,
            balance=account.balance,
            currency=account.currency,
            is_investment=account.is_investment_account(),
            is_crypto=account.is_crypto_account(),
            created_at=account.created_at,
            updated_at=account.updated_at,
        )


class AccountListResponse(BaseModel):
    accounts: list[AccountResponse]
    count: int

    @classmethod
    def from_entities(cls, accounts: list[Account]) -> "AccountListResponse":
        return cls(
            accounts=[AccountResponse.from_entity(a) for a in accounts],
            count=len(accounts),
        )


class AccountSummaryResponse(BaseModel):
    total_accounts: int
    total_balance: JsonDecimal
    by_type: dict[str, int]
    by_currency: dict[str, JsonDecimal]

    @classmethod
    def from_summary(cls, summary: AccountSummary) -> "AccountSummaryResponse":
        return cls(
            total_accounts=summary.total_accounts,
            total_balance=summary.total_balance,
            by_type={t.value: count for t, count in summary.by_type.items()},
            by_currency=dict(summary.by_currency),
        )


class AssetInfoResponse(BaseModel):
    id: UUID
    definition_id: UUID
    asset_type: str
    quantity: JsonDecimal
    symbol: str
    name: str
    suffix: str
    updated_at: datetime

    @classmethod
    def from_info(cls, info: AssetInfo) -> "AssetInfoResponse":
        return cls(
            id=info.id,
            definition_id=info.definition_id,
            asset_type=info.asset_type.value,
            quantity=info.quantity,
            symbol=info.symbol,
            name=info.name,
            suffix=info.suffix,
            updated_at=info.updated_at,
        )


class AccountWithAssetsResponse(BaseModel):
    """Account joined with its holdings.

    total_balances sums quantities per definition suffix; asset_counts
    counts holdings per asset type.
    """

    account: AccountResponse
    assets: list[AssetInfoResponse]
    total_balances: dict[str, JsonDecimal]
    asset_counts: dict[str, int]
    last_updated: datetime | None

    @classmethod
    def from_view(cls, view: AccountWithAssets) -> "AccountWithAssetsResponse":
        return cls(
            account=AccountResponse.from_entity(view.account),
            assets=[AssetInfoResponse.from_info(i) for i in view.assets],
            total_balances=dict(view.total_balances),
            asset_counts={t.value: n for t, n in view.asset_counts.items()},
            last_updated=view.last_updated,
        )


class AccountWithAssetsListResponse(BaseModel):
    accounts: list[AccountWithAssetsResponse]
    count: int

    @classmethod
    def from_views(cls, views: list[AccountWithAssets]) -> "AccountWithAssetsListResponse":
        return cls(
            accounts=[AccountWithAssetsResponse.from_view(v) for v in views],
            count=len(views),
        )
