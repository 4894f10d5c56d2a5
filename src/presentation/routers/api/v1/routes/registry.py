"""API Route Registry - Single Source of Truth for all routes.

Registry structure:
    - Each entry is a RouteMetadata instance carrying handler, auth policy and docs
    - Handlers reference endpoint functions from the resource modules
    - Auth policies explicitly declared (PUBLIC, AUTHENTICATED)
    - Within a resource, static paths precede parameterized ones

Usage:
    from src.presentation.routers.api.v1.routes.registry import ROUTE_REGISTRY
    from src.presentation.routers.api.v1.routes.generator import register_routes_from_registry

    router = APIRouter(prefix="/api/v1")
    register_routes_from_registry(router, ROUTE_REGISTRY)
"""

from src.presentation.routers.api.v1 import (
    accounts,
    assets,
    auth,
    definitions,
    transactions,
)
from src.presentation.routers.api.v1.routes.metadata import (
    AuthLevel,
    AuthPolicy,
    ErrorSpec,
    HTTPMethod,
    IdempotencyLevel,
    RouteMetadata,
)
from src.schemas.account_schemas import (
    AccountListResponse,
    AccountResponse,
    AccountSummaryResponse,
    AccountWithAssetsListResponse,
    AccountWithAssetsResponse,
)
from src.schemas.asset_schemas import (
    AssetListResponse,
    AssetPerformanceListResponse,
    AssetResponse,
    TotalValueResponse,
)
from src.schemas.auth_schemas import TokenResponse, UserResponse
from src.schemas.common_schemas import MessageResponse, TypeListResponse
from src.schemas.definition_schemas import DefinitionListResponse, DefinitionResponse
from src.schemas.transaction_schemas import (
    MonthlyTotalsResponse,
    TotalsResponse,
    TransactionListResponse,
    TransactionResponse,
)

PUBLIC = AuthPolicy(level=AuthLevel.PUBLIC)
AUTHENTICATED = AuthPolicy(level=AuthLevel.AUTHENTICATED)

# Common error sets
_VALIDATION = ErrorSpec(status=400, description="Validation error")
_UNAUTHORIZED = ErrorSpec(status=401, description="Missing or invalid token")
_FORBIDDEN = ErrorSpec(status=403, description="Owned by another user")
_ABORTED = ErrorSpec(status=499, description="Client closed request")


def _not_found(resource: str) -> ErrorSpec:
    return ErrorSpec(status=404, description=f"{resource} not found")


_OWNED_READ = [_UNAUTHORIZED, _FORBIDDEN]
_RANGE_READ = [_VALIDATION, _UNAUTHORIZED]


# =============================================================================
# ROUTE_REGISTRY - Single Source of Truth
# =============================================================================

ROUTE_REGISTRY: list[RouteMetadata] = [
    # =========================================================================
    # Auth Resource
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/auth/register",
        handler=auth.register,
        resource="auth",
        tags=["Auth"],
        summary="Register user",
        operation_id="register_user",
        response_model=UserResponse,
        status_code=201,
        errors=[
            _VALIDATION,
            ErrorSpec(status=409, description="Email already registered"),
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/auth/login",
        handler=auth.login,
        resource="auth",
        tags=["Auth"],
        summary="Log in",
        description="Exchange email and password for a bearer access token.",
        operation_id="login_user",
        response_model=TokenResponse,
        errors=[ErrorSpec(status=401, description="Invalid credentials")],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/auth/me",
        handler=auth.get_me,
        resource="auth",
        tags=["Auth"],
        summary="Get current user",
        operation_id="get_current_user",
        response_model=UserResponse,
        errors=[_UNAUTHORIZED, _not_found("User")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/auth/me",
        handler=auth.update_me,
        resource="auth",
        tags=["Auth"],
        summary="Update profile",
        operation_id="update_current_user",
        response_model=UserResponse,
        errors=[_UNAUTHORIZED, _not_found("User")],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/auth/me",
        handler=auth.delete_me,
        resource="auth",
        tags=["Auth"],
        summary="Delete user",
        description="Delete the caller and everything they own. Requires the password.",
        operation_id="delete_current_user",
        status_code=204,
        errors=[ErrorSpec(status=401, description="Invalid token or password")],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/auth/change-password",
        handler=auth.change_password,
        resource="auth",
        tags=["Auth"],
        summary="Change password",
        operation_id="change_password",
        response_model=MessageResponse,
        errors=[_VALIDATION, ErrorSpec(status=401, description="Wrong current password")],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AUTHENTICATED,
    ),
    # =========================================================================
    # Definitions Resource
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/definitions",
        handler=definitions.create_definition,
        resource="definitions",
        tags=["Definitions"],
        summary="Create definition",
        operation_id="create_definition",
        response_model=DefinitionResponse,
        status_code=201,
        errors=[
            _VALIDATION,
            _UNAUTHORIZED,
            ErrorSpec(status=409, description="Abbreviation already exists"),
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/definitions",
        handler=definitions.list_definitions,
        resource="definitions",
        tags=["Definitions"],
        summary="List definitions",
        operation_id="list_definitions",
        response_model=DefinitionListResponse,
        errors=[_UNAUTHORIZED],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/definitions/search",
        handler=definitions.search_definitions,
        resource="definitions",
        tags=["Definitions"],
        summary="Search definitions",
        operation_id="search_definitions",
        response_model=DefinitionListResponse,
        errors=[_VALIDATION, _UNAUTHORIZED],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/definitions/abbreviation/{abbreviation}",
        handler=definitions.get_definition_by_abbreviation,
        resource="definitions",
        tags=["Definitions"],
        summary="Get definition by abbreviation",
        operation_id="get_definition_by_abbreviation",
        response_model=DefinitionResponse,
        errors=[_UNAUTHORIZED, _not_found("Definition")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/definitions/{definition_id}",
        handler=definitions.get_definition,
        resource="definitions",
        tags=["Definitions"],
        summary="Get definition",
        operation_id="get_definition",
        response_model=DefinitionResponse,
        errors=[_UNAUTHORIZED, _not_found("Definition")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/definitions/{definition_id}",
        handler=definitions.update_definition,
        resource="definitions",
        tags=["Definitions"],
        summary="Update definition",
        operation_id="update_definition",
        response_model=DefinitionResponse,
        errors=[
            _VALIDATION,
            _UNAUTHORIZED,
            _not_found("Definition"),
            ErrorSpec(status=409, description="Abbreviation already exists"),
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/definitions/{definition_id}",
        handler=definitions.delete_definition,
        resource="definitions",
        tags=["Definitions"],
        summary="Delete definition",
        operation_id="delete_definition",
        status_code=204,
        errors=[
            _UNAUTHORIZED,
            _not_found("Definition"),
            ErrorSpec(status=409, description="Definition is referenced by assets"),
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AUTHENTICATED,
    ),
    # =========================================================================
    # Accounts Resource
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/accounts/types",
        handler=accounts.list_account_types,
        resource="accounts",
        tags=["Accounts"],
        summary="List account types",
        operation_id="list_account_types",
        response_model=TypeListResponse,
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/accounts",
        handler=accounts.create_account,
        resource="accounts",
        tags=["Accounts"],
        summary="Create account",
        operation_id="create_account",
        response_model=AccountResponse,
        status_code=201,
        errors=[_VALIDATION, _UNAUTHORIZED],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/accounts",
        handler=accounts.list_accounts,
        resource="accounts",
        tags=["Accounts"],
        summary="List accounts",
        operation_id="list_accounts",
        response_model=AccountListResponse,
        errors=[_VALIDATION, _UNAUTHORIZED],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/accounts/with-assets",
        handler=accounts.list_accounts_with_assets,
        resource="accounts",
        tags=["Accounts"],
        summary="List accounts with holdings",
        operation_id="list_accounts_with_assets",
        response_model=AccountWithAssetsListResponse,
        errors=[_UNAUTHORIZED, _ABORTED],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/accounts/filter",
        handler=accounts.filter_accounts,
        resource="accounts",
        tags=["Accounts"],
        summary="Filter accounts",
        operation_id="filter_accounts",
        response_model=AccountListResponse,
        errors=[_VALIDATION, _UNAUTHORIZED],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/accounts/summary",
        handler=accounts.get_account_summary,
        resource="accounts",
        tags=["Accounts"],
        summary="Account summary",
        operation_id="get_account_summary",
        response_model=AccountSummaryResponse,
        errors=[_UNAUTHORIZED],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/accounts/type/{account_type}",
        handler=accounts.list_accounts_by_type,
        resource="accounts",
        tags=["Accounts"],
        summary="List accounts by type",
        operation_id="list_accounts_by_type",
        response_model=AccountListResponse,
        errors=[_VALIDATION, _UNAUTHORIZED],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/accounts/currency/{currency}",
        handler=accounts.list_accounts_by_currency,
        resource="accounts",
        tags=["Accounts"],
        summary="List accounts by currency",
        operation_id="list_accounts_by_currency",
        response_model=AccountListResponse,
        errors=[_VALIDATION, _UNAUTHORIZED],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/accounts/{account_id}",
        handler=accounts.get_account,
        resource="accounts",
        tags=["Accounts"],
        summary="Get account",
        operation_id="get_account",
        response_model=AccountResponse,
        errors=[*_OWNED_READ, _not_found("Account")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/accounts/{account_id}/with-assets",
        handler=accounts.get_account_with_assets,
        resource="accounts",
        tags=["Accounts"],
        summary="Get account with holdings",
        operation_id="get_account_with_assets",
        response_model=AccountWithAssetsResponse,
        errors=[*_OWNED_READ, _not_found("Account"), _ABORTED],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/accounts/{account_id}",
        handler=accounts.update_account,
        resource="accounts",
        tags=["Accounts"],
        summary="Update account",
        operation_id="update_account",
        response_model=AccountResponse,
        errors=[_VALIDATION, *_OWNED_READ, _not_found("Account")],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.PATCH,
        path="/accounts/{account_id}/balance",
        handler=accounts.update_account_balance,
        resource="accounts",
        tags=["Accounts"],
        summary="Adjust account balance",
        description="Apply a signed delta atomically; refused if the result would be negative.",
        operation_id="update_account_balance",
        response_model=AccountResponse,
        errors=[
            ErrorSpec(status=400, description="Insufficient balance"),
            *_OWNED_READ,
            _not_found("Account"),
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/accounts/{account_id}",
        handler=accounts.delete_account,
        resource="accounts",
        tags=["Accounts"],
        summary="Delete account",
        operation_id="delete_account",
        status_code=204,
        errors=[*_OWNED_READ, _not_found("Account")],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AUTHENTICATED,
    ),
    # =========================================================================
    # Assets Resource
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/assets/types",
        handler=assets.list_asset_types,
        resource="assets",
        tags=["Assets"],
        summary="List asset types",
        operation_id="list_asset_types",
        response_model=TypeListResponse,
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/assets",
        handler=assets.create_asset,
        resource="assets",
        tags=["Assets"],
        summary="Create asset",
        operation_id="create_asset",
        response_model=AssetResponse,
        status_code=201,
        errors=[_VALIDATION, *_OWNED_READ, _not_found("Account or definition")],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/assets",
        handler=assets.list_assets,
        resource="assets",
        tags=["Assets"],
        summary="List assets",
        operation_id="list_assets",
        response_model=AssetListResponse,
        errors=[_VALIDATION, _UNAUTHORIZED],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/assets/filter",
        handler=assets.filter_assets,
        resource="assets",
        tags=["Assets"],
        summary="Filter assets",
        operation_id="filter_assets",
        response_model=AssetListResponse,
        errors=[_VALIDATION, _UNAUTHORIZED],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/assets/performance",
        handler=assets.get_asset_performance,
        resource="assets",
        tags=["Assets"],
        summary="Asset performance",
        operation_id="get_asset_performance",
        response_model=AssetPerformanceListResponse,
        errors=_RANGE_READ,
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/assets/total-value",
        handler=assets.get_total_value,
        resource="assets",
        tags=["Assets"],
        summary="Total asset value",
        operation_id="get_total_value",
        response_model=TotalValueResponse,
        errors=[_VALIDATION, _UNAUTHORIZED],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/assets/account/{account_id}",
        handler=assets.list_assets_by_account,
        resource="assets",
        tags=["Assets"],
        summary="List assets in an account",
        operation_id="list_assets_by_account",
        response_model=AssetListResponse,
        errors=[*_OWNED_READ, _not_found("Account")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/assets/{asset_id}",
        handler=assets.get_asset,
        resource="assets",
        tags=["Assets"],
        summary="Get asset",
        operation_id="get_asset",
        response_model=AssetResponse,
        errors=[*_OWNED_READ, _not_found("Asset")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/assets/{asset_id}",
        handler=assets.update_asset,
        resource="assets",
        tags=["Assets"],
        summary="Update asset",
        operation_id="update_asset",
        response_model=AssetResponse,
        errors=[_VALIDATION, *_OWNED_READ, _not_found("Asset")],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/assets/{asset_id}/price",
        handler=assets.update_asset_price,
        resource="assets",
        tags=["Assets"],
        summary="Update asset price",
        operation_id="update_asset_price",
        response_model=AssetResponse,
        errors=[_VALIDATION, *_OWNED_READ, _not_found("Asset")],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/assets/{asset_id}",
        handler=assets.delete_asset,
        resource="assets",
        tags=["Assets"],
        summary="Delete asset",
        operation_id="delete_asset",
        status_code=204,
        errors=[*_OWNED_READ, _not_found("Asset")],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AUTHENTICATED,
    ),
    # =========================================================================
    # Transactions Resource
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/transactions/types",
        handler=transactions.list_transaction_types,
        resource="transactions",
        tags=["Transactions"],
        summary="List transaction types",
        operation_id="list_transaction_types",
        response_model=TypeListResponse,
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/transactions",
        handler=transactions.create_transaction,
        resource="transactions",
        tags=["Transactions"],
        summary="Create transaction",
        description="Record a movement. Balances are not changed.",
        operation_id="create_transaction",
        response_model=TransactionResponse,
        status_code=201,
        errors=[_VALIDATION, *_OWNED_READ, _not_found("Account or asset")],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/transactions",
        handler=transactions.list_transactions,
        resource="transactions",
        tags=["Transactions"],
        summary="List transactions",
        operation_id="list_transactions",
        response_model=TransactionListResponse,
        errors=[_UNAUTHORIZED],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/transactions/date-range",
        handler=transactions.list_transactions_by_date_range,
        resource="transactions",
        tags=["Transactions"],
        summary="List transactions in a date range",
        operation_id="list_transactions_by_date_range",
        response_model=TransactionListResponse,
        errors=_RANGE_READ,
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/transactions/type/{transaction_type}",
        handler=transactions.list_transactions_by_type,
        resource="transactions",
        tags=["Transactions"],
        summary="List transactions by type",
        operation_id="list_transactions_by_type",
        response_model=TransactionListResponse,
        errors=[_VALIDATION, _UNAUTHORIZED],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/transactions/category/{category}",
        handler=transactions.list_transactions_by_category,
        resource="transactions",
        tags=["Transactions"],
        summary="List transactions by category",
        operation_id="list_transactions_by_category",
        response_model=TransactionListResponse,
        errors=[_UNAUTHORIZED],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/transactions/totals/category",
        handler=transactions.get_totals_by_category,
        resource="transactions",
        tags=["Transactions"],
        summary="Totals by category",
        operation_id="get_totals_by_category",
        response_model=TotalsResponse,
        errors=_RANGE_READ,
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/transactions/totals/type",
        handler=transactions.get_totals_by_type,
        resource="transactions",
        tags=["Transactions"],
        summary="Totals by type",
        operation_id="get_totals_by_type",
        response_model=TotalsResponse,
        errors=_RANGE_READ,
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/transactions/totals/monthly",
        handler=transactions.get_monthly_totals,
        resource="transactions",
        tags=["Transactions"],
        summary="Monthly totals",
        operation_id="get_monthly_totals",
        response_model=MonthlyTotalsResponse,
        errors=_RANGE_READ,
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/transactions/account/{account_id}",
        handler=transactions.list_transactions_by_account,
        resource="transactions",
        tags=["Transactions"],
        summary="List transactions of an account",
        operation_id="list_transactions_by_account",
        response_model=TransactionListResponse,
        errors=[*_OWNED_READ, _not_found("Account")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/transactions/asset/{asset_id}",
        handler=transactions.list_transactions_by_asset,
        resource="transactions",
        tags=["Transactions"],
        summary="List transactions of an asset",
        operation_id="list_transactions_by_asset",
        response_model=TransactionListResponse,
        errors=[*_OWNED_READ, _not_found("Asset")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/transactions/{transaction_id}",
        handler=transactions.get_transaction,
        resource="transactions",
        tags=["Transactions"],
        summary="Get transaction",
        operation_id="get_transaction",
        response_model=TransactionResponse,
        errors=[*_OWNED_READ, _not_found("Transaction")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/transactions/{transaction_id}",
        handler=transactions.update_transaction,
        resource="transactions",
        tags=["Transactions"],
        summary="Update transaction",
        operation_id="update_transaction",
        response_model=TransactionResponse,
        errors=[_VALIDATION, *_OWNED_READ, _not_found("Transaction")],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/transactions/{transaction_id}",
        handler=transactions.delete_transaction,
        resource="transactions",
        tags=["Transactions"],
        summary="Delete transaction",
        operation_id="delete_transaction",
        status_code=204,
        errors=[*_OWNED_READ, _not_found("Transaction")],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AUTHENTICATED,
    ),
]
