"""Domain value objects and read models.

Immutable values: validated inputs (Email, Password) and the derived,
never-persisted views returned by aggregate queries.
"""

from src.domain.value_objects.account_summary import AccountSummary
from src.domain.value_objects.account_with_assets import AccountWithAssets, AssetInfo
from src.domain.value_objects.asset_performance import AssetPerformance
from src.domain.value_objects.email import Email
from src.domain.value_objects.monthly_total import MonthlyTotal
from src.domain.value_objects.password import Password

__all__ = [
    "AccountSummary",
    "AccountWithAssets",
    "AssetInfo",
    "AssetPerformance",
    "Email",
    "MonthlyTotal",
    "Password",
]
