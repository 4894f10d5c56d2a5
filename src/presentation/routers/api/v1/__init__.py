"""API v1 routers.

All routes are generated from the Route Metadata Registry at startup;
see routes/registry.py for the complete route catalog.

Resources:
    /api/v1/auth           - Registration, login and profile
    /api/v1/definitions    - Unit definitions (global registry)
    /api/v1/accounts       - Accounts and balances
    /api/v1/assets         - Holdings
    /api/v1/transactions   - Recorded value movements and aggregates
"""

from fastapi import APIRouter

from src.core.config import settings
from src.presentation.routers.api.v1.routes.generator import (
    register_routes_from_registry,
)
from src.presentation.routers.api.v1.routes.registry import ROUTE_REGISTRY

v1_router = APIRouter(prefix=settings.api_v1_prefix)
register_routes_from_registry(v1_router, ROUTE_REGISTRY)

__all__ = [
    "v1_router",
]
