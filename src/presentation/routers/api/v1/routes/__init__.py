"""API Route Registry package.

Modules:
    metadata: Core types (RouteMetadata, AuthPolicy, ErrorSpec, etc.)
    registry: ROUTE_REGISTRY - Every mounted route, in mount order
    generator: register_routes_from_registry() - Generate FastAPI routes
"""

from src.presentation.routers.api.v1.routes.metadata import (
    AuthLevel,
    AuthPolicy,
    ErrorSpec,
    HTTPMethod,
    IdempotencyLevel,
    RouteMetadata,
)

__all__ = [
    "RouteMetadata",
    "HTTPMethod",
    "AuthPolicy",
    "AuthLevel",
    "ErrorSpec",
    "IdempotencyLevel",
]
