"""Builds the v1 router from ``ROUTE_REGISTRY``.

Each RouteMetadata entry becomes one ``add_api_route`` call. The idempotency
level is published as the ``x-idempotency`` OpenAPI extension.
"""

from typing import Any

from fastapi import APIRouter, Depends

from src.presentation.routers.api.middleware.auth_dependencies import (
    get_current_user,
)
from src.presentation.routers.api.v1.routes.metadata import (
    AuthLevel,
    AuthPolicy,
    ErrorSpec,
    RouteMetadata,
)


def register_routes_from_registry(
    router: APIRouter,
    registry: list[RouteMetadata],
) -> None:
    """Add one route per entry, in list order.

    Starlette matches first-registered first, so ``/accounts/types`` has to be
    listed ahead of ``/accounts/{account_id}``.
    """
    for metadata in registry:
        dependencies = _build_dependencies(metadata.auth_policy)
        responses = _build_responses(metadata.errors) if metadata.errors else None

        router.add_api_route(
            path=metadata.path,
            endpoint=metadata.handler,
            methods=[metadata.method.value],
            response_model=metadata.response_model,
            status_code=metadata.status_code,
            tags=list(metadata.tags),
            summary=metadata.summary,
            description=metadata.description,
            operation_id=metadata.operation_id,
            responses=responses,
            dependencies=dependencies,
            deprecated=metadata.deprecated,
            openapi_extra={"x-idempotency": metadata.idempotency.value},
        )


def _build_dependencies(auth_policy: AuthPolicy) -> list[Any]:
    """Authenticated routes resolve the caller before the endpoint runs."""
    match auth_policy.level:
        case AuthLevel.PUBLIC:
            return []
        case AuthLevel.AUTHENTICATED:
            return [Depends(get_current_user)]
        case _:
            msg = f"Unknown auth level: {auth_policy.level}"
            raise ValueError(msg)


def _build_responses(errors: list[ErrorSpec]) -> dict[int | str, dict[str, Any]]:
    """Status code to description, for the OpenAPI document only."""
    return {error.status: {"description": error.description} for error in errors}
