"""Types describing one entry of ``ROUTE_REGISTRY``.

An entry pairs an endpoint coroutine with everything the generator needs to
mount it: method, path, auth policy, OpenAPI text and declared errors.

    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/accounts/{account_id}",
        handler=delete_account,
        resource="accounts",
        tags=["Accounts"],
        summary="Delete account",
        status_code=204,
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AuthPolicy(level=AuthLevel.AUTHENTICATED),
    )
"""

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel


class HTTPMethod(str, Enum):
    """HTTP methods for API routes."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


class AuthLevel(str, Enum):
    """Authentication levels for routes.

    Attributes:
        PUBLIC: No authentication required (registration, login, type listings)
        AUTHENTICATED: Requires a valid JWT (AuthenticatedUser dependency)
    """

    PUBLIC = "public"
    AUTHENTICATED = "authenticated"


@dataclass(frozen=True, kw_only=True)
class AuthPolicy:
    """Authentication policy for a route.

    Examples:
        >>> AuthPolicy(level=AuthLevel.PUBLIC)
        >>> AuthPolicy(level=AuthLevel.AUTHENTICATED)
    """

    level: AuthLevel


class IdempotencyLevel(str, Enum):
    """HTTP idempotency classification.

    Attributes:
        SAFE: No side effects (GET)
        IDEMPOTENT: Side effects, but repeatable (PUT, DELETE)
        NON_IDEMPOTENT: Side effects, not repeatable (POST, PATCH)
    """

    SAFE = "safe"
    IDEMPOTENT = "idempotent"
    NON_IDEMPOTENT = "non_idempotent"


@dataclass(frozen=True, kw_only=True)
class ErrorSpec:
    """Declared error response, documented in OpenAPI.

    Examples:
        >>> ErrorSpec(status=404, description="Account not found")
        >>> ErrorSpec(status=409, description="Abbreviation already exists")
    """

    status: int
    description: str
    model: type[BaseModel] | None = None


@dataclass(frozen=True, kw_only=True)
class RouteMetadata:
    """Everything needed to mount and document one route.

    Identity fields:
        method: HTTP method
        path: URL path relative to the version prefix (e.g., "/accounts/{account_id}")
        handler: Async endpoint function

    Grouping fields:
        resource: Resource category (e.g., "accounts")
        tags: OpenAPI tags

    Request/Response:
        response_model: Pydantic model for the success body
        status_code: Success status (200, 201, 204)
        errors: Documented error responses
    """

    # Identity
    method: HTTPMethod
    path: str
    handler: Callable[..., Awaitable[Any]]

    # Grouping
    resource: str
    tags: Sequence[str]
    version: str = "v1"

    # OpenAPI documentation
    summary: str
    description: str | None = None
    operation_id: str | None = None

    # Request/Response
    response_model: type[BaseModel] | None = None
    status_code: int = 200
    errors: list[ErrorSpec] | None = None

    # Behavior
    idempotency: IdempotencyLevel
    auth_policy: AuthPolicy

    deprecated: bool = False
