"""Registry compliance tests - prevent drift between registry and router.

These tests ensure the Route Metadata Registry remains the single source of
truth by validating that:
1. Every FastAPI route has a registry entry and vice versa
2. Operation ids are unique and every entry is documented
3. Static paths are registered before parameterized siblings
4. Public routes are exactly the ones that need no token
"""

import inspect
import re

import pytest

from src.core.config import settings
from src.presentation.routers.api.v1 import v1_router
from src.presentation.routers.api.v1.routes.metadata import (
    AuthLevel,
    HTTPMethod,
    IdempotencyLevel,
)
from src.presentation.routers.api.v1.routes.registry import ROUTE_REGISTRY

PUBLIC_ENDPOINTS = {
    "POST /auth/register",
    "POST /auth/login",
    "GET /accounts/types",
    "GET /assets/types",
    "GET /transactions/types",
}

_PARAM = re.compile(r"\{[^}]+\}")


def _key(entry) -> str:
    return f"{entry.method.value} {entry.path}"


@pytest.mark.api
class TestRegistryCompleteness:
    def test_all_routes_are_registered(self):
        actual = {
            f"{method} {route.path}"
            for route in v1_router.routes
            for method in getattr(route, "methods", ())
            if method not in {"HEAD", "OPTIONS"}
        }
        expected = {
            f"{entry.method.value} {settings.api_v1_prefix}{entry.path}"
            for entry in ROUTE_REGISTRY
        }

        assert actual == expected

    def test_operation_ids_are_unique(self):
        operation_ids = [entry.operation_id for entry in ROUTE_REGISTRY]

        assert all(operation_ids)
        assert len(operation_ids) == len(set(operation_ids))

    def test_entries_are_documented(self):
        for entry in ROUTE_REGISTRY:
            assert entry.tags, f"{_key(entry)} has no tags"
            assert entry.resource, f"{_key(entry)} has no resource"
            assert entry.summary, f"{_key(entry)} has no summary"
            assert inspect.iscoroutinefunction(entry.handler), _key(entry)

    def test_deletes_return_no_content(self):
        for entry in ROUTE_REGISTRY:
            if entry.method == HTTPMethod.DELETE:
                assert entry.status_code == 204, _key(entry)

    def test_idempotency_matches_method(self):
        expected = {
            HTTPMethod.GET: IdempotencyLevel.SAFE,
            HTTPMethod.PUT: IdempotencyLevel.IDEMPOTENT,
            HTTPMethod.DELETE: IdempotencyLevel.IDEMPOTENT,
            HTTPMethod.POST: IdempotencyLevel.NON_IDEMPOTENT,
            HTTPMethod.PATCH: IdempotencyLevel.NON_IDEMPOTENT,
        }
        for entry in ROUTE_REGISTRY:
            assert entry.idempotency == expected[entry.method], _key(entry)

    def test_idempotency_published_in_openapi(self, client):
        paths = client.get("/openapi.json").json()["paths"]
        operation = paths[f"{settings.api_v1_prefix}/accounts/{{account_id}}"]["delete"]

        assert operation["x-idempotency"] == "idempotent"


@pytest.mark.api
def test_static_paths_precede_parameterized_siblings():
    """A literal segment registered after a ``{param}`` sibling is unreachable."""
    seen: list[tuple[HTTPMethod, str]] = []
    for entry in ROUTE_REGISTRY:
        for method, earlier in seen:
            if method != entry.method or "{" not in earlier:
                continue
            pattern = "^" + _PARAM.sub("[^/]+", earlier) + "$"
            assert not re.match(pattern, entry.path), (
                f"{_key(entry)} is shadowed by {method.value} {earlier}"
            )
        seen.append((entry.method, entry.path))


@pytest.mark.api
class TestAuthPolicies:
    def test_public_routes(self):
        public = {
            _key(entry)
            for entry in ROUTE_REGISTRY
            if entry.auth_policy.level == AuthLevel.PUBLIC
        }

        assert public == PUBLIC_ENDPOINTS

    def test_public_handlers_do_not_read_caller(self):
        for entry in ROUTE_REGISTRY:
            if entry.auth_policy.level != AuthLevel.PUBLIC:
                continue
            params = inspect.signature(entry.handler).parameters
            assert "current_user" not in params, _key(entry)
