"""Handler factory - auto-wire handler dependencies from type hints.

Handlers declare what they need in ``__init__`` annotations; the factory
resolves each parameter by type name:

- ``*Repository``: new instance bound to the request session
- ``*Protocol``: app-scoped singleton from the container

Usage:
    from src.core.container.handler_factory import handler_factory

    @router.post("/accounts")
    async def create_account(
        handler: CreateAccountHandler = Depends(handler_factory(CreateAccountHandler)),
    ): ...

    # Tests
    app.dependency_overrides[handler_factory(CreateAccountHandler)] = lambda: mock
"""

from collections.abc import Callable
from typing import Any, TypeVar, get_type_hints

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.infrastructure import (
    get_db_session,
    get_logger,
    get_password_service,
    get_token_service,
)

T = TypeVar("T")


def _repository_classes() -> dict[str, type]:
    from src.infrastructure.persistence.repositories import (
        AccountRepository,
        AssetRepository,
        DefinitionRepository,
        TransactionRepository,
        UserRepository,
    )

    return {
        "AccountRepository": AccountRepository,
        "AssetRepository": AssetRepository,
        "DefinitionRepository": DefinitionRepository,
        "TransactionRepository": TransactionRepository,
        "UserRepository": UserRepository,
    }


SINGLETON_FACTORIES: dict[str, Callable[[], Any]] = {
    "LoggerProtocol": get_logger,
    "PasswordHashingProtocol": get_password_service,
    "TokenGenerationProtocol": get_token_service,
}


def get_type_name(annotation: Any) -> str:
    """Type name of an annotation, unwrapping ``X | None``."""
    args = getattr(annotation, "__args__", None)
    if args:
        for arg in args:
            if arg is not type(None):
                return get_type_name(arg)
    if isinstance(annotation, type):
        return annotation.__name__
    return str(annotation).split(".")[-1].rstrip("'>")


def create_handler(
    handler_class: type[T],
    session: AsyncSession,
    **overrides: Any,
) -> T:
    """Instantiate ``handler_class`` with resolved dependencies.

    Raises:
        ValueError: A required parameter has no known provider.
    """
    hints = get_type_hints(handler_class.__init__)
    hints.pop("return", None)
    repositories = _repository_classes()

    resolved: dict[str, Any] = {}
    for param_name, annotation in hints.items():
        if param_name in overrides:
            resolved[param_name] = overrides[param_name]
            continue
        type_name = get_type_name(annotation)
        if type_name in repositories:
            resolved[param_name] = repositories[type_name](session=session)
        elif type_name in SINGLETON_FACTORIES:
            resolved[param_name] = SINGLETON_FACTORIES[type_name]()
        else:
            raise ValueError(
                f"Cannot resolve dependency '{param_name}' "
                f"of type '{type_name}' for {handler_class.__name__}"
            )
    return handler_class(**resolved)


_handler_factory_cache: dict[type, Callable[..., Any]] = {}


def handler_factory(handler_class: type[T]) -> Callable[..., Any]:
    """FastAPI dependency creating ``handler_class`` per request.

    Cached per class so tests can override with the same key.
    """
    if handler_class in _handler_factory_cache:
        return _handler_factory_cache[handler_class]

    async def _factory(session: AsyncSession = Depends(get_db_session)) -> T:
        return create_handler(handler_class, session)

    _factory.__name__ = f"get_{handler_class.__name__.lower()}"
    _factory.__doc__ = f"Auto-wired factory for {handler_class.__name__}."
    _handler_factory_cache[handler_class] = _factory
    return _factory
