"""Container module - centralized dependency injection.

- infrastructure: database, security services, logging
- handler_factory: auto-wired, request-scoped CQRS handlers

    from src.core.container import get_logger, handler_factory
"""

from src.core.container.handler_factory import create_handler, handler_factory
from src.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_logger,
    get_password_service,
    get_token_service,
)

__all__ = [
    "create_handler",
    "get_database",
    "get_db_session",
    "get_logger",
    "get_password_service",
    "get_token_service",
    "handler_factory",
]
