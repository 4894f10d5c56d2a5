"""Infrastructure dependency factories.

App-scoped singletons (cached with lru_cache) and the request-scoped
database session.

Usage:
    # Application code
    from src.core.container import get_logger
    logger = get_logger()

    # FastAPI
    async def route(session: AsyncSession = Depends(get_db_session)): ...
"""

from collections.abc import AsyncGenerator
from functools import lru_cache
from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
    from src.domain.protocols.token_generation_protocol import TokenGenerationProtocol


# ============================================================================
# Database
# ============================================================================


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Use get_db_session() for per-request sessions.
    """
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Yield a request-scoped session.

    Commits when the request completes without error, rolls back otherwise.
    Every repository created for the request shares this session.
    """
    db = get_database()
    async with db.get_session() as session:
        yield session


# ============================================================================
# Security Services (Application-Scoped)
# ============================================================================


@lru_cache()
def get_password_service() -> "PasswordHashingProtocol":
    """Get bcrypt password service singleton."""
    from src.infrastructure.security import BcryptPasswordService

    return BcryptPasswordService(cost_factor=settings.bcrypt_rounds)


@lru_cache()
def get_token_service() -> "TokenGenerationProtocol":
    """Get JWT token service singleton."""
    from src.infrastructure.security import JWTService

    return JWTService(
        secret_key=settings.secret_key,
        expiration_minutes=settings.access_token_expire_minutes,
        algorithm=settings.algorithm,
    )


# ============================================================================
# Logging (Application-Scoped)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Get structured logger singleton.

    Renderer follows settings.log_format ('json' or 'console'); production
    always logs JSON.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    use_json = settings.log_format == "json" or settings.is_production
    return ConsoleAdapter(use_json=use_json, level=settings.log_level)
