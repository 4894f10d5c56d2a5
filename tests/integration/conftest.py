"""Fixtures for integration tests against a real PostgreSQL database.

The database comes from ``DATABASE_URL``. Tables are created from the ORM
metadata before each test; rows are never shared because every test owns
a freshly created user (and, for the global catalog, unique abbreviations).
"""

from uuid import UUID

import pytest
import pytest_asyncio
from uuid_extensions import uuid7

from src.core.config import settings
from src.domain.entities.account import Account
from src.domain.entities.definition import Definition
from src.infrastructure.persistence.database import Database
from src.infrastructure.persistence.models.user import User as UserModel
from src.infrastructure.persistence.repositories import (
    AccountRepository,
    DefinitionRepository,
)
from tests.conftest import make_account, make_definition


@pytest_asyncio.fixture
async def test_database():
    """Provide a Database whose sessions commit on exit.

    Usage:
        async def test_something(test_database):
            async with test_database.get_session() as session:
                ...
    """
    db = Database(database_url=settings.database_url, echo=settings.db_echo)
    if not await db.check_connection():
        await db.close()
        pytest.skip("PostgreSQL is not reachable at DATABASE_URL")
    await db.create_all()
    yield db
    await db.close()


@pytest_asyncio.fixture
async def user_id(test_database) -> UUID:
    """Insert a user row so ledger rows satisfy their FK."""
    new_id = uuid7()
    async with test_database.get_session() as session:
        session.add(
            UserModel(
                id=new_id,
                email=f"ledger_{new_id.hex}@example.com",
                password_hash="$2b$12$test_hash",
            )
        )
    return new_id


def unique_code(prefix: str = "T") -> str:
    """Abbreviation no other test run will produce."""
    return f"{prefix}{uuid7().hex[-10:]}".upper()


async def create_account_in_db(test_database, user_id: UUID, **fields) -> Account:
    account = make_account(user_id=user_id, **fields)
    async with test_database.get_session() as session:
        await AccountRepository(session).save(account)
    return account


async def create_definition_in_db(test_database, **fields) -> Definition:
    fields.setdefault("abbreviation", unique_code())
    definition = make_definition(**fields)
    async with test_database.get_session() as session:
        await DefinitionRepository(session).save(definition)
    return definition
