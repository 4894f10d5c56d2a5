"""Pytest configuration shared by the unit and API suites.

Provides:
1. Marker registration (unit, integration, api)
2. Auto-marking of async tests for pytest-asyncio
3. Entity factory helpers used across test modules
"""

import inspect
from datetime import UTC, datetime
from decimal import Decimal
from uuid import UUID

import pytest
from uuid_extensions import uuid7

from src.domain.entities.account import Account
from src.domain.entities.asset import Asset
from src.domain.entities.definition import Definition
from src.domain.entities.transaction import Transaction
from src.domain.entities.user import User
from src.domain.enums.account_type import AccountType
from src.domain.enums.asset_type import AssetType
from src.domain.enums.transaction_type import TransactionType


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests with no I/O")
    config.addinivalue_line("markers", "integration: tests touching a real database")
    config.addinivalue_line("markers", "api: HTTP tests through TestClient")


def pytest_collection_modifyitems(items):
    for item in items:
        if inspect.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)


# Test helper functions for domain entities


def make_user(
    user_id: UUID | None = None,
    email: str = "ada@example.com",
    password_hash: str = "$2b$12$hashedpassword",
) -> User:
    return User(
        id=user_id or uuid7(),
        email=email,
        password_hash=password_hash,
        first_name="Ada",
        last_name="Lovelace",
    )


def make_account(
    user_id: UUID | None = None,
    account_type: AccountType = AccountType.CHECKING,
    balance: Decimal = Decimal("1000.00"),
    currency: str = "USD",
    name: str = "Everyday Checking",
) -> Account:
    """Helper to create an Account for testing.

    Usage:
        account = make_account(balance=Decimal("50"))
        crypto = make_account(account_type=AccountType.CRYPTO_WALLET)
    """
    return Account(
        id=uuid7(),
        user_id=user_id or uuid7(),
        name=name,
        account_type=account_type,
        balance=balance,
        currency=currency,
    )


def make_definition(
    name: str = "Bitcoin",
    abbreviation: str = "BTC",
    suffix: str = "BTC",
) -> Definition:
    return Definition(id=uuid7(), name=name, abbreviation=abbreviation, suffix=suffix)


def make_asset(
    user_id: UUID | None = None,
    account_id: UUID | None = None,
    asset_type: AssetType = AssetType.CRYPTOCURRENCY,
    quantity: Decimal = Decimal("2"),
    purchase_price: Decimal = Decimal("50"),
    current_price: Decimal = Decimal("80"),
) -> Asset:
    return Asset(
        id=uuid7(),
        user_id=user_id or uuid7(),
        account_id=account_id or uuid7(),
        definition_id=uuid7(),
        asset_type=asset_type,
        quantity=quantity,
        symbol="BTC",
        purchase_price=purchase_price,
        current_price=current_price,
        currency="USD",
    )


def make_transaction(
    user_id: UUID | None = None,
    account_id: UUID | None = None,
    transaction_type: TransactionType = TransactionType.DEPOSIT,
    amount: Decimal = Decimal("100"),
    fee: Decimal = Decimal("0"),
    category: str = "",
    date: datetime = datetime(2026, 10, 1, 12, 0, tzinfo=UTC),
    **kwargs,
) -> Transaction:
    return Transaction(
        id=uuid7(),
        user_id=user_id or uuid7(),
        account_id=account_id or uuid7(),
        transaction_type=transaction_type,
        amount=amount,
        date=date,
        fee=fee,
        currency="USD",
        category=category,
        **kwargs,
    )
