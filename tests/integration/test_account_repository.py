"""Integration tests for AccountRepository.

Tests cover:
- apply_delta: credit, debit, and the guard that refuses a negative balance
- update: name/type/currency written without touching a balance changed
  concurrently; balance written only when asked
- get_summary: counts by type, sums by currency
- delete cascading to the account's transactions

Architecture:
- Integration tests with REAL PostgreSQL database
- Uses test_database fixture (fresh instance per test)
"""

from decimal import Decimal

import pytest
from uuid_extensions import uuid7

from src.domain.enums.account_type import AccountType
from src.infrastructure.persistence.repositories import (
    AccountRepository,
    TransactionRepository,
)
from tests.conftest import make_transaction
from tests.integration.conftest import create_account_in_db


async def _reload(test_database, account_id):
    async with test_database.get_session() as session:
        return await AccountRepository(session).find_by_id(account_id)


@pytest.mark.integration
class TestAccountRepositoryApplyDelta:
    async def test_credit_and_debit(self, test_database, user_id):
        account = await create_account_in_db(
            test_database, user_id, balance=Decimal("100.00")
        )

        async with test_database.get_session() as session:
            repo = AccountRepository(session)
            after_credit = await repo.apply_delta(account.id, Decimal("25.50"))
            after_debit = await repo.apply_delta(account.id, Decimal("-125.50"))

        assert after_credit == Decimal("125.50")
        assert after_debit == Decimal("0")
        assert (await _reload(test_database, account.id)).balance == Decimal("0")

    async def test_overdraw_is_refused_and_nothing_written(
        self, test_database, user_id
    ):
        account = await create_account_in_db(
            test_database, user_id, balance=Decimal("10.00")
        )

        async with test_database.get_session() as session:
            result = await AccountRepository(session).apply_delta(
                account.id, Decimal("-10.01")
            )

        assert result is None
        assert (await _reload(test_database, account.id)).balance == Decimal("10.00")

    async def test_missing_account(self, test_database):
        async with test_database.get_session() as session:
            result = await AccountRepository(session).apply_delta(
                uuid7(), Decimal("1")
            )

        assert result is None


@pytest.mark.integration
class TestAccountRepositoryUpdate:
    async def test_rename_keeps_concurrent_balance_change(
        self, test_database, user_id
    ):
        account = await create_account_in_db(
            test_database, user_id, balance=Decimal("100.00")
        )
        stale = await _reload(test_database, account.id)

        async with test_database.get_session() as session:
            await AccountRepository(session).apply_delta(account.id, Decimal("50"))

        stale.update(name="Bills")
        async with test_database.get_session() as session:
            stored = await AccountRepository(session).update(stale)

        found = await _reload(test_database, account.id)
        assert stored == Decimal("150.00")
        assert found.name == "Bills"
        assert found.balance == Decimal("150.00")

    async def test_balance_written_when_included(self, test_database, user_id):
        account = await create_account_in_db(
            test_database, user_id, balance=Decimal("100.00")
        )
        account.update(balance=Decimal("42.00"), account_type=AccountType.SAVINGS)

        async with test_database.get_session() as session:
            stored = await AccountRepository(session).update(
                account, include_balance=True
            )

        found = await _reload(test_database, account.id)
        assert stored == Decimal("42.00")
        assert found.balance == Decimal("42.00")
        assert found.account_type == AccountType.SAVINGS


@pytest.mark.integration
async def test_get_summary(test_database, user_id):
    await create_account_in_db(test_database, user_id, balance=Decimal("100"))
    await create_account_in_db(test_database, user_id, balance=Decimal("50"))
    await create_account_in_db(
        test_database,
        user_id,
        account_type=AccountType.SAVINGS,
        balance=Decimal("25"),
        currency="EUR",
    )

    async with test_database.get_session() as session:
        summary = await AccountRepository(session).get_summary(user_id)

    assert summary.total_accounts == 3
    assert summary.total_balance == Decimal("175")
    assert summary.by_type == {AccountType.CHECKING: 2, AccountType.SAVINGS: 1}
    assert summary.by_currency == {"USD": Decimal("150"), "EUR": Decimal("25")}


@pytest.mark.integration
async def test_summary_for_user_without_accounts(test_database, user_id):
    async with test_database.get_session() as session:
        summary = await AccountRepository(session).get_summary(user_id)

    assert summary.total_accounts == 0
    assert summary.total_balance == Decimal("0")


@pytest.mark.integration
async def test_delete_cascades_transactions(test_database, user_id):
    account = await create_account_in_db(test_database, user_id)
    transaction = make_transaction(user_id=user_id, account_id=account.id)
    async with test_database.get_session() as session:
        await TransactionRepository(session).save(transaction)

    async with test_database.get_session() as session:
        await AccountRepository(session).delete(account.id)

    assert await _reload(test_database, account.id) is None
    async with test_database.get_session() as session:
        assert await TransactionRepository(session).find_by_id(transaction.id) is None
