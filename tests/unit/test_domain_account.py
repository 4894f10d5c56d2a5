"""Unit tests for Account domain entity.

Tests cover:
- AccountType classification helpers
- Ownership and type queries
- Partial updates
- apply_delta non-negative balance rule
"""

from decimal import Decimal

import pytest
from uuid_extensions import uuid7

from src.core.result import Failure, Success
from src.domain.enums.account_type import AccountType
from tests.conftest import make_account


# =============================================================================
# AccountType Enum Tests
# =============================================================================


@pytest.mark.unit
class TestAccountTypeEnum:
    """Test AccountType enum helper methods."""

    def test_values_returns_all_types(self):
        values = AccountType.values()
        assert len(values) == 13
        assert "checking" in values
        assert "credit-card" in values
        assert "crypto-wallet" in values

    def test_is_valid_is_case_sensitive(self):
        assert AccountType.is_valid("savings") is True
        assert AccountType.is_valid("SAVINGS") is False
        assert AccountType.is_valid("") is False

    def test_investment_and_crypto_sets_are_disjoint(self):
        investment = set(AccountType.investment_types())
        crypto = set(AccountType.crypto_types())
        assert investment == {
            AccountType.INVESTMENT,
            AccountType.BROKER,
            AccountType.PENSION,
        }
        assert investment.isdisjoint(crypto)

    @pytest.mark.parametrize(
        "account_type,category",
        [
            (AccountType.CHECKING, "banking"),
            (AccountType.BROKER, "investment"),
            (AccountType.CRYPTO_EXCHANGE, "crypto"),
            (AccountType.SAFE, "other"),
        ],
    )
    def test_category(self, account_type, category):
        assert account_type.category == category


# =============================================================================
# Query Method Tests
# =============================================================================


@pytest.mark.unit
class TestAccountQueries:
    def test_is_owned_by(self):
        user_id = uuid7()
        account = make_account(user_id=user_id)

        assert account.is_owned_by(user_id) is True
        assert account.is_owned_by(uuid7()) is False

    def test_currency_is_normalized(self):
        account = make_account(currency=" eur ")
        assert account.currency == "EUR"

    def test_type_flags(self):
        wallet = make_account(account_type=AccountType.CRYPTO_WALLET)
        assert wallet.is_crypto_account() is True
        assert wallet.is_investment_account() is False


# =============================================================================
# Update Method Tests
# =============================================================================


@pytest.mark.unit
class TestAccountUpdate:
    def test_update_applies_only_supplied_fields(self):
        account = make_account(name="Old", balance=Decimal("10"))
        before = account.updated_at

        account.update(name="New")

        assert account.name == "New"
        assert account.balance == Decimal("10")
        assert account.account_type == AccountType.CHECKING
        assert account.updated_at >= before

    def test_update_normalizes_currency(self):
        account = make_account()
        account.update(currency="gbp")
        assert account.currency == "GBP"


@pytest.mark.unit
class TestAccountApplyDelta:
    def test_positive_delta_increases_balance(self):
        account = make_account(balance=Decimal("100.00"))

        result = account.apply_delta(Decimal("25.50"))

        assert isinstance(result, Success)
        assert result.value == Decimal("125.50")
        assert account.balance == Decimal("125.50")

    def test_delta_to_exactly_zero_is_allowed(self):
        account = make_account(balance=Decimal("40"))

        result = account.apply_delta(Decimal("-40"))

        assert isinstance(result, Success)
        assert account.balance == Decimal("0")

    def test_overdraw_fails_and_keeps_balance(self):
        account = make_account(balance=Decimal("40"))

        result = account.apply_delta(Decimal("-40.01"))

        assert isinstance(result, Failure)
        assert result.error == Decimal("40")
        assert account.balance == Decimal("40")
