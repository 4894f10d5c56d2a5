"""API tests for transaction endpoints.

Covers creation, lenient pagination, date-range parameters, the three
aggregate endpoints and the RFC 9457 error mapping.
"""

from decimal import Decimal

import pytest
from uuid_extensions import uuid7

from src.application.commands.handlers.transaction_handlers import (
    CreateTransactionHandler,
    DeleteTransactionHandler,
    UpdateTransactionHandler,
)
from src.application.queries.handlers.transaction_handlers import (
    GetMonthlyTotalsHandler,
    GetTotalsByTypeHandler,
    ListTransactionsByAccountHandler,
    ListTransactionsByDateRangeHandler,
    ListTransactionsHandler,
)
from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Success
from src.domain.enums.transaction_type import TransactionType
from src.domain.value_objects.monthly_total import MonthlyTotal
from src.main import app
from src.presentation.routers.api.middleware.auth_dependencies import get_current_user
from tests.conftest import make_transaction

RANGE = "startDate=2026-09-01T00:00:00Z&endDate=2026-10-01T00:00:00Z"


@pytest.mark.api
def test_transaction_types_are_public(client):
    app.dependency_overrides.pop(get_current_user, None)

    response = client.get("/api/v1/transactions/types")

    assert response.status_code == 200
    assert "BORROWING" in response.json()["types"]


@pytest.mark.api
class TestCreateTransaction:
    def test_create_returns_201_with_derived_fields(
        self, client, override_handler, mock_user_id
    ):
        tx = make_transaction(
            user_id=mock_user_id,
            transaction_type=TransactionType.WITHDRAWAL,
            amount=Decimal("100"),
            fee=Decimal("5"),
        )
        handler = override_handler(CreateTransactionHandler, Success(value=tx))

        response = client.post(
            "/api/v1/transactions",
            json={
                "account_id": str(tx.account_id),
                "transaction_type": "WITHDRAWAL",
                "amount": "100",
                "fee": "5",
            },
        )

        assert response.status_code == 201
        data = response.json()
        assert data["total_amount"] == 105.0
        assert data["is_debit"] is True
        assert data["is_credit"] is False
        assert handler.calls[0].date is None

    def test_rule_violation_is_400(self, client, override_handler):
        override_handler(
            CreateTransactionHandler,
            Failure(
                error=ValidationError(
                    code=ErrorCode.TRANSFER_DESTINATION_REQUIRED,
                    message="Transfer requires a destination account",
                    field="to_account_id",
                )
            ),
        )

        response = client.post(
            "/api/v1/transactions",
            json={
                "account_id": str(uuid7()),
                "transaction_type": "TRANSFER",
                "amount": "10",
            },
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "to_account_id"

    def test_update_requires_date(self, client, override_handler):
        handler = override_handler(
            UpdateTransactionHandler, Success(value=make_transaction())
        )

        response = client.put(
            f"/api/v1/transactions/{uuid7()}",
            json={
                "account_id": str(uuid7()),
                "transaction_type": "DEPOSIT",
                "amount": "10",
            },
        )

        assert response.status_code == 400
        assert handler.calls == []


@pytest.mark.api
class TestListTransactions:
    @pytest.mark.parametrize(
        "query_string,limit,offset",
        [
            ("", None, None),
            ("?limit=10&offset=30", 10, 30),
            ("?limit=abc&offset=xyz", None, None),
            ("?limit=-5", -5, None),
        ],
    )
    def test_pagination_is_lenient(
        self, client, override_handler, query_string, limit, offset
    ):
        handler = override_handler(ListTransactionsHandler, Success(value=[]))

        response = client.get(f"/api/v1/transactions{query_string}")

        assert response.status_code == 200
        assert response.json() == {"transactions": [], "count": 0}
        assert handler.calls[0].limit == limit
        assert handler.calls[0].offset == offset

    def test_by_account(self, client, override_handler, mock_user_id):
        account_id = uuid7()
        tx = make_transaction(user_id=mock_user_id, account_id=account_id)
        handler = override_handler(
            ListTransactionsByAccountHandler, Success(value=[tx])
        )

        response = client.get(f"/api/v1/transactions/account/{account_id}?limit=5")

        assert response.status_code == 200
        assert response.json()["count"] == 1
        assert handler.calls[0].account_id == account_id
        assert handler.calls[0].limit == 5

    def test_date_range_requires_both_bounds(self, client, override_handler):
        override_handler(ListTransactionsByDateRangeHandler, Success(value=[]))

        response = client.get(
            "/api/v1/transactions/date-range?startDate=2026-09-01T00:00:00Z"
        )

        assert response.status_code == 400

    def test_date_range(self, client, override_handler):
        handler = override_handler(ListTransactionsByDateRangeHandler, Success(value=[]))

        response = client.get(f"/api/v1/transactions/date-range?{RANGE}")

        assert response.status_code == 200
        query = handler.calls[0]
        assert query.start_date.month == 9
        assert query.end_date.month == 10


@pytest.mark.api
class TestAggregates:
    def test_totals_by_type_keyed_by_value(self, client, override_handler):
        override_handler(
            GetTotalsByTypeHandler,
            Success(
                value={
                    TransactionType.DEPOSIT: Decimal("300"),
                    TransactionType.BORROWING: Decimal("-50"),
                    TransactionType.EXPENSE: Decimal("-120.5"),
                }
            ),
        )

        response = client.get(f"/api/v1/transactions/totals/type?{RANGE}")

        assert response.status_code == 200
        assert response.json()["totals"] == {
            "DEPOSIT": 300.0,
            "BORROWING": -50.0,
            "EXPENSE": -120.5,
        }

    def test_monthly_totals(self, client, override_handler):
        override_handler(
            GetMonthlyTotalsHandler,
            Success(
                value=[
                    MonthlyTotal(
                        year=2026,
                        month=9,
                        total_in=Decimal("1000"),
                        total_out=Decimal("400"),
                        net_amount=Decimal("600"),
                    )
                ]
            ),
        )

        response = client.get(f"/api/v1/transactions/totals/monthly?{RANGE}")

        assert response.status_code == 200
        month = response.json()["months"][0]
        assert (month["year"], month["month"], month["net_amount"]) == (2026, 9, 600.0)


@pytest.mark.api
def test_delete_transaction(client, override_handler):
    transaction_id = uuid7()
    handler = override_handler(DeleteTransactionHandler, Success(value=None))

    response = client.delete(f"/api/v1/transactions/{transaction_id}")

    assert response.status_code == 204
    assert handler.calls[0].transaction_id == transaction_id
