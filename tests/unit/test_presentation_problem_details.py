"""Unit tests for RFC 9457 Problem Details schemas."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from src.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)


def _problem(**overrides) -> ProblemDetails:
    fields = {
        "type": "http://localhost:8000/errors/insufficient_balance",
        "title": "Insufficient Balance",
        "status": 400,
        "detail": "Balance cannot go negative",
        "instance": "/api/v1/accounts/0190/balance",
    }
    fields.update(overrides)
    return ProblemDetails(**fields)


@pytest.mark.unit
class TestErrorDetail:
    def test_requires_all_fields(self):
        with pytest.raises(PydanticValidationError):
            ErrorDetail(field="quantity", code="invalid_quantity")  # type: ignore[call-arg]

    def test_serializes(self):
        detail = ErrorDetail(
            field="quantity",
            code="invalid_quantity",
            message="Quantity must be greater than zero",
        )

        assert detail.model_dump() == {
            "field": "quantity",
            "code": "invalid_quantity",
            "message": "Quantity must be greater than zero",
        }


@pytest.mark.unit
class TestProblemDetails:
    def test_optional_members_default_to_none(self):
        problem = _problem()

        assert problem.errors is None
        assert problem.trace_id is None

    def test_exclude_none_drops_optional_members(self):
        body = _problem().model_dump(exclude_none=True)

        assert set(body) == {"type", "title", "status", "detail", "instance"}

    def test_field_errors_and_trace_id(self):
        problem = _problem(
            errors=[
                ErrorDetail(
                    field="to_account_id",
                    code="transfer_destination_required",
                    message="Transfer requires a destination account",
                )
            ],
            trace_id="0190c0de-trace",
        )

        body = problem.model_dump(exclude_none=True)
        assert body["errors"][0]["field"] == "to_account_id"
        assert body["trace_id"] == "0190c0de-trace"

    @pytest.mark.parametrize("status", [399, 600])
    def test_status_must_be_an_error(self, status):
        with pytest.raises(PydanticValidationError):
            _problem(status=status)

    def test_client_closed_request_is_allowed(self):
        assert _problem(status=499, title="Client Closed Request").status == 499
