"""Unit tests for the JWT and bcrypt identity services."""

from datetime import UTC, datetime, timedelta

import jwt
import pytest
from freezegun import freeze_time
from uuid_extensions import uuid7

from src.core.result import Failure, Success
from src.infrastructure.security.bcrypt_password_service import BcryptPasswordService
from src.infrastructure.security.jwt_service import (
    TOKEN_EXPIRED,
    TOKEN_INVALID,
    JWTService,
)

SECRET = "s" * 32


@pytest.mark.unit
class TestJWTService:
    def test_short_secret_rejected(self):
        with pytest.raises(ValueError):
            JWTService(secret_key="too-short")

    def test_round_trip_claims(self):
        service = JWTService(secret_key=SECRET)
        user_id = uuid7()

        token = service.generate_access_token(user_id=user_id, email="ada@ledger.io")
        result = service.validate_access_token(token)

        assert isinstance(result, Success)
        assert result.value["sub"] == str(user_id)
        assert result.value["email"] == "ada@ledger.io"
        assert "jti" in result.value

    def test_expired_token(self):
        service = JWTService(secret_key=SECRET, expiration_minutes=5)
        issued = datetime(2026, 10, 18, 9, 0, tzinfo=UTC)

        with freeze_time(issued):
            token = service.generate_access_token(user_id=uuid7(), email="a@b.io")
        with freeze_time(issued + timedelta(minutes=6)):
            result = service.validate_access_token(token)

        assert isinstance(result, Failure)
        assert result.error == TOKEN_EXPIRED

    def test_wrong_signature(self):
        token = JWTService(secret_key="x" * 32).generate_access_token(
            user_id=uuid7(), email="a@b.io"
        )

        result = JWTService(secret_key=SECRET).validate_access_token(token)

        assert isinstance(result, Failure)
        assert result.error == TOKEN_INVALID

    def test_missing_subject(self):
        token = jwt.encode(
            {"exp": int(datetime.now(UTC).timestamp()) + 60}, SECRET, algorithm="HS256"
        )

        result = JWTService(secret_key=SECRET).validate_access_token(token)

        assert isinstance(result, Failure)
        assert result.error == TOKEN_INVALID


@pytest.mark.unit
class TestBcryptPasswordService:
    def test_hash_and_verify(self):
        service = BcryptPasswordService(cost_factor=4)

        password_hash = service.hash_password("correct horse")

        assert password_hash != "correct horse"
        assert service.verify_password("correct horse", password_hash) is True
        assert service.verify_password("wrong horse", password_hash) is False

    def test_malformed_hash_is_a_mismatch(self):
        service = BcryptPasswordService(cost_factor=4)
        assert service.verify_password("anything", "not-a-bcrypt-hash") is False

    @pytest.mark.parametrize("cost", [3, 32])
    def test_cost_factor_bounds(self, cost):
        with pytest.raises(ValueError):
            BcryptPasswordService(cost_factor=cost)
