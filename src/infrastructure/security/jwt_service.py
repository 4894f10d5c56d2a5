"""JWT access token service (adapter for TokenGenerationProtocol).

Security:
    - HMAC-SHA256 (HS256) by default
    - Secret key of at least 32 bytes
    - Unique JWT ID (jti) per token
    - Claims: sub (user id), email, iat, exp, jti

Validation is stateless: signature and expiry only, no database lookup.
"""

from datetime import UTC, datetime, timedelta
from uuid import UUID

import jwt
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError
from uuid_extensions import uuid7

from src.core.result import Failure, Result, Success

TOKEN_EXPIRED = "Token has expired"
TOKEN_INVALID = "Invalid token"


class JWTService:
    """JWT token generation and validation service.

    Usage:
        from src.core.container import get_token_service

        token_service = get_token_service()
        token = token_service.generate_access_token(user_id=user.id, email=user.email)

        match token_service.validate_access_token(token):
            case Success(value=payload):
                user_id = UUID(payload["sub"])
            case Failure(error=reason):
                ...
    """

    def __init__(
        self,
        secret_key: str,
        expiration_minutes: int = 24 * 60,
        algorithm: str = "HS256",
    ) -> None:
        """Initialize JWT service.

        Args:
            secret_key: Signing key, at least 32 bytes.
            expiration_minutes: Token lifetime.
            algorithm: HMAC algorithm name understood by PyJWT.

        Raises:
            ValueError: If secret_key is shorter than 32 bytes.
        """
        if len(secret_key) < 32:
            msg = "JWT secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._expiration_minutes = expiration_minutes
        self._algorithm = algorithm

    def generate_access_token(self, user_id: UUID, email: str) -> str:
        """Generate a signed access token.

        Example:
            >>> service = JWTService(secret_key="x" * 32)
            >>> token = service.generate_access_token(uuid7(), "ada@example.com")
            >>> len(token.split("."))
            3
        """
        now = datetime.now(UTC)
        payload = {
            "sub": str(user_id),
            "email": email,
            "iat": int(now.timestamp()),
            "exp": int((now + timedelta(minutes=self._expiration_minutes)).timestamp()),
            "jti": str(uuid7()),
        }
        token: str = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return token

    def validate_access_token(self, token: str) -> Result[dict[str, str | int], str]:
        """Validate signature and expiry, returning the payload.

        Returns:
            Success(payload) if valid, Failure(TOKEN_EXPIRED | TOKEN_INVALID)
            otherwise. Tokens missing the ``sub`` claim are invalid.
        """
        try:
            payload: dict[str, str | int] = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": ["sub", "exp"]},
            )
        except ExpiredSignatureError:
            return Failure(error=TOKEN_EXPIRED)
        except InvalidTokenError:
            return Failure(error=TOKEN_INVALID)
        return Success(value=payload)
