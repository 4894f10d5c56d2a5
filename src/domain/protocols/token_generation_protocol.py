"""Token generation protocol for domain layer.

The identity provider issues and checks JWT access tokens. The ledger
core never re-authenticates: it trusts the ``sub`` claim resolved here.

Token Strategy:
    - Access tokens only (no refresh tokens)
    - Stateless validation (no database lookup)
"""

from typing import Protocol
from uuid import UUID

from src.core.result import Result


class TokenGenerationProtocol(Protocol):
    """JWT access token generation and validation interface.

    Usage:
        token = token_service.generate_access_token(user_id=user.id, email=user.email)

        match token_service.validate_access_token(token):
            case Success(value=payload):
                user_id = UUID(payload["sub"])
            case Failure(error=error):
                ...  # 401
    """

    def generate_access_token(self, user_id: UUID, email: str) -> str:
        """Generate a signed access token.

        Args:
            user_id: Stored in the ``sub`` claim.
            email: Stored in the ``email`` claim.

        Returns:
            Encoded JWT string.
        """
        ...

    def validate_access_token(self, token: str) -> Result[dict[str, str | int], str]:
        """Validate signature and expiry and return the payload.

        Returns:
            Success(payload) for a valid token, Failure(reason) otherwise.
            Never raises for malformed input.
        """
        ...
