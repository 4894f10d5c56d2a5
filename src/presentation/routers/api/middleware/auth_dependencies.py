"""JWT authentication dependencies.

Protect a route by depending on ``get_current_user``; a missing, malformed,
expired or tampered bearer token is rejected with 401 before the route
body (and any handler) runs.

Usage:
    @router.get("/accounts")
    async def list_accounts(current_user: AuthenticatedUser): ...
"""

from dataclasses import dataclass
from typing import Annotated
from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.core.container import get_token_service
from src.core.result import Failure, Success
from src.domain.protocols.token_generation_protocol import TokenGenerationProtocol

bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True, slots=True, kw_only=True)
class CurrentUser:
    """Identity taken from a validated access token.

    Attributes:
        user_id: From the ``sub`` claim.
        email: From the ``email`` claim.
        token_jti: JWT unique identifier.
    """

    user_id: UUID
    email: str
    token_jti: str | None = None


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
    token_service: Annotated[TokenGenerationProtocol, Depends(get_token_service)],
) -> CurrentUser:
    """Resolve the caller from the Authorization header.

    Raises:
        HTTPException 401: Token missing, invalid or expired.
    """
    if credentials is None or not credentials.credentials:
        raise _unauthorized("Authentication required")

    match token_service.validate_access_token(credentials.credentials):
        case Failure(error=reason):
            raise _unauthorized(reason)
        case Success(value=payload):
            try:
                user_id = UUID(str(payload["sub"]))
            except (KeyError, ValueError) as e:
                raise _unauthorized("Invalid token payload") from e
            jti = payload.get("jti")
            return CurrentUser(
                user_id=user_id,
                email=str(payload.get("email", "")),
                token_jti=str(jti) if jti else None,
            )


AuthenticatedUser = Annotated[CurrentUser, Depends(get_current_user)]
