"""Authentication and profile schemas (/auth endpoints)."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from src.domain.entities.user import User


class RegisterRequest(BaseModel):
    """Registration payload.

    Email format and password length are checked by the handler so the
    error comes back in the domain taxonomy.
    """

    email: str = Field(..., description="Email address", examples=["ada@example.com"])
    password: str = Field(..., description="Password (min 8 characters)")
    first_name: str = Field(default="", max_length=100)
    last_name: str = Field(default="", max_length=100)


class LoginRequest(BaseModel):
    email: str = Field(..., description="Email address")
    password: str = Field(..., description="Password")


class UpdateProfileRequest(BaseModel):
    first_name: str | None = Field(default=None, max_length=100)
    last_name: str | None = Field(default=None, max_length=100)


class ChangePasswordRequest(BaseModel):
    old_password: str = Field(..., description="Current password")
    new_password: str = Field(..., description="New password (min 8 characters)")


class DeleteAccountRequest(BaseModel):
    """Password confirmation for deleting the caller's user."""

    password: str = Field(..., description="Current password")


class UserResponse(BaseModel):
    """Public view of a user (never includes the password hash)."""

    id: UUID
    email: str
    first_name: str
    last_name: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class TokenResponse(BaseModel):
    """Access token issued on login."""

    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")
    user: UserResponse
