"""User commands (registration, login and profile upkeep).

Pattern:
- Commands are data containers (no logic)
- Plaintext passwords live only inside commands, never in logs
"""

from dataclasses import dataclass, field
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class RegisterUser:
    """Create a user account.

    Attributes:
        email: Login email (validated and lowercased by the handler).
        password: Plaintext password, at least 8 characters.
    """

    email: str
    password: str = field(repr=False)
    first_name: str = ""
    last_name: str = ""


@dataclass(frozen=True, kw_only=True)
class LoginUser:
    """Exchange credentials for an access token."""

    email: str
    password: str = field(repr=False)


@dataclass(frozen=True, kw_only=True)
class UpdateUser:
    """Update profile fields; None leaves a field unchanged."""

    user_id: UUID
    first_name: str | None = None
    last_name: str | None = None


@dataclass(frozen=True, kw_only=True)
class ChangePassword:
    """Replace the password after re-verifying the current one."""

    user_id: UUID
    old_password: str = field(repr=False)
    new_password: str = field(repr=False)


@dataclass(frozen=True, kw_only=True)
class DeleteUser:
    """Delete the caller's user account; requires password confirmation."""

    user_id: UUID
    password: str = field(repr=False)


@dataclass(frozen=True, kw_only=True)
class ValidatePassword:
    """Check a password against the user's stored hash."""

    user_id: UUID
    password: str = field(repr=False)
