"""Error taxonomy shared by every aggregate.

Each class maps to exactly one HTTP status at the API boundary:

- ValidationError: malformed, missing or out-of-range input (400)
- InsufficientBalanceError: balance delta would go negative (400)
- AuthenticationError: bad credentials or token (401)
- AuthorizationError: entity exists but caller does not own it (403)
- NotFoundError: entity ID does not resolve (404)
- ConflictError: uniqueness or referential conflict (409)
- AbortedError: caller cancelled the operation mid-flight (499)

Usage:
    from src.core.errors import ValidationError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(error=ValidationError(
        code=ErrorCode.INVALID_QUANTITY,
        message="Quantity must be greater than zero",
        field="quantity",
    ))
"""

from dataclasses import dataclass
from decimal import Decimal

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        field: Field name that failed validation.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        resource_type: Type of resource (Account, Asset, etc.).
        resource_id: ID of the resource that was not found.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Resource conflict (duplicate abbreviation, definition still referenced).

    Attributes:
        resource_type: Type of resource in conflict.
        conflicting_field: Field that has conflict (email, abbreviation, etc.).
    """

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Authentication failure (invalid credentials, token expired)."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationError(DomainError):
    """Ownership mismatch.

    Attributes:
        required_permission: Permission that was required.
    """

    required_permission: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class InsufficientBalanceError(DomainError):
    """Balance adjustment would leave a negative balance.

    Attributes:
        resource_id: Account whose balance was targeted.
        current_balance: Balance before the adjustment.
        requested_delta: Signed amount that was refused.
    """

    resource_id: str
    current_balance: Decimal
    requested_delta: Decimal


@dataclass(frozen=True, slots=True, kw_only=True)
class AbortedError(DomainError):
    """Operation cancelled by the caller before completion.

    Attributes:
        operation: Name of the interrupted operation.
    """

    operation: str
