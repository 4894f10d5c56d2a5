"""Result types for railway-oriented programming.

Handlers return a Result instead of raising for business outcomes, so every
failure path (validation, ownership, not found) is visible in the signature
and can be asserted in tests without exception plumbing.

Usage:
    result = await handler.handle(cmd)
    match result:
        case Success(value=account):
            return AccountResponse.from_entity(account)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request, trace_id)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful outcome.

    Attributes:
        value: Payload produced by the operation.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed outcome.

    Attributes:
        error: Error describing why the operation failed.
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]
