"""Root of the ledger's error hierarchy.

Handlers never raise these. A failed command or query returns one wrapped
in ``Failure`` and the presentation layer turns it into a problem response.

Subclasses in ``common_errors`` add context fields, e.g.
``InsufficientBalanceError`` carries the refused delta and the balance it
would have overdrawn.
"""

from dataclasses import dataclass

from src.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Value object describing why an operation was refused.

    ``code`` selects the problem type URI, ``message`` becomes the detail
    text, and ``details`` carries optional key/value context for logs.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
