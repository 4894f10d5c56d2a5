"""Pagination clamping shared by every paginated query.

Rules:
    - limit <= 0 or missing -> default
    - limit > maximum -> maximum
    - offset < 0 or missing -> 0
"""

from dataclasses import dataclass

TRANSACTION_DEFAULT_LIMIT = 20
ACCOUNT_DEFAULT_LIMIT = 20
DEFINITION_DEFAULT_LIMIT = 50
MAX_LIMIT = 100


@dataclass(frozen=True, slots=True)
class Page:
    """Clamped pagination window."""

    limit: int
    offset: int


def clamp_pagination(
    limit: int | None,
    offset: int | None,
    *,
    default: int,
    maximum: int = MAX_LIMIT,
) -> Page:
    """Clamp caller-supplied pagination to the allowed window.

    Example:
        >>> clamp_pagination(500, -3, default=20)
        Page(limit=100, offset=0)
        >>> clamp_pagination(0, 40, default=20)
        Page(limit=20, offset=40)
    """
    if limit is None or limit <= 0:
        limit = default
    limit = min(limit, maximum)
    if offset is None or offset < 0:
        offset = 0
    return Page(limit=limit, offset=offset)
