"""Lenient query-string parsing.

Pagination and numeric filters never reject a request: values that do
not parse fall back to the default and the handlers clamp the rest.
"""

from decimal import Decimal, InvalidOperation


def parse_int(value: str | None, default: int | None = None) -> int | None:
    """Parse an integer query value, returning ``default`` on failure.

    Example:
        >>> parse_int("25")
        25
        >>> parse_int("abc", 20)
        20
    """
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        return default


def parse_decimal(value: str | None) -> Decimal | None:
    """Parse a decimal query value; anything unparseable is ignored."""
    if value is None or not value.strip():
        return None
    try:
        parsed = Decimal(value.strip())
    except InvalidOperation:
        return None
    if not parsed.is_finite():
        return None
    return parsed


def parse_csv(value: str | None) -> list[str] | None:
    """Split a comma-separated list, dropping blanks."""
    if value is None:
        return None
    items = [item.strip() for item in value.split(",") if item.strip()]
    return items or None
