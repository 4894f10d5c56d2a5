"""Email value object with validation.

Immutable value object that validates email format.
"""

from dataclasses import dataclass

from email_validator import EmailNotValidError, validate_email


@dataclass(frozen=True)
class Email:
    """Email address validated with email-validator and stored lowercase.

    Raises:
        ValueError: If email format is invalid.

    Example:
        >>> str(Email("Ada@Example.com"))
        'ada@example.com'
    """

    value: str

    def __post_init__(self) -> None:
        try:
            # No deliverability (DNS) check: registration must work offline
            validated = validate_email(self.value, check_deliverability=False)
        except EmailNotValidError as e:
            raise ValueError(f"Invalid email: {e}") from e
        object.__setattr__(self, "value", validated.normalized.lower())

    def __str__(self) -> str:
        return self.value
