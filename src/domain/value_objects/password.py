"""Password value object with length validation.

Immutable value object guarding the minimum password policy applied on
registration and password change.
"""

from dataclasses import dataclass

MIN_PASSWORD_LENGTH = 8


@dataclass(frozen=True)
class Password:
    """Plaintext password that satisfies the minimum policy.

    Raises:
        ValueError: If password is shorter than ``MIN_PASSWORD_LENGTH``.

    Example:
        >>> Password("correct horse")
        Password(value='correct horse')
        >>> Password("short")
        Traceback (most recent call last):
        ...
        ValueError: Password must be at least 8 characters
    """

    value: str

    def __post_init__(self) -> None:
        if len(self.value) < MIN_PASSWORD_LENGTH:
            raise ValueError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            )

    def __str__(self) -> str:
        return self.value
