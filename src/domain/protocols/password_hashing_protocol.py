"""Password hashing protocol for domain layer.

Infrastructure provides the concrete implementation (BcryptPasswordService).
"""

from typing import Protocol


class PasswordHashingProtocol(Protocol):
    """Password hashing and verification interface.

    Usage:
        password_hash = password_service.hash_password("correct horse")
        password_service.verify_password("correct horse", password_hash)  # True
    """

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password (random salt per call)."""
        ...

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a stored hash.

        Returns:
            True if the password matches, False otherwise (never raises).
        """
        ...
