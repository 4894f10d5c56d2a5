"""Bcrypt password hashing service (adapter for PasswordHashingProtocol).

Security:
    - Random salt per hash
    - Configurable cost factor (settings.bcrypt_rounds, default 12)
    - Constant-time comparison via bcrypt.checkpw
"""

import bcrypt


class BcryptPasswordService:
    """Bcrypt password hashing service.

    Usage:
        from src.core.container import get_password_service

        password_service = get_password_service()
        password_hash = password_service.hash_password("correct horse")
        password_service.verify_password("correct horse", password_hash)  # True
    """

    def __init__(self, cost_factor: int = 12) -> None:
        """Initialize with a bcrypt cost factor.

        Args:
            cost_factor: log2 of the work factor. Tests use 4 for speed.

        Raises:
            ValueError: Outside bcrypt's supported range 4..31.
        """
        if not 4 <= cost_factor <= 31:
            msg = "Cost factor must be between 4 and 31"
            raise ValueError(msg)
        self._cost_factor = cost_factor

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password; each call yields a different hash."""
        salt = bcrypt.gensalt(rounds=self._cost_factor)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Check a plaintext password against a stored hash.

        Returns:
            False for a mismatch or a malformed hash.
        """
        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
        except ValueError:
            return False
