"""User domain errors."""


class UserError:
    """User error constants."""

    INVALID_EMAIL = "Email cannot be empty"
    INVALID_PASSWORD = "Password cannot be empty"
    EMAIL_ALREADY_EXISTS = "Email already registered"
    INVALID_CREDENTIALS = "Invalid email or password"
    INVALID_OLD_PASSWORD = "Current password is incorrect"
    INVALID_PASSWORD_CONFIRMATION = "Password confirmation failed"
    USER_NOT_FOUND = "User not found"
