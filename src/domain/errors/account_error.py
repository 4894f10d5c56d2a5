"""Account domain errors.

Message constants for account validation and balance rules. Paired with an
``ErrorCode`` inside a ``DomainError`` by the account handlers.

Usage:
    from src.domain.errors import AccountError

    if not name.strip():
        return Failure(error=ValidationError(
            code=ErrorCode.INVALID_NAME,
            message=AccountError.INVALID_ACCOUNT_NAME,
            field="name",
        ))
"""


class AccountError:
    """Account error constants.

    Error Categories:
        - Validation errors: INVALID_ACCOUNT_NAME, INVALID_ACCOUNT_TYPE,
          INVALID_CURRENCY, NEGATIVE_BALANCE
        - Lookup errors: ACCOUNT_NOT_FOUND, ACCOUNT_NOT_OWNED
        - Balance errors: INSUFFICIENT_BALANCE
    """

    # -------------------------------------------------------------------------
    # Validation Errors
    # -------------------------------------------------------------------------

    INVALID_ACCOUNT_NAME = "Account name cannot be empty"

    INVALID_ACCOUNT_TYPE = "Invalid account type"
    """Account type must be one of AccountType.values()."""

    INVALID_CURRENCY = "Currency code cannot be empty"

    NEGATIVE_BALANCE = "Balance cannot be negative"

    # -------------------------------------------------------------------------
    # Lookup Errors
    # -------------------------------------------------------------------------

    ACCOUNT_NOT_FOUND = "Account not found"

    ACCOUNT_NOT_OWNED = "Account does not belong to user"

    # -------------------------------------------------------------------------
    # Balance Errors
    # -------------------------------------------------------------------------

    INSUFFICIENT_BALANCE = "Insufficient balance"
    """Applying the delta would leave a negative balance."""
