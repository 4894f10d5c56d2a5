"""Transaction domain errors.

Message constants for transaction validation and lookup failures.

Usage:
    from src.domain.errors import TransactionError

    if transaction_type.requires_asset() and asset_id is None:
        ...message=TransactionError.ASSET_REQUIRED...
"""


class TransactionError:
    """Transaction error constants.

    Error Categories:
        - Validation errors: INVALID_TRANSACTION_TYPE, INVALID_AMOUNT, NEGATIVE_FEE,
          TRANSFER_DESTINATION_REQUIRED, ASSET_REQUIRED, INVALID_DATE_RANGE
        - Lookup errors: TRANSACTION_NOT_FOUND, TRANSACTION_NOT_OWNED
    """

    # -------------------------------------------------------------------------
    # Validation Errors
    # -------------------------------------------------------------------------

    INVALID_TRANSACTION_TYPE = "Invalid transaction type"

    INVALID_AMOUNT = "Amount must be greater than zero"
    """Raised for every type outside TransactionType.non_positive_amount_types()."""

    NEGATIVE_FEE = "Fee cannot be negative"

    TRANSFER_DESTINATION_REQUIRED = "Destination account is required for transfers"

    ASSET_REQUIRED = "Asset is required for buy and sell transactions"

    INVALID_DATE_RANGE = "Start date must be before or equal to end date"

    # -------------------------------------------------------------------------
    # Lookup Errors
    # -------------------------------------------------------------------------

    TRANSACTION_NOT_FOUND = "Transaction not found"

    TRANSACTION_NOT_OWNED = "Transaction does not belong to user"
