"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention and are returned
to API clients as the slug of the RFC 9457 ``type`` URL.

Categories:
- Validation errors (INVALID_*, VALIDATION_*)
- Resource errors (*_NOT_FOUND)
- Conflict errors (*_ALREADY_EXISTS, *_IN_USE)
- Authentication errors (INVALID_CREDENTIALS, TOKEN_*)
- Authorization errors (RESOURCE_NOT_OWNED)
- Business rule violations (INSUFFICIENT_BALANCE)
- Cancellation (OPERATION_ABORTED)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Validation errors
    INVALID_EMAIL = "invalid_email"
    INVALID_PASSWORD = "invalid_password"
    INVALID_NAME = "invalid_name"
    INVALID_ACCOUNT_TYPE = "invalid_account_type"
    INVALID_CURRENCY = "invalid_currency"
    INVALID_BALANCE = "invalid_balance"
    INVALID_ASSET_TYPE = "invalid_asset_type"
    INVALID_QUANTITY = "invalid_quantity"
    INVALID_PRICE = "invalid_price"
    INVALID_TRANSACTION_TYPE = "invalid_transaction_type"
    INVALID_AMOUNT = "invalid_amount"
    TRANSFER_DESTINATION_REQUIRED = "transfer_destination_required"
    ASSET_REQUIRED = "asset_required"
    INVALID_ABBREVIATION = "invalid_abbreviation"
    SEARCH_TERM_REQUIRED = "search_term_required"
    INVALID_DATE_RANGE = "invalid_date_range"
    VALIDATION_FAILED = "validation_failed"

    # Resource errors
    USER_NOT_FOUND = "user_not_found"
    ACCOUNT_NOT_FOUND = "account_not_found"
    ASSET_NOT_FOUND = "asset_not_found"
    DEFINITION_NOT_FOUND = "definition_not_found"
    TRANSACTION_NOT_FOUND = "transaction_not_found"

    # Conflict errors
    EMAIL_ALREADY_EXISTS = "email_already_exists"
    ABBREVIATION_ALREADY_EXISTS = "abbreviation_already_exists"
    DEFINITION_IN_USE = "definition_in_use"

    # Authentication errors
    INVALID_CREDENTIALS = "invalid_credentials"
    TOKEN_EXPIRED = "token_expired"
    TOKEN_INVALID = "token_invalid"

    # Authorization errors
    RESOURCE_NOT_OWNED = "resource_not_owned"

    # Business rule violations
    INSUFFICIENT_BALANCE = "insufficient_balance"

    # Cancellation
    OPERATION_ABORTED = "operation_aborted"
