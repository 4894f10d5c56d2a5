"""Asset domain errors.

Message constants for asset validation and ownership failures.
"""


class AssetError:
    """Asset error constants."""

    INVALID_ASSET_TYPE = "Invalid asset type"
    INVALID_QUANTITY = "Quantity must be greater than zero"
    INVALID_PRICE = "Price cannot be negative"
    ASSET_NOT_FOUND = "Asset not found"
    ASSET_NOT_OWNED = "Asset does not belong to user"
