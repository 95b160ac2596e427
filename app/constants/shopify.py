"""Constants for Shopify inventory operations."""


class ShopifyQuantityName:
    """Inventory quantity state written by a sync."""
    AVAILABLE = "available"


class ShopifyAdjustmentReason:
    """Adjustment reason recorded with each quantity set."""
    CORRECTION = "correction"


class SyncErrorMessage:
    """Error messages reported per item in a sync batch."""
    ITEMS_NOT_ARRAY = "Field 'items' must be an array"
    MISSING_SKU_OR_QUANTITY = "Missing sku or quantity"
    INVALID_SKU = "Invalid sku"
    INVALID_QUANTITY = "Invalid quantity for sku {sku}"
    NO_VARIANT = "No variant found for sku {sku}"
    NO_INVENTORY_LEVELS = "No inventory levels for sku {sku}"
    UNKNOWN = "Unknown error"
    INTERNAL = "Internal server error"


SKU_QUERY_TEMPLATE = "sku:{sku}"
