"""Exceptions raised while syncing inventory to Shopify."""

from typing import Any, Dict, List, Optional

from app.constants.shopify import SyncErrorMessage


class InventorySyncError(Exception):
    """Base class for inventory sync failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BatchValidationError(InventorySyncError):
    """The request payload is not a batch at all."""

    def __init__(self, message: str = SyncErrorMessage.ITEMS_NOT_ARRAY):
        super().__init__(message)


class ItemValidationError(InventorySyncError):
    """A single item cannot be sent to Shopify."""


class ResolutionError(InventorySyncError):
    """A SKU could not be mapped to an inventory item and location."""

    def __init__(self, message: str, sku: Optional[str] = None):
        super().__init__(message)
        self.sku = sku


class VariantNotFoundError(ResolutionError):
    def __init__(self, sku: str):
        super().__init__(SyncErrorMessage.NO_VARIANT.format(sku=sku), sku=sku)


class NoInventoryLevelsError(ResolutionError):
    def __init__(self, sku: str):
        super().__init__(SyncErrorMessage.NO_INVENTORY_LEVELS.format(sku=sku), sku=sku)


class RemoteUserError(InventorySyncError):
    """Shopify rejected a mutation with field-level user errors."""

    def __init__(self, user_errors: List[Dict[str, Any]]):
        self.user_errors = user_errors
        super().__init__(", ".join(str(e.get("message", "")) for e in user_errors))


class TransportError(InventorySyncError):
    """The request to the remote API failed or returned an unusable response."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ShopifyClientError(TransportError):
    """Error returned by the Shopify Admin GraphQL API."""
