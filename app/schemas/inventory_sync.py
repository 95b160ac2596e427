"""
Schemas for inventory sync
"""
from typing import Any, List, Optional

from pydantic import BaseModel, Field

from app.core.exceptions import BatchValidationError


class SyncItemRequest(BaseModel):
    """One (sku, quantity) pair as received from the source of truth"""
    # Both kept raw so results echo the sku exactly as given; they are
    # validated per item so a bad value fails only that item.
    sku: Optional[Any] = None
    quantity: Optional[Any] = None

    class Config:
        frozen = True

    @classmethod
    def from_raw(cls, raw: Any) -> "SyncItemRequest":
        if not isinstance(raw, dict):
            return cls()
        return cls(sku=raw.get("sku"), quantity=raw.get("quantity"))

    @property
    def is_complete(self) -> bool:
        return self.sku is not None and self.quantity is not None


class SyncItemResult(BaseModel):
    """Outcome of syncing a single item"""
    sku: Optional[Any] = None
    success: bool
    error: Optional[str] = None


class InventorySyncResponse(BaseModel):
    """Report for a whole batch, one result per input item in input order"""
    results: List[SyncItemResult]


class VariantLookup(BaseModel):
    """Inventory item and location a SKU resolves to"""
    inventory_item_id: str
    location_id: str


class ErrorResponse(BaseModel):
    error: str


class ProductCountResponse(BaseModel):
    count: int = Field(..., ge=0)


def parse_sync_request(body: Any) -> List[SyncItemRequest]:
    """
    Validate the top-level payload and return its items.

    Raises BatchValidationError when `items` is missing or not an array.
    Individual items are never rejected here.
    """
    items = body.get("items") if isinstance(body, dict) else None
    if not isinstance(items, list):
        raise BatchValidationError()
    return [SyncItemRequest.from_raw(raw) for raw in items]
