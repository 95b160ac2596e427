"""Batch reconciliation of absolute inventory quantities into Shopify."""

import logging
from typing import Any, Dict, List, Optional, Sequence

from app.constants.shopify import (
    SKU_QUERY_TEMPLATE,
    ShopifyAdjustmentReason,
    ShopifyQuantityName,
    SyncErrorMessage,
)
from app.core.config import Settings, settings
from app.core.exceptions import (
    InventorySyncError,
    ItemValidationError,
    NoInventoryLevelsError,
    RemoteUserError,
    VariantNotFoundError,
)
from app.schemas.inventory_sync import SyncItemRequest, SyncItemResult, VariantLookup
from app.services.shopify.client import RemoteInventoryClient
from app.services.shopify.queries import (
    INVENTORY_SET_QUANTITIES_MUTATION,
    VARIANT_BY_SKU_QUERY,
)

logger = logging.getLogger(__name__)


def coerce_sku(sku: Any) -> str:
    """
    Return the text used to look `sku` up remotely.

    Strings and numbers are accepted; blank strings, booleans and
    containers raise ItemValidationError.
    """
    if isinstance(sku, bool) or not isinstance(sku, (str, int, float)):
        raise ItemValidationError(SyncErrorMessage.INVALID_SKU)
    if isinstance(sku, float) and sku.is_integer():
        return str(int(sku))
    text = str(sku).strip()
    if not text:
        raise ItemValidationError(SyncErrorMessage.INVALID_SKU)
    return text


def coerce_quantity(sku: str, quantity: Any) -> int:
    """
    Return `quantity` as a non-negative int.

    Integral floats and numeric strings are accepted; anything else
    raises ItemValidationError.
    """
    invalid = ItemValidationError(SyncErrorMessage.INVALID_QUANTITY.format(sku=sku))
    if isinstance(quantity, bool):
        raise invalid
    if isinstance(quantity, int):
        value = quantity
    elif isinstance(quantity, (float, str)):
        try:
            number = float(quantity)
        except ValueError:
            raise invalid
        if not number.is_integer():
            raise invalid
        value = int(number)
    else:
        raise invalid
    if value < 0:
        raise invalid
    return value


class InventorySyncOrchestrator:
    """
    Turns a batch of (sku, quantity) pairs into a per-item report.

    Each item is resolved to an inventory item and location, then its
    available quantity is overwritten. Failures are isolated per item;
    successful writes are never rolled back.
    """

    def __init__(self, client: RemoteInventoryClient, config: Settings = settings):
        self.client = client
        self.levels_lookahead = max(1, config.inventory_levels_lookahead)

    def sync_batch(self, items: Sequence[SyncItemRequest]) -> List[SyncItemResult]:
        """Process items sequentially; results keep the input order."""
        logger.info(f"Starting inventory sync for {len(items)} items")
        results = [self.sync_item(item) for item in items]
        succeeded = sum(1 for r in results if r.success)
        logger.info(
            f"Inventory sync finished: {succeeded} succeeded, "
            f"{len(results) - succeeded} failed"
        )
        return results

    def sync_item(self, item: SyncItemRequest) -> SyncItemResult:
        if not item.is_complete:
            logger.warning(f"Skipping item without sku or quantity: {item}")
            return SyncItemResult(
                sku=item.sku,
                success=False,
                error=SyncErrorMessage.MISSING_SKU_OR_QUANTITY,
            )

        # Results echo item.sku as given; remote calls use its text form.
        sku = item.sku
        try:
            sku_text = coerce_sku(sku)
            quantity = coerce_quantity(sku_text, item.quantity)
            target = self.resolve_variant(sku_text)
            self.set_available_quantity(target, quantity)
        except InventorySyncError as e:
            logger.error(f"Failed to update inventory for sku {sku}: {e.message}")
            return SyncItemResult(sku=sku, success=False, error=e.message)
        except Exception as e:
            logger.error(f"Failed to update inventory for sku {sku}: {e}", exc_info=True)
            return SyncItemResult(
                sku=sku,
                success=False,
                error=str(e) or SyncErrorMessage.UNKNOWN,
            )

        return SyncItemResult(sku=sku, success=True)

    def resolve_variant(self, sku: str) -> VariantLookup:
        """
        Map a SKU to its inventory item and location.

        Takes the first variant and the first inventory level in the order
        Shopify returns them; no location preference is applied.
        """
        data = self.client.query(
            VARIANT_BY_SKU_QUERY,
            {"query": SKU_QUERY_TEMPLATE.format(sku=sku), "levels": self.levels_lookahead},
        )
        variants = ((data or {}).get("productVariants") or {}).get("nodes") or []
        if not variants:
            raise VariantNotFoundError(sku)

        inventory_item = variants[0].get("inventoryItem") or {}
        edges = (inventory_item.get("inventoryLevels") or {}).get("edges") or []
        if not edges:
            raise NoInventoryLevelsError(sku)

        return VariantLookup(
            inventory_item_id=inventory_item["id"],
            location_id=edges[0]["node"]["location"]["id"],
        )

    def set_available_quantity(self, target: VariantLookup, quantity: int) -> Optional[Dict[str, Any]]:
        """
        Overwrite the quantity at the resolved location.

        Returns the inventory adjustment group, raises RemoteUserError when
        Shopify reports user errors.
        """
        data = self.client.mutate(
            INVENTORY_SET_QUANTITIES_MUTATION,
            {
                "input": {
                    "name": ShopifyQuantityName.AVAILABLE,
                    "reason": ShopifyAdjustmentReason.CORRECTION,
                    "ignoreCompareQuantity": True,
                    "quantities": [
                        {
                            "inventoryItemId": target.inventory_item_id,
                            "locationId": target.location_id,
                            "quantity": quantity,
                        }
                    ],
                }
            },
        )
        payload = (data or {}).get("inventorySetQuantities") or {}
        user_errors = payload.get("userErrors") or []
        if user_errors:
            raise RemoteUserError(user_errors)

        adjustment = payload.get("inventoryAdjustmentGroup")
        logger.info(
            f"Set {ShopifyQuantityName.AVAILABLE} quantity {quantity} for item "
            f"{target.inventory_item_id} at {target.location_id}: {adjustment}"
        )
        return adjustment


def sync_inventory_batch(
    items: Sequence[SyncItemRequest],
    client: RemoteInventoryClient,
) -> List[SyncItemResult]:
    """Sync a batch with the default settings."""
    return InventorySyncOrchestrator(client).sync_batch(items)
