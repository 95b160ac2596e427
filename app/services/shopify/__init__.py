"""Shopify services package."""

from app.services.shopify.client import (
    RemoteInventoryClient,
    ShopifyGraphQLClient,
)
from app.services.shopify.factory import ShopifyClientFactory
from app.services.shopify.queries import (
    INVENTORY_SET_QUANTITIES_MUTATION,
    PRODUCTS_COUNT_QUERY,
    VARIANT_BY_SKU_QUERY,
)

__all__ = [
    'RemoteInventoryClient',
    'ShopifyGraphQLClient',
    'ShopifyClientFactory',
    'INVENTORY_SET_QUANTITIES_MUTATION',
    'PRODUCTS_COUNT_QUERY',
    'VARIANT_BY_SKU_QUERY',
]
