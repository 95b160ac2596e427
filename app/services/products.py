"""Shopify product lookups."""

import logging

from app.services.shopify.client import RemoteInventoryClient
from app.services.shopify.queries import PRODUCTS_COUNT_QUERY

__logger__ = logging.getLogger(__name__)


def count_products(client: RemoteInventoryClient) -> int:
    data = client.query(PRODUCTS_COUNT_QUERY)
    count = int(data["productsCount"]["count"])
    __logger__.debug(f"Shop has {count} products")
    return count
