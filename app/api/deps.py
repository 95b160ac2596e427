from typing import Iterator

from app.services.shopify.client import RemoteInventoryClient
from app.services.shopify.factory import ShopifyClientFactory


def get_inventory_client() -> Iterator[RemoteInventoryClient]:
    """
    Authenticated Shopify client for the current request.

    Session establishment happens outside this service; the token is
    read from settings. The client's HTTP session is closed once the
    response has been produced.
    """
    client = ShopifyClientFactory.from_settings()
    try:
        yield client
    finally:
        client.close()
