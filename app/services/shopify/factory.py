"""Factory for creating Shopify API clients."""

from app.core.config import Settings, settings
from app.services.shopify.client import ShopifyGraphQLClient


class ShopifyClientFactory:
    """Factory class for creating Shopify GraphQL clients."""

    @staticmethod
    def from_settings(config: Settings = settings) -> ShopifyGraphQLClient:
        """
        Create a client for the shop configured in the application settings.

        Args:
            config: Settings instance, the global one by default

        Returns:
            ShopifyGraphQLClient: Configured client
        """
        return ShopifyGraphQLClient(
            url=config.shopify_graphql_url,
            access_token=config.shopify_access_token,
            timeout=config.shopify_request_timeout,
            verify_ssl=config.shopify_verify_ssl,
        )
