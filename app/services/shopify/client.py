"""Shopify Admin GraphQL API client."""

import logging
from typing import Any, Dict, Optional, Protocol

import requests

from app.core.exceptions import ShopifyClientError

__logger__ = logging.getLogger(__name__)


class RemoteInventoryClient(Protocol):
    """Capability the sync orchestrator needs from the remote platform."""

    def query(self, document: str, variables: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        ...

    def mutate(self, document: str, variables: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        ...


class ShopifyGraphQLClient:
    """
    Thin GraphQL client bound to one authenticated shop.

    Both `query` and `mutate` return the `data` object of the response.
    Transport failures, non-2xx statuses, non-JSON bodies and top-level
    GraphQL `errors` raise ShopifyClientError.
    """

    def __init__(
        self,
        url: str,
        access_token: str,
        timeout: int = 30,
        verify_ssl: bool = True,
        session: Optional[requests.Session] = None,
    ):
        self.url = url
        self.timeout = timeout
        self.verify_ssl = verify_ssl
        self.session = session or requests.Session()
        self.session.headers.update({
            "Content-Type": "application/json",
            "X-Shopify-Access-Token": access_token,
        })

    def close(self) -> None:
        self.session.close()

    def query(self, document: str, variables: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return self.request(document, variables)

    def mutate(self, document: str, variables: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return self.request(document, variables)

    def request(self, document: str, variables: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Execute a GraphQL document and return its `data` payload."""
        __logger__.debug(f"Shopify GraphQL request with variables: {variables}")
        try:
            r = self.session.post(
                self.url,
                json={"query": document, "variables": variables or {}},
                timeout=self.timeout,
                verify=self.verify_ssl,
            )
        except requests.RequestException as e:
            __logger__.error(f"Shopify request to {self.url} failed: {e}")
            raise ShopifyClientError(f"Shopify request failed: {e}") from e

        if not r.ok:
            __logger__.error(f"Shopify GraphQL error: {r.status_code} - {r.text}")
            raise ShopifyClientError(
                f"Shopify API error ({r.status_code}): {r.text}",
                status_code=r.status_code,
            )

        try:
            payload = r.json()
        except ValueError as e:
            raise ShopifyClientError(
                f"Non-JSON response ({r.status_code}): {r.text[:300]}",
                status_code=r.status_code,
            ) from e

        errors = payload.get("errors")
        if errors:
            messages = ", ".join(str(err.get("message", err)) for err in errors)
            __logger__.error(f"Shopify GraphQL errors: {messages}")
            raise ShopifyClientError(f"GraphQL errors: {messages}", status_code=r.status_code)

        __logger__.debug(f"Shopify GraphQL response: {payload}")
        return payload.get("data") or {}
