from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from app.api.deps import get_inventory_client
from app.main import app


def make_variant(sku: str, item_id: str, location_ids: List[str]) -> Dict[str, Any]:
    return {
        "id": f"gid://shopify/ProductVariant/{sku}",
        "sku": sku,
        "inventoryItem": {
            "id": item_id,
            "inventoryLevels": {
                "edges": [
                    {"node": {"id": f"level-{loc}", "location": {"id": loc}}}
                    for loc in location_ids
                ]
            },
        },
    }


class FakeInventoryClient:
    """In-memory stand-in for the Shopify GraphQL API."""

    def __init__(self):
        self.variants: Dict[str, Dict[str, Any]] = {}
        self.user_errors: Dict[str, List[Dict[str, Any]]] = {}
        self.failing_skus: Dict[str, Exception] = {}
        self.queries: List[Dict[str, Any]] = []
        self.mutations: List[Dict[str, Any]] = []
        self.product_count = 0

    def add_variant(self, sku: str, item_id: Optional[str] = None, locations=("gid://shopify/Location/1",)):
        item_id = item_id or f"gid://shopify/InventoryItem/{sku}"
        self.variants[sku] = make_variant(sku, item_id, list(locations))
        return item_id

    def query(self, document, variables=None):
        self.queries.append(variables or {})
        if "productsCount" in document:
            return {"productsCount": {"count": self.product_count}}
        sku = variables["query"].split(":", 1)[1]
        if sku in self.failing_skus:
            raise self.failing_skus[sku]
        variant = self.variants.get(sku)
        return {"productVariants": {"nodes": [variant] if variant else []}}

    def mutate(self, document, variables=None):
        self.mutations.append(variables)
        item_id = variables["input"]["quantities"][0]["inventoryItemId"]
        sku = next(
            (s for s, v in self.variants.items() if v["inventoryItem"]["id"] == item_id),
            None,
        )
        return {
            "inventorySetQuantities": {
                "inventoryAdjustmentGroup": {"createdAt": "2026-10-18T00:00:00Z", "reason": "correction"},
                "userErrors": self.user_errors.get(sku, []),
            }
        }


@pytest.fixture
def fake_client() -> FakeInventoryClient:
    return FakeInventoryClient()


@pytest.fixture
def api_client(fake_client):
    app.dependency_overrides[get_inventory_client] = lambda: fake_client
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
