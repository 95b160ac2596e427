"""
Tests for the Shopify GraphQL client
"""
from unittest.mock import MagicMock

import pytest
import requests
from fastapi.testclient import TestClient

from app.api.deps import get_inventory_client
from app.core.config import Settings
from app.core.exceptions import ShopifyClientError
from app.main import app
from app.services.shopify import ShopifyClientFactory, ShopifyGraphQLClient


def make_response(status_code=200, payload=None, text=""):
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.text = text
    if isinstance(payload, Exception):
        response.json.side_effect = payload
    else:
        response.json.return_value = payload
    return response


def make_client(response=None, side_effect=None):
    session = MagicMock()
    session.headers = {}
    session.post.return_value = response
    session.post.side_effect = side_effect
    client = ShopifyGraphQLClient(
        url="https://shop.example/admin/api/2024-10/graphql.json",
        access_token="shpat_test",
        timeout=7,
        session=session,
    )
    return client, session


def test_query_returns_data_payload():
    client, session = make_client(make_response(payload={"data": {"productsCount": {"count": 3}}}))

    data = client.query("query { productsCount { count } }", {"a": 1})

    assert data == {"productsCount": {"count": 3}}
    assert session.headers["X-Shopify-Access-Token"] == "shpat_test"
    _, kwargs = session.post.call_args
    assert kwargs["json"] == {"query": "query { productsCount { count } }", "variables": {"a": 1}}
    assert kwargs["timeout"] == 7


def test_http_error_raises_client_error():
    client, _ = make_client(make_response(status_code=401, text="Invalid API key"))

    with pytest.raises(ShopifyClientError) as exc:
        client.mutate("mutation { x }")
    assert exc.value.status_code == 401
    assert "Invalid API key" in exc.value.message


def test_graphql_errors_raise_client_error():
    client, _ = make_client(make_response(payload={"errors": [{"message": "Throttled"}]}))

    with pytest.raises(ShopifyClientError) as exc:
        client.query("query { x }")
    assert exc.value.message == "GraphQL errors: Throttled"


def test_non_json_body_raises_client_error():
    client, _ = make_client(make_response(payload=ValueError("no json"), text="<html>"))

    with pytest.raises(ShopifyClientError):
        client.query("query { x }")


def test_network_failure_raises_client_error():
    client, _ = make_client(side_effect=requests.ConnectionError("connection refused"))

    with pytest.raises(ShopifyClientError) as exc:
        client.query("query { x }")
    assert "connection refused" in exc.value.message


def test_factory_builds_graphql_url_from_settings():
    config = Settings(shopify_shop_domain="my-store.myshopify.com", shopify_api_version="2025-01")

    client = ShopifyClientFactory.from_settings(config)

    assert client.url == "https://my-store.myshopify.com/admin/api/2025-01/graphql.json"


def test_http_port_prefers_backend_port():
    assert Settings(backend_port=8081, port=9000).http_port == 8081
    assert Settings(backend_port=None, port=9000).http_port == 9000
    assert Settings(backend_port=None, port=None).http_port == 3000


def test_client_dependency_closes_session():
    """The per-request client releases its connection pool after the response"""
    dependency = get_inventory_client()
    client = next(dependency)
    session = MagicMock()
    client.session = session

    with pytest.raises(StopIteration):
        next(dependency)

    session.close.assert_called_once_with()


def test_inventory_sync_request_closes_session(monkeypatch):
    session = MagicMock()
    session.headers = {}
    session.post.return_value = make_response(payload={"data": {"productVariants": {"nodes": []}}})
    monkeypatch.setattr(requests, "Session", lambda: session)

    response = TestClient(app).post("/api/inventory-sync", json={"items": [{"sku": "A", "quantity": 1}]})

    assert response.json()["results"] == [
        {"sku": "A", "success": False, "error": "No variant found for sku A"}
    ]
    session.close.assert_called_once_with()
