"""Integration tests for Product API endpoints.

Covers:
- CRUD operations via /api/v1/products/.
- Result mapping: ValidationFailed -> 400, NotFound -> 404.
- Malformed payloads -> 400.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from django.urls import resolve

from modules.products.commands import CreateProductCommand
from modules.products.models import Product
from modules.products.services import create_mediator

pytestmark = pytest.mark.integration


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def sample_product_id():
    """A persisted Product, created through the mediator."""
    result = create_mediator().send(
        CreateProductCommand(name="Widget Alpha", price=Decimal("19.99"))
    )
    return result.value


# ===========================================================================
# LIST
# ===========================================================================


class TestProductList:
    def test_list_empty(self, api_client):
        response = api_client.get("/api/v1/products/")
        assert response.status_code == 200
        assert response.json() == []

    def test_list_returns_products(self, api_client, sample_product_id):
        response = api_client.get("/api/v1/products/")
        assert response.status_code == 200
        data = response.json()
        assert len(data) == 1
        assert data[0]["id"] == sample_product_id
        assert data[0]["name"] == "Widget Alpha"
        assert data[0]["price"] == "19.99"


# ===========================================================================
# RETRIEVE
# ===========================================================================


class TestProductRetrieve:
    def test_retrieve_success(self, api_client, sample_product_id):
        response = api_client.get(f"/api/v1/products/{sample_product_id}/")
        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Widget Alpha"
        assert data["created_at"] is not None
        assert data["updated_at"] is None

    def test_retrieve_not_found(self, api_client):
        response = api_client.get("/api/v1/products/999/")
        assert response.status_code == 404

    def test_retrieve_non_numeric_id(self, api_client):
        response = api_client.get("/api/v1/products/abc/")
        assert response.status_code == 404


# ===========================================================================
# CREATE
# ===========================================================================


class TestProductCreate:
    def test_create_success(self, api_client):
        response = api_client.post(
            "/api/v1/products/", {"name": "New Product", "price": "29.99"}, format="json"
        )
        assert response.status_code == 201
        product = Product.objects.get(id=response.json()["id"])
        assert product.name == "New Product"
        assert product.price == Decimal("29.99")

    def test_create_accepts_numeric_price(self, api_client):
        response = api_client.post(
            "/api/v1/products/", {"name": "Widget", "price": 9.99}, format="json"
        )
        assert response.status_code == 201
        assert Product.objects.get().price == Decimal("9.99")

    def test_create_validation_errors(self, api_client):
        response = api_client.post(
            "/api/v1/products/", {"name": "", "price": "0"}, format="json"
        )
        assert response.status_code == 400
        assert response.json() == {
            "errors": [
                "Product name is required.",
                "Product price must be greater than zero.",
            ]
        }
        assert Product.objects.count() == 0

    def test_create_missing_fields_fail_validation(self, api_client):
        response = api_client.post("/api/v1/products/", {}, format="json")
        assert response.status_code == 400
        assert len(response.json()["errors"]) == 2

    def test_create_malformed_price(self, api_client):
        response = api_client.post(
            "/api/v1/products/", {"name": "Widget", "price": "cheap"}, format="json"
        )
        assert response.status_code == 400
        assert "detail" in response.json()

    def test_create_rejects_price_with_more_than_two_decimals(self, api_client):
        response = api_client.post(
            "/api/v1/products/", {"name": "Pen", "price": "0.001"}, format="json"
        )
        assert response.status_code == 400
        assert "detail" in response.json()
        assert Product.objects.count() == 0

    def test_create_rejects_non_object_body(self, api_client):
        response = api_client.post("/api/v1/products/", [1, 2], format="json")
        assert response.status_code == 400
        assert response.json() == {"detail": "Request body must be a JSON object."}
        assert Product.objects.count() == 0


# ===========================================================================
# UPDATE
# ===========================================================================


class TestProductUpdate:
    def test_update_success(self, api_client, sample_product_id):
        response = api_client.put(
            f"/api/v1/products/{sample_product_id}/",
            {"name": "Widget Beta", "price": "24.99"},
            format="json",
        )
        assert response.status_code == 204

        data = api_client.get(f"/api/v1/products/{sample_product_id}/").json()
        assert data["name"] == "Widget Beta"
        assert data["price"] == "24.99"
        assert data["updated_at"] is not None

    def test_update_not_found(self, api_client):
        response = api_client.put(
            "/api/v1/products/999/", {"name": "X", "price": "1.00"}, format="json"
        )
        assert response.status_code == 404
        assert response.json() == {"detail": "Product with ID 999 not found."}

    def test_update_validation_error(self, api_client, sample_product_id):
        response = api_client.put(
            f"/api/v1/products/{sample_product_id}/",
            {"name": "x" * 201, "price": "1000000"},
            format="json",
        )
        assert response.status_code == 400
        assert response.json()["errors"] == [
            "Product name must not exceed 200 characters.",
            "Product price must not exceed 999,999.99.",
        ]

    def test_update_rejects_price_with_more_than_two_decimals(
        self, api_client, sample_product_id
    ):
        response = api_client.put(
            f"/api/v1/products/{sample_product_id}/",
            {"name": "Widget", "price": "9.999"},
            format="json",
        )
        assert response.status_code == 400
        assert Product.objects.get(id=sample_product_id).price == Decimal("19.99")

    def test_update_rejects_non_object_body(self, api_client, sample_product_id):
        response = api_client.put(
            f"/api/v1/products/{sample_product_id}/", ["Widget", "1.00"], format="json"
        )
        assert response.status_code == 400
        assert response.json() == {"detail": "Request body must be a JSON object."}


# ===========================================================================
# DESTROY
# ===========================================================================


class TestProductDestroy:
    def test_destroy_success(self, api_client, sample_product_id):
        response = api_client.delete(f"/api/v1/products/{sample_product_id}/")
        assert response.status_code == 204
        assert not Product.objects.filter(id=sample_product_id).exists()

    def test_destroy_not_found(self, api_client):
        response = api_client.delete("/api/v1/products/999/")
        assert response.status_code == 404

    def test_destroy_zero_id_is_validation_error(self, api_client):
        response = api_client.delete("/api/v1/products/0/")
        assert response.status_code == 400
        assert response.json() == {"errors": ["Product ID must be greater than zero."]}


# ===========================================================================
# ROUTING
# ===========================================================================


class TestProductRoutes:
    def test_collection_and_detail_routes(self):
        assert resolve("/api/v1/products/").url_name == "product-list"
        assert resolve("/api/v1/products/7/").url_name == "product-detail"

    def test_no_browsable_api_root(self, api_client):
        assert api_client.get("/api/v1/").status_code == 404
