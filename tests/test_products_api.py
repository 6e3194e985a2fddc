"""Tests for the catalog endpoints"""
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from storefront.database import product_db


@pytest.fixture
def catalog(make_product):
    base = datetime(2025, 1, 1, tzinfo=timezone.utc)
    rows = [
        ("lamp", "Desk Lamp", "Warm LED light", "40", "home", 4.0),
        ("mug", "Coffee Mug", "Ceramic, 350ml", "12", "home", 4.5),
        ("jacket", "Rain Jacket", "Waterproof shell", "120", "clothing", 3.9),
        ("novel", "Mystery Novel", "A page-turner with a coffee stain", "18", "books", 4.8),
    ]
    for offset, (pid, name, description, price, category, rating) in enumerate(rows):
        created = base + timedelta(days=offset)
        make_product(
            pid,
            name=name,
            description=description,
            price=Decimal(price),
            category=category,
            rating=rating,
            created_at=created,
            updated_at=created,
        )


def test_default_listing_is_newest_first(client, catalog):
    response = client.get("/api/products")

    assert response.status_code == 200
    body = response.json()
    assert [p["id"] for p in body["products"]] == ["novel", "jacket", "mug", "lamp"]
    assert body["total"] == 4
    assert body["pages"] == 1
    assert body["page"] == 1


def test_keyword_matches_name_and_description(client, catalog):
    response = client.get("/api/products", params={"keyword": "COFFEE"})

    assert {p["id"] for p in response.json()["products"]} == {"mug", "novel"}


def test_category_and_price_filters(client, catalog):
    response = client.get("/api/products", params={"category": "home", "priceMin": 20})
    assert [p["id"] for p in response.json()["products"]] == ["lamp"]

    response = client.get("/api/products", params={"priceMax": 18, "sortBy": "price", "sortOrder": "asc"})
    assert [p["id"] for p in response.json()["products"]] == ["mug", "novel"]


def test_pagination(client, catalog):
    response = client.get("/api/products", params={"pageSize": 3, "page": 2, "sortBy": "name", "sortOrder": "asc"})

    body = response.json()
    assert body["pages"] == 2
    assert body["total"] == 4
    assert [p["id"] for p in body["products"]] == ["jacket"]


def test_invalid_sort_field(client, catalog):
    response = client.get("/api/products", params={"sortBy": "password"})
    assert response.status_code == 400


def test_get_product(client, discounted_product):
    response = client.get("/api/products/P")

    assert response.status_code == 200
    product = response.json()
    assert product["price"] == 100
    assert product["discountPrice"] == 80
    assert product["images"] == ["/static/images/P.jpg"]


def test_get_missing_product(client):
    response = client.get("/api/products/nope")

    assert response.status_code == 404
    assert response.json() == {"message": "Product not found"}


class TestAdminEndpoints:

    payload = {
        "name": "Standing Desk",
        "description": "Electric height adjustment",
        "price": 499.0,
        "discountPrice": 449.0,
        "images": ["/static/images/desk.jpg"],
        "category": "home",
        "stock": 7,
    }

    def test_create_requires_token(self, client):
        assert client.post("/api/products", json=self.payload).status_code == 401

    def test_create_requires_admin(self, client, auth_headers):
        response = client.post("/api/products", json=self.payload, headers=auth_headers)

        assert response.status_code == 403
        assert response.json() == {"message": "Forbidden"}

    def test_create(self, client, admin_headers):
        response = client.post("/api/products", json=self.payload, headers=admin_headers)

        assert response.status_code == 201
        product = response.json()
        assert product["discountPrice"] == 449
        assert product["rating"] == 0
        assert product_db.get_product(product["id"]).stock == 7

    def test_create_rejects_negative_price(self, client, admin_headers):
        response = client.post("/api/products", json={**self.payload, "price": -1}, headers=admin_headers)
        assert response.status_code == 400

    def test_partial_update(self, client, admin_headers, discounted_product):
        response = client.put("/api/products/P", json={"stock": 0, "discountPrice": 0}, headers=admin_headers)

        assert response.status_code == 200
        product = response.json()
        assert product["stock"] == 0
        assert product["discountPrice"] == 0
        assert product["price"] == 100
        assert product["name"] == "Product P"

    def test_update_missing(self, client, admin_headers):
        response = client.put("/api/products/nope", json={"stock": 1}, headers=admin_headers)
        assert response.status_code == 404

    def test_delete(self, client, admin_headers, discounted_product):
        response = client.delete("/api/products/P", headers=admin_headers)

        assert response.status_code == 200
        assert response.json() == {"message": "Product removed"}
        assert product_db.get_product("P") is None

        assert client.delete("/api/products/P", headers=admin_headers).status_code == 404
