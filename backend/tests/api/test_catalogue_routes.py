"""
Tests for product, cart and address endpoints.

Services are mocked; these tests cover routing, auth requirements,
status codes and the response envelope.
"""

import pytest
from unittest.mock import AsyncMock
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import get_auth_service, get_cart_service, get_product_service
from modules.auth.exceptions import InsufficientPermissionsError
from modules.auth.hashing import PasswordHasher
from modules.auth.service import AuthService
from modules.auth.tokens import TokenIssuer
from modules.cart.exceptions import AddressRequiredError
from modules.cart.models import Address, CartItem, CheckoutResult
from modules.products.exceptions import ProductNotFoundError
from modules.products.models import Product, ProductPage

from tests.conftest import TEST_JWT_ISSUER, TEST_JWT_SECRET, TEST_USER_ID

PRODUCT_ID = "3c9d2f4e-7a1b-4e6d-8f20-5b4a9c1d7e33"


def make_product() -> Product:
    return Product(
        id=PRODUCT_ID,
        name="Kettle",
        description="Boils water",
        price=24.5,
        image_url="https://img/kettle.png",
    )


@pytest.fixture
def products() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def cart() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def client(products, cart) -> TestClient:
    auth = AuthService(
        users=AsyncMock(),
        verification=AsyncMock(),
        hasher=PasswordHasher(rounds=4),
        issuer=TokenIssuer(secret=TEST_JWT_SECRET, issuer=TEST_JWT_ISSUER),
    )
    app = create_app()
    app.dependency_overrides[get_auth_service] = lambda: auth
    app.dependency_overrides[get_product_service] = lambda: products
    app.dependency_overrides[get_cart_service] = lambda: cart
    return TestClient(app)


class TestProductRoutes:
    def test_list_is_public(self, client, products):
        products.list_products.return_value = ProductPage(products=[make_product()], totalcount=1)

        response = client.get("/api/products", params={"page": 2, "limit": 5})

        assert response.status_code == 200
        products.list_products.assert_awaited_once_with(2, 5, 0)
        data = response.json()["data"]
        assert data["totalcount"] == 1
        assert data["products"][0]["name"] == "Kettle"

    def test_search(self, client, products):
        products.search_products.return_value = ProductPage(products=[], totalcount=0)

        response = client.get("/api/products/search", params={"search": "kett", "offset": 20})

        assert response.status_code == 200
        products.search_products.assert_awaited_once_with("kett", 1, 10, 20)

    def test_invalid_page(self, client):
        response = client.get("/api/products", params={"page": 0})
        assert response.status_code == 422

    def test_create_requires_token(self, client, products):
        response = client.post("/api/products", json={"name": "Kettle"})
        assert response.status_code == 401
        products.create_product.assert_not_awaited()

    def test_create_as_admin(self, client, products, auth_headers):
        products.create_product.return_value = make_product()

        response = client.post(
            "/api/products",
            json={"name": "Kettle", "description": "Boils water", "price": 24.5,
                  "image_url": "https://img/kettle.png"},
            headers=auth_headers,
        )

        assert response.status_code == 201
        assert response.json()["data"]["id"] == PRODUCT_ID

    def test_create_as_normal_user(self, client, products, auth_headers):
        products.create_product.side_effect = InsufficientPermissionsError("admin", "normal")

        response = client.post("/api/products", json={"name": "Kettle"}, headers=auth_headers)

        assert response.status_code == 403

    def test_negative_price(self, client, auth_headers):
        response = client.post("/api/products", json={"name": "K", "price": -1}, headers=auth_headers)
        assert response.status_code == 422

    def test_delete_missing(self, client, products, auth_headers):
        products.delete_product.side_effect = ProductNotFoundError(PRODUCT_ID)

        response = client.delete(f"/api/products/{PRODUCT_ID}", headers=auth_headers)

        assert response.status_code == 404
        assert response.json()["message"] == "no product available"

    def test_update_with_null_field(self, client, products, auth_headers):
        response = client.put(
            f"/api/products/{PRODUCT_ID}", json={"name": None, "price": None}, headers=auth_headers,
        )
        assert response.status_code == 422
        products.update_product.assert_not_awaited()

    def test_update(self, client, products, auth_headers):
        products.update_product.return_value = make_product()

        response = client.put(f"/api/products/{PRODUCT_ID}", json={"price": 0}, headers=auth_headers)

        assert response.status_code == 200
        _, product_id, request = products.update_product.call_args.args
        assert product_id == PRODUCT_ID
        assert request.changes() == {"price": 0}


class TestCartRoutes:
    def test_add_address(self, client, cart, auth_headers):
        cart.add_address.return_value = Address(
            id="a1", user_id=TEST_USER_ID, address_1="1 Main St", city="Oslo", country="NO",
        )

        response = client.post(
            "/api/addresses",
            json={"address_1": "1 Main St", "city": "Oslo", "country": "NO"},
            headers=auth_headers,
        )

        assert response.status_code == 201
        assert response.json()["data"]["city"] == "Oslo"

    def test_add_to_cart(self, client, cart, auth_headers):
        cart.add_to_cart.return_value = CartItem(id="c1", user_id=TEST_USER_ID, product_id=PRODUCT_ID)

        response = client.post("/api/cart", json={"product_id": PRODUCT_ID}, headers=auth_headers)

        assert response.status_code == 201
        assert response.json()["data"]["checkout"] is False

    def test_add_to_cart_without_address(self, client, cart, auth_headers):
        cart.add_to_cart.side_effect = AddressRequiredError(TEST_USER_ID)

        response = client.post("/api/cart", json={"product_id": PRODUCT_ID}, headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["code"] == "ADDRESS_REQUIRED"

    def test_list_cart(self, client, cart, auth_headers):
        cart.list_cart.return_value = []
        response = client.get("/api/cart", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["data"] == []

    def test_checkout(self, client, cart, auth_headers):
        cart.checkout.return_value = CheckoutResult(checked_out=2)

        response = client.put("/api/cart/checkout", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["data"]["checked_out"] == 2

    def test_cart_requires_token(self, client):
        assert client.get("/api/cart").status_code == 401
