"""Pytest configuration and fixtures"""
from datetime import datetime, timezone
from decimal import Decimal

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ed25519
from fastapi.testclient import TestClient

from authtoken import Role, TokenSigner, TokenVerifier
from storefront.core.config import Settings
from storefront.database import cart_db, product_db, user_db, wishlist_db
from storefront.database.users import DEMO_ADMIN_ID, DEMO_USER_ID
from storefront.models.product import Product
from storefront.services.cart_service import CartService
from storefront.services.wishlist_service import WishlistService


def _pem_pair() -> tuple[str, str]:
    private_key = ed25519.Ed25519PrivateKey.generate()
    private_pem = private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode()
    public_pem = private_key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    ).decode()
    return private_pem, public_pem


@pytest.fixture(scope="session")
def key_pair():
    """Ed25519 key pair (private PEM, public PEM)"""
    return _pem_pair()


@pytest.fixture(scope="session")
def other_key_pair():
    """A second, unrelated key pair"""
    return _pem_pair()


@pytest.fixture
def signer(key_pair):
    return TokenSigner(private_key_pem=key_pair[0])


@pytest.fixture
def verifier(key_pair):
    return TokenVerifier(public_key_pem=key_pair[1])


@pytest.fixture
def settings(key_pair):
    """Settings with the test key pair and no .env lookup"""
    return Settings(_env_file=None, token_private_key=key_pair[0], token_public_key=key_pair[1])


@pytest.fixture(autouse=True)
def reset_stores():
    """Every test starts with an empty catalog and no carts or wishlists"""
    product_db.reset(seed=False)
    cart_db.reset()
    wishlist_db.reset()
    user_db.reset(seed=True)
    yield
    product_db.reset(seed=False)
    cart_db.reset()
    wishlist_db.reset()


@pytest.fixture
def make_product():
    """Factory that adds a product to the catalog"""

    def _make(product_id: str, **overrides) -> Product:
        now = datetime(2025, 1, 1, tzinfo=timezone.utc)
        fields = {
            "id": product_id,
            "name": f"Product {product_id}",
            "description": "Test product",
            "price": Decimal("10"),
            "discount_price": Decimal("0"),
            "images": [f"/static/images/{product_id}.jpg"],
            "category": "test",
            "stock": 10,
            "created_at": now,
            "updated_at": now,
        }
        fields.update(overrides)
        product = Product(**fields)
        product_db.add_product(product)
        return product

    return _make


@pytest.fixture
def discounted_product(make_product):
    """price=100, discountPrice=80, stock=5"""
    return make_product("P", price=Decimal("100"), discount_price=Decimal("80"), stock=5)


@pytest.fixture
def scarce_product(make_product):
    """stock=1"""
    return make_product("Q", price=Decimal("250"), stock=1)


@pytest.fixture
def cart_service():
    return CartService(products=product_db, carts=cart_db)


@pytest.fixture
def wishlist_service():
    return WishlistService(products=product_db, wishlists=wishlist_db)


@pytest.fixture
def client(settings):
    """Test client"""
    from storefront.main import create_app

    return TestClient(create_app(settings))


@pytest.fixture
def auth_headers(signer):
    token = signer.issue(DEMO_USER_ID, "demo shopper", "shopper@example.com", Role.USER)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers(signer):
    token = signer.issue(DEMO_ADMIN_ID, "store admin", "admin@example.com", Role.ADMIN)
    return {"Authorization": f"Bearer {token}"}
