"""Pytest configuration and fixtures"""
import os
import pytest
from decimal import Decimal

# Keep tests independent of the developer's environment
os.environ.pop("STOREFRONT_STORAGE_DIR", None)
os.environ.pop("STOREFRONT_DEFAULT_CURRENCY", None)
os.environ.setdefault("LOG_LEVEL", "DEBUG")

from storefront.cart import CartStore, CatalogStorage, MemoryKeyValueStore, Product, default_catalog
from storefront.session import StorefrontSession, reset_session


@pytest.fixture
def store():
    """Cart store over the default catalog (Cherry, Orange, Strawberry)"""
    return CartStore(default_catalog())


@pytest.fixture
def storage():
    """Catalog storage over an in-memory backend"""
    return CatalogStorage(MemoryKeyValueStore())


@pytest.fixture
def session(storage):
    """Fresh session with the default catalog in USD"""
    return StorefrontSession(storage=storage, default_currency="USD")


@pytest.fixture
def ten_dollar_session(session):
    """Session whose cart total is exactly 10.00"""
    result = session.register_product(10, "Gift Box", "5.00", "../images/gift.jpg")
    assert result.ok
    session.add_to_cart(10)
    session.add_to_cart(10)
    assert session.cart_total() == Decimal("10.00")
    return session


@pytest.fixture
def sample_product():
    """Sample product data"""
    return Product(product_id=42, name="Mango", price="4.25", image="../images/mango.jpg")


@pytest.fixture(autouse=True)
def _reset_global_session():
    """Drop the process-wide session between tests"""
    reset_session()
    yield
    reset_session()
