"""Tests for catalog storage"""
import json

import pytest

from storefront.cart import (
    CatalogStorage,
    JsonFileKeyValueStore,
    MemoryKeyValueStore,
    Product,
    default_catalog,
)


def test_default_catalog():
    products = default_catalog()

    assert [p.name for p in products] == ["Cherry", "Orange", "Strawberry"]
    assert [p.product_id for p in products] == [1, 2, 3]
    assert all(p.quantity == 0 for p in products)


def test_missing_data_falls_back_to_default(storage):
    products = storage.load_products()

    assert [p.product_id for p in products] == [1, 2, 3]


def test_save_and_load(storage, sample_product):
    products = default_catalog() + [sample_product]

    storage.save_products(products)
    loaded = storage.load_products()

    assert [p.product_id for p in loaded] == [1, 2, 3, 42]
    assert loaded[-1].price == sample_product.price


def test_saved_format(storage):
    storage.save_products(default_catalog())

    records = json.loads(storage.backend.get("products"))
    assert records[0] == {
        "productId": 1,
        "name": "Cherry",
        "price": "2.99",
        "image": "../images/cherry.jpg",
        "quantity": 0,
    }


@pytest.mark.parametrize("payload", [
    "not json",
    '{"productId": 1}',
    '[{"name": "No id"}]',
    '[{"productId": "x", "name": "Bad", "price": 1, "image": "a"}]',
    '[{"productId": -4, "name": "", "price": "abc", "image": "a"}]',
    '[{"productId": 0, "name": "Zero", "price": 1, "image": "a"}]',
    '[{"productId": 9, "name": "  ", "price": 1, "image": "a"}]',
    '[{"productId": 9, "name": "Bad", "price": "-1", "image": "a"}]',
    '[{"productId": 9, "name": "Bad", "price": "NaN", "image": "a"}]',
    '[{"productId": 9, "name": "Bad", "price": 1, "image": ""}]',
    '[{"productId": true, "name": "Bad", "price": 1, "image": "a"}]',
    "[1, 2, 3]",
])
def test_corrupted_data_is_dropped(payload, caplog):
    backend = MemoryKeyValueStore()
    backend.set("products", payload)
    storage = CatalogStorage(backend)

    products = storage.load_products()

    assert [p.product_id for p in products] == [1, 2, 3]
    assert backend.get("products") is None
    assert "Corrupted catalog data" in caplog.text


def test_custom_key():
    backend = MemoryKeyValueStore()
    storage = CatalogStorage(backend, key="shop-a")

    storage.save_products([Product(product_id=5, name="Lime", price="0.30", image="lime.jpg")])

    assert backend.get("products") is None
    assert storage.load_products()[0].name == "Lime"


def test_json_file_backend(tmp_path):
    backend = JsonFileKeyValueStore(str(tmp_path / "data"))

    assert backend.get("products") is None

    backend.set("products", "[]")
    assert (tmp_path / "data" / "products.json").read_text(encoding="utf-8") == "[]"
    assert backend.get("products") == "[]"

    backend.delete("products")
    backend.delete("products")
    assert backend.get("products") is None


def test_json_file_catalog_round_trip(tmp_path, sample_product):
    storage = CatalogStorage(JsonFileKeyValueStore(str(tmp_path)))
    storage.save_products([sample_product])

    reopened = CatalogStorage(JsonFileKeyValueStore(str(tmp_path)))
    loaded = reopened.load_products()

    assert len(loaded) == 1
    assert loaded[0].name == "Mango"
