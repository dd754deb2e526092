"""Cart package: product model, catalog & cart store, and catalog storage."""
from .models import Product
from .service import CartStore
from .storage import (
    CatalogStorage,
    JsonFileKeyValueStore,
    MemoryKeyValueStore,
    default_catalog,
)

__all__ = [
    "Product",
    "CartStore",
    "CatalogStorage",
    "JsonFileKeyValueStore",
    "MemoryKeyValueStore",
    "default_catalog",
]
