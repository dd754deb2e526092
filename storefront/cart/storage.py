"""
Catalog persistence.

The catalog is mirrored as a JSON list of product records under a fixed key
in a small key-value backend. The core never depends on it: the session
loads from it at start and writes to it after catalog mutations.
"""
import json
import os
from pathlib import Path
from typing import Dict, List, Optional, Protocol

from storefront.config import DEFAULT_STORAGE_KEY
from storefront.logging import get_logger
from .models import Product

logger = get_logger(__name__)


def default_catalog() -> List[Product]:
    """Catalog used when nothing has been saved yet."""
    return [
        Product(product_id=1, name="Cherry", price="2.99", image="../images/cherry.jpg"),
        Product(product_id=2, name="Orange", price="1.99", image="../images/orange.jpg"),
        Product(product_id=3, name="Strawberry", price="3.49", image="../images/strawberry.jpg"),
    ]


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


class MemoryKeyValueStore:
    """Process-local backend."""

    def __init__(self):
        self._data: Dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileKeyValueStore:
    """One JSON file per key inside a directory."""

    def __init__(self, directory: str):
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        path = self._path(key)
        tmp_path = path.with_suffix(".json.tmp")
        tmp_path.write_text(value, encoding="utf-8")
        os.replace(tmp_path, path)

    def delete(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)


class CatalogStorage:
    """Loads and mirrors the product catalog."""

    def __init__(self, backend: KeyValueStore, key: str = DEFAULT_STORAGE_KEY):
        self.backend = backend
        self.key = key

    def load_products(self) -> List[Product]:
        """
        Load the saved catalog.

        Falls back to the default catalog when nothing is saved. Corrupted
        data is logged, deleted, and replaced by the default catalog.
        """
        data = self.backend.get(self.key)
        if not data:
            return default_catalog()

        try:
            records = json.loads(data)
            if not isinstance(records, list):
                raise TypeError(f"expected a list of products, got {type(records).__name__}")
            return [Product.from_dict(record) for record in records]
        except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            logger.warning(f"Corrupted catalog data under '{self.key}': {e}")
            self.backend.delete(self.key)
            return default_catalog()

    def save_products(self, products: List[Product]) -> None:
        """Mirror the catalog."""
        self.backend.set(self.key, json.dumps([p.to_dict() for p in products]))
        logger.debug(f"Saved {len(products)} products under '{self.key}'")
