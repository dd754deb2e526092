"""Environment configuration for the storefront session."""
import os
from typing import List, Optional

DEFAULT_STORAGE_KEY = "products"
DEFAULT_CURRENCY = "USD"


def get_storage_dir() -> Optional[str]:
    """
    Directory for the JSON file catalog backend.

    Returns None when STOREFRONT_STORAGE_DIR is unset, in which case the
    catalog lives in memory only.
    """
    value = os.environ.get("STOREFRONT_STORAGE_DIR", "").strip()
    return value or None


def get_storage_key() -> str:
    """Key under which the catalog is mirrored."""
    return os.environ.get("STOREFRONT_STORAGE_KEY", "").strip() or DEFAULT_STORAGE_KEY


def get_default_currency() -> str:
    """Currency selected at session start (validated by CurrencyService)."""
    return os.environ.get("STOREFRONT_DEFAULT_CURRENCY", DEFAULT_CURRENCY).strip().upper()


def get_cors_origins() -> List[str]:
    """Allowed origins for the browser client (comma-separated, default "*")."""
    raw = os.environ.get("STOREFRONT_CORS_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()] or ["*"]
