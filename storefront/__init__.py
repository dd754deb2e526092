"""
Storefront Core

- cart: product catalog, cart store and catalog storage
- services: money helpers, currency conversion, payment reconciliation
- session: the session facade used by the presentation layer
- routers: FastAPI endpoints over the session

Imports are lazy so that submodules can be loaded in any order.
"""

__all__ = [
    "StorefrontSession",
    "get_session",
    "reset_session",
]


def __getattr__(name):
    """Lazy attribute access for the session API."""
    if name in __all__:
        import importlib
        return getattr(importlib.import_module("storefront.session"), name)
    raise AttributeError(f"module 'storefront' has no attribute '{name}'")
