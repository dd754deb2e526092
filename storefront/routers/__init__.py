"""
FastAPI Routers Package

Combines all storefront sub-routers into a single router with prefix /api.
Included by api/index.py.
"""

from fastapi import APIRouter

from .cart import router as cart_router
from .catalog import router as catalog_router
from .checkout import router as checkout_router
from .currency import router as currency_router

router = APIRouter(prefix="/api")

router.include_router(catalog_router)
router.include_router(cart_router)
router.include_router(checkout_router)
router.include_router(currency_router)

__all__ = ["router"]
