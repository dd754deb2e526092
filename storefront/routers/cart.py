"""
Cart Router

Cart mutations return the full cart view so the client can redraw in one
round trip. Unknown product ids answer 404 and change nothing.
"""
from fastapi import APIRouter, Depends

from storefront.session import StorefrontSession, get_session
from .helpers import ensure_found, format_cart_response
from .models import AddToCartRequest


router = APIRouter(tags=["cart"])


@router.get("/cart")
async def get_cart(session: StorefrontSession = Depends(get_session)):
    """Get the cart with totals in USD and the display currency."""
    return format_cart_response(session)


@router.post("/cart/add")
async def add_to_cart(request: AddToCartRequest, session: StorefrontSession = Depends(get_session)):
    ensure_found(session.add_to_cart(request.product_id))
    return format_cart_response(session)


@router.post("/cart/{product_id}/increase")
async def increase_quantity(product_id: int, session: StorefrontSession = Depends(get_session)):
    ensure_found(session.increase_quantity(product_id))
    return format_cart_response(session)


@router.post("/cart/{product_id}/decrease")
async def decrease_quantity(product_id: int, session: StorefrontSession = Depends(get_session)):
    ensure_found(session.decrease_quantity(product_id))
    return format_cart_response(session)


@router.delete("/cart/{product_id}")
async def remove_from_cart(product_id: int, session: StorefrontSession = Depends(get_session)):
    ensure_found(session.remove_from_cart(product_id))
    return format_cart_response(session)


@router.delete("/cart")
async def empty_cart(session: StorefrontSession = Depends(get_session)):
    session.empty_cart()
    return format_cart_response(session)
