"""
Response builders shared by the storefront routers.

Every amount is returned twice:
- *_usd fields: unrounded USD values as floats, for calculations
- display fields: strings formatted in the session's current currency
"""
from typing import Optional

from fastapi import HTTPException

from storefront.cart import Product
from storefront.errors import ErrorCode, ERROR_PRODUCT_NOT_FOUND
from storefront.services.money import Number, to_float
from storefront.session import StorefrontSession


def currency_info(session: StorefrontSession) -> dict:
    return {
        "currency": session.currency.currency,
        "symbol": session.symbol(),
        "exchange_rate": to_float(session.currency.rate),
    }


def money_fields(session: StorefrontSession, name: str, amount: Optional[Number]) -> dict:
    """Return {name_usd, name} for an amount, or nulls when absent."""
    if amount is None:
        return {f"{name}_usd": None, name: None}
    return {f"{name}_usd": to_float(amount), name: session.format(amount)}


def serialize_product(session: StorefrontSession, product: Product) -> dict:
    return {
        "product_id": product.product_id,
        "name": product.name,
        "image": product.image,
        "quantity": product.quantity,
        **money_fields(session, "price", product.price),
    }


def format_cart_response(session: StorefrontSession) -> dict:
    items = []
    for product in session.list_cart():
        item = serialize_product(session, product)
        item.update(money_fields(session, "line_total", product.line_total))
        items.append(item)

    return {
        "items": items,
        "is_empty": not items,
        "total_items": session.store.total_items(),
        **money_fields(session, "total", session.cart_total()),
        **money_fields(session, "remaining_balance", session.remaining_balance),
        "payment_state": session.payment_state.value,
        **currency_info(session),
    }


def ensure_found(product: Optional[Product]) -> Product:
    """Map an unknown product id to 404. The store has already left state unchanged."""
    if product is None:
        raise HTTPException(
            status_code=404,
            detail={"error": ErrorCode.NOT_FOUND.value, "message": ERROR_PRODUCT_NOT_FOUND},
        )
    return product
