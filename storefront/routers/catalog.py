"""Catalog endpoints: list and register products."""
from fastapi import APIRouter, Depends, HTTPException

from storefront.errors import ErrorCode
from storefront.session import StorefrontSession, get_session
from .helpers import currency_info, ensure_found, serialize_product
from .models import RegisterProductRequest


router = APIRouter(tags=["catalog"])


@router.get("/products")
async def list_products(session: StorefrontSession = Depends(get_session)):
    """List the catalog with prices in the current currency."""
    return {
        "products": [serialize_product(session, p) for p in session.list_products()],
        **currency_info(session),
    }


@router.get("/products/{product_id}")
async def get_product(product_id: int, session: StorefrontSession = Depends(get_session)):
    product = ensure_found(session.find_product(product_id))
    return serialize_product(session, product)


@router.post("/products", status_code=201)
async def register_product(
    request: RegisterProductRequest,
    session: StorefrontSession = Depends(get_session),
):
    """Register a new product (quantity 0)."""
    result = session.register_product(
        request.product_id,
        request.name,
        request.price,
        request.image,
    )
    if not result.ok:
        status_code = 409 if result.error == ErrorCode.DUPLICATE_ID else 400
        raise HTTPException(
            status_code=status_code,
            detail={"error": result.error.value, "message": result.message},
        )

    product = session.find_product(result.product_id)
    return serialize_product(session, product)
