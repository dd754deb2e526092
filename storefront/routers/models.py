"""
Storefront API Pydantic Models

Request bodies for the storefront endpoints. Field-level checks are left to
the core so that rejections carry the core's error codes.
"""
from typing import Optional, Union

from pydantic import BaseModel


# ==================== CATALOG MODELS ====================

class RegisterProductRequest(BaseModel):
    product_id: Optional[Union[int, str]] = None
    name: Optional[str] = None
    price: Optional[Union[float, str]] = None
    image: Optional[str] = None


# ==================== CART MODELS ====================

class AddToCartRequest(BaseModel):
    product_id: int


# ==================== CHECKOUT MODELS ====================

class CashPaymentRequest(BaseModel):
    amount: Optional[Union[float, str]] = None  # missing = nothing received


class CardPaymentRequest(BaseModel):
    number: str = ""
    expiry: str = ""  # MM/YY
    cvv: str = ""


# ==================== CURRENCY MODELS ====================

class SwitchCurrencyRequest(BaseModel):
    code: str
