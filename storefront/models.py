"""
Pydantic Models - Results returned across the core boundary.

Errors never propagate out of the core as exceptions; they are reported as
status/reason values on these models for the presentation layer to render.
"""

from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from storefront.errors import ErrorCode


# ============================================================
# Enums
# ============================================================

class CashStatus(str, Enum):
    """Outcome of a cash settlement."""
    PAID = "paid"  # Paid in full, change returned
    UNDERPAID = "underpaid"  # Balance carried over
    EMPTY = "empty"  # Nothing to pay


class CardStatus(str, Enum):
    """Outcome of a card settlement."""
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class PaymentState(str, Enum):
    """Session payment state."""
    CLEAR = "clear"
    PARTIALLY_PAID = "partially_paid"


# ============================================================
# Results
# ============================================================

class CashSettlement(BaseModel):
    """Result of settle_cash. All amounts are unrounded USD."""
    status: CashStatus
    due: Decimal = Field(description="Amount that was due before this payment")
    tendered: Decimal = Field(description="Cash received")
    change: Optional[Decimal] = Field(default=None, description="Change returned when paid")
    balance: Optional[Decimal] = Field(default=None, description="Remaining balance when underpaid")


class CardSettlement(BaseModel):
    """Result of settle_card."""
    status: CardStatus
    reason: Optional[ErrorCode] = None
    message: str = ""
    amount: Decimal = Field(default=Decimal("0"), description="Cart total charged (USD)")

    @property
    def accepted(self) -> bool:
        return self.status == CardStatus.ACCEPTED


class RegistrationResult(BaseModel):
    """Result of register_product."""
    ok: bool
    product_id: Optional[int] = None
    error: Optional[ErrorCode] = None
    message: str = ""
