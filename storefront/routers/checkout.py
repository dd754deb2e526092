"""
Checkout Router

Cash and card settlement. Rejections and underpayments are normal outcomes
and answer 200 with a status field; only malformed bodies are errors.
"""
from fastapi import APIRouter, Depends

from storefront.models import CashStatus
from storefront.session import StorefrontSession, get_session
from .helpers import format_cart_response, money_fields
from .models import CardPaymentRequest, CashPaymentRequest

router = APIRouter(prefix="/checkout", tags=["checkout"])

CASH_MESSAGES = {
    CashStatus.PAID: "Thank you!",
    CashStatus.UNDERPAID: "Please pay the remaining amount.",
    CashStatus.EMPTY: "Cart is empty. Nothing to pay.",
}


@router.post("/cash")
async def pay_cash(request: CashPaymentRequest, session: StorefrontSession = Depends(get_session)):
    """Apply cash against the cart total or the outstanding balance."""
    result = session.settle_cash(request.amount)
    return {
        "status": result.status.value,
        "message": CASH_MESSAGES[result.status],
        **money_fields(session, "due", result.due),
        **money_fields(session, "tendered", result.tendered),
        **money_fields(session, "change", result.change),
        **money_fields(session, "balance", result.balance),
        "cart": format_cart_response(session),
    }


@router.post("/card")
async def pay_card(request: CardPaymentRequest, session: StorefrontSession = Depends(get_session)):
    """Validate card details and pay for the cart."""
    result = session.settle_card(request.number, request.expiry, request.cvv)
    return {
        "status": result.status.value,
        "reason": result.reason.value if result.reason else None,
        "message": result.message,
        **money_fields(session, "amount", result.amount),
        "cart": format_cart_response(session),
    }


@router.post("/clear-receipt")
async def clear_receipt(session: StorefrontSession = Depends(get_session)):
    """Drop any outstanding cash balance. The cart is kept."""
    session.clear_receipt()
    return format_cart_response(session)
