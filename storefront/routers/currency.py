"""Display currency endpoints."""
from fastapi import APIRouter, Depends

from storefront.errors import ErrorCode, ERROR_UNKNOWN_CURRENCY
from storefront.session import StorefrontSession, get_session
from .helpers import currency_info
from .models import SwitchCurrencyRequest

router = APIRouter(tags=["currency"])


@router.get("/currency")
async def get_currency(session: StorefrontSession = Depends(get_session)):
    return {
        **currency_info(session),
        "available": sorted(session.currency.rates),
    }


@router.put("/currency")
async def switch_currency(request: SwitchCurrencyRequest, session: StorefrontSession = Depends(get_session)):
    """Switch the display currency. Unknown codes are ignored."""
    switched = session.switch_currency(request.code)
    return {
        "switched": switched,
        "reason": None if switched else ErrorCode.UNKNOWN_CURRENCY.value,
        "message": "" if switched else ERROR_UNKNOWN_CURRENCY,
        **currency_info(session),
    }
