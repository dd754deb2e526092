"""
Payment Reconciler

Cash settlement runs a two-state machine over the session payment state:

    Clear --underpay--> PartiallyPaid(balance)
    PartiallyPaid --underpay--> PartiallyPaid(new balance)
    Clear / PartiallyPaid --pay in full--> Clear (cart emptied)
    any --clear_receipt--> Clear (cart untouched)

Card settlement is format validation only. It empties the cart on success
and never reads or writes the cash balance.
"""
import re
from decimal import Decimal
from typing import Optional

from storefront.cart import CartStore
from storefront.errors import (
    ErrorCode,
    StorefrontError,
    ERROR_INVALID_CARD_NUMBER,
    ERROR_INVALID_CVV,
    ERROR_INVALID_EXPIRY,
)
from storefront.logging import get_logger
from storefront.models import (
    CardSettlement,
    CardStatus,
    CashSettlement,
    CashStatus,
    PaymentState,
)
from storefront.services.money import Number, ZERO, is_valid_amount, to_decimal

logger = get_logger(__name__)

CARD_NUMBER_PATTERN = re.compile(r"^[0-9]{16}$")
CARD_SEPARATORS_PATTERN = re.compile(r"[\s-]+")
EXPIRY_PATTERN = re.compile(r"^(0[1-9]|1[0-2])/[0-9]{2}$")
CVV_PATTERN = re.compile(r"^[0-9]{3,4}$")


def validate_card(card_number: str, expiry: str, cvv: str) -> None:
    """
    Check card details format. First failing check wins.

    Raises:
        StorefrontError: INVALID_CARD_NUMBER, INVALID_EXPIRY or INVALID_CVV
    """
    if not isinstance(card_number, str) or not CARD_NUMBER_PATTERN.fullmatch(
        CARD_SEPARATORS_PATTERN.sub("", card_number)
    ):
        raise StorefrontError(ErrorCode.INVALID_CARD_NUMBER, ERROR_INVALID_CARD_NUMBER)
    if not isinstance(expiry, str) or not EXPIRY_PATTERN.fullmatch(expiry.strip()):
        raise StorefrontError(ErrorCode.INVALID_EXPIRY, ERROR_INVALID_EXPIRY)
    if not isinstance(cvv, str) or not CVV_PATTERN.fullmatch(cvv.strip()):
        raise StorefrontError(ErrorCode.INVALID_CVV, ERROR_INVALID_CVV)


def _parse_tendered(amount: Number) -> Decimal:
    """Cash received; anything unusable counts as nothing."""
    if not is_valid_amount(amount):
        return ZERO
    tendered = to_decimal(amount)
    if tendered < 0:
        logger.warning(f"Negative cash amount {tendered} treated as 0")
        return ZERO
    return tendered


class PaymentReconciler:
    """Settles payments against the cart and tracks any remaining balance."""

    def __init__(self, store: CartStore):
        self.store = store
        self._remaining_balance: Optional[Decimal] = None

    @property
    def remaining_balance(self) -> Optional[Decimal]:
        """Outstanding balance after an underpayment, or None."""
        return self._remaining_balance

    @property
    def state(self) -> PaymentState:
        if self._remaining_balance is None:
            return PaymentState.CLEAR
        return PaymentState.PARTIALLY_PAID

    def amount_due(self) -> Decimal:
        """Remaining balance if partially paid, else the cart total."""
        if self._remaining_balance is not None:
            return self._remaining_balance
        return self.store.cart_total()

    def settle_cash(self, amount: Number) -> CashSettlement:
        """Apply a cash payment to the amount due."""
        tendered = _parse_tendered(amount)
        due = self.amount_due()

        if due == 0:
            logger.info("Cash payment with nothing to pay")
            return CashSettlement(status=CashStatus.EMPTY, due=due, tendered=tendered)

        change = tendered - due
        if change >= 0:
            self.store.empty_cart()
            self._remaining_balance = None
            logger.info(f"Cash payment settled: due={due} tendered={tendered} change={change}")
            return CashSettlement(status=CashStatus.PAID, due=due, tendered=tendered, change=change)

        self._remaining_balance = -change
        logger.info(f"Cash payment short: due={due} tendered={tendered} balance={-change}")
        return CashSettlement(
            status=CashStatus.UNDERPAID,
            due=due,
            tendered=tendered,
            balance=-change,
        )

    def settle_card(self, card_number: str, expiry: str, cvv: str) -> CardSettlement:
        """Validate card details and, if valid, pay for the cart."""
        try:
            validate_card(card_number, expiry, cvv)
        except StorefrontError as e:
            logger.info(f"Card payment rejected: {e.code.value}")
            return CardSettlement(status=CardStatus.REJECTED, reason=e.code, message=e.message)

        amount = self.store.cart_total()
        self.store.empty_cart()
        logger.info(f"Card payment accepted: amount={amount}")
        return CardSettlement(
            status=CardStatus.ACCEPTED,
            message="Payment successful! Thank you!",
            amount=amount,
        )

    def clear_receipt(self) -> None:
        """Drop any outstanding balance. The cart is not affected."""
        if self._remaining_balance is not None:
            logger.info(f"Receipt cleared with outstanding balance {self._remaining_balance}")
        self._remaining_balance = None
