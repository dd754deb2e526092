"""
Currency Conversion Service

All stored prices are in USD. Conversion is a display-time projection:
it never mutates stored prices and its rounding never feeds back into
cart totals or balance tracking.
"""
from decimal import Decimal
from typing import Dict, Optional

from storefront.config import get_default_currency
from storefront.logging import get_logger, sanitize_string_for_logging
from storefront.services.money import Number, format_money, multiply

logger = get_logger(__name__)

REFERENCE_CURRENCY = "USD"

# Static rates: 1 USD = X target currency
CURRENCY_RATES: Dict[str, Decimal] = {
    "USD": Decimal("1"),
    "EUR": Decimal("0.92"),
    "YEN": Decimal("155.5"),
}

CURRENCY_SYMBOLS: Dict[str, str] = {
    "USD": "$",
    "EUR": "€",
    "YEN": "¥",
}

# Currencies displayed as whole units (no decimals)
INTEGER_CURRENCIES = {"YEN"}


class CurrencyService:
    """Holds the session's display currency and converts USD amounts into it."""

    def __init__(self, default_currency: Optional[str] = None):
        """
        Args:
            default_currency: Currency selected at start and after reset().
                Unknown codes fall back to USD.
        """
        self.rates = CURRENCY_RATES
        self.symbols = CURRENCY_SYMBOLS
        self.default_currency = self._normalize(default_currency or get_default_currency())
        if self.default_currency not in self.rates:
            logger.warning(
                f"Unknown default currency {sanitize_string_for_logging(self.default_currency)}, "
                f"using {REFERENCE_CURRENCY}"
            )
            self.default_currency = REFERENCE_CURRENCY
        self._currency = self.default_currency

    @staticmethod
    def _normalize(code) -> str:
        if not isinstance(code, str):
            return ""
        return code.strip().upper()

    @property
    def currency(self) -> str:
        """Current display currency code."""
        return self._currency

    @property
    def rate(self) -> Decimal:
        """Multiplier of the current currency against USD."""
        return self.rates[self._currency]

    def switch_currency(self, code: str) -> bool:
        """
        Switch the display currency.

        Unknown codes are ignored and the currency stays unchanged.

        Returns:
            True if the currency was switched (or already selected)
        """
        normalized = self._normalize(code)
        if normalized not in self.rates:
            logger.warning(f"Ignoring unknown currency: {sanitize_string_for_logging(code)}")
            return False
        self._currency = normalized
        logger.debug(f"Display currency set to {normalized}")
        return True

    def convert(self, amount: Number) -> Decimal:
        """
        Convert a USD amount into the current currency.

        Invalid or non-finite amounts count as 0. The result is unrounded.
        """
        return multiply(amount, self.rate)

    def format(self, amount: Number) -> str:
        """Convert a USD amount and render it in the current currency."""
        return format_money(self.convert(amount), self._currency)

    def symbol(self) -> str:
        """Display symbol of the current currency."""
        return self.symbols[self._currency]

    def reset(self) -> None:
        """Return to the default currency."""
        self._currency = self.default_currency
