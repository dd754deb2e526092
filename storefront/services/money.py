"""
Money Utilities - Safe Decimal operations for monetary values.

Avoids float precision issues by using Decimal throughout. Values are never
rounded here except by round_money / format_money, which are display-only.
"""
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Union

Number = Union[str, int, float, Decimal, None]

# Default precision for money operations (2 decimal places)
MONEY_PRECISION = Decimal("0.01")

# Precision for integer currencies (YEN)
INTEGER_PRECISION = Decimal("1")

ZERO = Decimal("0")


def to_decimal(value: Number) -> Decimal:
    """
    Convert any value to Decimal safely.

    Args:
        value: Value to convert (str, int, float, Decimal, or None)

    Returns:
        Decimal representation of the value, or Decimal("0") if None,
        unparseable or non-finite (NaN, Infinity)
    """
    if value is None or isinstance(value, bool):
        return ZERO

    try:
        if isinstance(value, Decimal):
            result = value
        elif isinstance(value, float):
            # Use string representation to preserve precision
            result = Decimal(str(value))
        elif isinstance(value, str):
            result = Decimal(value.strip())
        else:
            result = Decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return ZERO

    if not result.is_finite():
        return ZERO
    return result


def is_valid_amount(value: Number) -> bool:
    """True if value parses to a finite Decimal."""
    if value is None or isinstance(value, bool):
        return False
    if isinstance(value, str) and not value.strip():
        return False
    try:
        parsed = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError, TypeError):
        return False
    return parsed.is_finite()


def round_money(value: Number, to_int: bool = False) -> Decimal:
    """
    Round monetary value to display precision.

    Args:
        value: Value to round
        to_int: If True, round to whole units (YEN)

    Returns:
        Rounded Decimal value
    """
    decimal_value = to_decimal(value)
    precision = INTEGER_PRECISION if to_int else MONEY_PRECISION
    return decimal_value.quantize(precision, rounding=ROUND_HALF_UP)


def format_money(value: Number, currency: str = "USD") -> str:
    """
    Format an already-converted monetary value with its currency symbol.

    Args:
        value: Amount in the target currency
        currency: Currency code (USD, EUR, YEN)

    Returns:
        Formatted string, e.g. "$1,234.56", "€0.92", "¥1,235", "-$4.00"
    """
    # Single source of truth for symbols and integer currencies
    from storefront.services.currency import CURRENCY_SYMBOLS, INTEGER_CURRENCIES

    symbol = CURRENCY_SYMBOLS.get(currency, currency)

    if currency in INTEGER_CURRENCIES:
        rounded = round_money(value, to_int=True)
        formatted = f"{int(abs(rounded)):,}"
    else:
        rounded = round_money(value)
        formatted = f"{abs(rounded):,.2f}"

    sign = "-" if rounded < 0 else ""
    return f"{sign}{symbol}{formatted}"


def to_float(value: Number) -> float:
    """
    Convert Decimal to float for JSON serialization.

    Use only at API boundaries, not for internal calculations.
    """
    return float(to_decimal(value))


def multiply(value: Number, factor: Number) -> Decimal:
    """Safe multiplication of monetary value by a factor."""
    return to_decimal(value) * to_decimal(factor)
