"""
Error taxonomy for the storefront core.

Message strings are centralized here to avoid duplication between the core,
the HTTP layer and tests.
"""
from enum import Enum


class ErrorCode(str, Enum):
    """Locally recoverable error conditions."""
    NOT_FOUND = "not_found"
    DUPLICATE_ID = "duplicate_id"
    INVALID_INPUT = "invalid_input"
    INVALID_CARD_NUMBER = "invalid_card_number"
    INVALID_EXPIRY = "invalid_expiry"
    INVALID_CVV = "invalid_cvv"
    UNKNOWN_CURRENCY = "unknown_currency"


# Catalog errors
ERROR_PRODUCT_NOT_FOUND = "Product not found"
ERROR_DUPLICATE_PRODUCT_ID = "Product ID already exists. Please use a unique ID."
ERROR_INVALID_PRODUCT_ID = "Product ID must be a positive number."
ERROR_INVALID_PRODUCT_FIELDS = "Please fill out all fields correctly."
ERROR_INVALID_PRICE = "Price must be a non-negative number."

# Card errors
ERROR_INVALID_CARD_NUMBER = "Invalid card number. Must be 16 digits."
ERROR_INVALID_EXPIRY = "Invalid expiration date. Must be in MM/YY format."
ERROR_INVALID_CVV = "Invalid CVV. Must be 3 or 4 digits."

# Currency errors
ERROR_UNKNOWN_CURRENCY = "Unknown currency"


class StorefrontError(Exception):
    """
    Raised inside the core for validation failures.

    The session facade and the payment reconciler catch it and hand the code
    to callers as a status value; it never crosses the core boundary.
    """

    def __init__(self, code: ErrorCode, message: str):
        super().__init__(message)
        self.code = code
        self.message = message

    def __repr__(self) -> str:
        return f"StorefrontError(code={self.code.value!r}, message={self.message!r})"
