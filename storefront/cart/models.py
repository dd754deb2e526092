"""Catalog product model with Decimal-based pricing."""
from dataclasses import dataclass
from decimal import Decimal

from storefront.errors import (
    ErrorCode,
    StorefrontError,
    ERROR_INVALID_PRICE,
    ERROR_INVALID_PRODUCT_FIELDS,
    ERROR_INVALID_PRODUCT_ID,
)
from storefront.services.money import to_decimal, is_valid_amount, multiply


def validate_product_fields(product_id, name, price, image) -> Decimal:
    """
    Check the fields of a catalog entry.

    Returns:
        The price as Decimal

    Raises:
        StorefrontError: INVALID_INPUT if the id is not a positive integer,
            name or image is blank, or price is missing, non-finite or negative
    """
    if isinstance(product_id, bool) or not isinstance(product_id, int) or product_id < 1:
        raise StorefrontError(ErrorCode.INVALID_INPUT, ERROR_INVALID_PRODUCT_ID)
    if not isinstance(name, str) or not name.strip():
        raise StorefrontError(ErrorCode.INVALID_INPUT, ERROR_INVALID_PRODUCT_FIELDS)
    if not isinstance(image, str) or not image.strip():
        raise StorefrontError(ErrorCode.INVALID_INPUT, ERROR_INVALID_PRODUCT_FIELDS)
    if not is_valid_amount(price):
        raise StorefrontError(ErrorCode.INVALID_INPUT, ERROR_INVALID_PRODUCT_FIELDS)
    decimal_price = to_decimal(price)
    if decimal_price < 0:
        raise StorefrontError(ErrorCode.INVALID_INPUT, ERROR_INVALID_PRICE)
    return decimal_price


@dataclass
class Product:
    """
    Catalog entry.

    `quantity` is the number of units currently in the cart. It is mutated in
    place by CartStore; a product is in the cart exactly when quantity > 0.
    """
    product_id: int
    name: str
    price: Decimal
    image: str
    quantity: int = 0

    def __post_init__(self):
        self.price = to_decimal(self.price)

    @property
    def in_cart(self) -> bool:
        return self.quantity > 0

    @property
    def line_total(self) -> Decimal:
        """Unrounded price for all units in the cart."""
        return multiply(self.price, self.quantity)

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "productId": self.product_id,
            "name": self.name,
            "price": str(self.price),
            "image": self.image,
            "quantity": self.quantity,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Product":
        """
        Create from a stored record. Cart quantities are not restored.

        Raises:
            KeyError: if a field is missing
            ValueError: if a field breaks the catalog entry rules
        """
        product_id, name, price, image = data["productId"], data["name"], data["price"], data["image"]
        try:
            decimal_price = validate_product_fields(product_id, name, price, image)
        except StorefrontError as e:
            raise ValueError(f"invalid product record {product_id!r}: {e.message}") from e
        return cls(
            product_id=product_id,
            name=name.strip(),
            price=decimal_price,
            image=image.strip(),
        )
