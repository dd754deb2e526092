"""Catalog & cart store."""
import copy
from decimal import Decimal
from typing import Iterable, List, Optional

from storefront.errors import ErrorCode, StorefrontError, ERROR_DUPLICATE_PRODUCT_ID
from storefront.logging import get_logger, sanitize_string_for_logging
from storefront.services.money import ZERO
from .models import Product, validate_product_fields

logger = get_logger(__name__)


class CartStore:
    """
    Owns the product catalog and the cart.

    The cart is not stored separately: it is the view of catalog entries with
    quantity > 0, in catalog order. Every mutator changes a single quantity,
    so catalog quantities and cart membership can never disagree.

    Mutators look products up in the catalog and return the product they
    touched, or None when the id is unknown (nothing is mutated then).
    """

    def __init__(self, products: Optional[Iterable[Product]] = None):
        self._products: List[Product] = []
        if products is not None:
            self.load(products)

    def load(self, products: Iterable[Product]) -> None:
        """Replace the catalog. Quantities start at 0."""
        loaded: List[Product] = []
        seen = set()
        for product in products:
            if product.product_id in seen:
                logger.warning(f"Skipping duplicate product id {product.product_id} in catalog")
                continue
            seen.add(product.product_id)
            product.quantity = 0
            loaded.append(product)
        self._products = loaded

    def find_product(self, product_id: int) -> Optional[Product]:
        """Find a catalog entry by id."""
        return next((p for p in self._products if p.product_id == product_id), None)

    def _lookup(self, product_id: int, action: str) -> Optional[Product]:
        product = self.find_product(product_id)
        if product is None:
            logger.warning(
                f"Product with ID {sanitize_string_for_logging(product_id)} not found ({action})"
            )
        return product

    def list_products(self) -> List[Product]:
        """Snapshot of the catalog (copies, safe to hand out)."""
        return [copy.copy(p) for p in self._products]

    def list_cart(self) -> List[Product]:
        """Catalog entries currently in the cart (references, not copies)."""
        return [p for p in self._products if p.quantity > 0]

    def add_to_cart(self, product_id: int) -> Optional[Product]:
        """Add one unit of a product to the cart."""
        product = self._lookup(product_id, "add")
        if product is None:
            return None
        if not isinstance(product.quantity, int) or product.quantity < 0:
            product.quantity = 0
        product.quantity += 1
        return product

    # Same operation under both names
    increase_quantity = add_to_cart

    def decrease_quantity(self, product_id: int) -> Optional[Product]:
        """
        Remove one unit from the cart.

        Reaching 0 takes the product out of the cart; quantity never goes
        negative.
        """
        product = self._lookup(product_id, "decrease")
        if product is None:
            return None
        if product.quantity > 0:
            product.quantity -= 1
        return product

    def remove_from_cart(self, product_id: int) -> Optional[Product]:
        """Take a product out of the cart regardless of its quantity."""
        product = self._lookup(product_id, "remove")
        if product is None:
            return None
        product.quantity = 0
        return product

    def empty_cart(self) -> None:
        """Reset every cart member's quantity to 0."""
        for product in self.list_cart():
            product.quantity = 0

    def cart_total(self) -> Decimal:
        """Exact (unrounded) sum of price * quantity over the cart, in USD."""
        return sum((p.line_total for p in self.list_cart()), ZERO)

    def total_items(self) -> int:
        """Total number of units in the cart."""
        return sum(p.quantity for p in self.list_cart())

    def register_product(self, product_id, name, price, image) -> Product:
        """
        Append a new product to the catalog with quantity 0.

        Raises:
            StorefrontError: DUPLICATE_ID if the id is taken, INVALID_INPUT
                if the id is not a positive integer, name or image is blank,
                or price is missing, non-finite or negative
        """
        decimal_price = validate_product_fields(product_id, name, price, image)
        if self.find_product(product_id) is not None:
            raise StorefrontError(ErrorCode.DUPLICATE_ID, ERROR_DUPLICATE_PRODUCT_ID)

        product = Product(
            product_id=product_id,
            name=name.strip(),
            price=decimal_price,
            image=image.strip(),
        )
        self._products.append(product)
        logger.info(f"Registered product {product_id}: {sanitize_string_for_logging(product.name)}")
        return product

    def __len__(self) -> int:
        return len(self._products)
