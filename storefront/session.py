"""
Storefront session: the single object a presentation layer talks to.

Holds exactly one catalog/cart store, one payment reconciler and one
currency context for the lifetime of the process. Nothing raised inside
the core escapes these methods; failures come back as status values.
"""
from decimal import Decimal
from typing import List, Optional

from storefront.cart import (
    CartStore,
    CatalogStorage,
    JsonFileKeyValueStore,
    MemoryKeyValueStore,
    Product,
)
from storefront.config import get_default_currency, get_storage_dir, get_storage_key
from storefront.errors import StorefrontError
from storefront.logging import get_logger
from storefront.models import CardSettlement, CashSettlement, PaymentState, RegistrationResult
from storefront.services.currency import CurrencyService
from storefront.services.money import Number
from storefront.services.payments import PaymentReconciler

logger = get_logger(__name__)


class StorefrontSession:
    """Catalog, cart, payment state and display currency for one session."""

    def __init__(
        self,
        storage: Optional[CatalogStorage] = None,
        default_currency: Optional[str] = None,
    ):
        self.storage = storage or CatalogStorage(MemoryKeyValueStore())
        self.store = CartStore(self.storage.load_products())
        self.payments = PaymentReconciler(self.store)
        self.currency = CurrencyService(default_currency)
        logger.info(f"Session started with {len(self.store)} products")

    @classmethod
    def from_env(cls) -> "StorefrontSession":
        """Build a session from STOREFRONT_* environment variables."""
        storage_dir = get_storage_dir()
        backend = JsonFileKeyValueStore(storage_dir) if storage_dir else MemoryKeyValueStore()
        return cls(
            storage=CatalogStorage(backend, key=get_storage_key()),
            default_currency=get_default_currency(),
        )

    def reset(self) -> None:
        """Reload the catalog, clear payment state and restore the default currency."""
        self.store.load(self.storage.load_products())
        self.payments.clear_receipt()
        self.currency.reset()
        logger.info("Session reset")

    # ==================== CATALOG ====================

    def list_products(self) -> List[Product]:
        return self.store.list_products()

    def find_product(self, product_id: int) -> Optional[Product]:
        return self.store.find_product(product_id)

    def register_product(self, product_id, name, price, image) -> RegistrationResult:
        """Add a product to the catalog and mirror the catalog to storage."""
        try:
            product = self.store.register_product(product_id, name, price, image)
        except StorefrontError as e:
            logger.info(f"Product registration rejected: {e.code.value}")
            return RegistrationResult(ok=False, error=e.code, message=e.message)

        self.storage.save_products(self.store.list_products())
        return RegistrationResult(ok=True, product_id=product.product_id)

    # ==================== CART ====================

    def list_cart(self) -> List[Product]:
        return self.store.list_cart()

    def add_to_cart(self, product_id: int) -> Optional[Product]:
        return self.store.add_to_cart(product_id)

    def increase_quantity(self, product_id: int) -> Optional[Product]:
        return self.store.increase_quantity(product_id)

    def decrease_quantity(self, product_id: int) -> Optional[Product]:
        return self.store.decrease_quantity(product_id)

    def remove_from_cart(self, product_id: int) -> Optional[Product]:
        return self.store.remove_from_cart(product_id)

    def empty_cart(self) -> None:
        self.store.empty_cart()

    def cart_total(self) -> Decimal:
        return self.store.cart_total()

    # ==================== PAYMENTS ====================

    def settle_cash(self, amount: Number) -> CashSettlement:
        return self.payments.settle_cash(amount)

    def settle_card(self, card_number: str, expiry: str, cvv: str) -> CardSettlement:
        return self.payments.settle_card(card_number, expiry, cvv)

    def clear_receipt(self) -> None:
        self.payments.clear_receipt()

    @property
    def remaining_balance(self) -> Optional[Decimal]:
        return self.payments.remaining_balance

    @property
    def payment_state(self) -> PaymentState:
        return self.payments.state

    # ==================== CURRENCY ====================

    def switch_currency(self, code: str) -> bool:
        return self.currency.switch_currency(code)

    def convert(self, amount: Number) -> Decimal:
        return self.currency.convert(amount)

    def format(self, amount: Number) -> str:
        return self.currency.format(amount)

    def symbol(self) -> str:
        return self.currency.symbol()


# Singleton instance
_session: Optional[StorefrontSession] = None


def get_session() -> StorefrontSession:
    """Get the process-wide session (created on first use)."""
    global _session
    if _session is None:
        _session = StorefrontSession.from_env()
    return _session


def reset_session() -> None:
    """Tear down the process-wide session; the next get_session() starts fresh."""
    global _session
    _session = None
