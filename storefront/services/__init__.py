"""
Storefront services: money helpers, currency conversion, payment reconciliation.

Imports are lazy: money is imported by the cart models, while payments
depends on the cart package.
"""

__all__ = [
    "CurrencyService",
    "PaymentReconciler",
]


def __getattr__(name):
    """Lazy attribute access to avoid import cycles with storefront.cart."""
    if name == "CurrencyService":
        from storefront.services.currency import CurrencyService
        return CurrencyService
    elif name == "PaymentReconciler":
        from storefront.services.payments import PaymentReconciler
        return PaymentReconciler
    raise AttributeError(f"module 'storefront.services' has no attribute '{name}'")
