"""
Tests for the catalog & cart store
"""

import random
from decimal import Decimal

import pytest

from storefront.cart import CartStore, Product, default_catalog
from storefront.errors import ErrorCode, StorefrontError


def assert_consistent(store: CartStore):
    """A product is in the cart iff its quantity is positive, and never negative."""
    cart_ids = {p.product_id for p in store.list_cart()}
    for product in store.list_products():
        assert product.quantity >= 0
        assert (product.product_id in cart_ids) == (product.quantity > 0)


class TestProduct:
    """Tests for Product dataclass."""

    def test_price_is_decimal(self):
        """Float prices are converted via their string form."""
        product = Product(product_id=1, name="Cherry", price=2.99, image="cherry.jpg")

        assert product.price == Decimal("2.99")
        assert product.quantity == 0
        assert not product.in_cart

    def test_line_total(self, sample_product):
        sample_product.quantity = 3

        assert sample_product.line_total == Decimal("12.75")

    def test_to_dict(self, sample_product):
        data = sample_product.to_dict()

        assert data["productId"] == 42
        assert data["price"] == "4.25"
        assert data["quantity"] == 0

    def test_from_dict_ignores_quantity(self):
        """Cart quantities are not restored from storage."""
        product = Product.from_dict({
            "productId": 7,
            "name": "Kiwi",
            "price": 0.99,
            "image": "kiwi.jpg",
            "quantity": 5,
        })

        assert product.product_id == 7
        assert product.price == Decimal("0.99")
        assert product.quantity == 0

    @pytest.mark.parametrize("record", [
        {"productId": -4, "name": "", "price": "abc", "image": "a"},
        {"productId": "7", "name": "Kiwi", "price": 0.99, "image": "kiwi.jpg"},
        {"productId": 7, "name": "Kiwi", "price": "-0.01", "image": "kiwi.jpg"},
        {"productId": 7, "name": "Kiwi", "price": "Infinity", "image": "kiwi.jpg"},
        {"productId": 7, "name": "Kiwi", "price": 0.99, "image": "   "},
    ])
    def test_from_dict_rejects_invalid_record(self, record):
        with pytest.raises(ValueError):
            Product.from_dict(record)

    def test_from_dict_missing_field(self):
        with pytest.raises(KeyError):
            Product.from_dict({"productId": 7, "name": "Kiwi", "image": "kiwi.jpg"})


class TestCartMutations:
    """Tests for add/increase/decrease/remove/empty."""

    def test_add_to_cart(self, store):
        product = store.add_to_cart(1)

        assert product.quantity == 1
        assert [p.product_id for p in store.list_cart()] == [1]

    def test_add_twice_keeps_single_entry(self, store):
        store.add_to_cart(1)
        store.add_to_cart(1)

        cart = store.list_cart()
        assert len(cart) == 1
        assert cart[0].quantity == 2

    def test_increase_is_add(self, store):
        """Both names refer to the same operation."""
        assert CartStore.increase_quantity is CartStore.add_to_cart

        store.increase_quantity(2)
        assert store.find_product(2).quantity == 1
        assert store.list_cart()[0].product_id == 2

    def test_cart_holds_references(self, store):
        store.add_to_cart(3)

        assert store.list_cart()[0] is store.find_product(3)

    def test_list_products_is_snapshot(self, store):
        snapshot = store.list_products()
        snapshot[0].quantity = 99

        assert store.find_product(1).quantity == 0
        assert store.list_cart() == []

    def test_unknown_id_is_noop(self, store, caplog):
        """Unknown ids return None, log, and change nothing."""
        before = [p.to_dict() for p in store.list_products()]

        assert store.add_to_cart(999) is None
        assert store.increase_quantity(999) is None
        assert store.decrease_quantity(999) is None
        assert store.remove_from_cart(999) is None

        assert [p.to_dict() for p in store.list_products()] == before
        assert "Product with ID 999 not found" in caplog.text

    def test_decrease_to_zero_removes(self, store):
        store.add_to_cart(1)
        store.add_to_cart(1)

        store.decrease_quantity(1)
        assert store.find_product(1).quantity == 1
        assert len(store.list_cart()) == 1

        store.decrease_quantity(1)
        assert store.find_product(1).quantity == 0
        assert store.list_cart() == []

    def test_decrease_never_negative(self, store):
        product = store.decrease_quantity(1)

        assert product.quantity == 0
        assert store.list_cart() == []

    def test_remove_regardless_of_quantity(self, store):
        for _ in range(5):
            store.add_to_cart(2)

        store.remove_from_cart(2)

        assert store.find_product(2).quantity == 0
        assert store.list_cart() == []

    def test_empty_cart(self, store):
        store.add_to_cart(1)
        store.add_to_cart(2)
        store.add_to_cart(2)

        store.empty_cart()

        assert store.list_cart() == []
        assert all(p.quantity == 0 for p in store.list_products())

    def test_empty_cart_when_already_empty(self, store):
        store.empty_cart()

        assert store.list_cart() == []

    def test_add_repairs_negative_quantity(self, store):
        store.find_product(1).quantity = -3

        store.add_to_cart(1)

        assert store.find_product(1).quantity == 1

    def test_random_sequences_keep_invariant(self, store):
        """Cart membership always follows quantity."""
        rng = random.Random(1234)
        operations = [
            store.add_to_cart,
            store.increase_quantity,
            store.decrease_quantity,
            store.remove_from_cart,
        ]
        for _ in range(500):
            operation = rng.choice(operations)
            operation(rng.choice([1, 2, 3, 4]))
            assert_consistent(store)
            if rng.random() < 0.02:
                store.empty_cart()
                assert store.list_cart() == []
                assert_consistent(store)


class TestCartTotal:
    """Tests for cart_total."""

    def test_empty_total(self, store):
        assert store.cart_total() == 0
        assert isinstance(store.cart_total(), Decimal)

    def test_total_is_exact_sum(self, store):
        store.add_to_cart(1)  # 2.99
        store.add_to_cart(1)  # 2.99
        store.add_to_cart(3)  # 3.49

        assert store.cart_total() == Decimal("9.47")
        assert store.total_items() == 3

    def test_total_is_not_rounded(self):
        store = CartStore([Product(product_id=1, name="Bolt", price="0.005", image="bolt.png")])
        for _ in range(3):
            store.add_to_cart(1)

        assert store.cart_total() == Decimal("0.015")

    def test_total_independent_of_add_order(self):
        first = CartStore(default_catalog())
        second = CartStore(default_catalog())
        for product_id in (1, 2, 3, 2):
            first.add_to_cart(product_id)
        for product_id in (2, 3, 2, 1):
            second.add_to_cart(product_id)

        assert first.cart_total() == second.cart_total() == Decimal("10.46")


class TestRegisterProduct:
    """Tests for register_product."""

    def test_register(self, store):
        product = store.register_product(4, "Banana", 0.59, "banana.jpg")

        assert product.quantity == 0
        assert product.price == Decimal("0.59")
        assert len(store) == 4
        assert store.find_product(4) is product

    def test_duplicate_id(self, store):
        with pytest.raises(StorefrontError) as exc_info:
            store.register_product(1, "Another Cherry", 1.0, "x.jpg")

        assert exc_info.value.code == ErrorCode.DUPLICATE_ID
        assert len(store) == 3

    @pytest.mark.parametrize("product_id, name, price, image", [
        (0, "Banana", 1.0, "banana.jpg"),
        (-1, "Banana", 1.0, "banana.jpg"),
        (None, "Banana", 1.0, "banana.jpg"),
        ("5", "Banana", 1.0, "banana.jpg"),
        (True, "Banana", 1.0, "banana.jpg"),
        (5, "", 1.0, "banana.jpg"),
        (5, "   ", 1.0, "banana.jpg"),
        (5, None, 1.0, "banana.jpg"),
        (5, "Banana", None, "banana.jpg"),
        (5, "Banana", float("nan"), "banana.jpg"),
        (5, "Banana", float("inf"), "banana.jpg"),
        (5, "Banana", "abc", "banana.jpg"),
        (5, "Banana", -0.5, "banana.jpg"),
        (5, "Banana", 1.0, ""),
        (5, "Banana", 1.0, None),
    ])
    def test_invalid_input(self, store, product_id, name, price, image):
        with pytest.raises(StorefrontError) as exc_info:
            store.register_product(product_id, name, price, image)

        assert exc_info.value.code == ErrorCode.INVALID_INPUT
        assert len(store) == 3

    def test_free_product_allowed(self, store):
        product = store.register_product(9, "Sample", 0, "sample.jpg")

        assert product.price == 0


class TestLoad:
    """Tests for replacing the catalog."""

    def test_load_resets_quantities(self, store):
        products = default_catalog()
        products[0].quantity = 4

        store.load(products)

        assert store.list_cart() == []

    def test_load_drops_duplicate_ids(self, store):
        products = default_catalog() + [
            Product(product_id=1, name="Duplicate", price="1.00", image="dup.jpg"),
        ]

        store.load(products)

        assert len(store) == 3
        assert store.find_product(1).name == "Cherry"
