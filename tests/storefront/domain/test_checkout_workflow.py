"""Tests for the checkout workflow."""

import pytest
from storefront.cart.events import CartCheckedOut
from storefront.errors import ErrorKind, Rejection
from storefront.order.receipt import Receipt, render_receipt
from storefront.order.workflow import CheckoutPlan, checkout, validate
from storefront.shipping.fees import ShippingFeePolicy


def _snapshot(customer, catalogue):
    return customer.balance, {pid: p.quantity_on_hand for pid, p in catalogue.items()}


class TestSuccessfulCheckout:
    def test_cheese_and_biscuits(self, customer, cart, cheese, biscuits, catalogue):
        cart.add_item(cheese, 2)
        cart.add_item(biscuits, 1)

        receipt = checkout(customer, cart, catalogue, policy=ShippingFeePolicy.PER_UNIT)

        assert isinstance(receipt, Receipt)
        assert receipt.subtotal == 350.0
        assert receipt.shipping_fee == 30.0
        assert receipt.total == 380.0
        assert receipt.balance_after == 620.0
        assert customer.balance == 620.0
        assert cheese.quantity_on_hand == 8
        assert biscuits.quantity_on_hand == 9

    def test_receipt_lines_follow_cart_order(self, customer, cart, cheese, biscuits, catalogue):
        cart.add_item(biscuits, 1)
        cart.add_item(cheese, 2)

        receipt = checkout(customer, cart, catalogue, policy=ShippingFeePolicy.PER_UNIT)

        assert [(line.quantity, line.product_name, line.line_total) for line in receipt.lines] == [
            (1, "Biscuits", 150.0),
            (2, "Cheese", 200.0),
        ]

    def test_shipment_notice(self, customer, cart, cheese, biscuits, catalogue):
        cart.add_item(cheese, 2)
        cart.add_item(biscuits, 1)

        receipt = checkout(customer, cart, catalogue, policy=ShippingFeePolicy.PER_UNIT)

        notice = receipt.shipment
        assert [(g.count, g.product_name, g.weight_grams) for g in notice.groups] == [
            (2, "Cheese", 400),
            (1, "Biscuits", 700),
        ]
        assert notice.total_weight_kg == pytest.approx(1.1)

    def test_non_shippable_only_has_no_notice_and_no_fee(self, customer, cart, scratch_card, catalogue):
        cart.add_item(scratch_card, 2)

        receipt = checkout(customer, cart, catalogue, policy=ShippingFeePolicy.PER_UNIT)

        assert receipt.shipment is None
        assert receipt.shipping_fee == 0.0
        assert receipt.total == 100.0
        assert scratch_card.quantity_on_hand == 3

    def test_mixed_cart_only_charges_shipping_for_shippable_units(
        self, customer, cart, cheese, scratch_card, catalogue
    ):
        cart.add_item(cheese, 1)
        cart.add_item(scratch_card, 3)

        receipt = checkout(customer, cart, catalogue, policy=ShippingFeePolicy.PER_UNIT)

        assert receipt.shipping_fee == 10.0
        assert receipt.shipment.unit_count == 1

    def test_per_kilogram_policy(self, customer, cart, cheese, biscuits, catalogue):
        cart.add_item(cheese, 2)
        cart.add_item(biscuits, 1)

        receipt = checkout(customer, cart, catalogue, policy=ShippingFeePolicy.PER_KILOGRAM)

        assert receipt.shipping_fee == pytest.approx(11.0)
        assert receipt.total == pytest.approx(361.0)
        assert customer.balance == pytest.approx(639.0)

    def test_balance_exactly_covers_total(self, cart, cheese):
        from storefront.customer.customer import Customer

        customer = Customer.register(name="Exact", balance=110.0)
        cart.add_item(cheese, 1)

        receipt = checkout(customer, cart, {str(cheese.id): cheese}, policy=ShippingFeePolicy.PER_UNIT)

        assert isinstance(receipt, Receipt)
        assert customer.balance == 0.0

    def test_records_checkout_on_cart(self, customer, cart, cheese, catalogue):
        cart.add_item(cheese, 1)
        cart._events.clear()

        checkout(customer, cart, catalogue, policy=ShippingFeePolicy.PER_UNIT)

        assert len(cart._events) == 1
        event = cart._events[0]
        assert isinstance(event, CartCheckedOut)
        assert event.total == 110.0

    def test_render_receipt(self, customer, cart, cheese, biscuits, catalogue):
        cart.add_item(cheese, 2)
        cart.add_item(biscuits, 1)

        receipt = checkout(customer, cart, catalogue, policy=ShippingFeePolicy.PER_UNIT)

        assert render_receipt(receipt) == [
            "** Checkout receipt **",
            "2x Cheese 200",
            "1x Biscuits 150",
            "----------------------",
            "Subtotal 350",
            "Shipping 30",
            "Amount 380",
        ]


class TestRejectedCheckout:
    def test_empty_cart(self, customer, cart, catalogue):
        outcome = checkout(customer, cart, catalogue)

        assert outcome == Rejection(ErrorKind.EMPTY_CART)
        assert str(outcome) == "Error: Cart is empty."
        assert customer.balance == 1000.0

    def test_expired_product(self, customer, cart, product_factory, biscuits):
        stale = product_factory("Cheese", expired=True)
        cart.add_item(biscuits, 1)
        cart.add_item(stale, 1)
        catalogue = {str(stale.id): stale, str(biscuits.id): biscuits}
        before = _snapshot(customer, catalogue)

        outcome = checkout(customer, cart, catalogue)

        assert outcome.kind == ErrorKind.EXPIRED_PRODUCT
        assert outcome.message == "Product Cheese is expired."
        assert _snapshot(customer, catalogue) == before

    def test_stock_sold_since_added(self, customer, cart, cheese, catalogue):
        cart.add_item(cheese, 5)
        cheese.reduce_stock(8)
        before = _snapshot(customer, catalogue)

        outcome = checkout(customer, cart, catalogue)

        assert outcome.kind == ErrorKind.OUT_OF_STOCK
        assert outcome.message == "Product Cheese is out of stock."
        assert _snapshot(customer, catalogue) == before

    def test_duplicate_lines_cannot_oversell(self, customer, cart, cheese, catalogue):
        cart.add_item(cheese, 6)
        cart.add_item(cheese, 6)
        before = _snapshot(customer, catalogue)

        outcome = checkout(customer, cart, catalogue)

        assert outcome == Rejection(ErrorKind.OUT_OF_STOCK, product_name="Cheese")
        assert _snapshot(customer, catalogue) == before

    def test_insufficient_balance(self, cart, cheese, biscuits, catalogue):
        from storefront.customer.customer import Customer

        customer = Customer.register(name="Short", balance=379.0)
        cart.add_item(cheese, 2)
        cart.add_item(biscuits, 1)
        before = _snapshot(customer, catalogue)

        outcome = checkout(customer, cart, catalogue, policy=ShippingFeePolicy.PER_UNIT)

        assert outcome == Rejection(ErrorKind.INSUFFICIENT_BALANCE)
        assert outcome.message == "Insufficient balance."
        assert _snapshot(customer, catalogue) == before

    def test_rejection_raises_no_events(self, cart, cheese, catalogue):
        from storefront.customer.customer import Customer

        customer = Customer.register(name="Short", balance=10.0)
        cart.add_item(cheese, 1)
        customer._events.clear()
        cheese._events.clear()
        cart._events.clear()

        checkout(customer, cart, catalogue)

        assert len(customer._events) == 0
        assert len(cheese._events) == 0
        assert len(cart._events) == 0

    def test_expiry_checked_before_stock(self, customer, cart, product_factory):
        stale = product_factory("Yoghurt", quantity_on_hand=3, expired=True)
        cart.add_item(stale, 3)
        stale.reduce_stock(3)

        outcome = checkout(customer, cart, {str(stale.id): stale})

        assert outcome.kind == ErrorKind.EXPIRED_PRODUCT

    def test_cart_cannot_be_checked_out_twice(self, customer, cart, cheese, catalogue):
        cart.add_item(cheese, 2)
        assert isinstance(checkout(customer, cart, catalogue, policy=ShippingFeePolicy.PER_UNIT), Receipt)
        customer._events.clear()
        cart._events.clear()

        outcome = checkout(customer, cart, catalogue, policy=ShippingFeePolicy.PER_UNIT)

        assert outcome == Rejection(ErrorKind.CART_CHECKED_OUT)
        assert str(outcome) == "Error: Cart has already been checked out."
        assert customer.balance == 780.0
        assert cheese.quantity_on_hand == 8
        assert len(customer._events) == 0
        assert len(cart._events) == 0

    def test_empty_cart_ignores_unknown_policy_setting(self, customer, cart, catalogue, monkeypatch):
        monkeypatch.setenv("SHIPPING_FEE_POLICY", "per_parcel")

        outcome = checkout(customer, cart, catalogue)

        assert outcome == Rejection(ErrorKind.EMPTY_CART)


class TestValidate:
    def test_validate_does_not_mutate(self, customer, cart, cheese, catalogue):
        cart.add_item(cheese, 2)

        plan = validate(customer, cart, catalogue, policy=ShippingFeePolicy.PER_UNIT)

        assert isinstance(plan, CheckoutPlan)
        assert plan.total == 220.0
        assert plan.stock_moves == ((str(cheese.id), 2),)
        assert len(plan.units) == 2
        assert customer.balance == 1000.0
        assert cheese.quantity_on_hand == 10
