"""Shared fixtures for the storefront domain."""

import pytest
from storefront.cart.cart import Cart
from storefront.catalogue.product import Product
from storefront.customer.customer import Customer


def make_product(name="Cheese", unit_price=100.0, quantity_on_hand=10, expired=False, requires_shipping=True, weight_kg=0.2):
    return Product.stock(
        name=name,
        unit_price=unit_price,
        quantity_on_hand=quantity_on_hand,
        expired=expired,
        requires_shipping=requires_shipping,
        weight_kg=weight_kg,
    )


@pytest.fixture()
def cheese():
    return make_product("Cheese", unit_price=100.0, quantity_on_hand=10, weight_kg=0.2)


@pytest.fixture()
def biscuits():
    return make_product("Biscuits", unit_price=150.0, quantity_on_hand=10, weight_kg=0.7)


@pytest.fixture()
def scratch_card():
    return make_product("Scratch Card", unit_price=50.0, quantity_on_hand=5, requires_shipping=False, weight_kg=0.0)


@pytest.fixture()
def customer():
    return Customer.register(name="Malak", balance=1000.0)


@pytest.fixture()
def cart():
    return Cart.create(customer_id="cust-001")


@pytest.fixture()
def catalogue(cheese, biscuits, scratch_card):
    return {str(p.id): p for p in (cheese, biscuits, scratch_card)}


@pytest.fixture()
def product_factory():
    return make_product
