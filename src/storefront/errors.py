"""Checkout failure taxonomy.

Aggregate guards raise ``CheckoutError`` (a Protean ``ValidationError``)
when a mutation would break an invariant. The checkout workflow never
raises for a business failure; it returns a ``Rejection`` instead.
"""

from dataclasses import dataclass
from enum import Enum

from protean.exceptions import ValidationError


class ErrorKind(Enum):
    INVALID_QUANTITY = "invalid_quantity"
    INSUFFICIENT_STOCK = "insufficient_stock"
    EXPIRED_PRODUCT = "expired_product"
    OUT_OF_STOCK = "out_of_stock"
    EMPTY_CART = "empty_cart"
    INSUFFICIENT_BALANCE = "insufficient_balance"
    CART_CHECKED_OUT = "cart_checked_out"


_MESSAGES = {
    ErrorKind.INVALID_QUANTITY: "Quantity must be positive.",
    ErrorKind.INSUFFICIENT_STOCK: "Quantity exceeds available stock.",
    ErrorKind.EXPIRED_PRODUCT: "Product {name} is expired.",
    ErrorKind.OUT_OF_STOCK: "Product {name} is out of stock.",
    ErrorKind.EMPTY_CART: "Cart is empty.",
    ErrorKind.INSUFFICIENT_BALANCE: "Insufficient balance.",
    ErrorKind.CART_CHECKED_OUT: "Cart has already been checked out.",
}


def message_for(kind: ErrorKind, product_name: str | None = None) -> str:
    return _MESSAGES[kind].format(name=product_name)


@dataclass(frozen=True)
class Rejection:
    """Outcome of a checkout that failed validation. Nothing was mutated."""

    kind: ErrorKind
    product_name: str | None = None

    @property
    def message(self) -> str:
        return message_for(self.kind, self.product_name)

    def __str__(self) -> str:
        return f"Error: {self.message}"


class CheckoutError(ValidationError):
    """Raised by an aggregate when a requested change violates its invariants."""

    def __init__(self, kind: ErrorKind, product_name: str | None = None):
        self.kind = kind
        self.product_name = product_name
        super().__init__({kind.value: [message_for(kind, product_name)]})

    @property
    def message(self) -> str:
        return message_for(self.kind, self.product_name)
