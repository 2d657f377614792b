"""Cart aggregate — the ordered list of products a customer intends to buy.

Lines keep insertion order, which is also the order of the receipt. Adding
a line checks the requested quantity against the product's current stock
but does not reserve it; stock only moves when a checkout commits. A cart
is checked out at most once; after that it accepts no more lines.
"""

from enum import Enum

from protean.fields import Float, HasMany, Identifier, Integer, String

from storefront.cart.events import CartCheckedOut, CartCreated, CartLineAdded
from storefront.domain import storefront
from storefront.errors import CheckoutError, ErrorKind


class CartStatus(Enum):
    OPEN = "Open"
    CHECKED_OUT = "Checked_Out"


@storefront.entity(part_of="Cart")
class CartLine:
    """One product in the cart with the quantity requested.

    Name and unit price are captured when the line is added; expiry and
    stock are always read from the live product at checkout.
    """

    product_id = Identifier(required=True)
    product_name = String(required=True, max_length=255)
    unit_price = Float(required=True, min_value=0.0)
    quantity = Integer(required=True, min_value=1)

    @property
    def line_total(self):
        return self.unit_price * self.quantity


@storefront.aggregate
class Cart:
    customer_id = Identifier()
    lines = HasMany(CartLine)
    status = String(choices=CartStatus, default=CartStatus.OPEN.value)

    @classmethod
    def create(cls, customer_id=None):
        cart = cls(customer_id=customer_id, status=CartStatus.OPEN.value)
        cart.raise_(
            CartCreated(
                cart_id=str(cart.id),
                customer_id=str(customer_id) if customer_id else None,
            )
        )
        return cart

    def add_item(self, product, quantity):
        """Append ``quantity`` units of ``product`` if the shelf holds that many."""
        if self.is_checked_out():
            raise CheckoutError(ErrorKind.CART_CHECKED_OUT)
        if quantity is None or quantity <= 0:
            raise CheckoutError(ErrorKind.INVALID_QUANTITY)
        if quantity > product.quantity_on_hand:
            raise CheckoutError(ErrorKind.INSUFFICIENT_STOCK, product_name=product.name)

        line = CartLine(
            product_id=str(product.id),
            product_name=product.name,
            unit_price=product.unit_price,
            quantity=quantity,
        )
        self.add_lines(line)

        self.raise_(
            CartLineAdded(
                cart_id=str(self.id),
                line_id=str(line.id),
                product_id=str(product.id),
                product_name=product.name,
                quantity=quantity,
                unit_price=product.unit_price,
            )
        )

    def is_empty(self):
        return not self.lines

    def is_checked_out(self):
        return CartStatus(self.status) == CartStatus.CHECKED_OUT

    def record_checkout(self, customer_id, subtotal, shipping_fee, total):
        if self.is_checked_out():
            raise CheckoutError(ErrorKind.CART_CHECKED_OUT)

        self.status = CartStatus.CHECKED_OUT.value
        self.raise_(
            CartCheckedOut(
                cart_id=str(self.id),
                customer_id=str(customer_id),
                subtotal=subtotal,
                shipping_fee=shipping_fee,
                total=total,
            )
        )
