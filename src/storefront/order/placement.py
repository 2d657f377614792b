"""Order placement — command and handler that run a checkout against the repositories."""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from storefront.cart.cart import Cart
from storefront.catalogue.product import Product
from storefront.customer.customer import Customer
from storefront.domain import storefront
from storefront.errors import Rejection
from storefront.order.workflow import checkout
from storefront.shipping.fees import ShippingFeePolicy
from storefront.utils.logging import bind_checkout_context, clear_checkout_context


@storefront.command(part_of="Cart")
class PlaceOrder:
    """Check out a cart on behalf of a customer.

    Returns a Receipt when the checkout completes and a Rejection when it
    fails validation.
    """

    cart_id = Identifier(required=True)
    customer_id = Identifier(required=True)
    shipping_policy = String(choices=ShippingFeePolicy)  # Falls back to SHIPPING_FEE_POLICY


@storefront.command_handler(part_of=Cart)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        bind_checkout_context(cart_id=str(command.cart_id), customer_id=str(command.customer_id))
        try:
            cart_repo = current_domain.repository_for(Cart)
            customer_repo = current_domain.repository_for(Customer)
            product_repo = current_domain.repository_for(Product)

            cart = cart_repo.get(command.cart_id)
            customer = customer_repo.get(command.customer_id)
            products = {}
            for line in cart.lines:
                product_id = str(line.product_id)
                if product_id not in products:
                    products[product_id] = product_repo.get(product_id)

            outcome = checkout(customer, cart, products, policy=command.shipping_policy)
            if isinstance(outcome, Rejection):
                return outcome

            customer_repo.add(customer)
            for product in products.values():
                product_repo.add(product)
            cart_repo.add(cart)
            return outcome
        finally:
            clear_checkout_context()
