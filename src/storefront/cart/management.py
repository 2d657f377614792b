"""Cart management — commands and handler for opening a cart and filling it."""

from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from storefront.cart.cart import Cart
from storefront.catalogue.product import Product
from storefront.domain import storefront


@storefront.command(part_of="Cart")
class CreateCart:
    """Open an empty cart, optionally on behalf of a known customer."""

    customer_id = Identifier()


@storefront.command(part_of="Cart")
class AddToCart:
    """Add a quantity of a catalogue product to a cart."""

    cart_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True)


@storefront.command_handler(part_of=Cart)
class ManageCartHandler:
    @handle(CreateCart)
    def create_cart(self, command):
        cart = Cart.create(customer_id=command.customer_id)
        current_domain.repository_for(Cart).add(cart)
        return str(cart.id)

    @handle(AddToCart)
    def add_to_cart(self, command):
        repo = current_domain.repository_for(Cart)
        cart = repo.get(command.cart_id)
        product = current_domain.repository_for(Product).get(command.product_id)

        cart.add_item(product, command.quantity)
        repo.add(cart)
