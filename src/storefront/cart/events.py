"""Domain events for the Cart aggregate."""

from protean.fields import Float, Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Cart")
class CartCreated:
    """An empty cart was opened."""

    __version__ = 1

    cart_id = Identifier(required=True)
    customer_id = Identifier()


@storefront.event(part_of="Cart")
class CartLineAdded:
    """A product and quantity were appended to the cart."""

    __version__ = 1

    cart_id = Identifier(required=True)
    line_id = Identifier(required=True)
    product_id = Identifier(required=True)
    product_name = String(required=True)
    quantity = Integer(required=True)
    unit_price = Float(required=True)


@storefront.event(part_of="Cart")
class CartCheckedOut:
    """The cart's contents were paid for and taken out of stock."""

    __version__ = 1

    cart_id = Identifier(required=True)
    customer_id = Identifier(required=True)
    subtotal = Float(required=True)
    shipping_fee = Float(required=True)
    total = Float(required=True)
