"""Domain events for the Product aggregate."""

from protean.fields import Boolean, Float, Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Product")
class ProductStocked:
    """A product was added to the catalogue with its initial stock."""

    __version__ = 1

    product_id = Identifier(required=True)
    name = String(required=True)
    unit_price = Float(required=True)
    quantity_on_hand = Integer(required=True)
    expired = Boolean(default=False)
    requires_shipping = Boolean(default=True)
    weight_kg = Float(default=0.0)


@storefront.event(part_of="Product")
class StockReduced:
    """Units of a product left the shelf as part of a completed checkout."""

    __version__ = 1

    product_id = Identifier(required=True)
    quantity = Integer(required=True)
    previous_on_hand = Integer(required=True)
    new_on_hand = Integer(required=True)
