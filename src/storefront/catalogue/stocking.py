"""Catalogue setup — command and handler for stocking a product."""

from protean import handle
from protean.fields import Boolean, Float, Integer, String
from protean.utils.globals import current_domain

from storefront.catalogue.product import Product
from storefront.domain import storefront


@storefront.command(part_of="Product")
class StockProduct:
    """Add a product to the catalogue with its initial quantity on hand."""

    name = String(required=True, max_length=255)
    unit_price = Float(required=True, min_value=0.0)
    quantity_on_hand = Integer(required=True, min_value=0)
    expired = Boolean(default=False)
    requires_shipping = Boolean(default=True)
    weight_kg = Float(default=0.0, min_value=0.0)


@storefront.command_handler(part_of=Product)
class StockProductHandler:
    @handle(StockProduct)
    def stock_product(self, command):
        product = Product.stock(
            name=command.name,
            unit_price=command.unit_price,
            quantity_on_hand=command.quantity_on_hand,
            expired=command.expired,
            requires_shipping=command.requires_shipping,
            weight_kg=command.weight_kg,
        )
        current_domain.repository_for(Product).add(product)
        return str(product.id)
