"""Product aggregate — a catalogue entry with stock, expiry and shipping data.

Perishable and non-perishable goods share one shape: ``expired`` and
``requires_shipping`` are plain flags rather than subclasses, and the
shipping weight lives on the product itself.
"""

from protean.fields import Boolean, Float, Integer, String

from storefront.catalogue.events import ProductStocked, StockReduced
from storefront.domain import storefront
from storefront.errors import CheckoutError, ErrorKind


@storefront.aggregate
class Product:
    name = String(required=True, max_length=255)
    unit_price = Float(required=True, min_value=0.0)
    quantity_on_hand = Integer(default=0, min_value=0)
    expired = Boolean(default=False)
    requires_shipping = Boolean(default=True)
    weight_kg = Float(default=0.0, min_value=0.0)

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def stock(cls, name, unit_price, quantity_on_hand, expired=False, requires_shipping=True, weight_kg=0.0):
        product = cls(
            name=name,
            unit_price=unit_price,
            quantity_on_hand=quantity_on_hand,
            expired=expired,
            requires_shipping=requires_shipping,
            weight_kg=weight_kg,
        )
        product.raise_(
            ProductStocked(
                product_id=str(product.id),
                name=name,
                unit_price=unit_price,
                quantity_on_hand=quantity_on_hand,
                expired=expired,
                requires_shipping=requires_shipping,
                weight_kg=weight_kg,
            )
        )
        return product

    # -------------------------------------------------------------------
    # Stock
    # -------------------------------------------------------------------
    def is_available(self, quantity):
        return self.quantity_on_hand >= quantity

    def reduce_stock(self, quantity):
        """Take units off the shelf. Only a committed checkout calls this."""
        if quantity <= 0:
            raise CheckoutError(ErrorKind.INVALID_QUANTITY)
        if not self.is_available(quantity):
            raise CheckoutError(ErrorKind.OUT_OF_STOCK, product_name=self.name)

        previous = self.quantity_on_hand
        self.quantity_on_hand = previous - quantity

        self.raise_(
            StockReduced(
                product_id=str(self.id),
                quantity=quantity,
                previous_on_hand=previous,
                new_on_hand=self.quantity_on_hand,
            )
        )
