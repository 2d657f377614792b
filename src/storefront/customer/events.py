"""Domain events for the Customer aggregate."""

from protean.fields import Float, Identifier, String

from storefront.domain import storefront


@storefront.event(part_of="Customer")
class CustomerRegistered:
    """A customer was registered with an opening balance."""

    __version__ = 1

    customer_id = Identifier(required=True)
    name = String(required=True)
    opening_balance = Float(required=True)


@storefront.event(part_of="Customer")
class BalanceDebited:
    """A checkout total was charged against the customer's balance."""

    __version__ = 1

    customer_id = Identifier(required=True)
    amount = Float(required=True)
    previous_balance = Float(required=True)
    new_balance = Float(required=True)
