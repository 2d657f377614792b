"""Customer aggregate — the paying party and their spendable balance."""

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Float, String

from storefront.customer.events import BalanceDebited, CustomerRegistered
from storefront.domain import storefront
from storefront.errors import CheckoutError, ErrorKind


@storefront.aggregate
class Customer:
    """A shopper who pays for checkouts out of a prepaid balance.

    The balance never goes negative: ``pay`` refuses any amount the customer
    cannot afford, and the checkout workflow checks affordability before it
    commits anything.
    """

    name = String(required=True, max_length=255)
    balance = Float(default=0.0, min_value=0.0)

    @invariant.post
    def balance_cannot_be_negative(self):
        if self.balance is not None and self.balance < 0:
            raise ValidationError({"balance": ["Balance cannot be negative"]})

    @classmethod
    def register(cls, name, balance=0.0):
        customer = cls(name=name, balance=balance)
        customer.raise_(
            CustomerRegistered(
                customer_id=str(customer.id),
                name=name,
                opening_balance=balance,
            )
        )
        return customer

    def can_afford(self, amount):
        return self.balance >= amount

    def pay(self, amount):
        if not self.can_afford(amount):
            raise CheckoutError(ErrorKind.INSUFFICIENT_BALANCE)

        previous = self.balance
        self.balance = previous - amount

        self.raise_(
            BalanceDebited(
                customer_id=str(self.id),
                amount=amount,
                previous_balance=previous,
                new_balance=self.balance,
            )
        )
