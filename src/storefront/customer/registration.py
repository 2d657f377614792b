"""Customer registration — command and handler."""

from protean import handle
from protean.fields import Float, String
from protean.utils.globals import current_domain

from storefront.customer.customer import Customer
from storefront.domain import storefront


@storefront.command(part_of="Customer")
class RegisterCustomer:
    """Register a customer with an opening balance."""

    name = String(required=True, max_length=255)
    balance = Float(default=0.0, min_value=0.0)


@storefront.command_handler(part_of=Customer)
class RegisterCustomerHandler:
    @handle(RegisterCustomer)
    def register_customer(self, command):
        customer = Customer.register(name=command.name, balance=command.balance or 0.0)
        current_domain.repository_for(Customer).add(customer)
        return str(customer.id)
