"""Storefront demo checkout.

Stocks a small catalogue, registers a customer, fills a cart and checks it
out, printing the shipment notice and receipt (or the error that stopped
the checkout).

Usage:
    storefront                          # 2x Cheese + 1x Biscuits, balance 1000
    storefront --balance 100            # Error: Insufficient balance.
    storefront --expired-cheese         # Error: Product Cheese is expired.
    storefront --shipping-policy per_kilogram
"""

import argparse
import sys

from protean.exceptions import ValidationError

from storefront.errors import Rejection
from storefront.shipping.fees import ShippingFeePolicy


def run_demo(balance=1000.0, cheese=2, biscuits=1, expired_cheese=False, shipping_policy=None, out=None):
    """Run the demo checkout and write its console report to ``out``."""
    from storefront.cart.management import AddToCart, CreateCart
    from storefront.catalogue.stocking import StockProduct
    from storefront.customer.registration import RegisterCustomer
    from storefront.domain import storefront
    from storefront.order.placement import PlaceOrder
    from storefront.order.receipt import render_receipt
    from storefront.shipping.notice import render_notice

    out = out or sys.stdout

    with storefront.domain_context():
        cheese_id = storefront.process(
            StockProduct(name="Cheese", unit_price=100, quantity_on_hand=10, expired=expired_cheese, weight_kg=0.2),
            asynchronous=False,
        )
        biscuits_id = storefront.process(
            StockProduct(name="Biscuits", unit_price=150, quantity_on_hand=10, weight_kg=0.7),
            asynchronous=False,
        )
        customer_id = storefront.process(RegisterCustomer(name="Malak", balance=balance), asynchronous=False)
        cart_id = storefront.process(CreateCart(customer_id=customer_id), asynchronous=False)

        for product_id, quantity in ((cheese_id, cheese), (biscuits_id, biscuits)):
            if quantity == 0:
                continue
            try:
                storefront.process(
                    AddToCart(cart_id=cart_id, product_id=product_id, quantity=quantity),
                    asynchronous=False,
                )
            except ValidationError as exc:
                for messages in exc.messages.values():
                    for message in messages:
                        print(f"Error: {message}", file=out)

        outcome = storefront.process(
            PlaceOrder(cart_id=cart_id, customer_id=customer_id, shipping_policy=shipping_policy),
            asynchronous=False,
        )

    if isinstance(outcome, Rejection):
        print(outcome, file=out)
        return outcome

    if outcome.shipment is not None:
        print("\n".join(render_notice(outcome.shipment)), file=out)
        print(file=out)
    print("\n".join(render_receipt(outcome)), file=out)
    return outcome


def main(argv=None):
    parser = argparse.ArgumentParser(description="Storefront demo checkout")
    parser.add_argument("--balance", type=float, default=1000.0, help="Customer opening balance (default: 1000)")
    parser.add_argument("--cheese", type=int, default=2, help="Units of Cheese to put in the cart (default: 2)")
    parser.add_argument("--biscuits", type=int, default=1, help="Units of Biscuits to put in the cart (default: 1)")
    parser.add_argument("--expired-cheese", action="store_true", help="Stock the Cheese as expired")
    parser.add_argument(
        "--shipping-policy",
        choices=[policy.value for policy in ShippingFeePolicy],
        default=None,
        help="Shipping fee rule (default: SHIPPING_FEE_POLICY or per_unit)",
    )

    args = parser.parse_args(argv)

    from storefront.domain import storefront

    storefront.init()
    outcome = run_demo(
        balance=args.balance,
        cheese=args.cheese,
        biscuits=args.biscuits,
        expired_cheese=args.expired_cheese,
        shipping_policy=args.shipping_policy,
    )
    return 1 if isinstance(outcome, Rejection) else 0


if __name__ == "__main__":
    sys.exit(main())
