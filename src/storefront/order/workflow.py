"""Checkout workflow — validate a cart, charge the customer, move stock.

The workflow runs as a single pass with one mutation boundary:

    0. already checked out  -> Rejection(CART_CHECKED_OUT)
    1. empty cart           -> Rejection(EMPTY_CART)
    2. expired product      -> Rejection(EXPIRED_PRODUCT)
    3. not enough on hand   -> Rejection(OUT_OF_STOCK)
    4-6. subtotal, shipping fee, total
    7. balance too low      -> Rejection(INSUFFICIENT_BALANCE)
    8. commit: debit the customer, reduce each product's stock
    9-10. shipment notice and receipt

Steps 1-7 only read. A rejected checkout leaves the customer and every
product exactly as it found them.
"""

from dataclasses import dataclass

from storefront.domain import logger
from storefront.errors import ErrorKind, Rejection
from storefront.order.receipt import Receipt, ReceiptLine
from storefront.shipping.fees import resolve_policy, shipping_fee
from storefront.shipping.shipment import ShippableUnit, build_notice, units_for


@dataclass(frozen=True)
class CheckoutPlan:
    """Everything a checkout will do, computed before anything changes."""

    lines: tuple[ReceiptLine, ...]
    stock_moves: tuple[tuple[str, int], ...]
    units: tuple[ShippableUnit, ...]
    subtotal: float
    shipping_fee: float
    total: float


def validate(customer, cart, products, policy=None) -> CheckoutPlan | Rejection:
    """Run the read-only checks and price the cart.

    ``products`` maps product id to the live Product aggregate each cart
    line refers to.
    """
    if cart.is_checked_out():
        return Rejection(ErrorKind.CART_CHECKED_OUT)
    if cart.is_empty():
        return Rejection(ErrorKind.EMPTY_CART)

    requested: dict[str, int] = {}
    receipt_lines = []
    stock_moves = []
    units: list[ShippableUnit] = []
    subtotal = 0.0

    for line in cart.lines:
        product = products[str(line.product_id)]
        if product.expired:
            return Rejection(ErrorKind.EXPIRED_PRODUCT, product_name=product.name)

        # Two lines for the same product draw on the same shelf.
        wanted = requested.get(str(product.id), 0) + line.quantity
        if not product.is_available(wanted):
            return Rejection(ErrorKind.OUT_OF_STOCK, product_name=product.name)
        requested[str(product.id)] = wanted

        subtotal += line.line_total
        receipt_lines.append(
            ReceiptLine(quantity=line.quantity, product_name=line.product_name, line_total=line.line_total)
        )
        stock_moves.append((str(product.id), line.quantity))

        if product.requires_shipping:
            units.extend(units_for(product.name, product.weight_kg, line.quantity))

    fee = shipping_fee(units, resolve_policy(policy))
    total = subtotal + fee

    if not customer.can_afford(total):
        return Rejection(ErrorKind.INSUFFICIENT_BALANCE)

    return CheckoutPlan(
        lines=tuple(receipt_lines),
        stock_moves=tuple(stock_moves),
        units=tuple(units),
        subtotal=subtotal,
        shipping_fee=fee,
        total=total,
    )


def commit(plan: CheckoutPlan, customer, cart, products) -> Receipt:
    """Apply a validated plan: the only step that mutates state."""
    customer.pay(plan.total)
    for product_id, quantity in plan.stock_moves:
        products[product_id].reduce_stock(quantity)

    cart.record_checkout(
        customer_id=customer.id,
        subtotal=plan.subtotal,
        shipping_fee=plan.shipping_fee,
        total=plan.total,
    )

    return Receipt(
        customer_id=str(customer.id),
        lines=plan.lines,
        subtotal=plan.subtotal,
        shipping_fee=plan.shipping_fee,
        total=plan.total,
        balance_after=customer.balance,
        shipment=build_notice(plan.units),
    )


def checkout(customer, cart, products, policy=None) -> Receipt | Rejection:
    outcome = validate(customer, cart, products, policy=policy)
    if isinstance(outcome, Rejection):
        logger.info(
            "Checkout rejected",
            cart_id=str(cart.id),
            customer_id=str(customer.id),
            kind=outcome.kind.value,
            product_name=outcome.product_name,
        )
        return outcome

    receipt = commit(outcome, customer, cart, products)
    logger.info(
        "Checkout completed",
        cart_id=str(cart.id),
        customer_id=str(customer.id),
        subtotal=receipt.subtotal,
        shipping_fee=receipt.shipping_fee,
        total=receipt.total,
        units_shipped=len(outcome.units),
    )
    return receipt
