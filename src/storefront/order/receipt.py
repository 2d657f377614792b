"""Checkout receipt and its console rendering."""

from dataclasses import dataclass

from storefront.shipping.shipment import ShipmentNotice

HEADER = "** Checkout receipt **"
SEPARATOR = "----------------------"


def display_amount(amount: float) -> int:
    """Amounts are printed as whole units, truncated toward zero."""
    return int(amount)


@dataclass(frozen=True)
class ReceiptLine:
    quantity: int
    product_name: str
    line_total: float


@dataclass(frozen=True)
class Receipt:
    """Outcome of a completed checkout."""

    customer_id: str
    lines: tuple[ReceiptLine, ...]
    subtotal: float
    shipping_fee: float
    total: float
    balance_after: float
    shipment: ShipmentNotice | None = None


def render_receipt(receipt: Receipt) -> list[str]:
    lines = [HEADER]
    for line in receipt.lines:
        lines.append(f"{line.quantity}x {line.product_name} {display_amount(line.line_total)}")
    lines.append(SEPARATOR)
    lines.append(f"Subtotal {display_amount(receipt.subtotal)}")
    lines.append(f"Shipping {display_amount(receipt.shipping_fee)}")
    lines.append(f"Amount {display_amount(receipt.total)}")
    return lines
