"""Console rendering of a shipment notice."""

from storefront.shipping.shipment import ShipmentNotice

HEADER = "** Shipment notice **"


def format_kilograms(weight_kg: float) -> str:
    return str(round(weight_kg, 6))


def render_notice(notice: ShipmentNotice) -> list[str]:
    lines = [HEADER]
    for group in notice.groups:
        lines.append(f"{group.count}x {group.product_name} {group.weight_grams}g")
    lines.append(f"Total package weight {format_kilograms(notice.total_weight_kg)}kg")
    return lines
