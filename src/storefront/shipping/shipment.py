"""Shipment aggregation — groups individual shippable units into a package summary.

Units are grouped by product name in the order each name is first seen, so
the notice lists products in the same order as the cart. Every unit of a
given name is assumed to weigh the same; the first occurrence sets the
unit weight of its group.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ShippableUnit:
    """One physical unit of a product that has to be shipped."""

    name: str
    weight_kg: float


@dataclass(frozen=True)
class ShipmentGroup:
    product_name: str
    unit_weight_kg: float
    count: int

    @property
    def weight_kg(self) -> float:
        return self.unit_weight_kg * self.count

    @property
    def weight_grams(self) -> int:
        return int(self.weight_kg * 1000)


@dataclass(frozen=True)
class ShipmentNotice:
    groups: tuple[ShipmentGroup, ...]
    total_weight_kg: float

    @property
    def unit_count(self) -> int:
        return sum(group.count for group in self.groups)


def units_for(name: str, weight_kg: float, quantity: int) -> list[ShippableUnit]:
    """Expand a cart line into one unit per item shipped."""
    return [ShippableUnit(name=name, weight_kg=weight_kg) for _ in range(quantity)]


def aggregate(units) -> list[ShipmentGroup]:
    counts: dict[str, int] = {}
    weights: dict[str, float] = {}
    for unit in units:
        if unit.name not in counts:
            counts[unit.name] = 0
            weights[unit.name] = unit.weight_kg
        counts[unit.name] += 1

    return [ShipmentGroup(product_name=name, unit_weight_kg=weights[name], count=count) for name, count in counts.items()]


def total_weight(units) -> float:
    return sum((unit.weight_kg for unit in units), 0.0)


def build_notice(units) -> ShipmentNotice | None:
    """Summarise ``units`` as a shipment notice, or None when nothing ships."""
    units = list(units)
    if not units:
        return None
    return ShipmentNotice(groups=tuple(aggregate(units)), total_weight_kg=total_weight(units))
