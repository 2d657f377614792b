"""Shipping fee policies.

Two pricing rules are supported and are deliberately kept separate because
they produce different totals for the same cart:

    per_unit      10 for every unit shipped (default)
    per_kilogram  10 for every kilogram shipped

The default comes from the ``SHIPPING_FEE_POLICY`` environment variable.
"""

import os
from enum import Enum

SHIPPING_RATE = 10.0


class ShippingFeePolicy(Enum):
    PER_UNIT = "per_unit"
    PER_KILOGRAM = "per_kilogram"


def default_policy() -> ShippingFeePolicy:
    return ShippingFeePolicy(os.getenv("SHIPPING_FEE_POLICY", ShippingFeePolicy.PER_UNIT.value))


def resolve_policy(policy=None) -> ShippingFeePolicy:
    """Accept a policy, its string value, or None for the configured default."""
    if policy is None or policy == "":
        return default_policy()
    if isinstance(policy, ShippingFeePolicy):
        return policy
    return ShippingFeePolicy(policy)


def shipping_fee(units, policy: ShippingFeePolicy) -> float:
    if policy is ShippingFeePolicy.PER_KILOGRAM:
        return SHIPPING_RATE * sum((unit.weight_kg for unit in units), 0.0)
    return SHIPPING_RATE * len(units)
