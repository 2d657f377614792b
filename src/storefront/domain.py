"""Storefront bounded context — catalogue, cart, customer balance and checkout.

A single domain owns every aggregate touched by a checkout so that the
stock decrement and the balance debit commit in one unit of work.
"""

from protean.domain import Domain

from storefront.utils.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

storefront = Domain(name="storefront")
