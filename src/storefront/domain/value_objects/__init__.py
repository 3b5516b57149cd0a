"""Domain Value Objects - Immutable objects without identity."""

from .money import CEDI, format_cedi, to_minor_units, from_minor_units, display_value
from .customer import Customer
from .order_item import OrderItem
from .request_meta import RequestMeta

__all__ = [
    "CEDI",
    "format_cedi",
    "to_minor_units",
    "from_minor_units",
    "display_value",
    "Customer",
    "OrderItem",
    "RequestMeta",
]
