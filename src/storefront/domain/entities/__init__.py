"""Domain Entities - Records persisted by the storefront."""

from .contact_message import ContactMessage
from .order import Order
from .customer_profile import CustomerProfile

__all__ = ["ContactMessage", "Order", "CustomerProfile"]
