"""Domain Enums - Constant values used across the domain."""

from .order_status import OrderStatus
from .order_source import OrderSource
from .payment_method import PaymentMethod

__all__ = ["OrderStatus", "OrderSource", "PaymentMethod"]
