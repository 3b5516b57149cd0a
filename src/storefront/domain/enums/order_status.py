"""Order lifecycle states."""

from enum import Enum
from typing import Optional


class OrderStatus(str, Enum):
    """Status of an order record."""

    PENDING = "pending"
    PROCESSING = "processing"
    PAID = "paid"

    @classmethod
    def parse(cls, value, default: Optional["OrderStatus"] = None) -> "OrderStatus":
        """Parse a stored or submitted status, falling back to ``default``."""
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return default or cls.PENDING

    def __str__(self) -> str:
        return self.value
