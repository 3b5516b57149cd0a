"""Where an order record came from."""

from enum import Enum


class OrderSource(str, Enum):
    """Intake path that wrote the order."""

    SEND_ORDER = "send-order"
    VERIFY_PAYMENT = "verify-payment"
    PAYSTACK_WEBHOOK = "paystack-webhook"

    def __str__(self) -> str:
        return self.value
