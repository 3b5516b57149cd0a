"""Payment methods offered at checkout."""

from enum import Enum


class PaymentMethod(str, Enum):
    """Checkout payment method and the gateway channels it maps to."""

    CARD = "card"
    MOMO = "momo"

    @classmethod
    def parse(cls, value) -> "PaymentMethod":
        """Anything other than mobile money is charged as a card payment."""
        if str(value or "").strip().lower() == cls.MOMO.value:
            return cls.MOMO
        return cls.CARD

    @property
    def channels(self) -> list[str]:
        if self is PaymentMethod.MOMO:
            return ["mobile_money"]
        return ["card"]

    def __str__(self) -> str:
        return self.value
