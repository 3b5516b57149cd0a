"""Order line item value object."""

from dataclasses import dataclass, field
from typing import Any

from storefront.domain.value_objects.money import CEDI


@dataclass(frozen=True)
class OrderItem:
    """
    A single cart line.

    Attributes:
        title: Product title
        qty: Quantity ordered
        price: Display price as shown in the cart
        extra: Additional cart fields (image, id, ...) kept verbatim
    """

    title: str = ""
    qty: int = 1
    price: str = ""
    extra: dict = field(default_factory=dict, compare=False)

    def __post_init__(self) -> None:
        """Validate quantity."""
        if self.qty < 0:
            raise ValueError("Quantity cannot be negative")

    @classmethod
    def from_dict(cls, data: Any) -> "OrderItem":
        """Build an item from a cart entry; ``name`` is accepted for ``title``."""
        if not isinstance(data, dict):
            return cls(title=str(data or ""))
        try:
            qty = int(data.get("qty") or 1)
        except (TypeError, ValueError):
            qty = 1
        price = data.get("price")
        extra = {
            key: value
            for key, value in data.items()
            if key not in ("title", "name", "qty", "price")
        }
        return cls(
            title=str(data.get("title") or data.get("name") or "").strip(),
            qty=max(qty, 0),
            price="" if price is None else str(price).strip(),
            extra=extra,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the stored JSON shape."""
        return {**self.extra, "title": self.title, "qty": self.qty, "price": self.price}

    @property
    def display_price(self) -> str:
        """Price with a leading dollar sign replaced by the cedi sign."""
        if self.price.startswith("$"):
            return CEDI + self.price[1:].lstrip()
        return self.price

    def __str__(self) -> str:
        return f"{self.qty} x {self.title}"
