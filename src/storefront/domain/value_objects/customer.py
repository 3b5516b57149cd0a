"""Customer value object attached to orders."""

from dataclasses import dataclass, field
from typing import Any, Optional


_FIELDS = ("name", "email", "phone", "addr1", "addr2", "city", "zip", "country")


@dataclass(frozen=True)
class Customer:
    """
    Immutable value object describing who placed an order.

    Attributes:
        name: Customer display name
        email: Contact email (receipt recipient)
        phone: Phone number used for SMS updates
        addr1, addr2, city, zip, country: Shipping address
        extra: Any additional fields the checkout sent, kept verbatim
    """

    name: str = ""
    email: str = ""
    phone: str = ""
    addr1: str = ""
    addr2: str = ""
    city: str = ""
    zip: str = ""
    country: str = ""
    extra: dict = field(default_factory=dict, compare=False)

    @classmethod
    def from_dict(cls, data: Optional[dict[str, Any]]) -> "Customer":
        """Build a customer from a loosely shaped JSON object."""
        if not isinstance(data, dict):
            return cls()
        known = {
            key: str(data.get(key) or "").strip()
            for key in _FIELDS
        }
        extra = {key: value for key, value in data.items() if key not in _FIELDS}
        return cls(**known, extra=extra)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the stored JSON shape."""
        data = dict(self.extra)
        data.update({key: getattr(self, key) for key in _FIELDS})
        return data

    def merged_with(self, other: "Customer") -> "Customer":
        """Return a customer taking ``other``'s non-empty fields over ours."""
        values = {
            key: getattr(other, key) or getattr(self, key)
            for key in _FIELDS
        }
        extra = {**self.extra, **other.extra}
        return Customer(**values, extra=extra)

    @property
    def shipping_address(self) -> str:
        street = f"{self.addr1} {self.addr2}".strip()
        locality = f"{self.city} {self.zip}".strip()
        return ", ".join(part for part in (street, locality, self.country) if part)

    def __str__(self) -> str:
        if self.name and self.email:
            return f"{self.name} <{self.email}>"
        return self.name or self.email or "customer"
