"""Customer profile snapshot captured at sign in."""

from dataclasses import dataclass, field
from typing import Any

from storefront.domain.clock import utc_now_iso
from storefront.domain.value_objects import RequestMeta


@dataclass
class CustomerProfile:
    """Snapshot of a shopper's details and cart at the time they signed in."""

    email: str
    name: str = ""
    phone: str = ""
    address: str = ""
    cart_snapshot: dict = field(default_factory=dict)
    login_at: str = field(default_factory=utc_now_iso)
    meta: RequestMeta = field(default_factory=RequestMeta)

    def __post_init__(self) -> None:
        """Normalize and validate the email."""
        self.email = (self.email or "").strip().lower()
        if not self.email:
            raise ValueError("Email is required")

    def to_dict(self) -> dict[str, Any]:
        return {
            "email": self.email,
            "name": self.name,
            "phone": self.phone,
            "address": self.address,
            "cartSnapshot": self.cart_snapshot,
            "loginAt": self.login_at,
            "meta": self.meta.to_dict(),
        }
