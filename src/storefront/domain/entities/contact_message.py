"""Contact message entity submitted through the contact form."""

from dataclasses import dataclass, field
from typing import Any

from storefront.domain.clock import utc_now_iso
from storefront.domain.value_objects import RequestMeta


@dataclass
class ContactMessage:
    """
    Entity representing one contact form submission.

    Name, email and message are mandatory; phone is optional and the topic
    defaults to "General".
    """

    name: str
    email: str
    message: str
    phone: str = ""
    topic: str = "General"
    source: str = "contact-form"
    created_at: str = field(default_factory=utc_now_iso)
    meta: RequestMeta = field(default_factory=RequestMeta)

    def __post_init__(self) -> None:
        """Validate mandatory fields."""
        if not self.name or not self.email or not self.message:
            raise ValueError("Missing required fields (name, email, message)")

    def to_dict(self) -> dict[str, Any]:
        """Convert message to its stored JSON shape."""
        return {
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "topic": self.topic,
            "message": self.message,
            "source": self.source,
            "createdAt": self.created_at,
            "meta": self.meta.to_dict(),
        }

    def __str__(self) -> str:
        return f"ContactMessage(from={self.email}, topic={self.topic})"
