"""Order entity - the aggregate reconciled between checkout and payment."""

from dataclasses import dataclass, field
from typing import Any, Optional

from storefront.domain.clock import utc_now_iso
from storefront.domain.enums import OrderSource, OrderStatus
from storefront.domain.value_objects import Customer, OrderItem


@dataclass
class Order:
    """
    Entity representing a customer order.

    An order is identified by ``order_id``. It is created either from the
    checkout submission (``processing``) or from a verified payment
    (``paid``); once paid it stays paid.
    """

    order_id: str
    customer: Customer = field(default_factory=Customer)
    items: list[OrderItem] = field(default_factory=list)
    subtotal: str = ""
    total: str = ""
    delivery_fee: str = ""
    payment_ref: str = ""
    payment_channel: str = ""
    status: OrderStatus = OrderStatus.PENDING
    source: OrderSource = OrderSource.SEND_ORDER
    created_at: str = field(default_factory=utc_now_iso)
    updated_at: Optional[str] = None
    raw: dict = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate order identity."""
        if not self.order_id or not str(self.order_id).strip():
            raise ValueError("Order ID cannot be empty")
        self.order_id = str(self.order_id).strip()

    @property
    def is_paid(self) -> bool:
        return self.status == OrderStatus.PAID

    @property
    def is_payment_verified(self) -> bool:
        """Paid and written by one of the gateway confirmation paths."""
        return self.is_paid and self.source in (OrderSource.VERIFY_PAYMENT, OrderSource.PAYSTACK_WEBHOOK)

    def mark_paid(
        self,
        payment_ref: str,
        payment_channel: str = "",
        raw: Optional[dict] = None,
        source: Optional[OrderSource] = None,
    ) -> None:
        """Record a successful payment against this order."""
        self.status = OrderStatus.PAID
        if source:
            self.source = source
        self.payment_ref = payment_ref or self.payment_ref
        self.payment_channel = payment_channel or self.payment_channel
        if raw:
            self.raw = {**self.raw, **raw}
        self._mark_updated()

    def merge_from(self, other: "Order") -> None:
        """
        Take details from a newer record of the same order.

        Non-empty fields of ``other`` win; a paid order is never moved back
        to an unpaid status.
        """
        self.customer = self.customer.merged_with(other.customer)
        self.items = other.items or self.items
        self.subtotal = other.subtotal or self.subtotal
        self.total = other.total or self.total
        self.delivery_fee = other.delivery_fee or self.delivery_fee
        self.payment_ref = other.payment_ref or self.payment_ref
        self.payment_channel = other.payment_channel or self.payment_channel
        if other.raw:
            self.raw = {**self.raw, **other.raw}
        if not self.is_paid:
            self.status = other.status
            self.source = other.source
        self._mark_updated()

    def matches(self, term: str) -> bool:
        """Case-insensitive search over identifiers and customer contact details."""
        if not term:
            return True
        haystack = " ".join(
            value
            for value in (
                self.order_id,
                self.payment_ref,
                self.customer.name,
                self.customer.email,
                self.customer.phone,
            )
            if value
        ).lower()
        return term.strip().lower() in haystack

    def to_dict(self) -> dict[str, Any]:
        """Convert order to its stored JSON shape."""
        data = {
            "orderId": self.order_id,
            "customer": self.customer.to_dict(),
            "items": [item.to_dict() for item in self.items],
            "subtotal": self.subtotal,
            "total": self.total,
            "deliveryFee": self.delivery_fee,
            "paymentRef": self.payment_ref,
            "paymentChannel": self.payment_channel,
            "status": self.status.value,
            "source": self.source.value,
            "createdAt": self.created_at,
        }
        if self.updated_at:
            data["updatedAt"] = self.updated_at
        if self.raw:
            data["raw"] = self.raw
        return data

    def _mark_updated(self) -> None:
        """Mark the entity as updated."""
        self.updated_at = utc_now_iso()

    def __str__(self) -> str:
        return f"Order(id={self.order_id}, status={self.status.value})"
