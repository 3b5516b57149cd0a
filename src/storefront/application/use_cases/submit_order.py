"""Use case for orders submitted by the checkout page."""

from typing import Any, Optional

from storefront.application.services import NotificationService
from storefront.domain.clock import utc_now_iso
from storefront.domain.entities import Order
from storefront.domain.enums import OrderSource, OrderStatus
from storefront.domain.exceptions import InvalidRequestError, StorageError
from storefront.domain.repositories import IOrderRepository
from storefront.domain.value_objects import Customer, OrderItem, display_value
from storefront.infrastructure.config import get_logger

logger = get_logger(__name__)


class SubmitOrderUseCase:
    """Store a checkout order and send the order confirmation."""

    def __init__(
        self,
        order_repository: IOrderRepository,
        notifications: NotificationService,
    ):
        self.order_repo = order_repository
        self.notifications = notifications

    async def execute(
        self,
        order_id: Optional[str],
        customer: Optional[dict[str, Any]],
        items: Optional[list[Any]] = None,
        subtotal: Any = None,
        total: Any = None,
        delivery_fee: Any = None,
        payment_ref: Optional[str] = None,
        status: Optional[str] = None,
        created_at: Optional[str] = None,
    ) -> dict[str, Any]:
        """
        Accept an order from checkout.

        Persistence is best-effort: the confirmation is sent even when the
        order could not be written.

        Raises:
            InvalidRequestError: If the order ID or customer email is missing
        """
        buyer = Customer.from_dict(customer)
        order_id = display_value(order_id)
        if not order_id or not buyer.email:
            raise InvalidRequestError("Missing required order fields (orderId, customer.email)")

        order = Order(
            order_id=order_id,
            customer=buyer,
            items=[OrderItem.from_dict(item) for item in items or []],
            subtotal=display_value(subtotal),
            total=display_value(total),
            delivery_fee=display_value(delivery_fee),
            payment_ref=display_value(payment_ref),
            status=OrderStatus.parse(status, default=OrderStatus.PROCESSING),
            source=OrderSource.SEND_ORDER,
            created_at=display_value(created_at) or utc_now_iso(),
        )

        await self.notifications.notify_order_confirmation(order)

        try:
            order = await self.order_repo.save_submitted(order)
        except StorageError as e:
            logger.warning(
                f"Order persistence step failed for {order.order_id}: {e.message}",
                extra={"order_id": order.order_id, "source": order.source.value},
            )

        logger.info(
            f"Order {order.order_id} received ({order.status.value})",
            extra={"order_id": order.order_id, "reference": order.payment_ref},
        )
        return {"ok": True, "orderId": order.order_id}
