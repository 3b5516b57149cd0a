"""Use case shared by both payment confirmation paths."""

from storefront.application.services import NotificationService
from storefront.domain.entities import Order
from storefront.domain.exceptions import StorageError
from storefront.domain.repositories import IOrderRepository
from storefront.infrastructure.config import get_logger

logger = get_logger(__name__)


class RecordPaidOrderUseCase:
    """
    Persist a verified payment and send the payment receipt.

    The webhook and the client-initiated verification usually both fire for
    the same payment. The repository records a payment reference once; the
    receipt is only sent by the call that recorded it.
    """

    def __init__(
        self,
        order_repository: IOrderRepository,
        notifications: NotificationService,
    ):
        self.order_repo = order_repository
        self.notifications = notifications

    async def execute(self, order: Order) -> tuple[Order, bool]:
        """
        Record ``order`` as paid.

        Returns:
            Tuple of (stored order, whether this call recorded the payment)
        """
        context = {"order_id": order.order_id, "reference": order.payment_ref, "source": order.source.value}
        try:
            stored, recorded = await self.order_repo.record_payment(order)
        except StorageError as e:
            # Receipt still goes out when the paid order could not be stored.
            logger.error(f"Failed to persist paid order {order.order_id}: {e.message}", extra=context)
            stored, recorded = order, True

        if not recorded:
            logger.info(
                f"Order {stored.order_id} already paid with {stored.payment_ref}, skipping receipt",
                extra=context,
            )
            return stored, False

        logger.info(
            f"Order {stored.order_id} paid ({stored.payment_ref}, via {order.source.value})",
            extra={**context, "channel": stored.payment_channel},
        )
        await self.notifications.notify_payment_received(stored)
        return stored, True
