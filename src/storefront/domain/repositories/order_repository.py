"""Order repository interface - Abstract definition."""

from abc import ABC, abstractmethod
from typing import Optional

from storefront.domain.entities import Order


class IOrderRepository(ABC):
    """
    Abstract repository interface for Order entity.

    Both write operations must be atomic with respect to other writers of
    the same store, so that the webhook and the client-initiated
    verification cannot both record the same payment.
    """

    @abstractmethod
    async def list_all(self) -> list[Order]:
        """
        Retrieve every stored order in storage order.

        Returns:
            All orders
        """
        pass

    @abstractmethod
    async def get_by_order_id(self, order_id: str) -> Optional[Order]:
        """
        Retrieve an order by its identifier.

        Args:
            order_id: Order identifier chosen at checkout

        Returns:
            Order if found, None otherwise
        """
        pass

    @abstractmethod
    async def save_submitted(self, order: Order) -> Order:
        """
        Insert or update an order submitted from checkout.

        An existing order with the same ``order_id`` is merged with the
        submission; a paid order keeps its paid status.

        Args:
            order: Order built from the checkout submission

        Returns:
            The stored order
        """
        pass

    @abstractmethod
    async def record_payment(self, order: Order) -> tuple[Order, bool]:
        """
        Persist a verified payment.

        If the payment reference is already recorded on a paid order nothing
        is written. If an order with the same ``order_id`` exists it is marked
        paid in place, otherwise ``order`` is appended.

        Args:
            order: Paid order rebuilt from the gateway response

        Returns:
            Tuple of (stored order, whether this call recorded the payment)
        """
        pass
