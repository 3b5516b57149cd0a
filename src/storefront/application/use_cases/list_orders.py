"""Use case for the admin order listing."""

from typing import Any, Optional

from storefront.domain.clock import newest_first, utc_now_iso
from storefront.domain.repositories import IOrderRepository


class ListOrdersUseCase:
    """Search and list stored orders, newest first."""

    def __init__(self, order_repository: IOrderRepository):
        self.order_repo = order_repository

    async def execute(self, query: Optional[str] = None, limit: Optional[int] = None) -> dict[str, Any]:
        """
        List orders.

        Args:
            query: Case-insensitive search over order ID, payment reference
                and customer name, email and phone
            limit: Maximum number of orders returned; None or non-positive means all

        Returns:
            ``{"ok", "count", "total", "updatedAt", "orders"}``
        """
        orders = await self.order_repo.list_all()
        term = (query or "").strip().lower()

        matching = [order for order in newest_first(orders, key=lambda o: o.created_at) if order.matches(term)]
        if limit is not None and limit > 0:
            matching = matching[:limit]

        return {
            "ok": True,
            "count": len(matching),
            "total": len(orders),
            "updatedAt": utc_now_iso(),
            "orders": [order.to_dict() for order in matching],
        }
