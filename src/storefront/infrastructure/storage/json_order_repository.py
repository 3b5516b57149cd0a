"""JSON file implementation of order repository."""

from typing import Any, Optional

from fastapi.concurrency import run_in_threadpool

from storefront.domain.clock import utc_now_iso
from storefront.domain.entities import Order
from storefront.domain.enums import OrderSource, OrderStatus
from storefront.domain.repositories import IOrderRepository
from storefront.domain.value_objects import Customer, OrderItem, display_value
from storefront.infrastructure.config import get_logger
from storefront.infrastructure.storage.json_file_store import JsonFileStore, Records

logger = get_logger(__name__)


class JsonOrderRepository(IOrderRepository):
    """
    Concrete implementation of IOrderRepository backed by orders.json.

    Every write goes through ``JsonFileStore.update`` so the lookup and the
    write happen under the same file lock.
    """

    def __init__(self, store: JsonFileStore):
        """Initialize repository with its file store."""
        self.store = store

    async def list_all(self) -> list[Order]:
        """Retrieve all orders."""
        records = await run_in_threadpool(self.store.read)
        orders = []
        for record in records:
            order = self._record_to_entity(record)
            if order is not None:
                orders.append(order)
        return orders

    async def get_by_order_id(self, order_id: str) -> Optional[Order]:
        """Retrieve an order by ID."""
        records = await run_in_threadpool(self.store.read)
        index = self._find(records, order_id=order_id)
        if index is None:
            return None
        return self._record_to_entity(records[index])

    async def save_submitted(self, order: Order) -> Order:
        """Insert a checkout submission or merge it into the stored order."""
        return await run_in_threadpool(self.store.update, lambda records: self._upsert(records, order))

    async def record_payment(self, order: Order) -> tuple[Order, bool]:
        """Record a verified payment at most once per payment reference."""
        return await run_in_threadpool(
            self.store.update, lambda records: self._record_payment(records, order)
        )

    def _upsert(self, records: Records, order: Order) -> Order:
        index = self._find(records, order_id=order.order_id)
        if index is None:
            records.append(self._entity_to_record(order))
            return order

        stored = self._record_to_entity(records[index])
        if stored is None:
            records[index] = self._entity_to_record(order)
            return order

        stored.merge_from(order)
        records[index] = self._entity_to_record(stored, previous=records[index])
        return stored

    def _record_payment(self, records: Records, order: Order) -> tuple[Order, bool]:
        if order.payment_ref:
            index = self._find(records, payment_ref=order.payment_ref)
            if index is not None:
                stored = self._record_to_entity(records[index])
                if stored is not None and stored.is_payment_verified:
                    logger.info(
                        f"Payment {order.payment_ref} already recorded on order {stored.order_id}"
                    )
                    return stored, False

        index = self._find(records, order_id=order.order_id)
        stored = self._record_to_entity(records[index]) if index is not None else None
        if stored is None:
            if index is not None:
                del records[index]
            records.append(self._entity_to_record(order))
            return order, True

        if stored.is_payment_verified and stored.payment_ref and stored.payment_ref != order.payment_ref:
            logger.warning(
                f"Order {stored.order_id} was paid with {stored.payment_ref}, "
                f"now also paid with {order.payment_ref}"
            )

        stored.merge_from(order)
        stored.mark_paid(order.payment_ref, order.payment_channel, order.raw, source=order.source)
        records[index] = self._entity_to_record(stored, previous=records[index])
        return stored, True

    @staticmethod
    def _find(
        records: Records,
        order_id: Optional[str] = None,
        payment_ref: Optional[str] = None,
    ) -> Optional[int]:
        """Index of the first record matching the given identifier."""
        for index, record in enumerate(records):
            if order_id is not None and str(record.get("orderId") or "") == order_id:
                return index
            if payment_ref is not None and str(record.get("paymentRef") or "") == payment_ref:
                return index
        return None

    def _entity_to_record(self, entity: Order, previous: Optional[dict] = None) -> dict[str, Any]:
        """Convert domain entity to stored record, keeping unknown stored keys."""
        record = dict(previous or {})
        record.update(entity.to_dict())
        record["timestamp"] = utc_now_iso()
        return record

    def _record_to_entity(self, record: dict[str, Any]) -> Optional[Order]:
        """Convert stored record to domain entity."""
        items = record.get("items")
        raw = record.get("raw")
        try:
            return Order(
                order_id=str(record.get("orderId") or ""),
                customer=Customer.from_dict(record.get("customer")),
                items=[OrderItem.from_dict(item) for item in items] if isinstance(items, list) else [],
                subtotal=display_value(record.get("subtotal")),
                total=display_value(record.get("total")),
                delivery_fee=display_value(record.get("deliveryFee")),
                payment_ref=display_value(record.get("paymentRef")),
                payment_channel=display_value(record.get("paymentChannel")),
                status=OrderStatus.parse(record.get("status")),
                source=self._parse_source(record.get("source")),
                created_at=display_value(record.get("createdAt")),
                updated_at=record.get("updatedAt") or None,
                raw=raw if isinstance(raw, dict) else {},
            )
        except ValueError as e:
            logger.warning(f"Skipping unreadable order record: {e}")
            return None

    @staticmethod
    def _parse_source(value: Any) -> OrderSource:
        try:
            return OrderSource(str(value))
        except ValueError:
            return OrderSource.SEND_ORDER
