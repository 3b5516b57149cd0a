"""Use case for Paystack webhook calls."""

import json
import re
from typing import Any, Optional

from storefront.application.interfaces import IPaymentGateway
from storefront.application.use_cases.record_paid_order import RecordPaidOrderUseCase
from storefront.domain.clock import epoch_millis, utc_now_iso
from storefront.domain.entities import Order
from storefront.domain.enums import OrderSource, OrderStatus
from storefront.domain.exceptions import (
    ConfigurationError,
    InvalidRequestError,
    PaymentGatewayError,
)
from storefront.domain.value_objects import Customer, OrderItem, display_value, from_minor_units
from storefront.infrastructure.config import get_logger

logger = get_logger(__name__)

SUCCESS_EVENTS = re.compile(r"charge\.success|transaction\.success|payment\.complete", re.IGNORECASE)

IGNORED = "ignored"
ACCEPTED = "ok"


class HandlePaymentWebhookUseCase:
    """
    Authenticate a webhook call, re-verify the transaction and record the order.

    The webhook body is never trusted on its own: only the reference is
    taken from it and the transaction is looked up again at the gateway.
    """

    def __init__(
        self,
        payment_gateway: IPaymentGateway,
        record_paid_order: RecordPaidOrderUseCase,
    ):
        self.gateway = payment_gateway
        self.record_paid_order = record_paid_order

    async def execute(self, raw_body: bytes, signature: Optional[str]) -> str:
        """
        Process one webhook delivery.

        Args:
            raw_body: Request body exactly as received
            signature: Value of the X-Paystack-Signature header

        Returns:
            ``"ok"`` when a payment was processed, ``"ignored"`` for events
            that do not concern a successful charge

        Raises:
            ConfigurationError: If the gateway has no secret key
            InvalidRequestError: If the signature is missing or wrong
            PaymentGatewayError: If re-verification fails
        """
        if not self.gateway.is_configured():
            raise ConfigurationError("PAYSTACK_SECRET_KEY not configured")

        if not self.gateway.verify_signature(raw_body, signature):
            logger.warning("Invalid webhook signature", extra={"source": "paystack-webhook"})
            raise InvalidRequestError("Invalid signature")

        payload = self._parse(raw_body)
        event = str(payload.get("event") or "")
        data = payload.get("data") if isinstance(payload.get("data"), dict) else {}
        reference = display_value(data.get("reference"))
        if not reference and isinstance(data.get("customer"), dict):
            reference = display_value(data["customer"].get("reference"))

        if not reference or not SUCCESS_EVENTS.search(event):
            logger.info(f"Webhook event '{event or '-'}' ignored", extra={"event": event, "reference": reference})
            return IGNORED

        try:
            verified = await self.gateway.verify_transaction(reference)
        except PaymentGatewayError as e:
            logger.error(f"Webhook handler error for {reference}: {e.message}", extra={"event": event, "reference": reference})
            raise PaymentGatewayError("internal error", status_code=500) from e

        transaction = (verified or {}).get("data") or {}
        if not verified or not verified.get("status") or transaction.get("status") != "success":
            logger.warning(f"Webhook: verification failed for {reference}", extra={"event": event, "reference": reference})
            raise PaymentGatewayError("verification failed", status_code=400, raw=verified)

        order = self._build_order(reference, event, transaction)
        await self.record_paid_order.execute(order)
        return ACCEPTED

    @staticmethod
    def _parse(raw_body: bytes) -> dict[str, Any]:
        try:
            payload = json.loads(raw_body or b"{}")
        except ValueError:
            return {}
        return payload if isinstance(payload, dict) else {}

    @staticmethod
    def _build_order(reference: str, event: str, transaction: dict[str, Any]) -> Order:
        """Rebuild the order from the verified transaction and its metadata."""
        meta = transaction.get("metadata") if isinstance(transaction.get("metadata"), dict) else {}
        gateway_customer = transaction.get("customer") if isinstance(transaction.get("customer"), dict) else {}
        items = meta.get("items")

        customer = Customer(
            name=display_value(meta.get("customerName") or gateway_customer.get("first_name")),
            email=display_value(gateway_customer.get("email")),
            phone=display_value(gateway_customer.get("phone")),
        )
        return Order(
            order_id=(
                display_value(meta.get("orderId"))
                or display_value(meta.get("reference"))
                or f"ORD-{epoch_millis()}"
            ),
            customer=customer,
            items=[OrderItem.from_dict(item) for item in items] if isinstance(items, list) else [],
            subtotal=display_value(meta.get("subtotal")),
            total=from_minor_units(transaction.get("amount")),
            delivery_fee=display_value(meta.get("deliveryFee") or meta.get("delivery")),
            payment_ref=reference,
            payment_channel=display_value(transaction.get("channel")),
            status=OrderStatus.PAID,
            source=OrderSource.PAYSTACK_WEBHOOK,
            created_at=display_value(meta.get("createdAt")) or utc_now_iso(),
            raw={"webhookEvent": event, "paystackId": transaction.get("id")},
        )
