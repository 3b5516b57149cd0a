"""Use case for the client-initiated payment verification."""

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
    PaymentVerificationError,
)
from storefront.domain.value_objects import Customer, OrderItem, display_value, from_minor_units
from storefront.infrastructure.config import get_logger

logger = get_logger(__name__)


class VerifyPaymentUseCase:
    """Confirm a payment reference with the gateway and record the paid order."""

    def __init__(
        self,
        payment_gateway: IPaymentGateway,
        record_paid_order: RecordPaidOrderUseCase,
    ):
        self.gateway = payment_gateway
        self.record_paid_order = record_paid_order

    async def execute(self, reference: Optional[str], order: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Verify ``reference`` and reconcile the order the client submitted.

        Args:
            reference: Gateway transaction reference
            order: Order details as known to the checkout page

        Returns:
            ``{"ok": True, "verified": True, "reference": ..., "orderId": ..., "duplicate": ...}``

        Raises:
            InvalidRequestError: If the reference is missing
            ConfigurationError: If the gateway has no secret key
            PaymentGatewayError: If the gateway is unreachable or answers unexpectedly
            PaymentVerificationError: If the transaction did not succeed
        """
        reference = str(reference or "").strip()
        if not reference:
            raise InvalidRequestError("Missing payment reference")
        if not self.gateway.is_configured():
            raise ConfigurationError("PAYSTACK_SECRET_KEY not configured on server")

        try:
            verified = await self.gateway.verify_transaction(reference)
        except PaymentGatewayError as e:
            logger.error(f"Error verifying paystack reference {reference}: {e.message}", extra={"reference": reference})
            raise PaymentGatewayError(
                "Verification failed", status_code=500, detail=e.message
            ) from e

        if not verified or not verified.get("status"):
            raise PaymentGatewayError("Unexpected paystack response", raw=verified)

        data = verified.get("data") or {}
        if data.get("status") != "success":
            reason = data.get("gateway_response") if data else None
            logger.warning(
                f"Payment {reference} not successful: {reason or 'not successful'}",
                extra={"reference": reference, "source": "verify-payment"},
            )
            raise PaymentVerificationError(
                "Payment not verified",
                expose_message=False,
                ok=False,
                verified=False,
                reason=reason or "not successful",
                raw=verified,
            )

        paid_order = self._build_order(reference, order or {}, data)
        stored, recorded = await self.record_paid_order.execute(paid_order)
        return {
            "ok": True,
            "verified": True,
            "reference": reference,
            "orderId": stored.order_id,
            "duplicate": not recorded,
        }

    def _build_order(self, reference: str, submitted: dict[str, Any], data: dict[str, Any]) -> Order:
        """Merge the client's view of the order with the gateway transaction."""
        metadata = data.get("metadata") if isinstance(data.get("metadata"), dict) else {}
        items = submitted.get("items")
        order_id = (
            display_value(submitted.get("orderId"))
            or display_value(metadata.get("orderId"))
            or f"ORD-{epoch_millis()}"
        )
        total = display_value(submitted.get("total"))
        if not total and data.get("amount"):
            total = from_minor_units(data["amount"])
        delivery_fee = submitted.get("deliveryFee")
        if delivery_fee is None:
            delivery_fee = submitted.get("delivery")

        return Order(
            order_id=order_id,
            customer=Customer.from_dict(submitted.get("customer")),
            items=[OrderItem.from_dict(item) for item in items] if isinstance(items, list) else [],
            subtotal=display_value(submitted.get("subtotal")),
            total=total,
            delivery_fee=display_value(delivery_fee),
            payment_ref=reference,
            payment_channel=display_value(data.get("channel")) or display_value(submitted.get("paymentChannel")),
            status=OrderStatus.PAID,
            source=OrderSource.VERIFY_PAYMENT,
            created_at=display_value(submitted.get("createdAt")) or utc_now_iso(),
            raw={
                "paystack": {
                    "id": data.get("id"),
                    "status": data.get("status"),
                    "gateway_response": data.get("gateway_response"),
                }
            },
        )
