"""Use case for starting a Paystack checkout."""

from typing import Any, Optional

from storefront.application.interfaces import IPaymentGateway
from storefront.domain.enums import PaymentMethod
from storefront.domain.exceptions import (
    ConfigurationError,
    InvalidRequestError,
    PaymentGatewayError,
)
from storefront.domain.value_objects import Customer, OrderItem, display_value, to_minor_units
from storefront.infrastructure.config import get_logger

logger = get_logger(__name__)


class InitializePaymentUseCase:
    """Build the gateway payload for an order total and start the transaction."""

    def __init__(self, payment_gateway: IPaymentGateway, currency: str = "GHS"):
        self.gateway = payment_gateway
        self.currency = currency

    def build_payload(
        self,
        order_id: Optional[str],
        customer: Customer,
        amount: int,
        payment_method: PaymentMethod,
        items: Optional[list[OrderItem]] = None,
        subtotal: Any = None,
        delivery_fee: Any = None,
        created_at: Optional[str] = None,
    ) -> dict[str, Any]:
        """
        Assemble the initialize payload.

        The order details travel in ``metadata`` so the webhook can rebuild
        the order from the gateway's copy of the transaction.
        """
        metadata: dict[str, Any] = {
            "orderId": order_id or "",
            "customerName": customer.name,
        }
        if items:
            metadata["items"] = [item.to_dict() for item in items]
        if display_value(subtotal):
            metadata["subtotal"] = display_value(subtotal)
        if display_value(delivery_fee):
            metadata["deliveryFee"] = display_value(delivery_fee)
        if created_at:
            metadata["createdAt"] = created_at

        payload: dict[str, Any] = {
            "email": customer.email,
            "amount": amount,
            "currency": self.currency,
            "metadata": metadata,
            "channels": payment_method.channels,
        }
        if payment_method is PaymentMethod.MOMO and customer.phone:
            payload["mobile_money"] = {"phone": customer.phone}
        return payload

    async def execute(
        self,
        order_id: Optional[str],
        customer: Customer,
        total: Any,
        payment_method: PaymentMethod = PaymentMethod.CARD,
        items: Optional[list[OrderItem]] = None,
        subtotal: Any = None,
        delivery_fee: Any = None,
        created_at: Optional[str] = None,
    ) -> dict[str, Any]:
        """
        Initialize a transaction for ``total``.

        Returns:
            Gateway response wrapped as ``{"ok": True, "init": ...}``

        Raises:
            ConfigurationError: If the gateway has no secret key
            InvalidRequestError: If the amount is not a positive number
            PaymentGatewayError: If the gateway failed or declined
        """
        if not self.gateway.is_configured():
            raise ConfigurationError("PAYSTACK_SECRET_KEY not configured on server")

        amount = to_minor_units(total)
        if amount <= 0:
            raise InvalidRequestError("Invalid amount")

        payload = self.build_payload(
            order_id,
            customer,
            amount,
            payment_method,
            items=items,
            subtotal=subtotal,
            delivery_fee=delivery_fee,
            created_at=created_at,
        )

        logger.info(
            f"Initializing {payment_method.value} payment of {amount} for order {order_id or '-'}",
            extra={"order_id": order_id, "channel": payment_method.value},
        )
        try:
            data = await self.gateway.initialize_transaction(payload)
        except PaymentGatewayError as e:
            logger.error(f"init-payment error: {e.message}", extra={"order_id": order_id})
            raise PaymentGatewayError(
                "Initialization failed", status_code=500, detail=e.message
            ) from e

        if not data:
            raise PaymentGatewayError("Empty response from Paystack")
        if not data.get("status"):
            logger.warning(
                f"Paystack declined initialization for order {order_id or '-'}: {data.get('message')}",
                extra={"order_id": order_id},
            )
            raise PaymentGatewayError(
                data.get("message") or "Initialization declined",
                status_code=400,
                expose_message=False,
                ok=False,
                raw=data,
            )
        return {"ok": True, "init": data}
