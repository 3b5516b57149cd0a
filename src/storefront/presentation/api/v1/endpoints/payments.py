"""Payment endpoints: initialization, verification and the gateway webhook."""

from typing import Optional

from fastapi import APIRouter, Depends, Header, Request
from fastapi.responses import PlainTextResponse

from storefront.application.use_cases import (
    HandlePaymentWebhookUseCase,
    InitializePaymentUseCase,
    VerifyPaymentUseCase,
)
from storefront.domain.enums import PaymentMethod
from storefront.domain.exceptions import PaymentGatewayError, StorefrontError
from storefront.domain.value_objects import Customer, OrderItem
from storefront.infrastructure.config import get_logger
from storefront.presentation.api.v1.dependencies import (
    get_handle_payment_webhook_use_case,
    get_initialize_payment_use_case,
    get_verify_payment_use_case,
)
from storefront.presentation.schemas import (
    InitPaymentRequest,
    InitPaymentResponse,
    VerifyPaymentRequest,
    VerifyPaymentResponse,
)

router = APIRouter(tags=["payments"])
logger = get_logger(__name__)


@router.post("/init-payment", response_model=InitPaymentResponse)
async def init_payment(
    request: InitPaymentRequest,
    use_case: InitializePaymentUseCase = Depends(get_initialize_payment_use_case),
) -> dict:
    """Start a gateway transaction for the checkout total."""
    return await use_case.execute(
        order_id=request.orderId,
        customer=Customer.from_dict(request.customer),
        total=request.total,
        payment_method=PaymentMethod.parse(request.paymentMethod),
        items=[OrderItem.from_dict(item) for item in request.items or []],
        subtotal=request.subtotal,
        delivery_fee=request.deliveryFee,
        created_at=request.createdAt,
    )


@router.post("/verify-payment", response_model=VerifyPaymentResponse)
async def verify_payment(
    request: VerifyPaymentRequest,
    use_case: VerifyPaymentUseCase = Depends(get_verify_payment_use_case),
) -> dict:
    """Verify a payment reference and record the paid order."""
    return await use_case.execute(request.reference or request.ref, request.order)


@router.post("/paystack-webhook", response_class=PlainTextResponse)
async def paystack_webhook(
    request: Request,
    x_paystack_signature: Optional[str] = Header(None),
    use_case: HandlePaymentWebhookUseCase = Depends(get_handle_payment_webhook_use_case),
) -> PlainTextResponse:
    """Gateway webhook; the signature is computed over the raw body."""
    raw_body = await request.body()
    try:
        outcome = await use_case.execute(raw_body, x_paystack_signature)
    except StorefrontError:
        raise
    except Exception as e:
        logger.error(f"Webhook handler error: {str(e)}", exc_info=True)
        raise PaymentGatewayError("internal error", status_code=500) from e
    return PlainTextResponse(outcome)
