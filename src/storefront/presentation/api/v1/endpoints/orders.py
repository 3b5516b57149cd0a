"""Order endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response

from storefront.application.use_cases import ListOrdersUseCase, SubmitOrderUseCase
from storefront.presentation.api.v1.dependencies import (
    get_list_orders_use_case,
    get_submit_order_use_case,
    parse_limit,
    require_orders_admin,
)
from storefront.presentation.schemas import OrdersResponse, SendOrderRequest, SendOrderResponse

router = APIRouter(tags=["orders"])


@router.post("/send-order", response_model=SendOrderResponse)
async def send_order(
    request: SendOrderRequest,
    use_case: SubmitOrderUseCase = Depends(get_submit_order_use_case),
) -> dict:
    """Accept an order from checkout and send the confirmation."""
    delivery_fee = request.deliveryFee if request.deliveryFee is not None else request.delivery
    return await use_case.execute(
        order_id=request.orderId,
        customer=request.customer,
        items=request.items,
        subtotal=request.subtotal,
        total=request.total,
        delivery_fee=delivery_fee,
        payment_ref=request.paymentRef,
        status=request.status,
        created_at=request.createdAt,
    )


@router.get(
    "/orders",
    response_model=OrdersResponse,
    dependencies=[Depends(require_orders_admin)],
)
async def list_orders(
    response: Response,
    q: Optional[str] = Query(None, description="Search term"),
    limit: Optional[int] = Depends(parse_limit),
    use_case: ListOrdersUseCase = Depends(get_list_orders_use_case),
) -> dict:
    """Search stored orders, newest first (admin only)."""
    response.headers["Cache-Control"] = "no-store"
    return await use_case.execute(q, limit)
