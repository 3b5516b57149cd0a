"""Order schemas."""

from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field

from storefront.presentation.schemas.payment_schemas import Amount


class SendOrderRequest(BaseModel):
    """Order submitted by the checkout page."""

    orderId: Optional[str] = Field(None, description="Order identifier")
    customer: Optional[dict[str, Any]] = Field(
        default_factory=dict,
        description="name, email, phone, addr1, addr2, city, zip, country",
    )
    items: Optional[list[Any]] = Field(default_factory=list, description="Cart lines (title, qty, price)")
    subtotal: Amount = None
    total: Amount = None
    deliveryFee: Amount = None
    delivery: Amount = None
    paymentRef: Optional[str] = None
    status: Optional[str] = None
    createdAt: Optional[str] = None

    model_config = ConfigDict(coerce_numbers_to_str=True)


class SendOrderResponse(BaseModel):
    ok: bool
    orderId: str


class OrdersResponse(BaseModel):
    """Admin order listing."""

    ok: bool
    count: int = Field(..., description="Number of orders returned")
    total: int = Field(..., description="Number of orders stored")
    updatedAt: str
    orders: list[dict[str, Any]]
