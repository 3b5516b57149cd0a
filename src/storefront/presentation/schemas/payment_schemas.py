"""Payment schemas."""

from typing import Any, Optional, Union
from pydantic import BaseModel, ConfigDict, Field

Amount = Union[str, float, int, None]


class InitPaymentRequest(BaseModel):
    """Checkout request to start a gateway transaction."""

    orderId: Optional[str] = Field(None, description="Order identifier chosen by the checkout")
    customer: Optional[dict[str, Any]] = Field(default_factory=dict, description="Customer name, email and phone")
    total: Amount = Field(None, description="Order total, e.g. '₵120.00' or 120")
    paymentMethod: Optional[str] = Field("card", description="'card' or 'momo'")
    items: Optional[list[Any]] = Field(default_factory=list, description="Cart lines")
    subtotal: Amount = None
    deliveryFee: Amount = None
    createdAt: Optional[str] = None

    model_config = ConfigDict(
        coerce_numbers_to_str=True,
        json_schema_extra={
            "examples": [
                {
                    "orderId": "EJ-1042",
                    "customer": {"name": "Kofi", "email": "kofi@example.com", "phone": "0241234567"},
                    "total": "₵350.00",
                    "paymentMethod": "momo"
                }
            ]
        }
    )


class InitPaymentResponse(BaseModel):
    """Gateway initialization result."""

    ok: bool = Field(..., description="Whether the gateway accepted the transaction")
    init: dict[str, Any] = Field(..., description="Gateway response (authorization URL, reference)")


class VerifyPaymentRequest(BaseModel):
    """Client-initiated verification after the payment popup closed."""

    reference: Optional[str] = Field(None, description="Gateway transaction reference")
    ref: Optional[str] = Field(None, description="Alias of reference")
    order: Optional[dict[str, Any]] = Field(default_factory=dict, description="Order as known to the checkout page")

    model_config = ConfigDict(coerce_numbers_to_str=True)


class VerifyPaymentResponse(BaseModel):
    """Verified payment."""

    ok: bool
    verified: bool
    reference: str
    orderId: str
    duplicate: bool = Field(False, description="True when the payment had already been recorded")
