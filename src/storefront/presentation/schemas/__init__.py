"""Pydantic schemas for request/response validation."""

from .common_schemas import SuccessResponse, HealthResponse
from .contact_schemas import ContactMessageRequest, ContactMessagesResponse
from .auth_schemas import LoginRequest, LoginResponse
from .payment_schemas import (
    InitPaymentRequest,
    InitPaymentResponse,
    VerifyPaymentRequest,
    VerifyPaymentResponse,
)
from .order_schemas import SendOrderRequest, SendOrderResponse, OrdersResponse
from .profile_schemas import SaveProfileRequest

__all__ = [
    "SuccessResponse",
    "HealthResponse",
    "ContactMessageRequest",
    "ContactMessagesResponse",
    "LoginRequest",
    "LoginResponse",
    "InitPaymentRequest",
    "InitPaymentResponse",
    "VerifyPaymentRequest",
    "VerifyPaymentResponse",
    "SendOrderRequest",
    "SendOrderResponse",
    "OrdersResponse",
    "SaveProfileRequest",
]
