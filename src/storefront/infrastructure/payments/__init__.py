"""Paystack payment gateway integration."""

from .signature import compute_signature, is_valid_signature
from .paystack_client import PaystackGateway

__all__ = ["compute_signature", "is_valid_signature", "PaystackGateway"]
