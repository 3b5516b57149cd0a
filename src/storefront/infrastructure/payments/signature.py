"""Webhook signature verification (HMAC-SHA512 over the raw request body)."""

import hashlib
import hmac
from typing import Optional, Union


def compute_signature(secret: str, payload: Union[bytes, str]) -> str:
    """
    Compute the hex HMAC-SHA512 digest Paystack sends in X-Paystack-Signature.

    Args:
        secret: Paystack secret key
        payload: Raw request body exactly as received

    Returns:
        Lower-case hex digest
    """
    if isinstance(payload, str):
        payload = payload.encode("utf-8")
    return hmac.new(secret.encode("utf-8"), payload, hashlib.sha512).hexdigest()


def is_valid_signature(secret: str, payload: Union[bytes, str], signature: Optional[str]) -> bool:
    """Constant-time check of a webhook signature against the raw body."""
    if not secret or not signature:
        return False
    expected = compute_signature(secret, payload)
    return hmac.compare_digest(expected.encode("utf-8"), signature.strip().lower().encode("utf-8"))
