"""Paystack REST client implementing the payment gateway interface."""

from typing import Any, Optional
from urllib.parse import quote

import requests
from fastapi.concurrency import run_in_threadpool

from storefront.application.interfaces import IPaymentGateway
from storefront.domain.exceptions import PaymentGatewayError
from storefront.infrastructure.config import get_logger
from storefront.infrastructure.payments.signature import is_valid_signature

logger = get_logger(__name__)


class PaystackGateway(IPaymentGateway):
    """Concrete implementation of IPaymentGateway using the Paystack REST API."""

    def __init__(
        self,
        secret_key: Optional[str],
        base_url: str = "https://api.paystack.co",
        timeout: float = 30.0,
    ):
        """Initialize the client with the account secret key."""
        self.secret_key = secret_key or ""
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def is_configured(self) -> bool:
        return bool(self.secret_key)

    @property
    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.secret_key}",
            "Content-Type": "application/json",
        }

    async def initialize_transaction(self, payload: dict[str, Any]) -> Optional[dict[str, Any]]:
        """POST /transaction/initialize."""
        return await run_in_threadpool(
            self._request, "POST", "/transaction/initialize", payload
        )

    async def verify_transaction(self, reference: str) -> Optional[dict[str, Any]]:
        """GET /transaction/verify/<reference>."""
        path = f"/transaction/verify/{quote(reference, safe='')}"
        return await run_in_threadpool(self._request, "GET", path)

    def verify_signature(self, raw_body: bytes, signature: Optional[str]) -> bool:
        """Check the X-Paystack-Signature header against the raw body."""
        return is_valid_signature(self.secret_key, raw_body, signature)

    def _request(
        self,
        method: str,
        path: str,
        payload: Optional[dict[str, Any]] = None,
    ) -> Optional[dict[str, Any]]:
        """
        Perform a blocking request and decode the JSON body.

        Gateway-level failures (``"status": false``) are returned to the
        caller as data; only transport errors and undecodable bodies raise.
        """
        url = f"{self.base_url}{path}"
        context = {"method": method, "path": path}
        try:
            resp = requests.request(
                method,
                url,
                json=payload,
                headers=self._headers,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"Paystack {method} {path} failed: {e}", extra=context)
            raise PaymentGatewayError(str(e)) from e

        if not resp.content:
            logger.warning(f"Paystack {method} {path} returned an empty body ({resp.status_code})", extra=context)
            return None
        try:
            data = resp.json()
        except ValueError as e:
            logger.error(f"Paystack {method} {path} returned non-JSON body ({resp.status_code})", extra=context)
            raise PaymentGatewayError("Paystack returned an unreadable response") from e

        logger.info(f"Paystack {method} {path} -> {resp.status_code}", extra=context)
        return data if isinstance(data, dict) else None
