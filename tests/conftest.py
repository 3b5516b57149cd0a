"""Pytest configuration and shared fixtures."""

import json
from typing import Any, Optional

import pytest
from fastapi.testclient import TestClient

from storefront.application.interfaces import IEmailSender, IPaymentGateway, ISmsSender
from storefront.application.services import NotificationService
from storefront.application.use_cases.authenticate_admin import sha256_hex
from storefront.domain.entities import Order
from storefront.domain.enums import OrderSource, OrderStatus
from storefront.domain.value_objects import Customer, OrderItem
from storefront.infrastructure.config import Settings, get_settings
from storefront.infrastructure.payments import compute_signature, is_valid_signature
from storefront.infrastructure.storage import JsonFileStore, JsonOrderRepository
from storefront.main import create_app
from storefront.presentation.api.v1.dependencies import (
    get_email_sender,
    get_payment_gateway,
    get_sms_sender,
)

SECRET_KEY = "sk_test_secret"
ADMIN_TOKEN = "contact-token"
ADMIN_KEY = "orders-key"


class FakePaymentGateway(IPaymentGateway):
    """In-memory gateway returning canned responses."""

    def __init__(self, secret_key: str = SECRET_KEY):
        self.secret_key = secret_key
        self.init_response: Optional[dict] = {
            "status": True,
            "message": "Authorization URL created",
            "data": {
                "authorization_url": "https://checkout.paystack.com/abc123",
                "access_code": "abc123",
                "reference": "ref-init-1",
            },
        }
        self.transactions: dict[str, Optional[dict]] = {}
        self.error: Optional[Exception] = None
        self.initialized: list[dict] = []
        self.verified: list[str] = []

    def is_configured(self) -> bool:
        return bool(self.secret_key)

    async def initialize_transaction(self, payload: dict[str, Any]) -> Optional[dict[str, Any]]:
        self.initialized.append(payload)
        if self.error:
            raise self.error
        return self.init_response

    async def verify_transaction(self, reference: str) -> Optional[dict[str, Any]]:
        self.verified.append(reference)
        if self.error:
            raise self.error
        return self.transactions.get(reference)

    def verify_signature(self, raw_body: bytes, signature: Optional[str]) -> bool:
        return is_valid_signature(self.secret_key, raw_body, signature)


class FakeEmailSender(IEmailSender):
    """Records sent emails."""

    def __init__(self, configured: bool = True, fail: bool = False):
        self.configured = configured
        self.fail = fail
        self.sent: list[dict] = []

    def is_configured(self) -> bool:
        return self.configured

    async def send(self, recipients, subject, text, html=None) -> bool:
        if self.fail:
            raise RuntimeError("SMTP connection refused")
        self.sent.append({"to": list(recipients), "subject": subject, "text": text, "html": html})
        return True


class FakeSmsSender(ISmsSender):
    """Records sent text messages."""

    def __init__(self, configured: bool = True):
        self.configured = configured
        self.sent: list[dict] = []

    def is_configured(self) -> bool:
        return self.configured

    async def send(self, to, body) -> bool:
        self.sent.append({"to": to, "body": body})
        return True


def successful_transaction(
    reference: str,
    amount: int = 35000,
    metadata: Optional[dict] = None,
    channel: str = "mobile_money",
) -> dict[str, Any]:
    """Gateway verify response for a successful charge."""
    return {
        "status": True,
        "message": "Verification successful",
        "data": {
            "id": 4099260516,
            "status": "success",
            "reference": reference,
            "amount": amount,
            "gateway_response": "Approved",
            "channel": channel,
            "currency": "GHS",
            "metadata": metadata if metadata is not None else {},
            "customer": {
                "first_name": "Kofi",
                "email": "kofi@example.com",
                "phone": "0241234567",
            },
        },
    }


def signed_body(payload: dict, secret: str = SECRET_KEY) -> tuple[bytes, dict[str, str]]:
    """Serialize a webhook payload and sign it."""
    body = json.dumps(payload).encode("utf-8")
    return body, {
        "x-paystack-signature": compute_signature(secret, body),
        "content-type": "application/json",
    }


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a temporary data directory."""
    return Settings(
        _env_file=None,
        environment="development",
        data_dir=tmp_path / "data",
        lock_timeout=2.0,
        paystack_secret_key=SECRET_KEY,
        admin_username="admin",
        admin_password_hash=sha256_hex("s3cret"),
        contact_admin_token=ADMIN_TOKEN,
        admin_api_key=ADMIN_KEY,
        contact_notify_emails="owner@example.com",
        contact_notify_phones="+233200000001",
        order_notify_emails="",
    )


@pytest.fixture
def gateway():
    return FakePaymentGateway()


@pytest.fixture
def email_sender():
    return FakeEmailSender()


@pytest.fixture
def sms_sender():
    return FakeSmsSender()


@pytest.fixture
def notifications(email_sender, sms_sender):
    """Notification service wired to the recording fakes."""
    return NotificationService(
        email_sender=email_sender,
        sms_sender=sms_sender,
        contact_recipients=["owner@example.com"],
        contact_phones=["+233200000001"],
    )


@pytest.fixture
def order_repository(tmp_path):
    return JsonOrderRepository(JsonFileStore(tmp_path / "orders.json", lock_timeout=2.0))


@pytest.fixture
def sample_order():
    """Fixture for a submitted order with two cart lines."""
    return Order(
        order_id="EJ-1042",
        customer=Customer(
            name="Ama Mensah",
            email="ama@example.com",
            phone="0201234567",
            addr1="12 Oxford St",
            city="Accra",
            country="Ghana",
        ),
        items=[
            OrderItem(title="Gold hoop earrings", qty=1, price="$120.00"),
            OrderItem(title="Beaded anklet", qty=2, price="₵40.00"),
        ],
        subtotal="200.00",
        total="230.00",
        delivery_fee="30.00",
        status=OrderStatus.PROCESSING,
        source=OrderSource.SEND_ORDER,
        created_at="2024-05-01T10:00:00.000Z",
    )


@pytest.fixture
def app(settings, gateway, email_sender, sms_sender):
    """Application with fake external services."""
    application = create_app(settings)
    application.dependency_overrides[get_settings] = lambda: settings
    application.dependency_overrides[get_payment_gateway] = lambda: gateway
    application.dependency_overrides[get_email_sender] = lambda: email_sender
    application.dependency_overrides[get_sms_sender] = lambda: sms_sender
    return application


@pytest.fixture
def client(app):
    return TestClient(app)


def read_json(path) -> list:
    """Contents of a JSON store file."""
    return json.loads(path.read_text(encoding="utf-8"))
