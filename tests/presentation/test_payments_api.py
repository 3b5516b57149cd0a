"""API tests for the payment endpoints and the gateway webhook."""

import pytest

from conftest import FakePaymentGateway, read_json, signed_body, successful_transaction


@pytest.fixture
def checkout_order():
    return {
        "orderId": "EJ-1042",
        "customer": {"name": "Ama Mensah", "email": "ama@example.com", "phone": "0201234567", "city": "Accra"},
        "items": [{"title": "Gold hoop earrings", "qty": 1, "price": "$120.00"}],
        "subtotal": "120.00",
        "total": "₵135.00",
        "deliveryFee": "15.00",
        "createdAt": "2024-05-01T10:00:00.000Z",
    }


class TestInitPayment:
    """POST /api/init-payment"""

    def test_initializes_transaction(self, client, gateway, checkout_order):
        """Test that a momo checkout initializes a mobile money transaction."""
        response = client.post("/api/init-payment", json={**checkout_order, "paymentMethod": "momo"})

        assert response.status_code == 200
        assert response.json()["ok"] is True
        assert response.json()["init"]["data"]["authorization_url"].startswith("https://")
        payload = gateway.initialized[0]
        assert payload["amount"] == 13500
        assert payload["email"] == "ama@example.com"
        assert payload["channels"] == ["mobile_money"]
        assert payload["metadata"]["orderId"] == "EJ-1042"
        assert payload["metadata"]["createdAt"] == "2024-05-01T10:00:00.000Z"

    def test_numeric_total(self, client, gateway):
        """Test that a numeric total is converted to pesewas."""
        response = client.post("/api/init-payment", json={"customer": {"email": "a@b.c"}, "total": 99.5})
        assert response.status_code == 200
        assert gateway.initialized[0]["amount"] == 9950
        assert gateway.initialized[0]["channels"] == ["card"]

    @pytest.mark.parametrize(
        "raw_total",
        [b'"free"', b'"' + b"1" * 30 + b'"', b"1" * 30, b"Infinity", b"NaN", b"-Infinity"],
    )
    def test_invalid_amount(self, client, raw_total):
        """Test that unusable totals get a 400 instead of a server error."""
        body = b'{"customer": {"email": "a@b.c"}, "total": ' + raw_total + b"}"
        response = client.post(
            "/api/init-payment",
            content=body,
            headers={"content-type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid amount"}

    def test_declined(self, client, gateway):
        """Test that a declined initialization returns ok false with the gateway answer."""
        gateway.init_response = {"status": False, "message": "Invalid Email Address Passed"}
        response = client.post("/api/init-payment", json={"customer": {"email": "bad"}, "total": "10"})
        assert response.status_code == 400
        assert response.json() == {"ok": False, "raw": {"status": False, "message": "Invalid Email Address Passed"}}

    def test_empty_gateway_response(self, client, gateway):
        """Test that an empty gateway answer returns 502."""
        gateway.init_response = None
        response = client.post("/api/init-payment", json={"customer": {"email": "a@b.c"}, "total": "10"})
        assert response.status_code == 502
        assert response.json() == {"error": "Empty response from Paystack"}

    def test_secret_not_configured(self, app, client):
        """Test that a missing secret key returns 500."""
        from storefront.presentation.api.v1.dependencies import get_payment_gateway

        app.dependency_overrides[get_payment_gateway] = lambda: FakePaymentGateway(secret_key="")
        response = client.post("/api/init-payment", json={"customer": {"email": "a@b.c"}, "total": "10"})
        assert response.status_code == 500
        assert response.json() == {"error": "PAYSTACK_SECRET_KEY not configured on server"}


class TestVerifyPayment:
    """POST /api/verify-payment"""

    def test_verified_payment_is_stored(self, client, gateway, settings, email_sender, sms_sender, checkout_order):
        """Test that a verified payment is stored and the receipt sent."""
        gateway.transactions["ref-1"] = successful_transaction("ref-1", amount=13500)

        response = client.post("/api/verify-payment", json={"reference": "ref-1", "order": checkout_order})

        assert response.status_code == 200
        assert response.json() == {
            "ok": True,
            "verified": True,
            "reference": "ref-1",
            "orderId": "EJ-1042",
            "duplicate": False,
        }
        stored = read_json(settings.data_dir / "orders.json")
        assert len(stored) == 1
        assert stored[0]["status"] == "paid"
        assert stored[0]["source"] == "verify-payment"
        assert stored[0]["total"] == "₵135.00"
        assert stored[0]["paymentChannel"] == "mobile_money"
        assert email_sender.sent[0]["subject"] == "Payment received — EJ-1042"
        assert sms_sender.sent[0]["body"].startswith("Thanks Ama Mensah! Payment received for Order EJ-1042.")

    def test_order_claimed_paid_at_checkout_is_still_recorded(self, client, gateway, settings, email_sender):
        """Test that a send-order status of paid does not mark a later payment as a duplicate."""
        client.post(
            "/api/send-order",
            json={"orderId": "EJ-7", "customer": {"email": "ama@example.com"}, "status": "paid", "paymentRef": "ref-x"},
        )
        gateway.transactions["ref-x"] = successful_transaction("ref-x")

        response = client.post("/api/verify-payment", json={"reference": "ref-x", "order": {"orderId": "EJ-7"}})

        assert response.status_code == 200
        assert response.json()["duplicate"] is False
        stored = read_json(settings.data_dir / "orders.json")
        assert len(stored) == 1
        assert stored[0]["source"] == "verify-payment"
        assert stored[0]["raw"]["paystack"]["id"] == 4099260516
        receipts = [m for m in email_sender.sent if m["subject"].startswith("Payment received")]
        assert len(receipts) == 1

    def test_ref_alias(self, client, gateway):
        """Test that ref is accepted in place of reference."""
        gateway.transactions["ref-2"] = successful_transaction("ref-2")
        response = client.post("/api/verify-payment", json={"ref": "ref-2", "order": {"orderId": "EJ-2"}})
        assert response.status_code == 200
        assert gateway.verified == ["ref-2"]

    def test_numeric_reference(self, client, gateway):
        """Test that a numeric reference is verified as a string."""
        gateway.transactions["123"] = successful_transaction("123")
        response = client.post("/api/verify-payment", json={"reference": 123, "order": {"orderId": 1042}})
        assert response.status_code == 200
        assert response.json()["reference"] == "123"
        assert response.json()["orderId"] == "1042"
        assert gateway.verified == ["123"]

    def test_missing_reference(self, client):
        """Test that a request without a reference returns 400."""
        response = client.post("/api/verify-payment", json={"order": {}})
        assert response.status_code == 400
        assert response.json() == {"error": "Missing payment reference"}

    def test_payment_not_successful(self, client, gateway, settings):
        """Test that a failed transaction returns ok false without storing an order."""
        response_data = successful_transaction("ref-3")
        response_data["data"]["status"] = "failed"
        response_data["data"]["gateway_response"] = "Insufficient funds"
        gateway.transactions["ref-3"] = response_data

        response = client.post("/api/verify-payment", json={"reference": "ref-3"})

        body = response.json()
        assert response.status_code == 400
        assert set(body) == {"ok", "verified", "reason", "raw"}
        assert body["ok"] is False
        assert body["verified"] is False
        assert body["reason"] == "Insufficient funds"
        assert not (settings.data_dir / "orders.json").exists()

    def test_unexpected_response(self, client):
        """Test that an unknown reference returns 502 with the raw answer."""
        response = client.post("/api/verify-payment", json={"reference": "unknown"})
        assert response.status_code == 502
        assert response.json() == {"error": "Unexpected paystack response", "raw": None}


class TestPaystackWebhook:
    """POST /api/paystack-webhook"""

    def _post(self, client, payload, **kwargs):
        body, headers = signed_body(payload, **kwargs)
        return client.post("/api/paystack-webhook", content=body, headers=headers)

    def test_charge_success(self, client, gateway, settings):
        """Test that a signed charge.success stores the order built from metadata."""
        metadata = {"orderId": "EJ-9", "customerName": "Kofi", "items": [{"title": "Cuff", "qty": 1, "price": "₵350"}]}
        gateway.transactions["ref-9"] = successful_transaction("ref-9", metadata=metadata)

        response = self._post(client, {"event": "charge.success", "data": {"reference": "ref-9"}})

        assert response.status_code == 200
        assert response.text == "ok"
        stored = read_json(settings.data_dir / "orders.json")
        assert stored[0]["orderId"] == "EJ-9"
        assert stored[0]["source"] == "paystack-webhook"
        assert stored[0]["total"] == "350.00"
        assert stored[0]["raw"]["webhookEvent"] == "charge.success"

    def test_webhook_after_verify_is_idempotent(self, client, gateway, settings, email_sender, checkout_order):
        """Test that both confirmation paths for one payment produce one order and one receipt."""
        gateway.transactions["ref-1"] = successful_transaction("ref-1", metadata={"orderId": "EJ-1042"})
        client.post("/api/verify-payment", json={"reference": "ref-1", "order": checkout_order})

        response = self._post(client, {"event": "charge.success", "data": {"reference": "ref-1"}})

        assert response.text == "ok"
        stored = read_json(settings.data_dir / "orders.json")
        assert len(stored) == 1
        assert stored[0]["source"] == "verify-payment"
        receipts = [m for m in email_sender.sent if m["subject"].startswith("Payment received")]
        assert len(receipts) == 1

    def test_checkout_order_is_marked_paid(self, client, gateway, settings, checkout_order):
        """Test that the webhook marks the checkout order paid and keeps its details."""
        client.post("/api/send-order", json=checkout_order)
        gateway.transactions["ref-5"] = successful_transaction("ref-5", metadata={"orderId": "EJ-1042"})

        self._post(client, {"event": "charge.success", "data": {"reference": "ref-5"}})

        stored = read_json(settings.data_dir / "orders.json")
        assert len(stored) == 1
        assert stored[0]["status"] == "paid"
        assert stored[0]["paymentRef"] == "ref-5"
        assert stored[0]["customer"]["city"] == "Accra"
        assert stored[0]["deliveryFee"] == "15.00"

    def test_ignored_event(self, client, gateway):
        """Test that other events are acknowledged as ignored."""
        response = self._post(client, {"event": "subscription.create", "data": {"reference": "ref-1"}})
        assert response.status_code == 200
        assert response.text == "ignored"
        assert gateway.verified == []

    def test_invalid_signature(self, client):
        """Test that a body signed with another secret returns 400."""
        response = self._post(client, {"event": "charge.success", "data": {"reference": "ref-1"}}, secret="sk_wrong")
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid signature"}

    def test_missing_signature(self, client):
        """Test that an unsigned body returns 400."""
        response = client.post("/api/paystack-webhook", content=b"{}")
        assert response.status_code == 400

    def test_verification_failed(self, client, gateway):
        """Test that a charge the gateway does not confirm returns 400."""
        gateway.transactions["ref-x"] = {"status": True, "data": {"status": "failed"}}
        response = self._post(client, {"event": "charge.success", "data": {"reference": "ref-x"}})
        assert response.status_code == 400
        assert response.json()["error"] == "verification failed"

    def test_gateway_unreachable(self, client, gateway):
        """Test that an unreachable gateway returns 500."""
        from storefront.domain.exceptions import PaymentGatewayError

        gateway.error = PaymentGatewayError("connection reset")
        response = self._post(client, {"event": "charge.success", "data": {"reference": "ref-y"}})
        assert response.status_code == 500
        assert response.json() == {"error": "internal error"}
