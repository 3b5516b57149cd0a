"""Tests for the SMTP and Twilio notification channels."""

import asyncio
import smtplib

from storefront.infrastructure.notifications import SmtpEmailSender, TwilioSmsSender


class FakeSMTP:
    instances = []

    def __init__(self, server, port, timeout=None):
        self.server = server
        self.port = port
        self.calls = []
        FakeSMTP.instances.append(self)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def ehlo(self):
        self.calls.append("ehlo")

    def starttls(self):
        self.calls.append("starttls")

    def login(self, username, password):
        self.calls.append(("login", username))

    def send_message(self, msg, to_addrs=None):
        self.calls.append(("send", msg["Subject"], to_addrs))


class RefusingSMTP(FakeSMTP):
    def login(self, username, password):
        raise smtplib.SMTPAuthenticationError(535, b"bad credentials")


class SerializingSMTP(FakeSMTP):
    def send_message(self, msg, to_addrs=None):
        self.calls.append(("send", msg["Subject"], to_addrs))
        self.calls.append(("bytes", msg.as_bytes()))


class BrokenHeaderSMTP(FakeSMTP):
    def send_message(self, msg, to_addrs=None):
        raise ValueError("Header values may not contain linefeed or carriage return characters")


def smtp_sender(**overrides):
    options = {
        "server": "smtp.example.com",
        "username": "shop@example.com",
        "password": "app-password",
    }
    options.update(overrides)
    return SmtpEmailSender(**options)


class TestSmtpEmailSender:
    """SMTP delivery with STARTTLS."""

    def test_sends_multipart_message(self, monkeypatch):
        """Test that the email is sent over STARTTLS to the non-blank recipients."""
        FakeSMTP.instances = []
        monkeypatch.setattr(smtplib, "SMTP", FakeSMTP)

        sent = asyncio.run(smtp_sender().send(["a@b.c", " "], "Hello", "text", "<p>html</p>"))

        assert sent is True
        calls = FakeSMTP.instances[0].calls
        assert "starttls" in calls
        assert ("login", "shop@example.com") in calls
        assert ("send", "Hello", ["a@b.c"]) in calls

    def test_not_configured(self):
        """Test that an unconfigured sender reports so and sends nothing."""
        sender = smtp_sender(password=None)
        assert not sender.is_configured()
        assert asyncio.run(sender.send(["a@b.c"], "Hello", "text")) is False

    def test_smtp_failure_returns_false(self, monkeypatch):
        """Test that an SMTP error is reported as not sent."""
        monkeypatch.setattr(smtplib, "SMTP", RefusingSMTP)
        assert asyncio.run(smtp_sender().send(["a@b.c"], "Hello", "text")) is False

    def test_subject_with_line_breaks_is_folded_to_one_line(self, monkeypatch):
        """Test that a subject containing line breaks is sent as a single header line."""
        FakeSMTP.instances = []
        monkeypatch.setattr(smtplib, "SMTP", SerializingSMTP)

        sent = asyncio.run(smtp_sender().send(["a@b.c"], "New contact message from Ama\nBcc: x@example.com", "text"))

        assert sent is True
        calls = FakeSMTP.instances[0].calls
        assert ("send", "New contact message from Ama Bcc: x@example.com", ["a@b.c"]) in calls
        raw = next(call[1] for call in calls if call[0] == "bytes")
        assert b"\nBcc:" not in raw

    def test_header_error_returns_false(self, monkeypatch):
        """Test that a message the generator refuses to serialise is reported as not sent."""
        monkeypatch.setattr(smtplib, "SMTP", BrokenHeaderSMTP)
        assert asyncio.run(smtp_sender().send(["a@b.c"], "Hello", "text")) is False


class FakeMessages:
    def __init__(self):
        self.created = []

    def create(self, **kwargs):
        self.created.append(kwargs)

        class Message:
            sid = "SM123"

        return Message()


class FakeTwilioClient:
    def __init__(self):
        self.messages = FakeMessages()


class TestTwilioSmsSender:
    """Twilio delivery."""

    def test_sends_message(self):
        """Test that the SMS is created with the configured sender number."""
        sender = TwilioSmsSender("AC123", "token", "+15550001111")
        sender._client = FakeTwilioClient()

        assert asyncio.run(sender.send("+233200000001", "Thanks!")) is True
        assert sender._client.messages.created == [
            {"from_": "+15550001111", "to": "+233200000001", "body": "Thanks!"}
        ]

    def test_not_configured(self):
        """Test that an unconfigured sender reports so and sends nothing."""
        sender = TwilioSmsSender(None, None, None)
        assert not sender.is_configured()
        assert asyncio.run(sender.send("+233200000001", "Thanks!")) is False
