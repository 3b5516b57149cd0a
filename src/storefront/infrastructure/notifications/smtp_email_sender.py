"""SMTP client for sending notification emails via standard library."""

import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import Optional

from fastapi.concurrency import run_in_threadpool

from storefront.application.interfaces import IEmailSender
from storefront.infrastructure.config import get_logger

logger = get_logger(__name__)


def header_value(value: str) -> str:
    """Collapse line breaks and runs of whitespace so ``value`` fits on one header line."""
    return " ".join(str(value or "").split())


class SmtpEmailSender(IEmailSender):
    """Concrete implementation of IEmailSender over SMTP with STARTTLS."""

    def __init__(
        self,
        server: Optional[str],
        port: int = 587,
        username: Optional[str] = None,
        password: Optional[str] = None,
        from_address: Optional[str] = None,
        use_tls: bool = True,
        timeout: float = 30.0,
    ):
        self.server = server
        self.port = port
        self.username = username
        self.password = password
        self.from_address = from_address or username
        self.use_tls = use_tls
        self.timeout = timeout

    def is_configured(self) -> bool:
        return bool(self.server and self.username and self.password and self.from_address)

    async def send(
        self,
        recipients: list[str],
        subject: str,
        text: str,
        html: Optional[str] = None,
    ) -> bool:
        """Send the email in the threadpool; never raises."""
        return await run_in_threadpool(self._send, recipients, subject, text, html)

    def _send(
        self,
        recipients: list[str],
        subject: str,
        text: str,
        html: Optional[str],
    ) -> bool:
        """
        Send an email using SMTP.

        Returns:
            bool: True if sent successfully, False otherwise.
        """
        if not self.is_configured():
            logger.warning("SMTP configuration missing. Skipping email.")
            return False

        recipients = [email.strip() for email in recipients if email and email.strip()]
        if not recipients:
            logger.warning("No recipient emails given. Skipping email.")
            return False

        subject = header_value(subject)
        context = {"channel": "email", "recipient": ", ".join(recipients)}

        msg = MIMEMultipart("alternative")
        msg["From"] = header_value(self.from_address)
        msg["To"] = header_value(", ".join(recipients))
        msg["Subject"] = subject
        msg.attach(MIMEText(text, "plain", "utf-8"))
        if html:
            msg.attach(MIMEText(html, "html", "utf-8"))

        try:
            logger.info(f"Connecting to SMTP server: {self.server}:{self.port}...")
            with smtplib.SMTP(self.server, self.port, timeout=self.timeout) as server:
                server.ehlo()
                if self.use_tls:
                    server.starttls()
                    server.ehlo()
                server.login(self.username, self.password)
                server.send_message(msg, to_addrs=recipients)

            logger.info(f"Email '{subject}' sent to {', '.join(recipients)}", extra=context)
            return True

        except (smtplib.SMTPException, OSError, ValueError) as e:
            logger.error(f"Failed to send email '{subject}': {e}", extra=context)
            return False
