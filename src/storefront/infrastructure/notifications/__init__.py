"""Notification channels - SMTP email and Twilio SMS."""

from .smtp_email_sender import SmtpEmailSender
from .twilio_sms_sender import TwilioSmsSender

__all__ = ["SmtpEmailSender", "TwilioSmsSender"]
