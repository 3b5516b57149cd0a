"""Application services shared by several use cases."""

from .message_templates import EmailContent
from .notification_service import NotificationService

__all__ = ["EmailContent", "NotificationService"]
