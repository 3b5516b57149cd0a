"""Email sender interface."""

from abc import ABC, abstractmethod
from typing import Optional


class IEmailSender(ABC):
    """Abstract interface for outgoing email."""

    @abstractmethod
    def is_configured(self) -> bool:
        """Whether the sender has the credentials it needs."""
        pass

    @abstractmethod
    async def send(
        self,
        recipients: list[str],
        subject: str,
        text: str,
        html: Optional[str] = None,
    ) -> bool:
        """
        Send one email to all recipients.
        
        Args:
            recipients: Destination addresses
            subject: Subject line
            text: Plain text body
            html: Optional HTML alternative
            
        Returns:
            True if sent successfully, False otherwise
        """
        pass
