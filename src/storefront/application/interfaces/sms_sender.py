"""SMS sender interface."""

from abc import ABC, abstractmethod


class ISmsSender(ABC):
    """Abstract interface for outgoing text messages."""

    @abstractmethod
    def is_configured(self) -> bool:
        """Whether the sender has the credentials it needs."""
        pass

    @abstractmethod
    async def send(self, to: str, body: str) -> bool:
        """
        Send a text message.
        
        Args:
            to: Destination phone number
            body: Message text
            
        Returns:
            True if sent successfully, False otherwise
        """
        pass
