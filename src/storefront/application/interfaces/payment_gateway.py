"""Payment gateway interface for dependency inversion."""

from abc import ABC, abstractmethod
from typing import Any, Optional


class IPaymentGateway(ABC):
    """
    Abstract interface for the payment gateway.
    
    This interface allows the application layer to initialize and verify
    payments without depending on a specific provider (Paystack, ...).
    """

    @abstractmethod
    def is_configured(self) -> bool:
        """Whether the gateway has the credentials it needs."""
        pass

    @abstractmethod
    async def initialize_transaction(self, payload: dict[str, Any]) -> Optional[dict[str, Any]]:
        """
        Start a transaction.
        
        Args:
            payload: Provider payload (email, amount in minor units,
                currency, metadata, channels)
            
        Returns:
            Decoded provider response, None when the body was empty
            
        Raises:
            PaymentGatewayError: If the provider could not be reached
        """
        pass

    @abstractmethod
    async def verify_transaction(self, reference: str) -> Optional[dict[str, Any]]:
        """
        Look up the outcome of a transaction.
        
        Args:
            reference: Transaction reference
            
        Returns:
            Decoded provider response, None when the body was empty
            
        Raises:
            PaymentGatewayError: If the provider could not be reached
        """
        pass

    @abstractmethod
    def verify_signature(self, raw_body: bytes, signature: Optional[str]) -> bool:
        """
        Authenticate a webhook call.
        
        Args:
            raw_body: Request body exactly as received
            signature: Signature header sent with the call
            
        Returns:
            True if the signature matches
        """
        pass
