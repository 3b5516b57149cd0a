"""Contact form schemas."""

from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field


class ContactMessageRequest(BaseModel):
    """Contact form submission. Required fields are checked by the use case."""

    name: Optional[str] = Field(None, description="Sender name")
    email: Optional[str] = Field(None, description="Sender email")
    message: Optional[str] = Field(None, description="Message body")
    phone: Optional[str] = Field(None, description="Optional phone number")
    topic: Optional[str] = Field(None, description="Topic, defaults to General")
    source: Optional[str] = Field(None, description="Form that sent the message")

    model_config = ConfigDict(
        coerce_numbers_to_str=True,
        json_schema_extra={
            "examples": [
                {
                    "name": "Ama Mensah",
                    "email": "ama@example.com",
                    "phone": "+233201234567",
                    "topic": "Custom order",
                    "message": "Do you make matching earrings for this necklace?"
                }
            ]
        }
    )


class ContactMessagesResponse(BaseModel):
    """Admin listing of contact messages."""

    count: int = Field(..., description="Number of messages returned")
    messages: list[dict[str, Any]] = Field(..., description="Messages, newest first")
