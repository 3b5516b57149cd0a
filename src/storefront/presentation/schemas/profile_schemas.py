"""Customer profile schema."""

from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field


class SaveProfileRequest(BaseModel):
    """Shopper details captured at sign in."""

    email: Optional[str] = Field(None, description="Shopper email (required)")
    name: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    cart: Any = Field(None, description="Cart as an object or a JSON encoded string")

    model_config = ConfigDict(coerce_numbers_to_str=True)
