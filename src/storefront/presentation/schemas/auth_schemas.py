"""Admin login schemas."""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class LoginRequest(BaseModel):
    """Admin login form."""

    username: Optional[str] = Field(None, description="Admin username")
    password: Optional[str] = Field(None, description="Admin password")

    model_config = ConfigDict(coerce_numbers_to_str=True)


class LoginResponse(BaseModel):
    """Successful login."""

    success: bool = Field(..., description="Always true on success")
    token: Optional[str] = Field(None, description="Token for the admin listings")
    redirect: str = Field(..., description="Admin page to open")
