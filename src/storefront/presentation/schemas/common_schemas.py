"""Schemas shared by several endpoints."""

from pydantic import BaseModel, Field


class SuccessResponse(BaseModel):
    """Plain acknowledgement."""

    success: bool = Field(True, description="Whether the submission was stored")


class HealthResponse(BaseModel):
    """Health check response schema."""
    
    status: str = Field(..., description="Service status")
    version: str = Field(..., description="API version")
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "status": "healthy",
                    "version": "1.0.0"
                }
            ]
        }
    }
