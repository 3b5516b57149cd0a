"""Health check endpoint."""

from fastapi import APIRouter, Depends

from storefront.presentation.schemas import HealthResponse
from storefront.infrastructure.config import Settings, get_settings

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_settings)) -> HealthResponse:
    """
    Health check endpoint.
    
    Returns service status and version information.
    """
    return HealthResponse(
        status="healthy",
        version=settings.app_version,
    )
