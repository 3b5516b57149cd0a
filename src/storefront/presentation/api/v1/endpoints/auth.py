"""Admin login endpoint."""

from fastapi import APIRouter, Depends

from storefront.application.use_cases import AuthenticateAdminUseCase
from storefront.presentation.api.v1.dependencies import get_authenticate_admin_use_case
from storefront.presentation.schemas import LoginRequest, LoginResponse

router = APIRouter(tags=["auth"])


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    use_case: AuthenticateAdminUseCase = Depends(get_authenticate_admin_use_case),
) -> dict:
    """Check admin credentials and return the admin token."""
    return use_case.execute(request.username, request.password)
