"""Customer profile endpoint."""

from fastapi import APIRouter, Depends

from storefront.application.use_cases import SaveProfileUseCase
from storefront.domain.value_objects import RequestMeta
from storefront.presentation.api.v1.dependencies import get_request_meta, get_save_profile_use_case
from storefront.presentation.schemas import SaveProfileRequest, SuccessResponse

router = APIRouter(tags=["profiles"])


@router.post("/save-profile", response_model=SuccessResponse)
async def save_profile(
    request: SaveProfileRequest,
    meta: RequestMeta = Depends(get_request_meta),
    use_case: SaveProfileUseCase = Depends(get_save_profile_use_case),
) -> SuccessResponse:
    """Store a snapshot of the shopper's details and cart."""
    await use_case.execute(
        email=request.email,
        name=request.name,
        phone=request.phone,
        address=request.address,
        cart=request.cart,
        meta=meta,
    )
    return SuccessResponse(success=True)
