"""Contact form endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends

from storefront.application.use_cases import ListContactMessagesUseCase, SubmitContactMessageUseCase
from storefront.domain.value_objects import RequestMeta
from storefront.presentation.api.v1.dependencies import (
    get_list_contact_messages_use_case,
    get_request_meta,
    get_submit_contact_message_use_case,
    parse_limit,
    require_contact_admin,
)
from storefront.presentation.schemas import (
    ContactMessageRequest,
    ContactMessagesResponse,
    SuccessResponse,
)

router = APIRouter(tags=["contact"])


@router.post("/contact-message", response_model=SuccessResponse)
async def submit_contact_message(
    request: ContactMessageRequest,
    meta: RequestMeta = Depends(get_request_meta),
    use_case: SubmitContactMessageUseCase = Depends(get_submit_contact_message_use_case),
) -> SuccessResponse:
    """Store a contact form submission and notify the shop."""
    await use_case.execute(
        name=request.name,
        email=request.email,
        message=request.message,
        phone=request.phone,
        topic=request.topic,
        source=request.source,
        meta=meta,
    )
    return SuccessResponse(success=True)


@router.get(
    "/contact-messages",
    response_model=ContactMessagesResponse,
    dependencies=[Depends(require_contact_admin)],
)
async def list_contact_messages(
    limit: Optional[int] = Depends(parse_limit),
    use_case: ListContactMessagesUseCase = Depends(get_list_contact_messages_use_case),
) -> dict:
    """List contact messages, newest first (admin only)."""
    return await use_case.execute(limit)
