# External package imports
from fastapi import APIRouter, HTTPException, status

# Local application imports
from ...application.dto.auth_dto import MessageResponse
from ...application.dto.contact_dto import ContactRequest
from ...application.use_cases.contact.send_contact_message import SendContactMessageUseCase
from ...core.exceptions import ValidationError
from ...di.container import get_container


router = APIRouter(tags=["contact"])


@router.post("/contact", response_model=MessageResponse)
async def send_contact_message(request: ContactRequest) -> MessageResponse:
    """
    Forward a contact-form message to the administrator and confirm to the sender

    Args:
        request: Contact form fields

    Returns:
        MessageResponse once both emails are sent
    """
    container = get_container()
    contact_use_case = container.get(SendContactMessageUseCase)

    try:
        await contact_use_case.execute(request)
    except ValidationError as exception:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=exception.user_message
        )
    return MessageResponse(msg="Message sent successfully to admin and user")
