# Standard library imports
import logging

# Local application imports
from ....core.config import Settings
from ....utils.datetime_utils import utc_now
from ....utils.email_service import (
    EmailService,
    build_admin_notification,
    build_user_confirmation,
)
from ...dto.contact_dto import ContactRequest
from ...validation import require_fields

logger = logging.getLogger(__name__)


class SendContactMessageUseCase:
    """Use case for forwarding a contact-form message to the admin and confirming to the visitor"""

    def __init__(self, email_service: EmailService, settings: Settings) -> None:
        self.email_service = email_service
        self.settings = settings

    async def execute(self, request: ContactRequest) -> None:
        """
        Send the admin notification, then the visitor confirmation

        Nothing is retried; if the second send fails the first is not undone.

        Args:
            request: Name, email and message of the visitor

        Raises:
            ValidationError: If any field is missing or blank
            EmailDeliveryError: If either email cannot be sent
        """
        require_fields(request.name, request.email, request.query)
        name = request.name.strip()
        email = request.email.strip()
        query = request.query.strip()

        brand = self.settings.email_from_name
        now = utc_now()
        received_at = now.strftime("%Y-%m-%d %H:%M:%S UTC")

        await self.email_service.send_html(
            to_email=self.settings.admin_email,
            subject=f"📩 New Contact Message - {brand}",
            html_body=build_admin_notification(brand, name, email, query, received_at, now.year),
            sender_name=brand,
            reply_to=email,
        )
        await self.email_service.send_html(
            to_email=email,
            subject=f"✅ We Received Your Message - {brand}",
            html_body=build_user_confirmation(brand, name, query, now.year),
            sender_name=f"{brand} Support",
        )
        logger.info("Contact message forwarded to admin and confirmed to sender")
