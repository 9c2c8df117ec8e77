from typing import TYPE_CHECKING
from ...core.config import Settings
from ...utils.email_service import EmailService
from ...application.use_cases.contact.send_contact_message import SendContactMessageUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ContactProvider:
    """Registers the SMTP email service and the contact-form use case"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        if not container.has(EmailService):
            container.register_singleton(EmailService, EmailService(container.get(Settings)))

        container.register_factory(
            SendContactMessageUseCase,
            lambda: SendContactMessageUseCase(
                email_service=container.get(EmailService),
                settings=container.get(Settings),
            )
        )
