"""
Unit tests for SendContactMessageUseCase
"""
import pytest

from cloud_saas.application.dto.contact_dto import ContactRequest
from cloud_saas.application.use_cases.contact.send_contact_message import SendContactMessageUseCase
from cloud_saas.core.exceptions import EmailDeliveryError, ValidationError


class TestSendContactMessageUseCase:
    @pytest.mark.asyncio
    async def test_sends_admin_then_confirmation(self, mock_email_service, settings):
        use_case = SendContactMessageUseCase(mock_email_service, settings)
        await use_case.execute(ContactRequest(name="Ada", email="ada@x.com", query="Pricing?"))

        assert mock_email_service.send_html.await_count == 2
        admin_call, user_call = mock_email_service.send_html.await_args_list
        assert admin_call.kwargs["to_email"] == "admin@example.com"
        assert admin_call.kwargs["reply_to"] == "ada@x.com"
        assert "New Contact Message" in admin_call.kwargs["subject"]
        assert user_call.kwargs["to_email"] == "ada@x.com"
        assert "We Received Your Message" in user_call.kwargs["subject"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("field", ["name", "email", "query"])
    async def test_blank_field_sends_nothing(self, mock_email_service, settings, field):
        data = {"name": "Ada", "email": "ada@x.com", "query": "Pricing?"}
        data[field] = " "

        with pytest.raises(ValidationError):
            await SendContactMessageUseCase(mock_email_service, settings).execute(ContactRequest(**data))
        mock_email_service.send_html.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_admin_failure_skips_confirmation(self, mock_email_service, settings):
        mock_email_service.send_html.side_effect = EmailDeliveryError("smtp down")

        with pytest.raises(EmailDeliveryError):
            await SendContactMessageUseCase(mock_email_service, settings).execute(
                ContactRequest(name="Ada", email="ada@x.com", query="Pricing?")
            )
        assert mock_email_service.send_html.await_count == 1
