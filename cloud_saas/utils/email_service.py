"""
Email service (async).
======================

Sends the contact-form emails: a notification to the site administrator and
a confirmation to the visitor. Both are HTML messages with a shared header
and footer layout. Delivery is fire-and-forget: a failure is reported to the
caller once and never retried.
"""
import html
import logging
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import Optional

import aiosmtplib

from ..core.config import Settings
from ..core.exceptions import EmailDeliveryError

logger = logging.getLogger(__name__)


_WRAPPER_STYLE = "margin:0;padding:0;background:#f4f6f9;font-family:Arial, sans-serif;"
_CONTAINER_STYLE = (
    "max-width:600px;margin:30px auto;background:#ffffff;border-radius:8px;"
    "overflow:hidden;box-shadow:0 5px 15px rgba(0,0,0,0.08);"
)
_HEADER_STYLE = "background:#0d6efd;color:#ffffff;padding:20px;text-align:center;"
_FOOTER_STYLE = "background:#f1f1f1;text-align:center;padding:15px;font-size:12px;color:#666;"
_QUOTE_STYLE = "background:#f8f9fa;padding:12px;border-radius:5px;"


def _layout(title: str, subtitle: str, body: str, footer: str) -> str:
    """Wrap a body fragment in the common header/footer layout."""
    return f"""
<div style="{_WRAPPER_STYLE}">
  <div style="{_CONTAINER_STYLE}">
    <div style="{_HEADER_STYLE}">
      <h2 style="margin:0;">{title}</h2>
      <p style="margin:5px 0 0;">{subtitle}</p>
    </div>
    <div style="padding:25px;color:#333;">
      {body}
    </div>
    <div style="{_FOOTER_STYLE}">
      {footer}
    </div>
  </div>
</div>
"""


def build_admin_notification(
    brand: str, name: str, email: str, query: str, received_at: str, year: int
) -> str:
    """Build the HTML body sent to the administrator for a new inquiry."""
    body = f"""
      <p><strong>Name:</strong> {html.escape(name)}</p>
      <p><strong>Email:</strong> {html.escape(email)}</p>
      <p><strong>Message:</strong></p>
      <div style="{_QUOTE_STYLE}">{html.escape(query)}</div>
      <p style="margin-top:20px;font-size:12px;color:#777;">Received on {html.escape(received_at)}</p>
"""
    footer = f"&copy; {year} {html.escape(brand)}. All rights reserved.<br/>Admin Notification Email"
    return _layout(f"{html.escape(brand)} Platform", "New Contact Inquiry", body, footer)


def build_user_confirmation(brand: str, name: str, query: str, year: int) -> str:
    """Build the HTML confirmation body sent back to the visitor."""
    safe_brand = html.escape(brand)
    body = f"""
      <p>Hi {html.escape(name)},</p>
      <p>Thank you for reaching out to us.</p>
      <p>We&rsquo;ve received your message and our team will respond within 24 hours.</p>
      <h4>Your Message:</h4>
      <div style="{_QUOTE_STYLE}">{html.escape(query)}</div>
      <p style="margin-top:20px;">Best regards,<br/><strong>{safe_brand} Team</strong></p>
"""
    footer = f"&copy; {year} {safe_brand}.<br/>This is an automated confirmation email."
    return _layout(f"{safe_brand} Support", "Thank You For Contacting Us", body, footer)


class EmailService:
    """SMTP sender configured once from application settings."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    @property
    def is_configured(self) -> bool:
        return self.settings.smtp_configured

    async def send_html(
        self,
        to_email: str,
        subject: str,
        html_body: str,
        sender_name: Optional[str] = None,
        reply_to: Optional[str] = None,
    ) -> None:
        """
        Send a single HTML email.

        Args:
            to_email: Recipient address
            subject: Subject line
            html_body: HTML content
            sender_name: Display name for the From header
            reply_to: Optional Reply-To address

        Raises:
            EmailDeliveryError: If SMTP is not configured or the send fails
        """
        settings = self.settings
        if not self.is_configured:
            raise EmailDeliveryError("SMTP not configured. Set EMAIL_USER and EMAIL_PASS")
        if not to_email:
            raise EmailDeliveryError("No recipient address")

        msg = MIMEMultipart("alternative")
        msg["Subject"] = subject
        msg["From"] = f'"{sender_name or settings.email_from_name}" <{settings.email_user}>'
        msg["To"] = to_email
        if reply_to:
            msg["Reply-To"] = reply_to
        msg.attach(MIMEText(html_body, "html", "utf-8"))

        try:
            await aiosmtplib.send(
                msg,
                sender=settings.email_user,
                recipients=[to_email],
                hostname=settings.smtp_host,
                port=settings.smtp_port,
                username=settings.email_user,
                password=settings.email_password,
                use_tls=settings.smtp_use_tls,
            )
        except (aiosmtplib.SMTPException, OSError) as e:
            logger.error("Email send failed | subject=%s | error=%s", subject, e)
            raise EmailDeliveryError(f"Email send failed: {e}") from e

        logger.info("Email sent | subject=%s", subject)
