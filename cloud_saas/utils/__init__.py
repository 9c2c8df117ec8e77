"""Utility modules for the Cloud SaaS backend."""

from .datetime_utils import utc_now, ensure_utc
from .email_service import EmailService, build_admin_notification, build_user_confirmation

__all__ = [
    "utc_now",
    "ensure_utc",
    "EmailService",
    "build_admin_notification",
    "build_user_confirmation",
]
