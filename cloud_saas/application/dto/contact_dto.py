from typing import Optional

from pydantic import BaseModel


class ContactRequest(BaseModel):
    """DTO for a contact-form submission"""
    name: Optional[str] = None
    email: Optional[str] = None
    query: Optional[str] = None
