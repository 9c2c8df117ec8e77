from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ...core.exceptions import ValidationError


@dataclass
class User:
    """Pure domain model for User entity - no external dependencies"""
    id: Optional[str]
    full_name: str
    email: str
    country: str
    hashed_password: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        """Business validations"""
        if not self.full_name or not self.full_name.strip():
            raise ValidationError("Full name is required")
        if not self.email or not self.email.strip():
            raise ValidationError("Email is required")
        if not self.country or not self.country.strip():
            raise ValidationError("Country is required")
        if not self.hashed_password:
            raise ValidationError("Password hash is required")
