from .auth_dto import (
    UserRegistrationRequest,
    UserLoginRequest,
    ForgotPasswordRequest,
    TokenResponse,
    AuthResponse,
    MessageResponse,
)
from .user_dto import UserResponse
from .contact_dto import ContactRequest

__all__ = [
    "UserRegistrationRequest",
    "UserLoginRequest",
    "ForgotPasswordRequest",
    "TokenResponse",
    "AuthResponse",
    "MessageResponse",
    "UserResponse",
    "ContactRequest",
]
