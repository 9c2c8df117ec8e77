from .auth import (
    RegisterUserUseCase,
    LoginUserUseCase,
    ResetPasswordUseCase,
    GetCurrentUserUseCase,
)
from .contact import SendContactMessageUseCase

__all__ = [
    "RegisterUserUseCase",
    "LoginUserUseCase",
    "ResetPasswordUseCase",
    "GetCurrentUserUseCase",
    "SendContactMessageUseCase",
]
