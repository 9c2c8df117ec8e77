from .register_user import RegisterUserUseCase
from .login_user import LoginUserUseCase
from .reset_password import ResetPasswordUseCase
from .get_current_user import GetCurrentUserUseCase

__all__ = [
    "RegisterUserUseCase",
    "LoginUserUseCase",
    "ResetPasswordUseCase",
    "GetCurrentUserUseCase",
]
