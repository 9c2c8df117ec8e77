from .config import Settings
from .exceptions import (
    AccountError,
    AuthenticationError,
    ConfigurationError,
    ConflictError,
    EmailDeliveryError,
    InternalError,
    InvalidCredentialsError,
    NotFoundError,
    ValidationError,
)
from .security import (
    hash_password,
    verify_password,
    create_jwt_token,
    decode_jwt_token,
    token_subject,
)

__all__ = [
    "Settings",
    "AccountError",
    "AuthenticationError",
    "ConfigurationError",
    "ConflictError",
    "EmailDeliveryError",
    "InternalError",
    "InvalidCredentialsError",
    "NotFoundError",
    "ValidationError",
    "hash_password",
    "verify_password",
    "create_jwt_token",
    "decode_jwt_token",
    "token_subject",
]
