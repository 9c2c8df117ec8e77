from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class UserRegistrationRequest(BaseModel):
    """DTO for user registration request (blank checks happen in the use case)"""
    model_config = ConfigDict(populate_by_name=True)

    full_name: Optional[str] = Field(default=None, alias="fullName")
    email: Optional[str] = None
    country: Optional[str] = None
    password: Optional[str] = None


class UserLoginRequest(BaseModel):
    """DTO for user login request"""
    email: Optional[str] = None
    password: Optional[str] = None


class ForgotPasswordRequest(BaseModel):
    """DTO for password reset request"""
    model_config = ConfigDict(populate_by_name=True)

    email: Optional[str] = None
    new_password: Optional[str] = Field(default=None, alias="newPassword")


class TokenResponse(BaseModel):
    """DTO for a freshly issued bearer token"""
    model_config = ConfigDict(populate_by_name=True)

    token: str
    user_id: str = Field(alias="userId")


class AuthResponse(TokenResponse):
    """Wire response for register/login: {msg, token, userId}"""
    msg: str


class MessageResponse(BaseModel):
    """Wire response carrying only a message"""
    msg: str
