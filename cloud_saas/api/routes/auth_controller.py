# External package imports
from fastapi import APIRouter, Depends, HTTPException, status

# Local application imports
from ...application.dto.auth_dto import (
    AuthResponse,
    ForgotPasswordRequest,
    MessageResponse,
    UserLoginRequest,
    UserRegistrationRequest,
)
from ...application.dto.user_dto import UserResponse
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...application.use_cases.auth.reset_password import ResetPasswordUseCase
from ...core.exceptions import (
    ConflictError,
    InvalidCredentialsError,
    NotFoundError,
    ValidationError,
)
from ...di.container import get_container
from .dependencies import get_current_user


router = APIRouter(tags=["authentication"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register_user(request: UserRegistrationRequest) -> AuthResponse:
    """
    Register a new user

    Args:
        request: User registration request

    Returns:
        AuthResponse with a bearer token for the new user
    """
    container = get_container()
    register_use_case = container.get(RegisterUserUseCase)

    try:
        result = await register_use_case.execute(request)
    except (ValidationError, ConflictError) as exception:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=exception.user_message
        )
    return AuthResponse(msg="Registration successful", token=result.token, user_id=result.user_id)


@router.post("/login", response_model=AuthResponse)
async def login_user(request: UserLoginRequest) -> AuthResponse:
    """
    Authenticate user and get access token

    Args:
        request: User login request

    Returns:
        AuthResponse with a fresh bearer token
    """
    container = get_container()
    login_use_case = container.get(LoginUserUseCase)

    try:
        result = await login_use_case.execute(request)
    except (ValidationError, InvalidCredentialsError) as exception:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=exception.user_message
        )
    return AuthResponse(msg="Login successful", token=result.token, user_id=result.user_id)


@router.post("/forgot", response_model=MessageResponse)
async def forgot_password(request: ForgotPasswordRequest) -> MessageResponse:
    """
    Overwrite the password of the account registered under ``email``

    Args:
        request: Email and new password

    Returns:
        MessageResponse confirming the reset
    """
    container = get_container()
    reset_use_case = container.get(ResetPasswordUseCase)

    try:
        await reset_use_case.execute(request)
    except (ValidationError, NotFoundError) as exception:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=exception.user_message
        )
    return MessageResponse(msg="Password reset successful")


@router.get("/me", response_model=UserResponse)
async def get_me(current_user: UserResponse = Depends(get_current_user)) -> UserResponse:
    """
    Get current authenticated user information

    Args:
        current_user: Current authenticated user (from dependency)

    Returns:
        UserResponse with user information
    """
    return current_user
