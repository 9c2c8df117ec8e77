# Standard library imports
import asyncio
import logging

# Local application imports
from ....core.config import Settings
from ....core.exceptions import InvalidCredentialsError
from ....core.security import verify_password, create_jwt_token
from ....domain.repositories.user_repository import UserRepository
from ...dto.auth_dto import UserLoginRequest, TokenResponse
from ...validation import require_fields

logger = logging.getLogger(__name__)


class LoginUserUseCase:
    """Use case for authenticating a user and generating JWT token"""

    def __init__(self, user_repository: UserRepository, settings: Settings) -> None:
        self.user_repository = user_repository
        self.settings = settings

    async def execute(self, request: UserLoginRequest) -> TokenResponse:
        """
        Authenticate user and generate access token

        Unknown email and wrong password raise the same error so callers
        cannot tell which accounts exist. Earlier tokens stay valid.

        Args:
            request: Login request with email and password

        Returns:
            TokenResponse with a fresh token

        Raises:
            ValidationError: If either field is missing or blank
            InvalidCredentialsError: If the email/password pair does not match
        """
        require_fields(request.email, request.password)

        user = await self.user_repository.find_by_email(request.email.strip())
        if user is None:
            raise InvalidCredentialsError()

        password_ok = await asyncio.to_thread(
            verify_password, request.password, user.hashed_password
        )
        if not password_ok:
            raise InvalidCredentialsError()

        user_id = user.id or ""
        token = create_jwt_token({"sub": user_id, "userId": user_id}, self.settings)
        logger.info(f"User {user_id} logged in")
        return TokenResponse(token=token, user_id=user_id)
