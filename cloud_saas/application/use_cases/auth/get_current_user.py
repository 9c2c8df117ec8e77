# Local application imports
from ....core.config import Settings
from ....core.exceptions import AuthenticationError, NotFoundError
from ....core.security import decode_jwt_token, token_subject
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UserResponse


class GetCurrentUserUseCase:
    """Use case for getting current authenticated user from JWT token"""

    def __init__(self, user_repository: UserRepository, settings: Settings) -> None:
        self.user_repository = user_repository
        self.settings = settings

    async def execute(self, token: str) -> UserResponse:
        """
        Get current user from JWT token

        Args:
            token: JWT access token

        Returns:
            UserResponse with user information

        Raises:
            AuthenticationError: If token is invalid, expired or has no user ID
            NotFoundError: If the user no longer exists
        """
        try:
            payload = decode_jwt_token(token, self.settings)
        except ValueError as exception:
            raise AuthenticationError(str(exception)) from exception

        user_id = token_subject(payload)
        if not user_id:
            raise AuthenticationError("Invalid authentication payload: missing user ID")

        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise NotFoundError()

        return UserResponse(
            id=user.id or "",
            full_name=user.full_name,
            email=user.email,
            country=user.country,
        )
