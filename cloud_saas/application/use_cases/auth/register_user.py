# Standard library imports
import asyncio
import logging

# Local application imports
from ....core.config import Settings
from ....core.exceptions import ConflictError, InternalError
from ....core.security import hash_password, create_jwt_token
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ...dto.auth_dto import UserRegistrationRequest, TokenResponse
from ...validation import require_fields

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Use case for registering a new user"""

    def __init__(self, user_repository: UserRepository, settings: Settings) -> None:
        self.user_repository = user_repository
        self.settings = settings

    async def execute(self, request: UserRegistrationRequest) -> TokenResponse:
        """
        Register a new user and issue a bearer token

        Args:
            request: Registration request with user details

        Returns:
            TokenResponse with the new user's token and ID

        Raises:
            ValidationError: If any field is missing or blank
            ConflictError: If a user with this email already exists
            InternalError: If hashing or storage fails
        """
        require_fields(request.full_name, request.email, request.country, request.password)
        email = request.email.strip()

        # The unique index is authoritative; this lookup only avoids a wasted hash
        existing_user = await self.user_repository.find_by_email(email)
        if existing_user is not None:
            raise ConflictError()

        try:
            hashed_password = await asyncio.to_thread(
                hash_password, request.password, self.settings.bcrypt_rounds
            )
        except ValueError as e:
            raise InternalError(f"Password hashing failed: {e}") from e

        new_user = User(
            id=None,  # Will be set by repository
            full_name=request.full_name.strip(),
            email=email,
            country=request.country.strip(),
            hashed_password=hashed_password,
        )

        # A concurrent duplicate surfaces here as ConflictError from the store
        saved_user = await self.user_repository.save(new_user)
        user_id = saved_user.id or ""

        token = create_jwt_token({"sub": user_id, "userId": user_id}, self.settings)
        logger.info(f"Registered user {user_id}")
        return TokenResponse(token=token, user_id=user_id)
