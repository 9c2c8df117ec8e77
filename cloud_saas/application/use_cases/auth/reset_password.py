# Standard library imports
import asyncio
import logging

# Local application imports
from ....core.config import Settings
from ....core.exceptions import InternalError, NotFoundError
from ....core.security import hash_password
from ....domain.repositories.user_repository import UserRepository
from ...dto.auth_dto import ForgotPasswordRequest
from ...validation import require_fields

logger = logging.getLogger(__name__)


class ResetPasswordUseCase:
    """
    Use case for overwriting a user's password.

    Knowing the email is enough: there is no emailed reset token and no
    old-password check. No token is issued; the caller logs in afterwards.
    """

    def __init__(self, user_repository: UserRepository, settings: Settings) -> None:
        self.user_repository = user_repository
        self.settings = settings

    async def execute(self, request: ForgotPasswordRequest) -> None:
        """
        Replace the stored password hash

        Args:
            request: Email and new password

        Raises:
            ValidationError: If either field is missing or blank
            NotFoundError: If no user has this email
            InternalError: If hashing or storage fails
        """
        require_fields(request.email, request.new_password)

        user = await self.user_repository.find_by_email(request.email.strip())
        if user is None:
            raise NotFoundError()

        try:
            user.hashed_password = await asyncio.to_thread(
                hash_password, request.new_password, self.settings.bcrypt_rounds
            )
        except ValueError as e:
            raise InternalError(f"Password hashing failed: {e}") from e

        await self.user_repository.save(user)
        logger.info(f"Password reset for user {user.id}")
