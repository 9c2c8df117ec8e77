from abc import ABC, abstractmethod
from typing import Optional
from ..models.user import User


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""

    @abstractmethod
    async def ensure_indexes(self) -> None:
        """Create the unique index on email (idempotent)"""
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find user by email address (exact, case-sensitive match)"""
        pass

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find user by ID"""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """
        Save user (create when ``user.id`` is None, otherwise update).

        Raises ConflictError when the store rejects a duplicate email.
        """
        pass
