"""
Shared pytest fixtures for cloud_saas tests.
"""
from typing import Dict, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId

from cloud_saas.core.config import Settings
from cloud_saas.core.exceptions import ConflictError, NotFoundError
from cloud_saas.di.base_container import BaseContainer
from cloud_saas.di.providers import AuthProvider, ContactProvider, SettingsProvider
from cloud_saas.domain.models.user import User
from cloud_saas.domain.repositories.user_repository import UserRepository
from cloud_saas.utils.datetime_utils import utc_now
from cloud_saas.utils.email_service import EmailService


class InMemoryUserRepository(UserRepository):
    """Dict-backed repository that rejects duplicate emails like the unique index."""

    def __init__(self) -> None:
        self.users: Dict[str, User] = {}
        self.indexes_ensured = False

    async def ensure_indexes(self) -> None:
        self.indexes_ensured = True

    async def find_by_email(self, email: str) -> Optional[User]:
        for user in self.users.values():
            if user.email == email:
                return user
        return None

    async def find_by_id(self, user_id: str) -> Optional[User]:
        return self.users.get(user_id)

    async def save(self, user: User) -> User:
        for other in self.users.values():
            if other.email == user.email and other.id != user.id:
                raise ConflictError()
        now = utc_now()
        if user.id is None:
            user.id = str(ObjectId())
            user.created_at = now
        elif user.id not in self.users:
            raise NotFoundError()
        user.updated_at = now
        self.users[user.id] = user
        return user


@pytest.fixture
def settings():
    """Settings with a low bcrypt work factor to keep tests fast."""
    return Settings(
        mongo_uri="mongodb://localhost:27017",
        jwt_secret_key="test_jwt_secret",
        mongo_database_name="test_cloud_saas",
        bcrypt_rounds=4,
        email_user="noreply@example.com",
        email_password="smtp-password",
        admin_email="admin@example.com",
    )


@pytest.fixture
def mock_user_repo():
    """Mock UserRepository with async methods."""
    return AsyncMock(spec=UserRepository)


@pytest.fixture
def user_repo():
    return InMemoryUserRepository()


@pytest.fixture
def mock_email_service():
    service = MagicMock(spec=EmailService)
    service.is_configured = True
    service.send_html = AsyncMock(return_value=None)
    return service


@pytest.fixture
def container(settings, user_repo, mock_email_service):
    """Container wired like DIContainer but over the in-memory repo and a mock mailer."""
    test_container = BaseContainer()
    SettingsProvider.register(test_container, settings)
    test_container.register_singleton(UserRepository, user_repo)
    test_container.register_singleton(EmailService, mock_email_service)
    AuthProvider.register(test_container)
    ContactProvider.register(test_container)
    return test_container
