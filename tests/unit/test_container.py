"""
Unit tests for the DI container
"""
import pytest

from cloud_saas.application.use_cases.auth.login_user import LoginUserUseCase
from cloud_saas.application.use_cases.contact.send_contact_message import SendContactMessageUseCase
from cloud_saas.core.config import Settings
from cloud_saas.di.base_container import BaseContainer
from cloud_saas.domain.repositories.user_repository import UserRepository


class TestBaseContainer:
    def test_singleton_returns_same_instance(self):
        container = BaseContainer()
        instance = object()
        container.register_singleton("thing", instance)
        assert container.get("thing") is instance

    def test_factory_builds_new_instance_each_time(self):
        container = BaseContainer()
        container.register_factory("thing", object)
        assert container.get("thing") is not container.get("thing")

    def test_unknown_key_raises(self):
        with pytest.raises(KeyError, match="Settings"):
            BaseContainer().get(Settings)


class TestProviders:
    def test_use_cases_share_settings_and_repository(self, container, settings, user_repo):
        login = container.get(LoginUserUseCase)
        assert login.settings is settings
        assert login.user_repository is user_repo
        assert container.get(UserRepository) is user_repo

    def test_contact_use_case_gets_registered_email_service(self, container, mock_email_service):
        assert container.get(SendContactMessageUseCase).email_service is mock_email_service
