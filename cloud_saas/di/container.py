# Standard library imports
from typing import Optional

# Local application imports
from ..core.config import Settings
from .base_container import BaseContainer
from .providers import (
    AuthProvider,
    ContactProvider,
    DatabaseProvider,
    RepositoryProvider,
    SettingsProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Settings (SettingsProvider) - the immutable configuration
    2. Database connections (DatabaseProvider) - depends on settings
    3. Repositories (RepositoryProvider) - depends on database
    4. Use cases (AuthProvider, ContactProvider) - depend on repositories/settings
    """

    def __init__(self, settings: Settings) -> None:
        super().__init__()
        self.settings = settings
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: settings → database → repositories → use cases
        """
        SettingsProvider.register(self, self.settings)
        DatabaseProvider.register(self)
        RepositoryProvider.register(self)
        AuthProvider.register(self)
        ContactProvider.register(self)


# Global container instance (singleton pattern)
_container: Optional[BaseContainer] = None


def set_container(container: BaseContainer) -> BaseContainer:
    """
    Install the process-wide container (called once by create_application)

    Returns:
        The installed container
    """
    global _container
    _container = container
    return _container


def get_container() -> BaseContainer:
    """
    Get the global DI container instance

    Returns:
        Container with all dependencies registered

    Raises:
        RuntimeError: If the application has not installed a container yet
    """
    if _container is None:
        raise RuntimeError("DI container is not initialized; call create_application() first")
    return _container
