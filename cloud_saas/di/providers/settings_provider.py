from typing import TYPE_CHECKING
from ...core.config import Settings

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class SettingsProvider:
    """Registers the one Settings instance built at start-up"""

    @staticmethod
    def register(container: "BaseContainer", settings: Settings) -> None:
        container.register_singleton(Settings, settings)
