"""Factory for creating purge actions."""
from typing import Dict, Optional, Type

from .base.exceptions import ConfigLoadError
from .base.guarded_action import BaseGuardedAction
from .base.rate_limiter import RateLimiter
from .handlers.archive_handler import DeleteArchiveAction
from .handlers.clear_field_handler import ClearFieldAction
from .services.archive_manager import ArchiveManager
from .services.config_manager import ConfigManager
from .services.record_client import RecordClient


class ActionFactory:
    """Builds guarded actions from their packaged definitions."""

    _action_types: Dict[str, Type[BaseGuardedAction]] = {
        'clear_field': ClearFieldAction,
        'delete_archive': DeleteArchiveAction,
    }

    def __init__(self, client: RecordClient, archive: ArchiveManager,
                 rate_limiter: Optional[RateLimiter] = None):
        self.client = client
        self.archive = archive
        self.rate_limiter = rate_limiter

    def create_action(self, action_name: str) -> BaseGuardedAction:
        """Create the action registered under ``action_name``."""
        definition = ConfigManager.load_action_definitions(action_name)
        action_type = definition.get('type')

        if action_type not in self._action_types:
            raise ConfigLoadError(f"Unknown action type '{action_type}' for {action_name}")

        return self._action_types[action_type].from_factory(action_name, definition, self)
