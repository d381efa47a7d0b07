"""
Bulk cleanup of generated media.

Clears generated images and videos from the Airtable generation table
(records are kept) and removes locally downloaded generation folders,
always behind an explicit confirmation.

Architecture:
- base/: guarded action pipeline, rate limiting, exceptions
- services/: configuration, Airtable client, local archive
- handlers/: concrete purge actions
- models/: records, impact summaries and tallies
- factory.py: builds actions from action_definitions.json
- controller.py: interactive menu
"""
import logging

from .factory import ActionFactory
from .controller import InteractiveController, MENU_OPTIONS
from .services.config_manager import AppConfig, ConfigManager
from .services.record_client import RecordClient
from .services.archive_manager import ArchiveManager
from .base.guarded_action import BaseGuardedAction, run_guarded_action
from .base.exceptions import (
    PurgeError, ConfigLoadError, RemoteQueryError, RemoteMutationError, LocalDeleteError,
)
from .models.record import Record
from .models.tally import Tally
from .models.impact_summary import ImpactSummary

__version__ = "1.0.0"

__all__ = [
    'ActionFactory', 'InteractiveController', 'MENU_OPTIONS',
    'AppConfig', 'ConfigManager', 'RecordClient', 'ArchiveManager',
    'BaseGuardedAction', 'run_guarded_action',
    'PurgeError', 'ConfigLoadError', 'RemoteQueryError', 'RemoteMutationError',
    'LocalDeleteError',
    'Record', 'Tally', 'ImpactSummary',
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
