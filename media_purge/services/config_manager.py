"""Configuration management service."""
import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Union
import logging

from ..base.exceptions import ConfigLoadError

DEFAULT_CONFIG_FILE = 'seedream-local/config.json'
CONFIG_ENV_VAR = 'MEDIA_PURGE_CONFIG'
ACTION_DEFINITIONS_FILE = Path(__file__).resolve().parent.parent / 'action_definitions.json'

AIRTABLE_API_URL = 'https://api.airtable.com/v0'
DEFAULT_TABLE = 'Generation'
DEFAULT_DOWNLOADS_DIR = 'downloads'
MAX_RECORDS = 1000


@dataclass(frozen=True)
class AppConfig:
    base_id: str
    token: str
    table: str = DEFAULT_TABLE
    api_url: str = AIRTABLE_API_URL
    downloads_dir: Path = Path(DEFAULT_DOWNLOADS_DIR)
    page_size: int = MAX_RECORDS
    request_timeout: int = 30
    prompt_field: str = 'Prompt'


class ConfigManager:
    """Manages configuration loading and validation."""

    @staticmethod
    def resolve_config_path(config_file: Optional[str] = None) -> Path:
        """Explicit path, then $MEDIA_PURGE_CONFIG, then the default location."""
        return Path(config_file or os.getenv(CONFIG_ENV_VAR) or DEFAULT_CONFIG_FILE)

    @staticmethod
    def load_config(config_file: Union[str, Path]) -> AppConfig:
        """Load configuration from JSON file."""
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                raw = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigLoadError(f"Config error: {e}") from e

        airtable = raw.get('airtable') if isinstance(raw, dict) else None
        if not isinstance(airtable, dict):
            raise ConfigLoadError(f"Config error: missing 'airtable' section in {config_file}")

        missing = [key for key in ('baseId', 'token') if not airtable.get(key)]
        if missing:
            raise ConfigLoadError(f"Config error: missing airtable.{', airtable.'.join(missing)}")

        logging.getLogger(__name__).debug(f"Configuration loaded from {config_file}")
        return AppConfig(
            base_id=airtable['baseId'],
            token=airtable['token'],
            table=airtable.get('table', DEFAULT_TABLE),
            downloads_dir=Path(raw.get('downloads_dir', DEFAULT_DOWNLOADS_DIR)),
        )

    @staticmethod
    def load_action_definitions(action_name: str) -> Dict:
        """Load the definition of a single purge action."""
        try:
            with open(ACTION_DEFINITIONS_FILE, 'r', encoding='utf-8') as f:
                all_definitions = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigLoadError(f"Action definitions error: {e}") from e

        if action_name not in all_definitions:
            raise ConfigLoadError(f"Unknown action: {action_name}")
        return all_definitions[action_name]
