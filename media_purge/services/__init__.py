"""Shared services for the purge actions."""
from .config_manager import AppConfig, ConfigManager
from .record_client import RecordClient
from .archive_manager import ArchiveManager


__all__ = ['AppConfig', 'ConfigManager', 'RecordClient', 'ArchiveManager']
