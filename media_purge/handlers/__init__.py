"""Purge action implementations."""
from .clear_field_handler import ClearFieldAction
from .archive_handler import DeleteArchiveAction

__all__ = ['ClearFieldAction', 'DeleteArchiveAction']
