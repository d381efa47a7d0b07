"""Custom exceptions for the media purge tool."""
from typing import Optional


class PurgeError(Exception):
    """Base exception for purge errors."""
    pass


class ConfigLoadError(PurgeError):
    """Raised when configuration is missing or invalid."""
    pass


class RemoteQueryError(PurgeError):
    """Raised when a record query is rejected by the API."""

    def __init__(self, status: Optional[int], body: str):
        self.status = status
        self.body = body
        super().__init__(f"Airtable API error: {status} - {body}")


class RemoteMutationError(PurgeError):
    """Raised when a record update is rejected by the API."""

    def __init__(self, record_id: str, status: Optional[int], body: str):
        self.record_id = record_id
        self.status = status
        self.body = body
        super().__init__(f"Failed to update record {record_id}: {status} - {body}")


class LocalDeleteError(PurgeError):
    """Raised when a local archive folder cannot be removed."""

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not delete {path}: {reason}")
