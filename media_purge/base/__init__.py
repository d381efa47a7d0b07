"""Base classes and interfaces for the purge actions."""
from .guarded_action import BaseGuardedAction, run_guarded_action
from .rate_limiter import RateLimiter, FixedDelayRateLimiter, NoDelayRateLimiter
from .exceptions import (
    PurgeError, ConfigLoadError, RemoteQueryError, RemoteMutationError, LocalDeleteError,
)

__all__ = [
    'BaseGuardedAction', 'run_guarded_action',
    'RateLimiter', 'FixedDelayRateLimiter', 'NoDelayRateLimiter',
    'PurgeError', 'ConfigLoadError', 'RemoteQueryError', 'RemoteMutationError',
    'LocalDeleteError',
]
