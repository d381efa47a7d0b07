"""Client-side pacing between API calls."""
from abc import ABC, abstractmethod
import time

DEFAULT_DELAY = 0.1  # 100ms between record updates


class RateLimiter(ABC):
    """Strategy called between consecutive API mutations."""

    @abstractmethod
    def before_next(self) -> None:
        """Block until the next call may be issued."""
        pass


class FixedDelayRateLimiter(RateLimiter):
    """Sleeps a fixed delay after each call."""

    def __init__(self, delay: float = DEFAULT_DELAY):
        self.delay = delay

    def before_next(self) -> None:
        time.sleep(self.delay)


class NoDelayRateLimiter(RateLimiter):

    def before_next(self) -> None:
        pass
