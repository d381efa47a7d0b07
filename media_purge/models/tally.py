"""Per-action result counters."""
from dataclasses import dataclass


@dataclass
class Tally:
    success: int = 0
    failed: int = 0

    @property
    def total(self) -> int:
        return self.success + self.failed
