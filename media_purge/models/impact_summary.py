"""Impact summary shown before a destructive action."""
from dataclasses import dataclass, field
from typing import Any, List


@dataclass
class ImpactSummary:
    """What an action is about to remove.

    ``item_count`` counts media items (or folders), ``container_count`` the
    records (or folders) holding them. ``items`` keeps the processing order.
    """
    label: str
    item_count: int = 0
    container_count: int = 0
    items: List[Any] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return self.container_count == 0
