"""Abstract base class for confirm-then-mutate bulk actions."""
from abc import ABC, abstractmethod
from typing import Callable, Dict, Optional
import logging

from ..models.impact_summary import ImpactSummary
from ..models.tally import Tally

logger = logging.getLogger(__name__)

Confirm = Callable[[ImpactSummary], bool]


class BaseGuardedAction(ABC):
    """Abstract base class that all destructive actions must implement."""

    def __init__(self, name: str, definition: Dict):
        self.name = name
        self.definition = definition
        self.label = definition.get('label', name)
        self.title = definition.get('title', self.label.capitalize())
        self.logger = logging.getLogger(self.__class__.__name__)

    @classmethod
    @abstractmethod
    def from_factory(cls, name: str, definition: Dict, factory) -> "BaseGuardedAction":
        """Build the action from the collaborators held by an ActionFactory."""
        pass

    @abstractmethod
    def compute_impact_summary(self) -> ImpactSummary:
        """Collect the items the action would remove, without touching them."""
        pass

    @abstractmethod
    def execute(self, summary: ImpactSummary) -> Tally:
        """Remove everything listed in the summary."""
        pass

    def describe(self, summary: ImpactSummary) -> None:
        """Announce the impact before asking for confirmation."""
        self.logger.warning(
            f"\n⚠️  WARNING: You are about to delete {summary.item_count} "
            f"{self.label} from {summary.container_count} records"
        )
        self.logger.warning("This action CANNOT BE UNDONE!\n")

    def report_empty(self) -> None:
        self.logger.info(f"✅ No {self.label} to delete")

    def report(self, tally: Tally) -> None:
        self.logger.info("\n========================================")
        self.logger.info(f"✅ {self.title} deleted: {tally.success}")
        self.logger.info(f"❌ Errors: {tally.failed}")
        self.logger.info("========================================")


def run_guarded_action(action: BaseGuardedAction, confirm: Confirm) -> Optional[Tally]:
    """Compute impact, ask for confirmation, then execute and report.

    Returns None when nothing was executed (empty impact or declined).
    """
    summary = action.compute_impact_summary()
    if summary.is_empty:
        action.report_empty()
        return None

    action.describe(summary)
    if not confirm(summary):
        logger.info("❌ Operation cancelled")
        return None

    tally = action.execute(summary)
    action.report(tally)
    return tally
