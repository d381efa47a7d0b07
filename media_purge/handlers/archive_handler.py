"""Local downloads deletion action."""
from typing import Dict

from ..base.guarded_action import BaseGuardedAction
from ..models.impact_summary import ImpactSummary
from ..models.tally import Tally
from ..services.archive_manager import ArchiveManager


class DeleteArchiveAction(BaseGuardedAction):
    """Removes every downloaded generation folder."""

    def __init__(self, name: str, definition: Dict, archive: ArchiveManager):
        super().__init__(name, definition)
        self.archive = archive

    @classmethod
    def from_factory(cls, name: str, definition: Dict, factory) -> "DeleteArchiveAction":
        return cls(name, definition, factory.archive)

    def compute_impact_summary(self) -> ImpactSummary:
        folders = self.archive.list_entries()
        return ImpactSummary(
            label=self.label,
            item_count=len(folders),
            container_count=len(folders),
            items=folders,
        )

    def report_empty(self) -> None:
        self.logger.info("✅ No downloaded files to delete")

    def describe(self, summary: ImpactSummary) -> None:
        self.logger.warning(f"\n⚠️  WARNING: You are about to delete {summary.item_count} {self.label}")
        self.logger.warning("Folders to delete:")
        for folder in summary.items:
            self.logger.warning(f"  - {folder}")
        self.logger.warning("\nThis action CANNOT BE UNDONE!\n")

    def execute(self, summary: ImpactSummary) -> Tally:
        self.logger.info("\n🗑️  Deleting local files...\n")
        deleted = self.archive.delete_all()
        return Tally(success=deleted, failed=max(0, len(summary.items) - deleted))

    def report(self, tally: Tally) -> None:
        self.logger.info("\n========================================")
        self.logger.info(f"✅ {self.title} deleted: {tally.success}")
        self.logger.info("========================================")
