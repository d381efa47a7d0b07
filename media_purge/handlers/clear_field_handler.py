"""Airtable media field clearing action."""
from typing import Dict, Optional

from ..base.exceptions import RemoteMutationError
from ..base.guarded_action import BaseGuardedAction
from ..base.rate_limiter import FixedDelayRateLimiter, RateLimiter
from ..models.impact_summary import ImpactSummary
from ..models.tally import Tally
from ..services.record_client import RecordClient


class ClearFieldAction(BaseGuardedAction):
    """Empties one media field on every record where it is set."""

    def __init__(self, name: str, definition: Dict, client: RecordClient,
                 rate_limiter: Optional[RateLimiter] = None):
        super().__init__(name, definition)
        self.field_name = definition['field']
        self.client = client
        self.rate_limiter = rate_limiter or FixedDelayRateLimiter()

    @classmethod
    def from_factory(cls, name: str, definition: Dict, factory) -> "ClearFieldAction":
        return cls(name, definition, factory.client, factory.rate_limiter)

    def compute_impact_summary(self) -> ImpactSummary:
        self.logger.info(f"\n📋 Searching for records with {self.label} in Airtable...")
        records = self.client.fetch_records_with_non_empty_field(self.field_name)
        return ImpactSummary(
            label=self.label,
            item_count=sum(record.media_count(self.field_name) for record in records),
            container_count=len(records),
            items=records,
        )

    def report_empty(self) -> None:
        self.logger.info(f"✅ No {self.label} to delete in Airtable")

    def execute(self, summary: ImpactSummary) -> Tally:
        self.logger.info(f"\n🗑️  Deleting {self.label} from Airtable...\n")
        tally = Tally()

        for record in summary.items:
            try:
                self.client.clear_field(record.record_id, self.field_name)
            except RemoteMutationError as e:
                self.logger.error(f"❌ [{record.record_id}] {record.short_prompt} Error: {e}")
                tally.failed += 1
                continue

            self.logger.info(f"✅ [{record.record_id}] {record.short_prompt}")
            tally.success += 1
            self.rate_limiter.before_next()

        return tally
