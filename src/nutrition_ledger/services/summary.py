"""Daily summaries built from the diary and the current goals."""

from dataclasses import dataclass
from datetime import date, datetime

from nutrition_ledger.domain.models import Macro
from nutrition_ledger.domain.summary import Contribution, DailySummary
from nutrition_ledger.services import aggregator
from nutrition_ledger.services.diary import DiaryLedger
from nutrition_ledger.services.goals import GoalStore


@dataclass
class SummaryService:
    """Service for per-day totals, goal progress and drill-down."""

    diary: DiaryLedger
    goal_store: GoalStore

    def daily(self, day: date | datetime) -> DailySummary:
        """Return totals, progress and meal buckets for a calendar day."""
        entries = self.diary.query(day)
        day_totals = aggregator.totals(entries)
        goals = self.goal_store.get()
        return DailySummary(
            day=self.diary.calendar_day(day),
            totals=day_totals,
            goals=goals,
            progress=aggregator.progress_all(day_totals, goals),
            meals=aggregator.group_by_meal_type(entries),
        )

    def breakdown(self, day: date | datetime, macro: Macro) -> list[Contribution]:
        """Return the foods contributing to one macro on a calendar day."""
        return aggregator.breakdown(self.diary.query(day), macro)
