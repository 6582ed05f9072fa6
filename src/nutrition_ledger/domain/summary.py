"""Domain models for aggregated diary data."""

from dataclasses import dataclass
from datetime import date

from nutrition_ledger.domain.models import DiaryEntry, Macro, MacroGoals, MealType


@dataclass(frozen=True)
class Progress:
    """Progress of a value towards a goal."""

    fraction: float
    percent: int


@dataclass(frozen=True)
class Contribution:
    """Amount of one macro contributed by a diary entry."""

    food_name: str
    value: float


@dataclass(frozen=True)
class DailySummary:
    """Totals, goal progress and meal buckets for one day."""

    day: date
    totals: MacroGoals
    goals: MacroGoals
    progress: dict[Macro, Progress]
    meals: dict[MealType, list[DiaryEntry]]
