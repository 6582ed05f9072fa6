"""Aggregation of diary entries into macro totals and goal progress."""

import math
from collections.abc import Iterable, Sequence

from nutrition_ledger.domain.models import DiaryEntry, Macro, MacroGoals, MealType
from nutrition_ledger.domain.summary import Contribution, Progress
from nutrition_ledger.services.composer import ZERO_MACROS, compute_totals


def entry_totals(entry: DiaryEntry) -> MacroGoals:
    """Return the macros of one entry: food totals times servings."""
    return compute_totals(entry.food).scaled(entry.portion_size)


def totals(entries: Iterable[DiaryEntry]) -> MacroGoals:
    """Sum macros over entries."""
    total = ZERO_MACROS
    for entry in entries:
        total = total + entry_totals(entry)
    return total


def progress(value: float, goal: float) -> Progress:
    """Return the clamped fraction of a goal reached and its percentage."""
    if goal <= 0:
        return Progress(fraction=0.0, percent=0)
    ratio = value / goal
    if math.isnan(ratio):
        return Progress(fraction=0.0, percent=0)
    fraction = min(max(ratio, 0.0), 1.0)
    return Progress(fraction=fraction, percent=round(fraction * 100))


def progress_all(values: MacroGoals, goals: MacroGoals) -> dict[Macro, Progress]:
    """Return progress for every macro."""
    return {
        macro: progress(values.value(macro), goals.value(macro)) for macro in Macro
    }


def breakdown(entries: Iterable[DiaryEntry], macro: Macro) -> list[Contribution]:
    """Return how much of one macro each entry contributed."""
    return [
        Contribution(
            food_name=entry.food.name,
            value=entry_totals(entry).value(Macro(macro)),
        )
        for entry in entries
    ]


def group_by_meal_type(
    entries: Sequence[DiaryEntry],
) -> dict[MealType, list[DiaryEntry]]:
    """Bucket entries by meal type, keeping a bucket for every meal type."""
    groups: dict[MealType, list[DiaryEntry]] = {meal: [] for meal in MealType}
    for entry in entries:
        groups[entry.meal_type].append(entry)
    return groups
