"""Tests for daily summaries and goals."""

from datetime import date

import pytest

from nutrition_ledger.domain.models import Macro, MacroGoals, MealType
from tests.conftest import RecordingSubscriber


def test_daily_summary_reports_totals_and_progress(container) -> None:
    container.goal_store.set(
        MacroGoals(kcals=2000, protein=100, carbs=250, fats=70, sugars=0)
    )
    day = date(2024, 5, 1)
    container.diary.quick_add(
        day, MealType.BREAKFAST, "Porridge", MacroGoals(kcals=500, protein=20), 1
    )
    container.diary.quick_add(
        day, MealType.DINNER, "Steak", MacroGoals(kcals=700, protein=100), 1
    )
    container.diary.quick_add(
        date(2024, 5, 2), MealType.LUNCH, "Pizza", MacroGoals(kcals=900), 1
    )

    summary = container.summary_service.daily(day)

    assert summary.day == day
    assert summary.totals.kcals == pytest.approx(1200)
    assert summary.progress[Macro.KCALS].percent == 60
    assert summary.progress[Macro.PROTEIN].fraction == 1.0
    assert summary.progress[Macro.SUGARS].fraction == 0.0
    assert [e.food.name for e in summary.meals[MealType.BREAKFAST]] == ["Porridge"]
    assert summary.meals[MealType.LUNCH] == []


def test_breakdown_for_a_day(container) -> None:
    day = date(2024, 5, 1)
    container.diary.quick_add(day, MealType.LUNCH, "Soup", MacroGoals(carbs=20), 2)
    container.diary.quick_add(day, MealType.SNACKS, "Apple", MacroGoals(carbs=25), 1)

    rows = container.summary_service.breakdown(day, Macro.CARBS)

    assert [(row.food_name, row.value) for row in rows] == [
        ("Soup", 40),
        ("Apple", 25),
    ]


def test_goal_store_replaces_goals_without_validation(container) -> None:
    subscriber = RecordingSubscriber()
    container.notifier.subscribe(subscriber)
    goals = MacroGoals(kcals=-1, protein=80, carbs=200, fats=60, sugars=40)

    container.goal_store.set(goals)

    assert container.goal_store.get() == goals
    assert [(e.collection, e.action) for e in subscriber.events] == [
        ("goals", "updated")
    ]
