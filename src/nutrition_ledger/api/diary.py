"""Diary and goal endpoints."""

from __future__ import annotations

from datetime import date  # noqa: TC003
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Query, Request, Response, status

from nutrition_ledger.api.schemas import (
    ContributionOut,
    DailySummaryOut,
    DiaryEntryIn,
    DiaryEntryOut,
    MacroValues,
    QuickAddIn,
)
from nutrition_ledger.domain.models import Macro, MealType

if TYPE_CHECKING:
    from nutrition_ledger.containers import AppContainer

router = APIRouter(tags=["diary"])


def _container(request: Request) -> AppContainer:
    return request.app.state.container


@router.get("/diary")
async def list_entries(
    request: Request,
    day: date = Query(alias="date"),
    meal_type: MealType | None = None,
) -> list[DiaryEntryOut]:
    """Return entries for a calendar day, optionally for one meal type."""
    entries = _container(request).diary.query(day, meal_type)
    return [DiaryEntryOut.from_domain(entry) for entry in entries]


@router.post("/diary", status_code=status.HTTP_201_CREATED)
async def log_food(request: Request, payload: DiaryEntryIn) -> DiaryEntryOut:
    """Log a saved food to the diary."""
    diary = _container(request).diary
    entry_id = diary.log_food(
        payload.logged_at, payload.meal_type, payload.food_id, payload.portion_size
    )
    return DiaryEntryOut.from_domain(diary.get(entry_id))


@router.post("/diary/quick-add", status_code=status.HTTP_201_CREATED)
async def quick_add(request: Request, payload: QuickAddIn) -> DiaryEntryOut:
    """Log a food given only its macros per serving."""
    diary = _container(request).diary
    entry_id = diary.quick_add(
        payload.logged_at,
        payload.meal_type,
        payload.name,
        payload.macros.to_domain(),
        payload.servings,
    )
    return DiaryEntryOut.from_domain(diary.get(entry_id))


@router.get("/diary/summary")
async def daily_summary(
    request: Request, day: date = Query(alias="date")
) -> DailySummaryOut:
    """Return totals, goal progress and meal buckets for a day."""
    summary = _container(request).summary_service.daily(day)
    return DailySummaryOut.from_domain(summary)


@router.get("/diary/breakdown")
async def macro_breakdown(
    request: Request, macro: Macro, day: date = Query(alias="date")
) -> list[ContributionOut]:
    """Return each food's contribution to one macro on a day."""
    rows = _container(request).summary_service.breakdown(day, macro)
    return [ContributionOut.from_domain(row) for row in rows]


@router.delete("/diary/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_entry(request: Request, entry_id: UUID) -> Response:
    """Delete one diary entry."""
    _container(request).diary.remove_entry(entry_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/goals")
async def get_goals(request: Request) -> MacroValues:
    """Return the current macro goals."""
    return MacroValues.from_domain(_container(request).goal_store.get())


@router.put("/goals")
async def set_goals(request: Request, payload: MacroValues) -> MacroValues:
    """Replace the macro goals."""
    goal_store = _container(request).goal_store
    goal_store.set(payload.to_domain())
    return MacroValues.from_domain(goal_store.get())
