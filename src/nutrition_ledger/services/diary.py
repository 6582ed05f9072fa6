"""Diary ledger service."""

import logging
from copy import deepcopy
from dataclasses import dataclass
from datetime import date, datetime
from typing import Protocol
from uuid import UUID
from zoneinfo import ZoneInfo

from nutrition_ledger.domain.errors import InvalidPortionError, NotFoundError
from nutrition_ledger.domain.models import DiaryEntry, Food, MacroGoals, MealType
from nutrition_ledger.services import composer
from nutrition_ledger.services.foods import FoodCatalog
from nutrition_ledger.services.notifier import ChangeNotifier

_logger = logging.getLogger(__name__)


class DiaryRepository(Protocol):
    """Storage interface for diary entries."""

    def append(self, entry: DiaryEntry) -> None:
        """Append an entry."""

    def get(self, entry_id: UUID) -> DiaryEntry | None:
        """Return an entry by id, if present."""

    def delete(self, entry_id: UUID) -> bool:
        """Delete an entry and report whether it existed."""

    def list_all(self) -> list[DiaryEntry]:
        """Return all entries in insertion order."""

    def clear(self) -> None:
        """Remove every entry."""


@dataclass
class DiaryLedger:
    """Application service for dated, categorized diary entries."""

    repository: DiaryRepository
    food_catalog: FoodCatalog
    notifier: ChangeNotifier
    timezone_name: str = "UTC"

    def add_entry(
        self,
        when: date | datetime,
        meal_type: MealType,
        food: Food,
        portion_size: float,
    ) -> UUID:
        """Record a snapshot of a food eaten and return the entry id."""
        if not composer.is_positive(portion_size):
            raise InvalidPortionError(portion_size)
        entry = DiaryEntry(
            date=when,
            meal_type=MealType(meal_type),
            food=deepcopy(food),
            portion_size=float(portion_size),
        )
        self.repository.append(entry)
        _logger.info("Diary entry added: id=%s meal=%s", entry.id, entry.meal_type)
        self.notifier.emit("diary", "added", entry.id)
        return entry.id

    def log_food(
        self,
        when: date | datetime,
        meal_type: MealType,
        food_id: UUID,
        portion_size: float,
    ) -> UUID:
        """Record a saved food from the catalog."""
        return self.add_entry(
            when, meal_type, self.food_catalog.get(food_id), portion_size
        )

    def quick_add(  # noqa: PLR0913
        self,
        when: date | datetime,
        meal_type: MealType,
        name: str,
        macros: MacroGoals,
        servings: float = 1.0,
    ) -> UUID:
        """Record a food given only its macros per serving."""
        return self.add_entry(
            when, meal_type, composer.manual_food(name, macros), servings
        )

    def get(self, entry_id: UUID) -> DiaryEntry:
        """Return an entry or raise NotFoundError."""
        entry = self.repository.get(entry_id)
        if entry is None:
            raise NotFoundError("diary entry", entry_id)
        return entry

    def remove_entry(self, entry_id: UUID) -> None:
        """Delete one diary entry."""
        if not self.repository.delete(entry_id):
            raise NotFoundError("diary entry", entry_id)
        _logger.info("Diary entry removed: id=%s", entry_id)
        self.notifier.emit("diary", "removed", entry_id)

    def query(
        self, day: date | datetime, meal_type: MealType | None = None
    ) -> list[DiaryEntry]:
        """Return entries on the same calendar day, in insertion order."""
        target = self.calendar_day(day)
        return [
            entry
            for entry in self.repository.list_all()
            if self.calendar_day(entry.date) == target
            and (meal_type is None or entry.meal_type == meal_type)
        ]

    def entries(self) -> list[DiaryEntry]:
        """Return every entry in insertion order."""
        return self.repository.list_all()

    def calendar_day(self, value: date | datetime) -> date:
        """Return the local calendar day of a date or timestamp."""
        if isinstance(value, datetime):
            if value.tzinfo is not None:
                return value.astimezone(ZoneInfo(self.timezone_name)).date()
            return value.date()
        return value
