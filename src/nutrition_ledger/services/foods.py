"""Saved food catalog service."""

import logging
from copy import deepcopy
from dataclasses import dataclass, replace
from typing import Protocol
from uuid import UUID

from nutrition_ledger.domain.errors import (
    DuplicateIdError,
    InvalidPortionError,
    NotFoundError,
)
from nutrition_ledger.domain.models import Food, MacroGoals
from nutrition_ledger.services import composer
from nutrition_ledger.services.ingredients import IngredientCatalog
from nutrition_ledger.services.notifier import ChangeNotifier

_logger = logging.getLogger(__name__)

_UNSET = object()


class FoodRepository(Protocol):
    """Storage interface for saved foods."""

    def save(self, food: Food) -> None:
        """Insert or replace a food."""

    def get(self, food_id: UUID) -> Food | None:
        """Return a food by id, if present."""

    def delete(self, food_id: UUID) -> bool:
        """Delete a food and report whether it existed."""

    def list_all(self) -> list[Food]:
        """Return all foods in insertion order."""

    def clear(self) -> None:
        """Remove every food."""


@dataclass
class FoodCatalog:
    """Application service for saved foods and their composition."""

    repository: FoodRepository
    ingredient_catalog: IngredientCatalog
    notifier: ChangeNotifier

    def add(self, food: Food) -> UUID:
        """Store a copy of a food and return its id."""
        _validate_portion(food.portion_size)
        if self.repository.get(food.id) is not None:
            raise DuplicateIdError("food", food.id)
        self.repository.save(deepcopy(food))
        _logger.info("Food added: id=%s", food.id)
        self.notifier.emit("foods", "added", food.id)
        return food.id

    def create(
        self,
        name: str,
        portion_name: str = "portion",
        portion_size: float = 1.0,
        manual_macros: MacroGoals | None = None,
    ) -> Food:
        """Create an empty food and return it."""
        food = Food(
            name=name,
            portion_name=portion_name,
            portion_size=portion_size,
            manual_macros=manual_macros,
        )
        self.add(food)
        return food

    def get(self, food_id: UUID) -> Food:
        """Return a food or raise NotFoundError."""
        food = self.repository.get(food_id)
        if food is None:
            raise NotFoundError("food", food_id)
        return food

    def update(
        self,
        food_id: UUID,
        *,
        name: str | None = None,
        portion_name: str | None = None,
        portion_size: float | None = None,
        manual_macros: MacroGoals | None | object = _UNSET,
    ) -> Food:
        """Update food attributes; pass manual_macros=None to clear them."""
        current = self.get(food_id)
        changes: dict[str, object] = {}
        if name is not None:
            changes["name"] = name
        if portion_name is not None:
            changes["portion_name"] = portion_name
        if portion_size is not None:
            _validate_portion(portion_size)
            changes["portion_size"] = float(portion_size)
        if manual_macros is not _UNSET:
            changes["manual_macros"] = manual_macros
        updated = replace(current, **changes)
        self._store(updated, "updated")
        return updated

    def remove(self, food_id: UUID) -> None:
        """Delete a food; diary entries keep their own snapshot."""
        if not self.repository.delete(food_id):
            raise NotFoundError("food", food_id)
        _logger.info("Food removed: id=%s", food_id)
        self.notifier.emit("foods", "removed", food_id)

    def list_foods(self, name_contains: str | None = None) -> list[Food]:
        """List foods whose name contains the text, ignoring case."""
        foods = self.repository.list_all()
        if not name_contains:
            return foods
        needle = name_contains.casefold()
        return [food for food in foods if needle in food.name.casefold()]

    def add_ingredient(self, food_id: UUID, ingredient_id: UUID, amount: float) -> Food:
        """Embed a copy of a catalog ingredient into a saved food."""
        food = self.get(food_id)
        ingredient = self.ingredient_catalog.get(ingredient_id)
        updated = composer.add_ingredient(food, ingredient, amount)
        self._store(updated, "updated")
        return updated

    def remove_ingredient(self, food_id: UUID, index: int) -> Food:
        """Drop the ingredient at index from a saved food."""
        updated = composer.remove_ingredient(self.get(food_id), index)
        self._store(updated, "updated")
        return updated

    def totals(self, food_id: UUID) -> MacroGoals:
        """Return per-portion macros of a saved food."""
        return composer.compute_totals(self.get(food_id))

    def _store(self, food: Food, action: str) -> None:
        self.repository.save(food)
        _logger.info("Food %s: id=%s", action, food.id)
        self.notifier.emit("foods", action, food.id)


def _validate_portion(portion_size: float) -> None:
    if not composer.is_positive(portion_size):
        raise InvalidPortionError(portion_size)
