"""Hand-off of the in-memory ledger state to and from a persistence layer."""

import logging
from dataclasses import dataclass, field

from nutrition_ledger.domain.models import DiaryEntry, Food, Ingredient, MacroGoals
from nutrition_ledger.services.diary import DiaryLedger
from nutrition_ledger.services.foods import FoodCatalog
from nutrition_ledger.services.goals import GoalStore
from nutrition_ledger.services.ingredients import IngredientCatalog
from nutrition_ledger.services.notifier import ChangeNotifier

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LedgerSnapshot:
    """Complete ledger state as plain values."""

    ingredients: list[Ingredient] = field(default_factory=list)
    foods: list[Food] = field(default_factory=list)
    diary: list[DiaryEntry] = field(default_factory=list)
    goals: MacroGoals = field(default_factory=MacroGoals)


@dataclass
class SnapshotService:
    """Exports and restores the whole ledger state."""

    ingredient_catalog: IngredientCatalog
    food_catalog: FoodCatalog
    diary: DiaryLedger
    goal_store: GoalStore
    notifier: ChangeNotifier

    def export(self) -> LedgerSnapshot:
        """Return the current state."""
        return LedgerSnapshot(
            ingredients=self.ingredient_catalog.repository.list_all(),
            foods=self.food_catalog.repository.list_all(),
            diary=self.diary.repository.list_all(),
            goals=self.goal_store.get(),
        )

    def restore(self, snapshot: LedgerSnapshot) -> None:
        """Replace the current state with a snapshot."""
        ingredients = self.ingredient_catalog.repository
        foods = self.food_catalog.repository
        diary = self.diary.repository
        ingredients.clear()
        foods.clear()
        diary.clear()
        for ingredient in snapshot.ingredients:
            ingredients.save(ingredient)
        for food in snapshot.foods:
            foods.save(food)
        for entry in snapshot.diary:
            diary.append(entry)
        self.goal_store.goals = snapshot.goals
        _logger.info(
            "Ledger restored: ingredients=%s foods=%s entries=%s",
            len(snapshot.ingredients),
            len(snapshot.foods),
            len(snapshot.diary),
        )
        self.notifier.emit("ledger", "restored")
