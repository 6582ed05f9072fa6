"""In-memory storage for saved foods."""

from dataclasses import dataclass, field
from uuid import UUID

from nutrition_ledger.domain.models import Food
from nutrition_ledger.services.foods import FoodRepository


@dataclass
class InMemoryFoodRepository(FoodRepository):
    """Dict-backed food repository preserving insertion order."""

    foods: dict[UUID, Food] = field(default_factory=dict)

    def save(self, food: Food) -> None:
        """Insert or replace a food."""
        self.foods[food.id] = food

    def get(self, food_id: UUID) -> Food | None:
        """Return a food by id, if present."""
        return self.foods.get(food_id)

    def delete(self, food_id: UUID) -> bool:
        """Delete a food and report whether it existed."""
        return self.foods.pop(food_id, None) is not None

    def list_all(self) -> list[Food]:
        """Return all foods in insertion order."""
        return list(self.foods.values())

    def clear(self) -> None:
        """Remove every food."""
        self.foods.clear()
