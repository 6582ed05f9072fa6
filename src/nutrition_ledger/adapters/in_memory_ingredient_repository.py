"""In-memory storage for catalog ingredients."""

from dataclasses import dataclass, field
from uuid import UUID

from nutrition_ledger.domain.models import Ingredient
from nutrition_ledger.services.ingredients import IngredientRepository


@dataclass
class InMemoryIngredientRepository(IngredientRepository):
    """Dict-backed ingredient repository preserving insertion order."""

    ingredients: dict[UUID, Ingredient] = field(default_factory=dict)

    def save(self, ingredient: Ingredient) -> None:
        """Insert or replace an ingredient."""
        self.ingredients[ingredient.id] = ingredient

    def get(self, ingredient_id: UUID) -> Ingredient | None:
        """Return an ingredient by id, if present."""
        return self.ingredients.get(ingredient_id)

    def delete(self, ingredient_id: UUID) -> bool:
        """Delete an ingredient and report whether it existed."""
        return self.ingredients.pop(ingredient_id, None) is not None

    def list_all(self) -> list[Ingredient]:
        """Return all ingredients in insertion order."""
        return list(self.ingredients.values())

    def clear(self) -> None:
        """Remove every ingredient."""
        self.ingredients.clear()
