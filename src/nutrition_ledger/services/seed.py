"""Sample data for a fresh ledger."""

from nutrition_ledger.domain.models import (
    Food,
    Ingredient,
    IngredientCategory,
    IngredientType,
    MacroGoals,
)
from nutrition_ledger.services import composer
from nutrition_ledger.services.foods import FoodCatalog
from nutrition_ledger.services.goals import GoalStore
from nutrition_ledger.services.ingredients import IngredientCatalog


def sample_ingredients() -> list[Ingredient]:
    """Return the starter ingredients."""
    return [
        Ingredient(
            name="Chicken Breast",
            type=IngredientType.SOLID,
            category=IngredientCategory.MEAT,
            kcals_per_100=165,
            protein_per_100=31,
            carbs_per_100=0,
            fats_per_100=3.6,
            sugars_per_100=0,
        ),
        Ingredient(
            name="Olive Oil",
            type=IngredientType.LIQUID,
            category=IngredientCategory.OILS,
            kcals_per_100=884,
            protein_per_100=0,
            carbs_per_100=0,
            fats_per_100=100,
            sugars_per_100=0,
        ),
    ]


def seed_ledger(
    ingredient_catalog: IngredientCatalog,
    food_catalog: FoodCatalog,
    goal_store: GoalStore,
    goals: MacroGoals,
) -> None:
    """Populate empty catalogs with the starter ingredients and food."""
    chicken, oil = sample_ingredients()
    ingredient_catalog.add(chicken)
    ingredient_catalog.add(oil)
    salad = Food(name="Grilled Chicken Salad", portion_name="Plate", portion_size=1)
    salad = composer.add_ingredient(salad, chicken, 200)
    salad = composer.add_ingredient(salad, oil, 10)
    food_catalog.add(salad)
    goal_store.set(goals)
