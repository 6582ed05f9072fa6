"""Food composition and per-portion macro computation."""

import math
from copy import deepcopy
from dataclasses import replace

from nutrition_ledger.domain.errors import IndexOutOfRangeError, InvalidAmountError
from nutrition_ledger.domain.models import (
    Food,
    FoodIngredient,
    Ingredient,
    MacroGoals,
)

ZERO_MACROS = MacroGoals()


def is_positive(value: float) -> bool:
    """Return True for a finite quantity greater than zero."""
    return math.isfinite(value) and value > 0


def compute_totals(food: Food) -> MacroGoals:
    """Return the macros of one portion of a food.

    Manual macros win over ingredients. A portion size of zero returns the
    unscaled ingredient sum instead of dividing by zero.
    """
    if food.manual_macros is not None:
        return food.manual_macros
    total = ZERO_MACROS
    for item in food.ingredients:
        total = total + item.ingredient.per_100.scaled(item.amount / 100)
    if food.portion_size > 0:
        return total.divided(food.portion_size)
    return total


def add_ingredient(food: Food, ingredient: Ingredient, amount: float) -> Food:
    """Return a copy of the food with an owned copy of the ingredient appended."""
    if not is_positive(amount):
        raise InvalidAmountError(amount)
    item = FoodIngredient(ingredient=deepcopy(ingredient), amount=float(amount))
    return replace(food, ingredients=(*food.ingredients, item))


def remove_ingredient(food: Food, index: int) -> Food:
    """Return a copy of the food without the ingredient at index."""
    size = len(food.ingredients)
    if not 0 <= index < size:
        raise IndexOutOfRangeError(index, size)
    return replace(
        food, ingredients=food.ingredients[:index] + food.ingredients[index + 1 :]
    )


def manual_food(
    name: str,
    macros: MacroGoals,
    portion_name: str = "serving",
    portion_size: float = 1.0,
) -> Food:
    """Build a quick-add food whose totals are exactly the given macros."""
    return Food(
        name=name,
        portion_name=portion_name,
        portion_size=portion_size,
        manual_macros=macros,
    )
