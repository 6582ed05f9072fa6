"""Domain models for the nutrition ledger."""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import StrEnum
from uuid import UUID, uuid4


class IngredientType(StrEnum):
    """Physical form of an ingredient."""

    SOLID = "solid"
    LIQUID = "liquid"


class IngredientCategory(StrEnum):
    """Catalog grouping for ingredients."""

    MEAT = "meat"
    VEGETABLES = "vegetables"
    FRUITS = "fruits"
    DAIRY = "dairy"
    GRAINS = "grains"
    OILS = "oils"
    OTHERS = "others"


class MealType(StrEnum):
    """Meal category of a diary entry."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACKS = "snacks"


class Macro(StrEnum):
    """Macronutrient selector."""

    KCALS = "kcals"
    PROTEIN = "protein"
    CARBS = "carbs"
    FATS = "fats"
    SUGARS = "sugars"


@dataclass(frozen=True)
class MacroGoals:
    """Macro values, used both as daily goals and as manual food macros."""

    kcals: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fats: float = 0.0
    sugars: float = 0.0

    def value(self, macro: Macro) -> float:
        """Return the value of a single macro."""
        return float(getattr(self, macro.value))

    def __add__(self, other: "MacroGoals") -> "MacroGoals":
        return MacroGoals(
            kcals=self.kcals + other.kcals,
            protein=self.protein + other.protein,
            carbs=self.carbs + other.carbs,
            fats=self.fats + other.fats,
            sugars=self.sugars + other.sugars,
        )

    def scaled(self, factor: float) -> "MacroGoals":
        """Return every macro multiplied by factor."""
        return MacroGoals(
            kcals=self.kcals * factor,
            protein=self.protein * factor,
            carbs=self.carbs * factor,
            fats=self.fats * factor,
            sugars=self.sugars * factor,
        )

    def divided(self, divisor: float) -> "MacroGoals":
        """Return every macro divided by divisor."""
        return MacroGoals(
            kcals=self.kcals / divisor,
            protein=self.protein / divisor,
            carbs=self.carbs / divisor,
            fats=self.fats / divisor,
            sugars=self.sugars / divisor,
        )


@dataclass(frozen=True)
class Ingredient:
    """Reusable ingredient with macro density per 100 g or ml."""

    name: str
    type: IngredientType = IngredientType.SOLID
    category: IngredientCategory = IngredientCategory.OTHERS
    kcals_per_100: float = 0.0
    protein_per_100: float = 0.0
    carbs_per_100: float = 0.0
    fats_per_100: float = 0.0
    sugars_per_100: float = 0.0
    id: UUID = field(default_factory=uuid4)

    @property
    def per_100(self) -> MacroGoals:
        """Macro density as a macro record."""
        return MacroGoals(
            kcals=self.kcals_per_100,
            protein=self.protein_per_100,
            carbs=self.carbs_per_100,
            fats=self.fats_per_100,
            sugars=self.sugars_per_100,
        )


@dataclass(frozen=True)
class FoodIngredient:
    """An owned copy of an ingredient and the grams or ml used."""

    ingredient: Ingredient
    amount: float
    id: UUID = field(default_factory=uuid4)


@dataclass(frozen=True)
class Food:
    """A food composed from ingredients or entered with manual macros."""

    name: str
    ingredients: tuple[FoodIngredient, ...] = ()
    portion_name: str = "portion"
    portion_size: float = 1.0
    manual_macros: MacroGoals | None = None
    id: UUID = field(default_factory=uuid4)


@dataclass(frozen=True)
class DiaryEntry:
    """One food consumed on one date under one meal category."""

    date: date | datetime
    meal_type: MealType
    food: Food
    portion_size: float
    id: UUID = field(default_factory=uuid4)
