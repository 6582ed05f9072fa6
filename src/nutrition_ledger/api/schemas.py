"""Pydantic request and response models for the HTTP API."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from nutrition_ledger.domain.models import (
    DiaryEntry,
    Food,
    FoodIngredient,
    Ingredient,
    IngredientCategory,
    IngredientType,
    Macro,
    MacroGoals,
    MealType,
)
from nutrition_ledger.domain.summary import Contribution, DailySummary, Progress
from nutrition_ledger.services import aggregator, composer


class MacroValues(BaseModel):
    """Macro record payload."""

    model_config = ConfigDict(allow_inf_nan=False)

    kcals: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fats: float = 0.0
    sugars: float = 0.0

    def to_domain(self) -> MacroGoals:
        return MacroGoals(**self.model_dump())

    @classmethod
    def from_domain(cls, macros: MacroGoals) -> "MacroValues":
        return cls(
            kcals=macros.kcals,
            protein=macros.protein,
            carbs=macros.carbs,
            fats=macros.fats,
            sugars=macros.sugars,
        )


class IngredientIn(BaseModel):
    """Ingredient creation payload."""

    name: str = Field(min_length=1)
    type: IngredientType = IngredientType.SOLID
    category: IngredientCategory = IngredientCategory.OTHERS
    kcals_per_100: float = Field(0.0, ge=0, allow_inf_nan=False)
    protein_per_100: float = Field(0.0, ge=0, allow_inf_nan=False)
    carbs_per_100: float = Field(0.0, ge=0, allow_inf_nan=False)
    fats_per_100: float = Field(0.0, ge=0, allow_inf_nan=False)
    sugars_per_100: float = Field(0.0, ge=0, allow_inf_nan=False)

    def to_domain(self) -> Ingredient:
        return Ingredient(**self.model_dump())


class IngredientUpdate(BaseModel):
    """Partial ingredient update payload."""

    name: str | None = Field(None, min_length=1)
    type: IngredientType | None = None
    category: IngredientCategory | None = None
    kcals_per_100: float | None = Field(None, ge=0, allow_inf_nan=False)
    protein_per_100: float | None = Field(None, ge=0, allow_inf_nan=False)
    carbs_per_100: float | None = Field(None, ge=0, allow_inf_nan=False)
    fats_per_100: float | None = Field(None, ge=0, allow_inf_nan=False)
    sugars_per_100: float | None = Field(None, ge=0, allow_inf_nan=False)


class IngredientOut(IngredientIn):
    """Stored ingredient."""

    id: UUID

    @classmethod
    def from_domain(cls, ingredient: Ingredient) -> "IngredientOut":
        return cls(
            id=ingredient.id,
            name=ingredient.name,
            type=ingredient.type,
            category=ingredient.category,
            kcals_per_100=ingredient.kcals_per_100,
            protein_per_100=ingredient.protein_per_100,
            carbs_per_100=ingredient.carbs_per_100,
            fats_per_100=ingredient.fats_per_100,
            sugars_per_100=ingredient.sugars_per_100,
        )


class FoodIngredientOut(BaseModel):
    """Ingredient copy embedded in a food."""

    id: UUID
    ingredient: IngredientOut
    amount: float

    @classmethod
    def from_domain(cls, item: FoodIngredient) -> "FoodIngredientOut":
        return cls(
            id=item.id,
            ingredient=IngredientOut.from_domain(item.ingredient),
            amount=item.amount,
        )


class FoodIn(BaseModel):
    """Food creation payload."""

    name: str = Field(min_length=1)
    portion_name: str = "portion"
    portion_size: float = Field(1.0, gt=0, allow_inf_nan=False)
    manual_macros: MacroValues | None = None


class FoodUpdate(BaseModel):
    """Partial food update payload; an explicit null clears manual macros."""

    name: str | None = Field(None, min_length=1)
    portion_name: str | None = None
    portion_size: float | None = Field(None, gt=0, allow_inf_nan=False)
    manual_macros: MacroValues | None = None


class FoodIngredientIn(BaseModel):
    """Request to embed a catalog ingredient into a food."""

    ingredient_id: UUID
    amount: float = Field(gt=0, allow_inf_nan=False)


class FoodOut(BaseModel):
    """Stored food with its per-portion totals."""

    id: UUID
    name: str
    ingredients: list[FoodIngredientOut]
    portion_name: str
    portion_size: float
    manual_macros: MacroValues | None
    totals: MacroValues

    @classmethod
    def from_domain(cls, food: Food) -> "FoodOut":
        return cls(
            id=food.id,
            name=food.name,
            ingredients=[FoodIngredientOut.from_domain(i) for i in food.ingredients],
            portion_name=food.portion_name,
            portion_size=food.portion_size,
            manual_macros=(
                MacroValues.from_domain(food.manual_macros)
                if food.manual_macros is not None
                else None
            ),
            totals=MacroValues.from_domain(composer.compute_totals(food)),
        )


class DiaryEntryIn(BaseModel):
    """Request to log a saved food."""

    logged_at: datetime
    meal_type: MealType
    food_id: UUID
    portion_size: float = Field(1.0, gt=0, allow_inf_nan=False)


class QuickAddIn(BaseModel):
    """Request to log a food from its macros alone."""

    logged_at: datetime
    meal_type: MealType
    name: str = Field(min_length=1)
    macros: MacroValues
    servings: float = Field(1.0, gt=0, allow_inf_nan=False)


class DiaryEntryOut(BaseModel):
    """Stored diary entry with its contributed macros."""

    id: UUID
    logged_at: datetime | date
    meal_type: MealType
    food: FoodOut
    portion_size: float
    totals: MacroValues

    @classmethod
    def from_domain(cls, entry: DiaryEntry) -> "DiaryEntryOut":
        return cls(
            id=entry.id,
            logged_at=entry.date,
            meal_type=entry.meal_type,
            food=FoodOut.from_domain(entry.food),
            portion_size=entry.portion_size,
            totals=MacroValues.from_domain(aggregator.entry_totals(entry)),
        )


class ProgressOut(BaseModel):
    """Goal progress of one macro."""

    fraction: float
    percent: int

    @classmethod
    def from_domain(cls, progress: Progress) -> "ProgressOut":
        return cls(fraction=progress.fraction, percent=progress.percent)


class ContributionOut(BaseModel):
    """One food's share of a macro."""

    food_name: str
    value: float

    @classmethod
    def from_domain(cls, contribution: Contribution) -> "ContributionOut":
        return cls(food_name=contribution.food_name, value=contribution.value)


class DailySummaryOut(BaseModel):
    """Totals, goal progress and meal buckets for a day."""

    day: date
    totals: MacroValues
    goals: MacroValues
    progress: dict[Macro, ProgressOut]
    meals: dict[MealType, list[DiaryEntryOut]]

    @classmethod
    def from_domain(cls, summary: DailySummary) -> "DailySummaryOut":
        return cls(
            day=summary.day,
            totals=MacroValues.from_domain(summary.totals),
            goals=MacroValues.from_domain(summary.goals),
            progress={
                macro: ProgressOut.from_domain(value)
                for macro, value in summary.progress.items()
            },
            meals={
                meal: [DiaryEntryOut.from_domain(entry) for entry in entries]
                for meal, entries in summary.meals.items()
            },
        )
