"""Ingredient and food catalog endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Request, Response, status

from nutrition_ledger.api.schemas import (
    FoodIn,
    FoodIngredientIn,
    FoodOut,
    FoodUpdate,
    IngredientIn,
    IngredientOut,
    IngredientUpdate,
)
from nutrition_ledger.domain.models import IngredientCategory

if TYPE_CHECKING:
    from nutrition_ledger.containers import AppContainer

router = APIRouter(tags=["catalog"])


def _container(request: Request) -> AppContainer:
    return request.app.state.container


@router.get("/ingredients")
async def list_ingredients(
    request: Request,
    q: str | None = None,
    category: IngredientCategory | None = None,
) -> list[IngredientOut]:
    """List ingredients matching a name fragment and category."""
    items = _container(request).ingredient_catalog.list_ingredients(q, category)
    return [IngredientOut.from_domain(item) for item in items]


@router.get("/ingredients/grouped")
async def grouped_ingredients(
    request: Request, q: str | None = None
) -> dict[IngredientCategory, list[IngredientOut]]:
    """Return matching ingredients grouped by category."""
    groups = _container(request).ingredient_catalog.grouped(q)
    return {
        category: [IngredientOut.from_domain(item) for item in items]
        for category, items in groups.items()
    }


@router.post("/ingredients", status_code=status.HTTP_201_CREATED)
async def create_ingredient(request: Request, payload: IngredientIn) -> IngredientOut:
    """Add an ingredient to the catalog."""
    catalog = _container(request).ingredient_catalog
    ingredient_id = catalog.add(payload.to_domain())
    return IngredientOut.from_domain(catalog.get(ingredient_id))


@router.get("/ingredients/{ingredient_id}")
async def get_ingredient(request: Request, ingredient_id: UUID) -> IngredientOut:
    """Return one ingredient."""
    catalog = _container(request).ingredient_catalog
    return IngredientOut.from_domain(catalog.get(ingredient_id))


@router.put("/ingredients/{ingredient_id}")
async def update_ingredient(
    request: Request, ingredient_id: UUID, payload: IngredientUpdate
) -> IngredientOut:
    """Update fields of an ingredient."""
    catalog = _container(request).ingredient_catalog
    fields = payload.model_dump(exclude_unset=True, exclude_none=True)
    return IngredientOut.from_domain(catalog.update(ingredient_id, **fields))


@router.delete("/ingredients/{ingredient_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_ingredient(request: Request, ingredient_id: UUID) -> Response:
    """Remove an ingredient from the catalog."""
    _container(request).ingredient_catalog.remove(ingredient_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/foods")
async def list_foods(request: Request, q: str | None = None) -> list[FoodOut]:
    """List saved foods matching a name fragment."""
    foods = _container(request).food_catalog.list_foods(q)
    return [FoodOut.from_domain(food) for food in foods]


@router.post("/foods", status_code=status.HTTP_201_CREATED)
async def create_food(request: Request, payload: FoodIn) -> FoodOut:
    """Create a saved food."""
    food = _container(request).food_catalog.create(
        name=payload.name,
        portion_name=payload.portion_name,
        portion_size=payload.portion_size,
        manual_macros=(
            payload.manual_macros.to_domain() if payload.manual_macros else None
        ),
    )
    return FoodOut.from_domain(food)


@router.get("/foods/{food_id}")
async def get_food(request: Request, food_id: UUID) -> FoodOut:
    """Return one saved food with its totals."""
    return FoodOut.from_domain(_container(request).food_catalog.get(food_id))


@router.put("/foods/{food_id}")
async def update_food(request: Request, food_id: UUID, payload: FoodUpdate) -> FoodOut:
    """Update a saved food."""
    changes: dict[str, object] = {
        "name": payload.name,
        "portion_name": payload.portion_name,
        "portion_size": payload.portion_size,
    }
    if "manual_macros" in payload.model_fields_set:
        changes["manual_macros"] = (
            payload.manual_macros.to_domain() if payload.manual_macros else None
        )
    food = _container(request).food_catalog.update(food_id, **changes)
    return FoodOut.from_domain(food)


@router.delete("/foods/{food_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_food(request: Request, food_id: UUID) -> Response:
    """Remove a saved food."""
    _container(request).food_catalog.remove(food_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/foods/{food_id}/ingredients")
async def add_food_ingredient(
    request: Request, food_id: UUID, payload: FoodIngredientIn
) -> FoodOut:
    """Embed a catalog ingredient into a saved food."""
    food = _container(request).food_catalog.add_ingredient(
        food_id, payload.ingredient_id, payload.amount
    )
    return FoodOut.from_domain(food)


@router.delete("/foods/{food_id}/ingredients/{index}")
async def remove_food_ingredient(
    request: Request, food_id: UUID, index: int
) -> FoodOut:
    """Remove the ingredient at a position from a saved food."""
    food = _container(request).food_catalog.remove_ingredient(food_id, index)
    return FoodOut.from_domain(food)
