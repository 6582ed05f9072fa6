"""Ingredient catalog service."""

import logging
from dataclasses import dataclass, replace
from typing import Protocol
from uuid import UUID

from nutrition_ledger.domain.errors import DuplicateIdError, NotFoundError
from nutrition_ledger.domain.models import Ingredient, IngredientCategory
from nutrition_ledger.services.notifier import ChangeNotifier

_logger = logging.getLogger(__name__)

_UPDATABLE_FIELDS = frozenset(
    {
        "name",
        "type",
        "category",
        "kcals_per_100",
        "protein_per_100",
        "carbs_per_100",
        "fats_per_100",
        "sugars_per_100",
    }
)


class IngredientRepository(Protocol):
    """Storage interface for catalog ingredients."""

    def save(self, ingredient: Ingredient) -> None:
        """Insert or replace an ingredient."""

    def get(self, ingredient_id: UUID) -> Ingredient | None:
        """Return an ingredient by id, if present."""

    def delete(self, ingredient_id: UUID) -> bool:
        """Delete an ingredient and report whether it existed."""

    def list_all(self) -> list[Ingredient]:
        """Return all ingredients in insertion order."""

    def clear(self) -> None:
        """Remove every ingredient."""


@dataclass
class IngredientCatalog:
    """Application service for reusable ingredient definitions."""

    repository: IngredientRepository
    notifier: ChangeNotifier

    def add(self, ingredient: Ingredient) -> UUID:
        """Store an ingredient and return its id."""
        if self.repository.get(ingredient.id) is not None:
            raise DuplicateIdError("ingredient", ingredient.id)
        self.repository.save(ingredient)
        _logger.info("Ingredient added: id=%s", ingredient.id)
        self.notifier.emit("ingredients", "added", ingredient.id)
        return ingredient.id

    def get(self, ingredient_id: UUID) -> Ingredient:
        """Return an ingredient or raise NotFoundError."""
        ingredient = self.repository.get(ingredient_id)
        if ingredient is None:
            raise NotFoundError("ingredient", ingredient_id)
        return ingredient

    def update(self, ingredient_id: UUID, **fields: object) -> Ingredient:
        """Replace selected fields of an ingredient.

        Foods that embedded the ingredient earlier keep their own copy.
        """
        unknown = set(fields) - _UPDATABLE_FIELDS
        if unknown:
            raise TypeError(f"Unknown ingredient fields: {sorted(unknown)}")
        updated = replace(self.get(ingredient_id), **fields)
        self.repository.save(updated)
        _logger.info("Ingredient updated: id=%s", ingredient_id)
        self.notifier.emit("ingredients", "updated", ingredient_id)
        return updated

    def remove(self, ingredient_id: UUID) -> None:
        """Delete an ingredient from the catalog."""
        if not self.repository.delete(ingredient_id):
            raise NotFoundError("ingredient", ingredient_id)
        _logger.info("Ingredient removed: id=%s", ingredient_id)
        self.notifier.emit("ingredients", "removed", ingredient_id)

    def list_ingredients(
        self,
        name_contains: str | None = None,
        category: IngredientCategory | None = None,
    ) -> list[Ingredient]:
        """List ingredients, optionally filtered by name and category."""
        needle = name_contains.casefold() if name_contains else None
        return [
            item
            for item in self.repository.list_all()
            if (needle is None or needle in item.name.casefold())
            and (category is None or item.category == category)
        ]

    def grouped(
        self, name_contains: str | None = None
    ) -> dict[IngredientCategory, list[Ingredient]]:
        """Group matching ingredients by category, skipping empty categories."""
        matches = self.list_ingredients(name_contains)
        groups: dict[IngredientCategory, list[Ingredient]] = {}
        for category in IngredientCategory:
            in_category = [item for item in matches if item.category == category]
            if in_category:
                groups[category] = in_category
        return groups
