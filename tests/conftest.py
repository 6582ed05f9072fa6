"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest
from fastapi.testclient import TestClient

from nutrition_ledger.api.app import create_app
from nutrition_ledger.config import Settings
from nutrition_ledger.containers import AppContainer, build_container
from nutrition_ledger.domain.events import ChangeEvent
from nutrition_ledger.domain.models import (
    Ingredient,
    IngredientCategory,
    IngredientType,
)


def chicken_breast() -> Ingredient:
    return Ingredient(
        name="Chicken Breast",
        type=IngredientType.SOLID,
        category=IngredientCategory.MEAT,
        kcals_per_100=165,
        protein_per_100=31,
        carbs_per_100=0,
        fats_per_100=3.6,
        sugars_per_100=0,
    )


def olive_oil() -> Ingredient:
    return Ingredient(
        name="Olive Oil",
        type=IngredientType.LIQUID,
        category=IngredientCategory.OILS,
        kcals_per_100=884,
        protein_per_100=0,
        carbs_per_100=0,
        fats_per_100=100,
        sugars_per_100=0,
    )


def banana() -> Ingredient:
    return Ingredient(
        name="Banana",
        category=IngredientCategory.FRUITS,
        kcals_per_100=89,
        protein_per_100=1.1,
        carbs_per_100=22.8,
        fats_per_100=0.3,
        sugars_per_100=12.2,
    )


@dataclass
class RecordingSubscriber:
    """Change subscriber that keeps every event it receives."""

    events: list[ChangeEvent] = field(default_factory=list)

    def __call__(self, event: ChangeEvent) -> None:
        self.events.append(event)


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test", timezone="UTC", seed_sample_data=False)


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    return build_container(settings)


@pytest.fixture
def seeded_container(settings: Settings) -> AppContainer:
    return build_container(settings.model_copy(update={"seed_sample_data": True}))


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))
