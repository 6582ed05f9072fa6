"""Dependency container wiring for the ledger."""

from dataclasses import dataclass

from nutrition_ledger.adapters.in_memory_diary_repository import (
    InMemoryDiaryRepository,
)
from nutrition_ledger.adapters.in_memory_food_repository import InMemoryFoodRepository
from nutrition_ledger.adapters.in_memory_ingredient_repository import (
    InMemoryIngredientRepository,
)
from nutrition_ledger.config import Settings, default_goals
from nutrition_ledger.services.diary import DiaryLedger
from nutrition_ledger.services.foods import FoodCatalog
from nutrition_ledger.services.goals import GoalStore
from nutrition_ledger.services.ingredients import IngredientCatalog
from nutrition_ledger.services.notifier import ChangeNotifier
from nutrition_ledger.services.seed import seed_ledger
from nutrition_ledger.services.snapshot import LedgerSnapshot, SnapshotService
from nutrition_ledger.services.summary import SummaryService


@dataclass
class AppContainer:
    """Holds the single ledger instance of a running app."""

    settings: Settings
    notifier: ChangeNotifier
    ingredient_catalog: IngredientCatalog
    food_catalog: FoodCatalog
    diary: DiaryLedger
    goal_store: GoalStore
    summary_service: SummaryService
    snapshot_service: SnapshotService


def build_container(
    settings: Settings | None = None, snapshot: LedgerSnapshot | None = None
) -> AppContainer:
    """Create the default dependency container.

    A snapshot, when given, replaces sample data seeding.
    """
    resolved_settings = settings or Settings()
    notifier = ChangeNotifier()
    ingredient_catalog = IngredientCatalog(
        repository=InMemoryIngredientRepository(), notifier=notifier
    )
    food_catalog = FoodCatalog(
        repository=InMemoryFoodRepository(),
        ingredient_catalog=ingredient_catalog,
        notifier=notifier,
    )
    diary = DiaryLedger(
        repository=InMemoryDiaryRepository(),
        food_catalog=food_catalog,
        notifier=notifier,
        timezone_name=resolved_settings.timezone,
    )
    goal_store = GoalStore(notifier=notifier, goals=default_goals(resolved_settings))
    snapshot_service = SnapshotService(
        ingredient_catalog=ingredient_catalog,
        food_catalog=food_catalog,
        diary=diary,
        goal_store=goal_store,
        notifier=notifier,
    )
    if snapshot is not None:
        snapshot_service.restore(snapshot)
    elif resolved_settings.seed_sample_data:
        seed_ledger(
            ingredient_catalog, food_catalog, goal_store, default_goals(resolved_settings)
        )

    return AppContainer(
        settings=resolved_settings,
        notifier=notifier,
        ingredient_catalog=ingredient_catalog,
        food_catalog=food_catalog,
        diary=diary,
        goal_store=goal_store,
        summary_service=SummaryService(diary=diary, goal_store=goal_store),
        snapshot_service=snapshot_service,
    )
