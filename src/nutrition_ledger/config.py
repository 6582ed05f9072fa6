"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from nutrition_ledger.domain.models import MacroGoals

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    environment: str = _ENVIRONMENT
    timezone: str = "UTC"
    log_level: str = "INFO"
    seed_sample_data: bool = True
    default_kcals_goal: float = 2000
    default_protein_goal: float = 75
    default_carbs_goal: float = 250
    default_fats_goal: float = 70
    default_sugars_goal: float = 50

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def default_goals(settings: Settings) -> MacroGoals:
    """Build the initial macro goals from settings."""
    return MacroGoals(
        kcals=settings.default_kcals_goal,
        protein=settings.default_protein_goal,
        carbs=settings.default_carbs_goal,
        fats=settings.default_fats_goal,
        sugars=settings.default_sugars_goal,
    )
