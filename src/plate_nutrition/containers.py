"""Dependency container wiring for the engine."""

from dataclasses import dataclass

from plate_nutrition.config import Settings
from plate_nutrition.services.meals import MealNutritionService
from plate_nutrition.services.pantry import FoodCatalog, PantryMatchService


@dataclass
class AppContainer:
    """Holds engine-wide dependencies."""

    settings: Settings
    pantry_match_service: PantryMatchService
    meal_nutrition_service: MealNutritionService


def build_container(
    catalog: FoodCatalog, settings: Settings | None = None
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    pantry_match_service = PantryMatchService(
        catalog=catalog,
        max_results=resolved_settings.match_max_results,
        min_confidence=resolved_settings.match_min_confidence,
        debug=resolved_settings.debug,
    )
    meal_nutrition_service = MealNutritionService(
        sync_threshold=resolved_settings.out_of_sync_threshold,
        debug=resolved_settings.debug,
    )
    return AppContainer(
        settings=resolved_settings,
        pantry_match_service=pantry_match_service,
        meal_nutrition_service=meal_nutrition_service,
    )
