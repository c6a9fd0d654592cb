"""Shared test fixtures."""

from dataclasses import dataclass, field
from uuid import uuid4

import pytest

from plate_nutrition.config import Settings
from plate_nutrition.containers import AppContainer, build_container
from plate_nutrition.domain.foods import FoodRecord
from plate_nutrition.domain.nutrition import NutritionProfile
from plate_nutrition.domain.vision import DetectedFood
from plate_nutrition.services.pantry import FoodCatalog


def make_food(  # noqa: PLR0913
    name: str = "Chicken Breast",
    category: str = "Protein",
    *,
    calories: float = 165,
    protein: float = 31,
    carbs: float = 0,
    fat: float = 3.6,
    fiber: float | None = None,
    sugar: float | None = None,
    sodium: float | None = None,
    serving_size: float = 100,
    serving_size_unit: str = "g",
    food_id: str | None = None,
) -> FoodRecord:
    """Build a catalog food with chicken breast defaults."""
    return FoodRecord(
        id=food_id or str(uuid4()),
        name=name,
        category=category,
        nutrition=NutritionProfile(
            calories=calories,
            protein=protein,
            carbs=carbs,
            fat=fat,
            fiber=fiber,
            sugar=sugar,
            sodium=sodium,
        ),
        serving_size=serving_size,
        serving_size_unit=serving_size_unit,
    )


def make_detected(  # noqa: PLR0913
    name: str = "Chicken Breast",
    category: str = "Protein",
    *,
    calories: float = 165,
    protein: float = 31,
    carbs: float = 0,
    fat: float = 3.6,
) -> DetectedFood:
    """Build a detected food the way the vision payload would describe it."""
    return DetectedFood.model_validate(
        {
            "name": name,
            "category": category,
            "nutrition": {
                "calories": calories,
                "protein": protein,
                "carbs": carbs,
                "fat": fat,
            },
        }
    )


@dataclass
class InMemoryFoodCatalog(FoodCatalog):
    """In-memory catalog for tests."""

    foods: list[FoodRecord] = field(default_factory=list)
    list_calls: int = 0

    def list_foods(self) -> list[FoodRecord]:
        self.list_calls += 1
        return list(self.foods)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        match_max_results=3,
        match_min_confidence=50,
        out_of_sync_threshold=0.5,
    )


@pytest.fixture
def catalog() -> InMemoryFoodCatalog:
    return InMemoryFoodCatalog(
        foods=[
            make_food(food_id="chicken"),
            make_food(
                "Green Apple",
                "Fruits",
                calories=52,
                protein=0.3,
                carbs=14,
                fat=0.2,
                serving_size=1,
                serving_size_unit="piece",
                food_id="green-apple",
            ),
            make_food(
                "Brown Rice",
                "Carbs",
                calories=112,
                protein=2.6,
                carbs=23.5,
                fat=0.9,
                fiber=1.8,
                food_id="brown-rice",
            ),
        ]
    )


@pytest.fixture
def container(settings: Settings, catalog: InMemoryFoodCatalog) -> AppContainer:
    return build_container(catalog, settings)
