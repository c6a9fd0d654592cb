"""Domain models for the user's food catalog."""

from dataclasses import dataclass

from plate_nutrition.domain.nutrition import NutritionProfile

FOOD_CATEGORIES = (
    "Protein",
    "Carbs",
    "Vegetables",
    "Fruits",
    "Dairy",
    "Fats",
    "Snacks",
    "Beverages",
    "Prepared",
)

SERVING_SIZE_UNITS = (
    "g",
    "ml",
    "oz",
    "cup",
    "tbsp",
    "tsp",
    "piece",
    "serving",
    "slice",
    "lb",
    "kg",
)


@dataclass(frozen=True)
class FoodRecord:
    """Represents a food saved in a user's pantry."""

    id: str
    name: str
    category: str
    nutrition: NutritionProfile
    serving_size: float
    serving_size_unit: str
    brand: str | None = None


@dataclass(frozen=True)
class Portion:
    """Amount of a food used in one meal."""

    amount: float
    unit: str
