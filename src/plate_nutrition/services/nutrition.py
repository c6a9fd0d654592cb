"""Portion, meal and summary nutrition computations."""

from collections.abc import Iterable

from plate_nutrition.domain.foods import FoodRecord, Portion
from plate_nutrition.domain.meals import PortionedFood
from plate_nutrition.domain.nutrition import (
    MacroPercentages,
    MealNutritionTotals,
    PortionNutrition,
)
from plate_nutrition.rounding import (
    round_calories,
    round_grams,
    round_half_away,
)
from plate_nutrition.services.units import convert_to_grams

DEFAULT_SYNC_THRESHOLD = 0.1

_KCAL_PER_GRAM = {
    "protein": 4,
    "carbs": 4,
    "fat": 9,
}

_CATEGORY_BONUS = {
    "Vegetables": 10,
    "Fruits": 10,
    "Protein": 5,
}


def compute_portion_multiplier(food: FoodRecord, portion: Portion) -> float:
    """Return how many declared servings a portion represents.

    Units are compared verbatim first. Otherwise both sides go through
    ``convert_to_grams``, so two different non-mass units end up comparing
    raw numbers.
    """
    if portion.unit == food.serving_size_unit:
        return portion.amount / food.serving_size
    portion_grams = convert_to_grams(portion.amount, portion.unit)
    serving_grams = convert_to_grams(food.serving_size, food.serving_size_unit)
    return portion_grams / serving_grams


def compute_portion_nutrition(food: FoodRecord, portion: Portion) -> PortionNutrition:
    """Scale a food's per-serving nutrition to a consumed portion."""
    multiplier = compute_portion_multiplier(food, portion)
    nutrition = food.nutrition
    return PortionNutrition(
        calories=round_calories(nutrition.calories * multiplier),
        protein=round_grams(nutrition.protein * multiplier),
        carbs=round_grams(nutrition.carbs * multiplier),
        fat=round_grams(nutrition.fat * multiplier),
        fiber=round_grams((nutrition.fiber or 0.0) * multiplier),
        sugar=round_grams((nutrition.sugar or 0.0) * multiplier),
    )


def aggregate_meal_nutrition(entries: Iterable[PortionedFood]) -> MealNutritionTotals:
    """Sum portion nutrition for every entry that has a portion."""
    calories = 0.0
    protein = 0.0
    carbs = 0.0
    fat = 0.0
    fiber = 0.0
    sugar = 0.0
    for entry in entries:
        if entry.portion is None:
            continue
        nutrition = compute_portion_nutrition(entry.food, entry.portion)
        calories += nutrition.calories
        protein += nutrition.protein
        carbs += nutrition.carbs
        fat += nutrition.fat
        fiber += nutrition.fiber
        sugar += nutrition.sugar
    return MealNutritionTotals(
        total_calories=round_calories(calories),
        total_protein=round_grams(protein),
        total_carbs=round_grams(carbs),
        total_fat=round_grams(fat),
        total_fiber=round_grams(fiber),
        total_sugar=round_grams(sugar),
    )


def is_out_of_sync(
    cached: MealNutritionTotals,
    live: MealNutritionTotals,
    threshold: float = DEFAULT_SYNC_THRESHOLD,
) -> bool:
    """Return True when any cached total drifted beyond the threshold."""
    pairs = (
        (cached.total_calories, live.total_calories),
        (cached.total_protein, live.total_protein),
        (cached.total_carbs, live.total_carbs),
        (cached.total_fat, live.total_fat),
        (cached.total_fiber or 0.0, live.total_fiber or 0.0),
        (cached.total_sugar or 0.0, live.total_sugar or 0.0),
    )
    return any(abs(stored - fresh) > threshold for stored, fresh in pairs)


def net_carbs(total_carbs: float, fiber: float | None = 0.0) -> float:
    """Carbohydrates minus fiber, never below zero."""
    return max(0.0, total_carbs - (fiber or 0.0))


def macro_percentages(protein: float, carbs: float, fat: float) -> MacroPercentages:
    """Return the calorie share of protein, carbs and fat."""
    protein_kcal = protein * _KCAL_PER_GRAM["protein"]
    carbs_kcal = carbs * _KCAL_PER_GRAM["carbs"]
    fat_kcal = fat * _KCAL_PER_GRAM["fat"]
    total = protein_kcal + carbs_kcal + fat_kcal
    if total == 0:
        return MacroPercentages(protein_percent=0, carbs_percent=0, fat_percent=0)
    return MacroPercentages(
        protein_percent=int(round_half_away(protein_kcal / total * 100)),
        carbs_percent=int(round_half_away(carbs_kcal / total * 100)),
        fat_percent=int(round_half_away(fat_kcal / total * 100)),
    )


def nutrition_score(food: FoodRecord) -> int:
    """Simple 0-100 quality heuristic for a catalog food."""
    nutrition = food.nutrition
    score = 50
    score += _tier(nutrition.protein, ((15, 15), (10, 10), (5, 5)))
    score += _tier(nutrition.fiber, ((5, 15), (3, 10), (1, 5)))
    score -= _tier(nutrition.sugar, ((20, 15), (10, 10), (5, 5)))
    score -= _tier(nutrition.sodium, ((800, 15), (400, 10), (200, 5)))
    score += _CATEGORY_BONUS.get(food.category, 0)
    return max(0, min(100, score))


def _tier(value: float | None, tiers: tuple[tuple[float, int], ...]) -> int:
    """Return the points of the first tier the value exceeds."""
    if not value:
        return 0
    for limit, points in tiers:
        if value > limit:
            return points
    return 0
