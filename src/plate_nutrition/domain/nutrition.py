"""Nutrition domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NutritionProfile:
    """Nutrition values for one declared serving of a food."""

    calories: float
    protein: float
    carbs: float
    fat: float
    fiber: float | None = None
    sugar: float | None = None
    sodium: float | None = None


@dataclass(frozen=True)
class PortionNutrition:
    """Rounded nutrition for a single consumed portion."""

    calories: float
    protein: float
    carbs: float
    fat: float
    fiber: float
    sugar: float


@dataclass(frozen=True)
class MealNutritionTotals:
    """Summed nutrition for a meal, live or cached."""

    total_calories: float
    total_protein: float
    total_carbs: float
    total_fat: float
    total_fiber: float | None = 0.0
    total_sugar: float | None = 0.0


@dataclass(frozen=True)
class MacroPercentages:
    """Share of calories coming from each macronutrient."""

    protein_percent: int
    carbs_percent: int
    fat_percent: int
