"""Carb-first display helpers."""

from enum import StrEnum

from plate_nutrition.rounding import round_grams
from plate_nutrition.services.nutrition import net_carbs

LOW_CARB_LIMIT = 20
MODERATE_CARB_LIMIT = 50


class CarbLevel(StrEnum):
    """Net carb tiers used to badge foods and meals."""

    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


_LEVEL_LABELS = {
    CarbLevel.LOW: "Low (Keto-friendly)",
    CarbLevel.MODERATE: "Moderate",
    CarbLevel.HIGH: "High",
}


def carb_level(net_carb_grams: float) -> CarbLevel:
    """Classify a net carb amount."""
    if net_carb_grams <= LOW_CARB_LIMIT:
        return CarbLevel.LOW
    if net_carb_grams <= MODERATE_CARB_LIMIT:
        return CarbLevel.MODERATE
    return CarbLevel.HIGH


def carb_level_label(net_carb_grams: float) -> str:
    """Accessible label for a net carb amount."""
    return _LEVEL_LABELS[carb_level(net_carb_grams)]


def format_nutrition_line(  # noqa: PLR0913
    *,
    calories: float,
    protein: float,
    carbs: float,
    fat: float,
    fiber: float | None = None,
    sugar: float | None = None,
) -> str:
    """Render nutrition in carb-first order."""
    parts = [
        f"{_number(net_carbs(carbs, fiber))}g net carbs "
        f"({_number(carbs)}g - {_number(fiber or 0)}g fiber)",
        f"{_number(protein)}g protein",
        f"{_number(fat)}g fat",
        f"{_number(calories)} cal",
    ]
    if sugar:
        parts.insert(1, f"{_number(sugar)}g sugar")
    return " • ".join(parts)


def format_carb_breakdown(
    carbs: float, fiber: float = 0, sugar: float | None = None
) -> str:
    """Render carbs, fiber and optional sugar."""
    parts = [f"{_number(carbs)}g carbs", f"{_number(fiber)}g fiber"]
    if sugar is not None and sugar > 0:
        parts.append(f"{_number(sugar)}g sugar")
    return " • ".join(parts)


def _number(value: float) -> str:
    """Format to 0.1 precision, without a trailing ``.0`` for whole numbers."""
    rounded = round_grams(value)
    if rounded.is_integer():
        return str(int(rounded))
    return str(rounded)
