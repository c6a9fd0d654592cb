"""Unit normalization, portion parsing and gram conversion."""

import re

from plate_nutrition.domain.foods import Portion

# Approximate grams per unit; volumes assume the density of water.
_GRAMS_PER_UNIT: dict[str, float] = {
    "g": 1.0,
    "ml": 1.0,
    "cup": 240.0,
    "tbsp": 15.0,
    "tsp": 5.0,
    "oz": 28.35,
    "lb": 453.592,
    "kg": 1000.0,
    "l": 1000.0,
}

_UNIT_SYNONYMS: dict[str, str] = {
    "gram": "g",
    "grams": "g",
    "milliliter": "ml",
    "milliliters": "ml",
    "cups": "cup",
    "tablespoon": "tbsp",
    "tablespoons": "tbsp",
    "teaspoon": "tsp",
    "teaspoons": "tsp",
    "ounce": "oz",
    "ounces": "oz",
    "pound": "lb",
    "pounds": "lb",
    "kilogram": "kg",
    "kilograms": "kg",
    "liter": "l",
    "liters": "l",
    "pieces": "piece",
    "slices": "slice",
}

_PORTION_PATTERN = re.compile(r"^(\d+(?:\.\d+)?|\.\d+)\s*([a-zA-Z]+)$")


def normalize_unit(unit: str) -> str:
    """Return the canonical abbreviation for a unit name."""
    cleaned = unit.strip().lower()
    return _UNIT_SYNONYMS.get(cleaned, cleaned)


def convert_to_grams(amount: float, unit: str) -> float:
    """Convert an amount to grams, leaving unknown units untouched.

    Units such as ``piece``, ``serving`` or ``slice`` have no mass equivalent,
    so the amount is returned as-is.
    """
    factor = _GRAMS_PER_UNIT.get(normalize_unit(unit))
    if factor is None:
        return amount
    return amount * factor


def parse_portion(text: str | None) -> Portion | None:
    """Parse strings like ``"150g"`` or ``"1 cup"`` into a portion."""
    if not text:
        return None
    match = _PORTION_PATTERN.match(text.strip())
    if match is None:
        return None
    return Portion(amount=float(match.group(1)), unit=match.group(2))
