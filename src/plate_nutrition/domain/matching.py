"""Domain models for pantry matching."""

from dataclasses import dataclass

from plate_nutrition.domain.foods import FoodRecord
from plate_nutrition.rounding import round_half_away


@dataclass(frozen=True)
class FoodMatch:
    """A catalog food ranked against a detected food."""

    food: FoodRecord
    score: float
    reasons: tuple[str, ...]

    @property
    def confidence(self) -> int:
        """Integer percentage derived from the score."""
        return int(round_half_away(self.score * 100))
