"""Domain models for meal composition."""

from dataclasses import dataclass

from plate_nutrition.domain.foods import FoodRecord, Portion


@dataclass(frozen=True)
class PortionedFood:
    """A catalog food together with the portion eaten in a meal."""

    food: FoodRecord
    portion: Portion | None = None
