"""Service for matching detected foods against the user's pantry."""

import logging
from dataclasses import dataclass
from typing import Protocol

from plate_nutrition.domain.foods import FoodRecord
from plate_nutrition.domain.matching import FoodMatch
from plate_nutrition.domain.vision import DetectedFood
from plate_nutrition.services.matching import (
    DEFAULT_MAX_RESULTS,
    DEFAULT_MIN_CONFIDENCE,
    find_matches,
)

_logger = logging.getLogger(__name__)


class FoodCatalog(Protocol):
    """Read-only view of the user's saved foods."""

    def list_foods(self) -> list[FoodRecord]:
        """Return a snapshot of every food in the catalog."""


@dataclass
class PantryMatchService:
    """Application service that ranks pantry foods for detected items."""

    catalog: FoodCatalog
    max_results: int = DEFAULT_MAX_RESULTS
    min_confidence: int = DEFAULT_MIN_CONFIDENCE
    debug: bool = False

    def match(self, detected: DetectedFood) -> list[FoodMatch]:
        """Return the best pantry matches for one detected food."""
        foods = self.catalog.list_foods()
        matches = find_matches(
            detected,
            foods,
            max_results=self.max_results,
            min_confidence=self.min_confidence,
        )
        if self.debug:
            _logger.info(
                "Pantry match: name=%s candidates=%s matches=%s",
                detected.name,
                len(foods),
                len(matches),
            )
        return matches

    def match_payload(self, payload: dict[str, object]) -> list[FoodMatch]:
        """Validate a raw detection payload and match it."""
        return self.match(DetectedFood.model_validate(payload))

    def match_all(
        self, detected_foods: list[DetectedFood]
    ) -> list[tuple[DetectedFood, list[FoodMatch]]]:
        """Match several detected foods against one catalog snapshot."""
        foods = self.catalog.list_foods()
        results = [
            (
                detected,
                find_matches(
                    detected,
                    foods,
                    max_results=self.max_results,
                    min_confidence=self.min_confidence,
                ),
            )
            for detected in detected_foods
        ]
        if self.debug:
            unmatched = sum(1 for _, matches in results if not matches)
            _logger.info(
                "Pantry match batch: items=%s unmatched=%s",
                len(results),
                unmatched,
            )
        return results
