"""Meal nutrition service."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from plate_nutrition.domain.meals import PortionedFood
from plate_nutrition.domain.nutrition import MealNutritionTotals
from plate_nutrition.services.nutrition import (
    DEFAULT_SYNC_THRESHOLD,
    aggregate_meal_nutrition,
    is_out_of_sync,
)

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MealTotalsCheck:
    """Live totals and whether the cached copy needs refreshing."""

    live: MealNutritionTotals
    out_of_sync: bool


@dataclass
class MealNutritionService:
    """Service that recomputes meal totals from current food data."""

    sync_threshold: float = DEFAULT_SYNC_THRESHOLD
    debug: bool = False

    def compute_totals(self, entries: Iterable[PortionedFood]) -> MealNutritionTotals:
        """Return live totals for the meal's foods."""
        return aggregate_meal_nutrition(entries)

    def check_totals(
        self,
        cached: MealNutritionTotals | None,
        entries: Iterable[PortionedFood],
    ) -> MealTotalsCheck:
        """Recompute totals and compare them with the cached ones.

        A meal without cached totals is always reported as out of sync.
        """
        live = aggregate_meal_nutrition(entries)
        if cached is None:
            return MealTotalsCheck(live=live, out_of_sync=True)
        drifted = is_out_of_sync(cached, live, threshold=self.sync_threshold)
        if drifted and self.debug:
            _logger.info(
                "Meal totals drifted: cached_calories=%s live_calories=%s",
                cached.total_calories,
                live.total_calories,
            )
        return MealTotalsCheck(live=live, out_of_sync=drifted)
