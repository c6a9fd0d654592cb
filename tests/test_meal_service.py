"""Tests for meal nutrition service."""

from plate_nutrition.domain.foods import Portion
from plate_nutrition.domain.meals import PortionedFood
from plate_nutrition.domain.nutrition import MealNutritionTotals
from plate_nutrition.services.meals import MealNutritionService
from tests.conftest import make_food


def _entries() -> list[PortionedFood]:
    butter = make_food(
        "Butter",
        "Fats",
        calories=102,
        protein=0.1,
        fat=11.5,
        serving_size=1,
        serving_size_unit="tbsp",
    )
    return [
        PortionedFood(make_food(), Portion(200, "g")),
        PortionedFood(butter, Portion(1, "tbsp")),
    ]


def test_compute_totals() -> None:
    totals = MealNutritionService().compute_totals(_entries())

    assert totals.total_calories == 432
    assert totals.total_protein == 62.1
    assert totals.total_fat == 18.7


def test_check_totals_without_cache_needs_refresh() -> None:
    check = MealNutritionService().check_totals(None, _entries())

    assert check.out_of_sync
    assert check.live.total_calories == 432


def test_check_totals_matching_cache() -> None:
    service = MealNutritionService()
    live = service.compute_totals(_entries())

    check = service.check_totals(live, _entries())

    assert not check.out_of_sync


def test_check_totals_detects_edited_food() -> None:
    service = MealNutritionService(debug=True)
    cached = MealNutritionTotals(330, 62.0, 0.0, 7.2, 0.0, 0.0)

    check = service.check_totals(cached, _entries())

    assert check.out_of_sync


def test_check_totals_uses_configured_threshold() -> None:
    service = MealNutritionService(sync_threshold=5)
    cached = MealNutritionTotals(430, 62.0, 0.0, 18.0, 0.0, 0.0)

    assert not service.check_totals(cached, _entries()).out_of_sync
