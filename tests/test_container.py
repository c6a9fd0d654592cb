"""Tests for container wiring."""

from plate_nutrition.containers import AppContainer, build_container
from tests.conftest import InMemoryFoodCatalog, make_detected


def test_build_container_applies_settings(container: AppContainer) -> None:
    assert container.pantry_match_service.max_results == 3
    assert container.pantry_match_service.min_confidence == 50
    assert container.meal_nutrition_service.sync_threshold == 0.5


def test_container_services_share_catalog(
    container: AppContainer, catalog: InMemoryFoodCatalog
) -> None:
    matches = container.pantry_match_service.match(make_detected())

    assert matches[0].food.id == "chicken"
    assert catalog.list_calls == 1


def test_build_container_defaults() -> None:
    container = build_container(InMemoryFoodCatalog())

    assert container.pantry_match_service.max_results == 5
    assert container.pantry_match_service.min_confidence == 60
