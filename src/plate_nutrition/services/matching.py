"""Ranking pantry foods against a detected food."""

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from plate_nutrition.domain.foods import FoodRecord
from plate_nutrition.domain.matching import FoodMatch
from plate_nutrition.domain.vision import DetectedFood
from plate_nutrition.services.similarity import fuzzy_match, nutrition_similarity

DEFAULT_MAX_RESULTS = 5
DEFAULT_MIN_CONFIDENCE = 60

Scorer = Callable[[DetectedFood, FoodRecord], float]


@dataclass(frozen=True)
class MatchComponent:
    """One weighted factor of the match score.

    ``reasons`` holds ``(threshold, text)`` pairs checked in order; the first
    threshold the factor score exceeds supplies the reason.
    """

    name: str
    weight: float
    scorer: Scorer
    reasons: tuple[tuple[float, str], ...]

    def reason_for(self, score: float) -> str | None:
        """Return the reason text earned by a factor score, if any."""
        for threshold, text in self.reasons:
            if score > threshold:
                return text
        return None


def score_name(detected: DetectedFood, food: FoodRecord) -> float:
    """Fuzzy similarity of the two names."""
    return fuzzy_match(detected.name, food.name)


def score_category(detected: DetectedFood, food: FoodRecord) -> float:
    """1.0 for the same category, ignoring case, otherwise 0.0."""
    if detected.category.lower() == food.category.lower():
        return 1.0
    return 0.0


def score_nutrition(detected: DetectedFood, food: FoodRecord) -> float:
    """Similarity of the macro profiles."""
    return nutrition_similarity(detected.profile, food.nutrition)


MATCH_COMPONENTS = (
    MatchComponent(
        name="name",
        weight=0.45,
        scorer=score_name,
        reasons=((0.8, "Name matches closely"), (0.6, "Name is similar")),
    ),
    MatchComponent(
        name="category",
        weight=0.15,
        scorer=score_category,
        reasons=((0.0, "Same category"),),
    ),
    MatchComponent(
        name="nutrition",
        weight=0.40,
        scorer=score_nutrition,
        reasons=((0.8, "Nutrition profile matches"), (0.6, "Similar nutrition")),
    ),
)


def score_candidate(
    detected: DetectedFood,
    food: FoodRecord,
    components: tuple[MatchComponent, ...] = MATCH_COMPONENTS,
) -> tuple[float, tuple[str, ...]]:
    """Return the weighted score and the reasons for one catalog food."""
    total = 0.0
    reasons: list[str] = []
    for component in components:
        value = component.scorer(detected, food)
        reason = component.reason_for(value)
        if reason is not None:
            reasons.append(reason)
        total += value * component.weight
    return min(1.0, total), tuple(reasons)


def find_matches(
    detected: DetectedFood,
    catalog: Iterable[FoodRecord],
    max_results: int = DEFAULT_MAX_RESULTS,
    min_confidence: int = DEFAULT_MIN_CONFIDENCE,
    components: tuple[MatchComponent, ...] = MATCH_COMPONENTS,
) -> list[FoodMatch]:
    """Return catalog foods that look like the detected food, best first."""
    if max_results < 0:
        raise ValueError("max_results must not be negative")
    matches: list[FoodMatch] = []
    for food in catalog:
        score, reasons = score_candidate(detected, food, components)
        match = FoodMatch(food=food, score=score, reasons=reasons)
        if match.confidence >= min_confidence:
            matches.append(match)
    matches.sort(key=lambda match: match.score, reverse=True)
    return matches[:max_results]
