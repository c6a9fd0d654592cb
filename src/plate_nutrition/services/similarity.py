"""String and nutrition similarity primitives."""

from dataclasses import dataclass

from plate_nutrition.domain.nutrition import NutritionProfile

CONTAINMENT_FACTOR = 0.95
NUTRITION_TOLERANCE = 0.20


@dataclass(frozen=True)
class MetricWeight:
    """A nutrition field compared during matching and its share of the score."""

    field: str
    weight: float


DEFAULT_METRIC_WEIGHTS = (
    MetricWeight("calories", 0.3),
    MetricWeight("protein", 0.3),
    MetricWeight("carbs", 0.2),
    MetricWeight("fat", 0.2),
)


def levenshtein(first: str, second: str) -> int:
    """Return the case-insensitive edit distance between two strings."""
    s1 = first.lower()
    s2 = second.lower()
    previous = list(range(len(s2) + 1))
    for i, char1 in enumerate(s1, start=1):
        current = [i]
        for j, char2 in enumerate(s2, start=1):
            if char1 == char2:
                current.append(previous[j - 1])
            else:
                current.append(
                    min(
                        previous[j - 1] + 1,
                        current[j - 1] + 1,
                        previous[j] + 1,
                    )
                )
        previous = current
    return previous[-1]


def fuzzy_match(first: str | None, second: str | None) -> float:
    """Return a 0-1 similarity score for two food names.

    Exact matches score 1.0. When one name contains the other the score is
    the length ratio scaled by 0.95, so containment never beats an exact
    match. Everything else falls back to normalized edit distance.

    Names are trimmed before the emptiness check, so a missing, empty or
    whitespace-only name scores 0.0 even against an identical string.
    """
    s1 = (first or "").strip().lower()
    s2 = (second or "").strip().lower()
    if not s1 or not s2:
        return 0.0
    if s1 == s2:
        return 1.0
    if s1 in s2 or s2 in s1:
        shorter = min(len(s1), len(s2))
        longer = max(len(s1), len(s2))
        return shorter / longer * CONTAINMENT_FACTOR
    longest = max(len(s1), len(s2))
    return max(0.0, 1 - levenshtein(s1, s2) / longest)


def nutrition_similarity(
    first: NutritionProfile,
    second: NutritionProfile,
    weights: tuple[MetricWeight, ...] = DEFAULT_METRIC_WEIGHTS,
) -> float:
    """Compare two nutrition profiles metric by metric.

    Metrics that are zero on both sides count as a full match; a metric that
    is zero on only one side contributes nothing.
    """
    total = 0.0
    for metric in weights:
        value1 = float(getattr(first, metric.field) or 0.0)
        value2 = float(getattr(second, metric.field) or 0.0)
        total += metric.weight * _metric_similarity(value1, value2)
    return min(1.0, total)


def _metric_similarity(value1: float, value2: float) -> float:
    if value1 == 0 and value2 == 0:
        return 1.0
    if value1 == 0 or value2 == 0:
        return 0.0
    larger = max(value1, value2)
    ratio = min(value1, value2) / larger
    difference = abs(value1 - value2) / larger
    if difference <= NUTRITION_TOLERANCE:
        return ratio
    return max(0.0, 1 - difference)
