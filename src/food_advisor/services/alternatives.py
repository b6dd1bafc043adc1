"""Flavor-similar alternatives from the bundled FlavorDB data."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from food_advisor.data.flavor_pairs import SIMILAR_FOODS
from food_advisor.domain.alternatives import AlternativeCandidate, SimilarFoods
from food_advisor.services.lookup import find_entry
from food_advisor.services.recipe_payloads import to_float

HEALTHY_METHODS = ("steamed", "baked", "grilled", "roasted", "boiled", "raw", "blended")


def is_healthy_method(cooking_method: str) -> bool:
    method = cooking_method.lower()
    return any(healthy in method for healthy in HEALTHY_METHODS)


def is_fried_method(cooking_method: str) -> bool:
    method = cooking_method.lower()
    return "fried" in method or "fry" in method


@dataclass
class FlavorService:
    """Looks up flavor-similar foods and ranks healthier ones first."""

    similar_foods: Mapping[str, Sequence[Mapping[str, object]]] = field(
        default_factory=lambda: SIMILAR_FOODS
    )

    def get_similar_foods(self, food_name: str) -> SimilarFoods | None:
        """Return every flavor-similar food known for ``food_name``."""
        match = find_entry(self.similar_foods, food_name)
        if match is None:
            return None
        _, entries = match
        return SimilarFoods(
            query=food_name,
            similar_foods=[_candidate(entry) for entry in entries],
        )

    def get_healthier_alternatives(
        self, food_name: str, original_is_fried: bool = False, limit: int = 3
    ) -> list[AlternativeCandidate]:
        """Rank alternatives: healthy method, then fewer calories, then similarity."""
        match = find_entry(self.similar_foods, food_name)
        if match is None or limit <= 0:
            return []
        _, entries = match

        if original_is_fried:
            entries = [
                entry
                for entry in entries
                if not entry.get("fried")
                and not is_fried_method(str(entry.get("cooking_method", "")))
            ]

        candidates = sorted(
            (_candidate(entry) for entry in entries),
            key=lambda alt: (
                not is_healthy_method(alt.cooking_method),
                alt.calories,
                -alt.similarity,
            ),
        )
        return candidates[:limit]


def _candidate(entry: Mapping[str, object]) -> AlternativeCandidate:
    reason = entry.get("reason")
    return AlternativeCandidate(
        name=str(entry.get("name", "")),
        cooking_method=str(entry.get("cooking_method", "")),
        calories=max(0.0, to_float(entry.get("calories"))),
        similarity=int(to_float(entry.get("similarity"))),
        reason=None if reason is None else str(reason),
    )
