"""Flavor similarity models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AlternativeCandidate:
    """A flavor-similar food suggested as an alternative."""

    name: str
    cooking_method: str
    calories: float
    similarity: int
    reason: str | None = None
    source: str = "FlavorDB"


@dataclass(frozen=True)
class SimilarFoods:
    """All flavor-similar foods known for a query."""

    query: str
    similar_foods: list[AlternativeCandidate]
    source: str = "FlavorDB"
