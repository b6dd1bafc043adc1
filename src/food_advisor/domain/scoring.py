"""Scoring and suitability results."""

from dataclasses import dataclass, field

from food_advisor.domain.nutrition import NutritionFacts

GOAL_LABELS: dict[str, str] = {
    "weight_loss": "Weight Loss",
    "muscle_gain": "Muscle Gain",
    "diabetes_friendly": "Diabetes Friendly",
    "balanced_diet": "Balanced Diet",
}

DEFAULT_GOAL = "balanced_diet"


def goal_label(goal: str) -> str:
    """Return the display name of a goal, or the goal itself if unknown."""
    return GOAL_LABELS.get(goal, goal)


@dataclass(frozen=True)
class HealthScore:
    """Goal-weighted health score with its tier label."""

    score: int
    label: str


@dataclass(frozen=True)
class SuitabilityResult:
    """Goal-conditioned verdict with the reasons behind it."""

    suitable: bool
    score: int
    reasons: list[str]
    explanation: str
    goal: str


@dataclass(frozen=True)
class FullAnalysis:
    """Nutrition facts, base score and suitability for one food."""

    nutrition: NutritionFacts | None
    health_score: int | None
    suitability: SuitabilityResult


@dataclass(frozen=True)
class PerServing:
    calories: int
    sugar: float
    fiber: float
    protein: float


@dataclass(frozen=True)
class PrecisionHealthReport:
    """Result of the per-serving precision formula."""

    health_score: float
    category: str
    color: str
    per_serving: PerServing
    benefits: list[str] = field(default_factory=list)
    risk_factors: list[str] = field(default_factory=list)
