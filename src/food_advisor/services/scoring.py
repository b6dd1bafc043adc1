"""Goal-weighted and per-serving health scores."""

from collections.abc import Mapping

from food_advisor.domain.nutrition import NutritionProfile
from food_advisor.domain.scoring import HealthScore, PerServing, PrecisionHealthReport
from food_advisor.services.recipe_payloads import first_value, to_float

SERVINGS_KEYS = ("servings", "Servings")
CALORIES_KEYS = ("Energy (kcal)", "Calories")
SUGAR_KEYS = ("Sugars, total (g)", "Sugar")
SAT_FAT_KEYS = ("Fatty acids, total saturated (g)", "Saturated Fat")
SODIUM_KEYS = ("Sodium, Na (mg)", "Sodium")
FIBER_KEYS = ("Fiber, total dietary (g)", "Fiber")
PROTEIN_KEYS = ("Protein (g)", "Protein")


def _clamp(score: float) -> int:
    return int(max(0, min(100, score)))


def calculate_health_score(nutrition: NutritionProfile, goal: str) -> int:  # noqa: PLR0912
    """Score nutrition 0-100 for a goal, starting from 50."""
    score = 50

    if goal == "weight_loss":
        if nutrition.calories < 200:
            score += 20
        elif nutrition.calories < 300:
            score += 10
        elif nutrition.calories > 500:
            score -= 20

        if nutrition.fat < 10:
            score += 15
        elif nutrition.fat > 20:
            score -= 15
    elif goal == "muscle_gain":
        if nutrition.protein > 20:
            score += 25
        elif nutrition.protein > 10:
            score += 15
        elif nutrition.protein < 5:
            score -= 10

        if nutrition.carbs > 30:
            score += 10
    else:
        if 10 <= nutrition.protein <= 25:
            score += 15
        if 20 <= nutrition.carbs <= 40:
            score += 15
        if 5 <= nutrition.fat <= 15:
            score += 15

    if nutrition.fiber > 5:
        score += 10
    elif nutrition.fiber > 3:
        score += 5

    if nutrition.sugar > 15:
        score -= 15
    elif nutrition.sugar > 10:
        score -= 10

    if nutrition.sodium > 800:
        score -= 10
    elif nutrition.sodium > 500:
        score -= 5

    return _clamp(score)


def health_score_label(score: int) -> str:
    if score >= 80:
        return "Excellent"
    if score >= 60:
        return "Good"
    if score >= 40:
        return "Moderate"
    return "Poor"


def health_score(nutrition: NutritionProfile, goal: str) -> HealthScore:
    score = calculate_health_score(nutrition, goal)
    return HealthScore(score=score, label=health_score_label(score))


def _amount(payload: Mapping[str, object], keys: tuple[str, ...]) -> float:
    return max(0.0, to_float(first_value(payload, keys)))


def _classify(score: float) -> tuple[str, str]:
    if score > 15:
        return "Very Healthy", "#2ecc71"
    if score >= 5:
        return "Moderate", "#f1c40f"
    if score >= 0:
        return "Less Healthy", "#e67e22"
    return "Unhealthy", "#e74c3c"


def precision_health(payload: Mapping[str, object]) -> PrecisionHealthReport:
    """Score a full nutrition record per serving.

    score = (fiber*4 + protein*3) - (sugar*3 + sat_fat*4 + sodium/200 + calories/100)
    """
    servings = to_float(first_value(payload, SERVINGS_KEYS), default=1.0)
    if servings <= 0:
        servings = 1.0

    calories = _amount(payload, CALORIES_KEYS) / servings
    sugar = _amount(payload, SUGAR_KEYS) / servings
    sat_fat = _amount(payload, SAT_FAT_KEYS) / servings
    sodium = _amount(payload, SODIUM_KEYS) / servings
    fiber = _amount(payload, FIBER_KEYS) / servings
    protein = _amount(payload, PROTEIN_KEYS) / servings

    score = (fiber * 4 + protein * 3) - (
        sugar * 3 + sat_fat * 4 + sodium / 200 + calories / 100
    )
    category, color = _classify(score)

    benefits: list[str] = []
    if fiber > 3:
        benefits.append("High Fiber")
    if protein > 10:
        benefits.append("High Protein")

    risk_factors: list[str] = []
    if sugar > 5:
        risk_factors.append("High Sugar (Diabetes Risk)")
    if sodium > 400:
        risk_factors.append("High Sodium (BP Risk)")
    if sat_fat > 3:
        risk_factors.append("High Saturated Fat (Heart Risk)")

    return PrecisionHealthReport(
        health_score=round(score, 1),
        category=category,
        color=color,
        benefits=benefits,
        risk_factors=risk_factors,
        per_serving=PerServing(
            calories=round(calories),
            sugar=round(sugar, 1),
            fiber=round(fiber, 1),
            protein=round(protein, 1),
        ),
    )
