"""Goal suitability verdicts built from the bundled nutrition facts.

This is a separate scorer from ``scoring.calculate_health_score``: it starts
from a goal-independent base score and subtracts penalties for every issue it
flags, so a food can score well and still be unsuitable when two or more
issues are flagged.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field

from food_advisor.data.nutrition_facts import NUTRITION_FACTS
from food_advisor.domain.nutrition import NutritionFacts
from food_advisor.domain.scoring import FullAnalysis, SuitabilityResult, goal_label
from food_advisor.services.lookup import find_entry
from food_advisor.services.recipe_payloads import facts_from_mapping

SUITABLE_MIN_SCORE = 50
MAX_REASONS_WHEN_SUITABLE = 1


def compute_base_health_score(facts: NutritionFacts) -> int:  # noqa: PLR0912
    """Goal-independent score starting from a neutral 70."""
    score = 70

    if facts.fried:
        score -= 25
    if facts.refined:
        score -= 10

    if facts.calories > 300:
        score -= 15
    elif facts.calories > 250:
        score -= 8
    elif facts.calories < 150:
        score += 10

    if facts.carbs > 40:
        score -= 10
    elif facts.carbs > 30:
        score -= 5

    if facts.fat > 15:
        score -= 10
    elif facts.fat < 5:
        score += 5

    if facts.protein > 20:
        score += 15
    elif facts.protein > 15:
        score += 10
    elif facts.protein > 10:
        score += 5

    if facts.fiber > 4:
        score += 8
    elif facts.fiber > 2:
        score += 4

    if facts.sugar > 20:
        score -= 15
    elif facts.sugar > 10:
        score -= 8

    if facts.sodium > 600:
        score -= 8
    elif facts.sodium > 400:
        score -= 4

    return max(0, min(100, score))


def _fmt(value: float) -> str:
    return f"{value:g}"


def goal_penalties(facts: NutritionFacts, goal: str) -> list[tuple[str, int]]:  # noqa: PLR0912
    """Return (reason, penalty) pairs in the order they are checked."""
    checks: list[tuple[str, int]] = []
    if facts.fried:
        checks.append(("Deep-fried preparation is unhealthy", 30))
    if facts.refined:
        checks.append(("Contains refined ingredients", 10))

    if goal == "weight_loss":
        if facts.calories > 250:
            checks.append((f"High calorie count ({_fmt(facts.calories)} kcal)", 20))
        if facts.fat > 15:
            checks.append((f"High fat content ({_fmt(facts.fat)}g)", 15))
        if facts.carbs > 30:
            checks.append((f"High carbohydrate content ({_fmt(facts.carbs)}g)", 10))
        if facts.sugar > 15:
            checks.append((f"High sugar content ({_fmt(facts.sugar)}g)", 10))
    elif goal == "muscle_gain":
        if facts.protein < 10:
            checks.append(
                (
                    f"Low protein content ({_fmt(facts.protein)}g), "
                    "poor for muscle building",
                    25,
                )
            )
        if facts.protein < 15:
            checks.append(
                (f"Moderate protein ({_fmt(facts.protein)}g), could be higher", 10)
            )
        if facts.calories < 100:
            checks.append(("Very low-calorie, insufficient for muscle gain", 15))
    elif goal == "diabetes_friendly":
        if facts.carbs > 30:
            checks.append(
                (
                    f"High carbohydrate content ({_fmt(facts.carbs)}g), "
                    "spikes blood sugar",
                    25,
                )
            )
        if facts.sugar > 10:
            checks.append((f"High sugar content ({_fmt(facts.sugar)}g)", 20))
        if facts.refined:
            checks.append(("Refined ingredients cause rapid blood sugar spikes", 15))
        if facts.fiber < 2:
            checks.append(
                (
                    f"Low fiber ({_fmt(facts.fiber)}g), "
                    "doesn't slow glucose absorption",
                    10,
                )
            )
    elif goal == "balanced_diet":
        if facts.fried:
            checks.append(("Fried foods should be limited in a balanced diet", 15))
        if facts.fat > 20:
            checks.append((f"Excessive fat ({_fmt(facts.fat)}g)", 10))
        if facts.sugar > 15:
            checks.append((f"High sugar ({_fmt(facts.sugar)}g)", 10))
        if facts.sodium > 500:
            checks.append((f"High sodium ({_fmt(facts.sodium)}mg)", 5))
    return checks


def explain(
    suitable: bool, reasons: list[str], goal: str, cooking_method: str | None
) -> str:
    """Write a one-sentence justification for a verdict."""
    label = goal_label(goal)
    if suitable:
        explanation = f"This food is a reasonable choice for your {label} goals."
        if reasons:
            explanation += f" Minor note: {reasons[0].lower()}."
        return explanation

    main_issues = " and ".join(reason.lower() for reason in reasons[:2])
    if main_issues:
        lead = main_issues[0].upper() + main_issues[1:]
        if cooking_method:
            lead += f". Its {cooking_method} preparation"
    elif cooking_method:
        lead = f"Its {cooking_method} preparation"
    else:
        lead = "Its overall nutritional profile"
    return f"{lead} makes this food not ideal for {label} goals."


def is_suitable(score: int, reasons: list[str]) -> bool:
    """A food suits a goal only with a passing score and at most one issue."""
    return score >= SUITABLE_MIN_SCORE and len(reasons) <= MAX_REASONS_WHEN_SUITABLE


def evaluate_facts(
    facts: NutritionFacts, goal: str, cooking_method: str | None = None
) -> SuitabilityResult:
    """Apply goal penalties to the base score and decide suitability."""
    checks = goal_penalties(facts, goal)
    reasons = [reason for reason, _ in checks]
    penalty = sum(weight for _, weight in checks)
    score = max(0, compute_base_health_score(facts) - penalty)
    suitable = is_suitable(score, reasons)
    return SuitabilityResult(
        suitable=suitable,
        score=score,
        reasons=reasons,
        explanation=explain(suitable, reasons, goal, cooking_method),
        goal=goal_label(goal),
    )


@dataclass
class SuitabilityEngine:
    """Evaluates foods by name against the nutrition facts dataset."""

    nutrition_facts: Mapping[str, Mapping[str, object]] = field(
        default_factory=lambda: NUTRITION_FACTS
    )

    def get_nutrition(self, food_name: str) -> NutritionFacts | None:
        match = find_entry(self.nutrition_facts, food_name)
        if match is None:
            return None
        key, raw = match
        return facts_from_mapping(key, raw)

    def compute_health_score(self, food_name: str) -> int | None:
        facts = self.get_nutrition(food_name)
        return None if facts is None else compute_base_health_score(facts)

    def evaluate(
        self, food_name: str, goal: str, cooking_method: str | None = None
    ) -> SuitabilityResult:
        """Decide whether a food suits a goal, with reasons."""
        facts = self.get_nutrition(food_name)
        if facts is None:
            return SuitabilityResult(
                suitable=False,
                score=0,
                reasons=["Food not found in our database."],
                explanation="Unable to evaluate this food item.",
                goal=goal_label(goal),
            )
        return evaluate_facts(facts, goal, cooking_method)

    def full_analysis(
        self, food_name: str, goal: str, cooking_method: str | None = None
    ) -> FullAnalysis:
        facts = self.get_nutrition(food_name)
        return FullAnalysis(
            nutrition=facts,
            health_score=None if facts is None else compute_base_health_score(facts),
            suitability=self.evaluate(food_name, goal, cooking_method),
        )
