"""Food analysis pipeline: label, recipe, scores, alternatives."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime

from food_advisor.domain.alternatives import AlternativeCandidate, SimilarFoods
from food_advisor.domain.errors import FoodNotFoundError
from food_advisor.domain.nutrition import NutritionFacts, NutritionProfile, Recipe
from food_advisor.domain.scoring import (
    DEFAULT_GOAL,
    PrecisionHealthReport,
    SuitabilityResult,
)
from food_advisor.services.alternatives import FlavorService, is_fried_method
from food_advisor.services.labels import map_label
from food_advisor.services.lookup import normalize_name
from food_advisor.services.recipes import RecipeService
from food_advisor.services.scoring import health_score, precision_health
from food_advisor.services.suitability import SuitabilityEngine

_logger = logging.getLogger(__name__)

ALTERNATIVES_LIMIT = 3


@dataclass(frozen=True)
class AnalysisResult:
    """Everything the analyze endpoint returns for one food."""

    detected_food: str
    original_label: str
    recipe: Recipe
    nutrition: NutritionProfile
    health_score: int
    health_label: str
    suitability: SuitabilityResult
    alternatives: list[AlternativeCandidate]
    flavor_data: SimilarFoods | None
    timestamp: datetime


@dataclass(frozen=True)
class HealthIntel:
    """Health summary for a recipe title, from the bundled datasets."""

    health_score: int
    suitability: SuitabilityResult
    nutrition: NutritionFacts
    alternatives: list[AlternativeCandidate] | None


@dataclass
class AnalysisService:
    """Runs the analysis pipeline over the recipe, flavor and scoring services."""

    recipe_service: RecipeService
    flavor_service: FlavorService
    suitability_engine: SuitabilityEngine

    async def analyze(
        self,
        food_name: str,
        goal: str | None = None,
        detected_label: str | None = None,
    ) -> AnalysisResult:
        """Analyze a food for a goal.

        Raises ``FoodNotFoundError`` when no recipe source knows the food.
        Alternatives and flavor data are best effort.
        """
        resolved_goal = goal or DEFAULT_GOAL
        food = map_label(detected_label) if detected_label else normalize_name(food_name)
        _logger.info("Analyzing food=%r goal=%r", food, resolved_goal)

        recipe = await self.recipe_service.get_recipe(food)
        if recipe is None:
            raise FoodNotFoundError(food_name)
        _logger.info(
            "Using %s nutrition for %r (%s kcal per serving)",
            recipe.nutrition.source,
            food,
            recipe.nutrition.calories,
        )

        nutrition = recipe.nutrition
        score = health_score(nutrition, resolved_goal)
        suitability = self.suitability_engine.evaluate(
            food, resolved_goal, cooking_method=recipe.cooking_method or None
        )

        return AnalysisResult(
            detected_food=food,
            original_label=detected_label or food_name,
            recipe=recipe,
            nutrition=nutrition,
            health_score=score.score,
            health_label=score.label,
            suitability=suitability,
            alternatives=self._alternatives(food, recipe.is_fried),
            flavor_data=self._similar_foods(food),
            timestamp=datetime.now(tz=UTC),
        )

    def health_intel(self, title: str, goal: str = DEFAULT_GOAL) -> HealthIntel | None:
        """Summarize a recipe title; ``None`` when it has no nutrition facts."""
        analysis = self.suitability_engine.full_analysis(title, goal)
        if analysis.nutrition is None or analysis.health_score is None:
            return None
        alternatives = self._alternatives(title, is_fried_method(title))
        return HealthIntel(
            health_score=analysis.health_score,
            suitability=analysis.suitability,
            nutrition=analysis.nutrition,
            alternatives=alternatives or None,
        )

    async def precision_health(self, recipe_id: str) -> PrecisionHealthReport | None:
        """Score a recipe's detailed nutrition per serving."""
        nutrition = await self.recipe_service.get_detailed_nutrition(recipe_id)
        if not nutrition:
            return None
        return precision_health(nutrition)

    def _alternatives(self, food: str, is_fried: bool) -> list[AlternativeCandidate]:
        try:
            return self.flavor_service.get_healthier_alternatives(
                food, original_is_fried=is_fried, limit=ALTERNATIVES_LIMIT
            )
        except Exception:
            _logger.exception("Alternative lookup failed for %r", food)
            return []

    def _similar_foods(self, food: str) -> SimilarFoods | None:
        try:
            return self.flavor_service.get_similar_foods(food)
        except Exception:
            _logger.exception("Flavor lookup failed for %r", food)
            return None
