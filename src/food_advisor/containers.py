"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from food_advisor.adapters.openai_vision_client import OpenAIVisionClient
from food_advisor.adapters.recipedb_client import HttpxRecipeDbClient
from food_advisor.config import Settings
from food_advisor.services.alternatives import FlavorService
from food_advisor.services.analysis import AnalysisService
from food_advisor.services.cache import InMemoryCache
from food_advisor.services.recipes import RecipeService
from food_advisor.services.suitability import SuitabilityEngine
from food_advisor.services.vision import VisionService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    recipe_service: RecipeService
    flavor_service: FlavorService
    suitability_engine: SuitabilityEngine
    analysis_service: AnalysisService
    vision_service: VisionService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    recipedb_client = HttpxRecipeDbClient.create(
        api_key=resolved_settings.recipedb_api_key,
        base_url=resolved_settings.recipedb_base_url,
        timeout_seconds=resolved_settings.recipedb_timeout_seconds,
    )
    recipe_service = RecipeService(
        client=recipedb_client,
        cache=InMemoryCache(),
        retry_attempts=resolved_settings.recipedb_retry_attempts,
        debug=resolved_settings.debug,
    )
    flavor_service = FlavorService()
    suitability_engine = SuitabilityEngine()
    analysis_service = AnalysisService(
        recipe_service=recipe_service,
        flavor_service=flavor_service,
        suitability_engine=suitability_engine,
    )
    openai_client = OpenAIVisionClient.create(
        resolved_settings.openai_api_key,
        timeout_seconds=resolved_settings.openai_timeout_seconds,
    )
    vision_service = VisionService(
        client=openai_client, model=resolved_settings.openai_model
    )

    async def close_resources() -> None:
        await recipedb_client.close()
        await openai_client.close()

    return AppContainer(
        settings=resolved_settings,
        recipe_service=recipe_service,
        flavor_service=flavor_service,
        suitability_engine=suitability_engine,
        analysis_service=analysis_service,
        vision_service=vision_service,
        close_resources=close_resources,
    )
