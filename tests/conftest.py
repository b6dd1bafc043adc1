"""Shared test fixtures."""

from collections import Counter
from dataclasses import dataclass, field

import pytest

from food_advisor.adapters.recipedb_client import RecipeDbClient
from food_advisor.config import Settings
from food_advisor.containers import AppContainer
from food_advisor.services.alternatives import FlavorService
from food_advisor.services.analysis import AnalysisService
from food_advisor.services.cache import InMemoryCache
from food_advisor.services.recipes import RecipeService
from food_advisor.services.suitability import SuitabilityEngine
from food_advisor.services.vision import VisionClient, VisionService

# One-pixel PNG.
PNG_BASE64 = (
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNk"
    "YPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="
)


@dataclass
class FakeRecipeDbClient(RecipeDbClient):
    """RecipeDB client returning canned payloads.

    ``payloads`` and ``failures`` are keyed by method name. Methods without a
    payload answer with an empty ``{"data": []}`` envelope.
    """

    payloads: dict[str, dict[str, object]] = field(default_factory=dict)
    failures: dict[str, Exception] = field(default_factory=dict)
    calls: Counter = field(default_factory=Counter)
    last_args: dict[str, tuple[object, ...]] = field(default_factory=dict)

    async def _respond(self, method: str, *args: object) -> dict[str, object]:
        self.calls[method] += 1
        self.last_args[method] = args
        if method in self.failures:
            raise self.failures[method]
        return self.payloads.get(method, {"data": []})

    async def search_by_title(
        self, title: str, page: int = 1, limit: int = 10
    ) -> dict[str, object]:
        return await self._respond("search_by_title", title, page, limit)

    async def search_by_method(self, method: str) -> dict[str, object]:
        return await self._respond("search_by_method", method)

    async def get_nutrition(self, recipe_id: str) -> dict[str, object]:
        return await self._respond("get_nutrition", recipe_id)

    async def get_instructions(self, recipe_id: str) -> dict[str, object]:
        return await self._respond("get_instructions", recipe_id)

    async def get_taste(self, recipe_id: str) -> dict[str, object]:
        return await self._respond("get_taste", recipe_id)

    async def get_flavor(self, recipe_id: str) -> dict[str, object]:
        return await self._respond("get_flavor", recipe_id)

    async def get_utensils(self, recipe_id: str) -> dict[str, object]:
        return await self._respond("get_utensils", recipe_id)

    async def get_processes(self, recipe_id: str) -> dict[str, object]:
        return await self._respond("get_processes", recipe_id)

    async def get_ingredient_categories(self, recipe_id: str) -> dict[str, object]:
        return await self._respond("get_ingredient_categories", recipe_id)


@dataclass
class FakeVisionClient(VisionClient):
    """Vision client returning fixed predictions."""

    predictions: list[dict[str, object]] = field(
        default_factory=lambda: [
            {"label": "french_fries", "confidence": 0.62},
            {"label": "samosa", "confidence": 0.91},
            {"label": "plate", "confidence": 0.12},
        ]
    )
    last_request: dict[str, object] | None = None

    async def classify(
        self,
        *,
        model: str,
        image_data_url: str,
        schema: dict[str, object],
        prompt: str,
    ) -> dict[str, object]:
        self.last_request = {
            "model": model,
            "image_data_url": image_data_url,
            "schema": schema,
            "prompt": prompt,
        }
        return {"predictions": self.predictions}


def recipe_record(**overrides: object) -> dict[str, object]:
    """Build a RecipeDB search record with total (not per-serving) nutrition."""
    record: dict[str, object] = {
        "Recipe_id": "9001",
        "Recipe_title": "Crispy Samosa",
        "Region": "Indian Subcontinent",
        "servings": "4",
        "Calories": "1200",
        "Carbohydrate, by difference (g)": "128",
        "Protein (g)": "20",
        "Total lipid (fat) (g)": "72",
        "Fiber, total dietary (g)": "12",
        "Sugars, total (g)": "8",
        "Sodium, Na (mg)": "1680",
        "Processes": "knead||stuff||deep-fry",
        "Utensils": "kadai||rolling pin",
        "ingredients": "flour||potato||peas",
    }
    record.update(overrides)
    return record


@pytest.fixture
def settings() -> Settings:
    return Settings(
        recipedb_api_key="recipedb-key",
        openai_api_key="openai-key",
    )


@pytest.fixture
def recipedb_client() -> FakeRecipeDbClient:
    return FakeRecipeDbClient()


@pytest.fixture
def vision_client() -> FakeVisionClient:
    return FakeVisionClient()


@pytest.fixture
def container(
    settings: Settings,
    recipedb_client: FakeRecipeDbClient,
    vision_client: FakeVisionClient,
) -> AppContainer:
    recipe_service = RecipeService(client=recipedb_client, cache=InMemoryCache())
    flavor_service = FlavorService()
    suitability_engine = SuitabilityEngine()
    analysis_service = AnalysisService(
        recipe_service=recipe_service,
        flavor_service=flavor_service,
        suitability_engine=suitability_engine,
    )
    vision_service = VisionService(client=vision_client, model=settings.openai_model)

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        recipe_service=recipe_service,
        flavor_service=flavor_service,
        suitability_engine=suitability_engine,
        analysis_service=analysis_service,
        vision_service=vision_service,
        close_resources=close_resources,
    )
